import re

ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_valid_address(address) -> bool:
    """True for a 0x-prefixed, 20-byte hex wallet address"""
    return isinstance(address, str) and bool(ADDRESS_PATTERN.match(address))


def normalize_address(address: str) -> str:
    """Validate and lower-case a wallet address. Raises ValueError if malformed."""
    if not is_valid_address(address):
        raise ValueError(f"Invalid player address format: {address!r}")
    return address.lower()
