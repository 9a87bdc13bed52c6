from nads_league.validators.address_validator import is_valid_address, normalize_address
from nads_league.validators.strategy_validator import StrategyChoiceValidator

__all__ = ["is_valid_address", "normalize_address", "StrategyChoiceValidator"]
