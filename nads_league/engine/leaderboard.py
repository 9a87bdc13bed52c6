"""
Leaderboard - player stats and ranking
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass
class PlayerStats:
    """Cumulative stats for one wallet"""
    wallet_address: str
    total_goals: int = 0
    total_matches: int = 0
    username: Optional[str] = None

    @property
    def efficiency(self) -> float:
        if self.total_matches == 0:
            return 0.0
        return self.total_goals / self.total_matches


@dataclass
class LeaderboardEntry:
    """Row in the leaderboard"""
    rank: int
    username: str
    wallet_address: str
    total_goals: int
    total_matches: int
    efficiency: float


def fallback_username(wallet_address: str) -> str:
    """Readable name for players without a registered username"""
    return f"Player_{wallet_address[2:8]}"


def build_leaderboard(
    stats: Iterable[PlayerStats],
    current_user_address: Optional[str] = None,
    current_username: Optional[str] = None,
) -> List[LeaderboardEntry]:
    """
    Rank players by efficiency, then total goals.
    Players who have not played a match are left out.
    """
    active = [s for s in stats if s.total_matches > 0]
    active.sort(key=lambda s: (-s.efficiency, -s.total_goals))

    current = current_user_address.lower() if current_user_address else None

    leaderboard = []
    for position, s in enumerate(active, start=1):
        if current and current_username and s.wallet_address.lower() == current:
            username = current_username
        else:
            username = s.username or fallback_username(s.wallet_address)

        leaderboard.append(LeaderboardEntry(
            rank=position,
            username=username,
            wallet_address=s.wallet_address,
            total_goals=s.total_goals,
            total_matches=s.total_matches,
            efficiency=s.efficiency,
        ))
    return leaderboard
