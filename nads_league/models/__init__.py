from nads_league.models.player import PlayerRecord
from nads_league.models.match import MatchRecord

__all__ = [
    "PlayerRecord",
    "MatchRecord",
]
