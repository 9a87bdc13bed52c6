from nads_league.engine.match_engine import MatchEngine, MatchOutcome, simulate_match
from nads_league.engine.score_ledger import ScoreLedger
from nads_league.engine.game_state import GameStateManager
from nads_league.engine.leaderboard import PlayerStats, LeaderboardEntry, build_leaderboard

__all__ = [
    "MatchEngine",
    "MatchOutcome",
    "simulate_match",
    "ScoreLedger",
    "GameStateManager",
    "PlayerStats",
    "LeaderboardEntry",
    "build_leaderboard",
]
