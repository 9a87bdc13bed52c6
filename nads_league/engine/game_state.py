"""
Game State - plays a match for a player and records the result
"""
import logging
import random
from typing import Mapping, Optional, Tuple
from sqlalchemy.orm import Session

from nads_league.engine.match_engine import MatchEngine, MatchOutcome
from nads_league.engine.score_ledger import ScoreLedger
from nads_league.engine.leaderboard import PlayerStats

logger = logging.getLogger(__name__)


class GameStateManager:
    """
    Ties the match engine to the score ledger.
    Each played match adds its goals and one match to the player's totals.
    """

    def __init__(self, session: Session, rng: Optional[random.Random] = None):
        self.session = session
        self.ledger = ScoreLedger(session)
        self._match_engine = MatchEngine(rng)

    def load_player_stats(self, wallet_address: str) -> PlayerStats:
        return self.ledger.get_player_stats(wallet_address)

    def play_match(
        self,
        wallet_address: str,
        strategy_choices: Mapping[str, str],
        username: Optional[str] = None,
    ) -> Tuple[MatchOutcome, PlayerStats]:
        """
        Simulate a match using the player's current efficiency, then
        record the goals and the match. Returns the outcome and the
        refreshed stats.
        """
        stats = self.load_player_stats(wallet_address)
        outcome = self._match_engine.simulate(strategy_choices, stats.efficiency)

        try:
            self.ledger.update_player_data(wallet_address, outcome.goals_scored, 1, username=username)
            self.ledger.record_match(wallet_address, outcome)
            self.session.commit()
        except Exception:
            logger.exception("Failed to record match %s for %s", outcome.match_id, wallet_address)
            self.session.rollback()
            raise

        return outcome, self.load_player_stats(wallet_address)
