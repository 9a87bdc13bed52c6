"""
Score Ledger - per-player goal and match totals for the leaderboard
"""
import json
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from nads_league.models.player import PlayerRecord
from nads_league.models.match import MatchRecord
from nads_league.engine.match_engine import MatchOutcome
from nads_league.engine.leaderboard import PlayerStats
from nads_league.validators.address_validator import normalize_address

logger = logging.getLogger(__name__)


def _check_amount(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError("Score and transaction amounts must be non-negative")
    return value


class ScoreLedger:
    """
    Records cumulative score (goals) and transactions (matches) per player.
    The caller owns the session and decides when to commit.
    """

    def __init__(self, session: Session):
        self.session = session

    def _get_record(self, address: str) -> Optional[PlayerRecord]:
        return self.session.query(PlayerRecord).filter_by(wallet_address=address).first()

    def update_player_data(
        self,
        player_address: str,
        score_amount: int,
        transaction_amount: int,
        username: Optional[str] = None,
    ) -> PlayerRecord:
        """Add to a player's totals, tracking the player on first sight."""
        address = normalize_address(player_address)
        score_amount = _check_amount("score_amount", score_amount)
        transaction_amount = _check_amount("transaction_amount", transaction_amount)

        record = self._get_record(address)
        if record is None:
            record = PlayerRecord(wallet_address=address, total_score=0, total_transactions=0)
            self.session.add(record)
            logger.info("Tracking new player %s", address)

        record.total_score += score_amount
        record.total_transactions += transaction_amount
        if username:
            record.username = username
        self.session.flush()

        logger.info(
            "Updated %s: +%d score, +%d transactions (totals %d/%d)",
            address, score_amount, transaction_amount,
            record.total_score, record.total_transactions,
        )
        return record

    def total_score_of_player(self, player_address: str) -> int:
        record = self._get_record(normalize_address(player_address))
        return record.total_score if record else 0

    def total_transactions_of_player(self, player_address: str) -> int:
        record = self._get_record(normalize_address(player_address))
        return record.total_transactions if record else 0

    def get_player_stats(self, player_address: str) -> PlayerStats:
        address = normalize_address(player_address)
        record = self._get_record(address)
        if record is None:
            return PlayerStats(wallet_address=address)
        return self._to_stats(record)

    def tracked_players(self) -> List[PlayerStats]:
        records = self.session.query(PlayerRecord).order_by(PlayerRecord.id).all()
        return [self._to_stats(r) for r in records]

    def record_match(self, player_address: str, outcome: MatchOutcome) -> MatchRecord:
        """Store a match outcome against a tracked player."""
        address = normalize_address(player_address)
        record = self._get_record(address)
        if record is None:
            raise ValueError(f"Player {address} is not tracked")

        match = MatchRecord(
            match_id=outcome.match_id,
            player_id=record.id,
            goals_scored=outcome.goals_scored,
            lam=outcome.lam,
            outcome_json=json.dumps(outcome.to_dict()),
        )
        self.session.add(match)
        self.session.flush()
        return match

    def match_history(self, player_address: str, limit: int = 20) -> List[MatchOutcome]:
        """Most recent outcomes first"""
        address = normalize_address(player_address)
        record = self._get_record(address)
        if record is None:
            return []
        rows = (
            self.session.query(MatchRecord)
            .filter_by(player_id=record.id)
            .order_by(MatchRecord.id.desc())
            .limit(limit)
            .all()
        )
        return [MatchOutcome.from_dict(json.loads(row.outcome_json)) for row in rows]

    @staticmethod
    def _to_stats(record: PlayerRecord) -> PlayerStats:
        return PlayerStats(
            wallet_address=record.wallet_address,
            total_goals=record.total_score,
            total_matches=record.total_transactions,
            username=record.username,
        )
