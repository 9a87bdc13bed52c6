"""
Tests for the score ledger and the play-match flow, against an in-memory database.
"""
import random
from unittest.mock import patch

import pytest

from nads_league.engine.score_ledger import ScoreLedger
from nads_league.engine.game_state import GameStateManager
from nads_league.models.player import PlayerRecord
from nads_league.models.match import MatchRecord
from tests.factories import BEST_CHOICES, WORST_CHOICES, WALLET_A, WALLET_B


class TestUpdatePlayerData:

    def test_first_update_tracks_player(self, test_db):
        ledger = ScoreLedger(test_db)
        record = ledger.update_player_data(WALLET_A, 2, 1)
        test_db.commit()

        assert record.wallet_address == WALLET_A
        assert test_db.query(PlayerRecord).count() == 1
        assert ledger.total_score_of_player(WALLET_A) == 2
        assert ledger.total_transactions_of_player(WALLET_A) == 1

    def test_updates_accumulate(self, test_db):
        ledger = ScoreLedger(test_db)
        ledger.update_player_data(WALLET_A, 2, 1)
        ledger.update_player_data(WALLET_A, 0, 1)
        ledger.update_player_data(WALLET_A, 3, 1)

        stats = ledger.get_player_stats(WALLET_A)
        assert stats.total_goals == 5
        assert stats.total_matches == 3
        assert stats.efficiency == pytest.approx(5 / 3)

    def test_addresses_are_case_insensitive(self, test_db):
        ledger = ScoreLedger(test_db)
        ledger.update_player_data(WALLET_B, 1, 1)
        ledger.update_player_data(WALLET_B.lower(), 1, 1)

        assert test_db.query(PlayerRecord).count() == 1
        assert ledger.total_score_of_player(WALLET_B) == 2
        assert ledger.get_player_stats(WALLET_B).wallet_address == WALLET_B.lower()

    def test_username_is_kept(self, test_db):
        ledger = ScoreLedger(test_db)
        ledger.update_player_data(WALLET_A, 1, 1, username="nadfan")
        ledger.update_player_data(WALLET_A, 1, 1)
        assert ledger.get_player_stats(WALLET_A).username == "nadfan"

    @pytest.mark.parametrize("address", ["", "0x123", "a" * 42, "0x" + "g" * 40, None])
    def test_rejects_bad_address(self, test_db, address):
        with pytest.raises(ValueError):
            ScoreLedger(test_db).update_player_data(address, 1, 1)

    @pytest.mark.parametrize("score, transactions", [(-1, 1), (1, -1), (1.5, 1), (True, 1)])
    def test_rejects_bad_amounts(self, test_db, score, transactions):
        with pytest.raises(ValueError):
            ScoreLedger(test_db).update_player_data(WALLET_A, score, transactions)
        assert test_db.query(PlayerRecord).count() == 0


class TestQueries:

    def test_unknown_player_has_zero_totals(self, test_db):
        ledger = ScoreLedger(test_db)
        assert ledger.total_score_of_player(WALLET_A) == 0
        assert ledger.total_transactions_of_player(WALLET_A) == 0
        stats = ledger.get_player_stats(WALLET_A)
        assert stats.total_matches == 0
        assert stats.efficiency == 0.0

    def test_tracked_players(self, test_db):
        ledger = ScoreLedger(test_db)
        ledger.update_player_data(WALLET_A, 1, 1)
        ledger.update_player_data(WALLET_B, 0, 0)
        addresses = [s.wallet_address for s in ledger.tracked_players()]
        assert addresses == [WALLET_A, WALLET_B.lower()]

    def test_record_match_requires_tracked_player(self, test_db, rng):
        from nads_league.engine.match_engine import simulate_match
        outcome = simulate_match(BEST_CHOICES, rng=rng)
        with pytest.raises(ValueError):
            ScoreLedger(test_db).record_match(WALLET_A, outcome)


class TestGameStateManager:

    def test_play_match_records_goals_and_match(self, test_db):
        manager = GameStateManager(test_db, random.Random(3))
        outcome, stats = manager.play_match(WALLET_A, BEST_CHOICES)

        assert stats.total_matches == 1
        assert stats.total_goals == outcome.goals_scored
        assert test_db.query(MatchRecord).count() == 1

    def test_efficiency_feeds_next_match(self, test_db):
        ScoreLedger(test_db).update_player_data(WALLET_A, 4, 4)
        test_db.commit()

        manager = GameStateManager(test_db, random.Random(5))
        outcome, stats = manager.play_match(WALLET_A, WORST_CHOICES)

        # 1 goal per match -> bonus 1.2
        assert outcome.efficiency_bonus == pytest.approx(1.2)
        assert stats.total_matches == 5

    def test_history_is_newest_first(self, test_db):
        manager = GameStateManager(test_db, random.Random(11))
        played = [manager.play_match(WALLET_A, BEST_CHOICES)[0] for _ in range(3)]

        history = ScoreLedger(test_db).match_history(WALLET_A)
        assert [o.match_id for o in history] == [o.match_id for o in reversed(played)]
        assert history[0] == played[-1]

    def test_history_limit(self, test_db):
        manager = GameStateManager(test_db, random.Random(13))
        for _ in range(5):
            manager.play_match(WALLET_A, BEST_CHOICES)
        assert len(ScoreLedger(test_db).match_history(WALLET_A, limit=2)) == 2
        assert ScoreLedger(test_db).match_history(WALLET_B) == []

    def test_failed_recording_rolls_back(self, test_db):
        manager = GameStateManager(test_db, random.Random(17))
        with patch.object(manager.ledger, "record_match", side_effect=ValueError("boom")):
            with pytest.raises(ValueError):
                manager.play_match(WALLET_A, BEST_CHOICES)

        assert test_db.query(PlayerRecord).count() == 0
        assert manager.load_player_stats(WALLET_A).total_matches == 0

    def test_invalid_address_plays_nothing(self, test_db):
        manager = GameStateManager(test_db)
        with pytest.raises(ValueError):
            manager.play_match("not-a-wallet", BEST_CHOICES)
        assert test_db.query(MatchRecord).count() == 0
