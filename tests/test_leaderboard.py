"""
Tests for leaderboard ranking.
"""
from nads_league.engine.leaderboard import PlayerStats, build_leaderboard, fallback_username
from tests.factories import WALLET_A, WALLET_B, WALLET_C


class TestPlayerStats:

    def test_efficiency(self):
        assert PlayerStats(WALLET_A, total_goals=3, total_matches=2).efficiency == 1.5

    def test_no_matches_has_zero_efficiency(self):
        assert PlayerStats(WALLET_A).efficiency == 0.0


class TestBuildLeaderboard:

    def test_sorted_by_efficiency_then_goals(self):
        stats = [
            PlayerStats(WALLET_A, total_goals=2, total_matches=4, username="slow"),
            PlayerStats(WALLET_B, total_goals=6, total_matches=4, username="sharp"),
            PlayerStats(WALLET_C, total_goals=3, total_matches=2, username="keen"),
        ]
        board = build_leaderboard(stats)

        assert [e.username for e in board] == ["sharp", "keen", "slow"]
        assert [e.rank for e in board] == [1, 2, 3]

    def test_ties_broken_by_total_goals(self):
        stats = [
            PlayerStats(WALLET_A, total_goals=1, total_matches=1, username="one"),
            PlayerStats(WALLET_B, total_goals=5, total_matches=5, username="five"),
        ]
        assert [e.username for e in build_leaderboard(stats)] == ["five", "one"]

    def test_players_without_matches_left_out(self):
        stats = [
            PlayerStats(WALLET_A, total_goals=0, total_matches=0),
            PlayerStats(WALLET_B, total_goals=0, total_matches=3),
        ]
        board = build_leaderboard(stats)
        assert len(board) == 1
        assert board[0].wallet_address == WALLET_B

    def test_fallback_username(self):
        board = build_leaderboard([PlayerStats(WALLET_C, total_goals=1, total_matches=1)])
        assert board[0].username == "Player_123456"
        assert fallback_username(WALLET_C) == "Player_123456"

    def test_current_user_name_wins(self):
        stats = [PlayerStats(WALLET_B.lower(), total_goals=1, total_matches=1, username="old")]
        board = build_leaderboard(stats, current_user_address=WALLET_B, current_username="new")
        assert board[0].username == "new"

    def test_empty(self):
        assert build_leaderboard([]) == []
