"""
API tests using FastAPI's TestClient with the database dependency overridden.
"""
import pytest
from fastapi.testclient import TestClient

from main import app
from nads_league.database import get_db
from nads_league.engine.tables import STRATEGY_CATEGORIES, ENVIRONMENT_CATEGORIES
from tests.factories import BEST_CHOICES, WALLET_A, WALLET_B


@pytest.fixture
def client(test_db):
    def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        assert client.get("/api/health").json() == {"status": "healthy"}

    def test_game_info(self, client):
        data = client.get("/api/game").json()
        assert data["name"] == "League Of Nads"
        assert data["base_goal_rate"] == 0.5


class TestStrategyOptions:

    def test_lists_every_category(self, client):
        data = client.get("/api/strategy/options").json()
        assert [c["category"] for c in data["strategic"]] == list(STRATEGY_CATEGORIES)
        assert [c["category"] for c in data["environmental"]] == list(ENVIRONMENT_CATEGORIES)
        formation = data["strategic"][0]["options"]
        assert {"name": "3-4-3", "multiplier": 1.3, "description": "Aggressive, high attacking line"} in formation


class TestSimulateMatch:

    def test_stateless_simulation(self, client):
        response = client.post("/api/match/simulate", json={"choices": BEST_CHOICES})
        assert response.status_code == 200
        data = response.json()

        outcome = data["outcome"]
        assert outcome["goals_scored"] >= 0
        assert outcome["lam"] > 0
        assert outcome["strategy_multiplier"] == pytest.approx(1.3 ** 7)
        assert len(data["strategy_breakdown"]) == 7
        assert len(data["environmental_breakdown"]) == 4
        assert data["player"] is None

    def test_camel_case_choices(self, client):
        camel = {
            "formation": "3-4-3",
            "defensivePhilosophy": "Gegenpressing",
            "trainingFocus": "Finishing Practice",
            "attackingApproach": "Quick Transitions",
            "strikerRole": "Poacher",
            "tempoStyle": "Direct Style",
            "matchMentality": "Desperate",
        }
        response = client.post("/api/match/simulate", json={"choices": camel})
        assert response.status_code == 200
        assert response.json()["outcome"]["strategy_choices"] == BEST_CHOICES

    def test_prior_efficiency_used(self, client):
        response = client.post("/api/match/simulate", json={"choices": BEST_CHOICES, "prior_efficiency": 1.0})
        assert response.json()["outcome"]["efficiency_bonus"] == pytest.approx(1.2)

    def test_negative_efficiency_rejected(self, client):
        response = client.post("/api/match/simulate", json={"choices": BEST_CHOICES, "prior_efficiency": -1})
        assert response.status_code == 422

    def test_unknown_option_rejected(self, client):
        choices = dict(BEST_CHOICES, formation="2-3-5")
        response = client.post("/api/match/simulate", json={"choices": choices})
        assert response.status_code == 400
        assert "formation" in response.json()["detail"]

    def test_missing_category_rejected(self, client):
        choices = dict(BEST_CHOICES)
        del choices["formation"]
        assert client.post("/api/match/simulate", json={"choices": choices}).status_code == 422

    def test_with_wallet_records_result(self, client):
        response = client.post(
            "/api/match/simulate",
            json={"choices": BEST_CHOICES, "wallet_address": WALLET_A, "username": "nadfan"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["player"]["total_matches"] == 1
        assert data["player"]["total_goals"] == data["outcome"]["goals_scored"]
        assert data["player"]["username"] == "nadfan"

        history = client.get(f"/api/player/{WALLET_A}/matches").json()
        assert [m["match_id"] for m in history["matches"]] == [data["outcome"]["match_id"]]

    def test_bad_wallet_rejected(self, client):
        response = client.post("/api/match/simulate", json={"choices": BEST_CHOICES, "wallet_address": "0x12"})
        assert response.status_code == 400


class TestPlayerData:

    def test_update_and_read(self, client):
        response = client.post(
            "/api/update-player-data",
            json={"player_address": WALLET_A, "score_amount": 3, "transaction_amount": 2},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["player"]["efficiency"] == pytest.approx(1.5)

        stats = client.get(f"/api/player/{WALLET_A}").json()
        assert stats["total_goals"] == 3
        assert stats["total_matches"] == 2

    def test_negative_amount_rejected(self, client):
        response = client.post(
            "/api/update-player-data",
            json={"player_address": WALLET_A, "score_amount": -1, "transaction_amount": 1},
        )
        assert response.status_code == 400
        assert "non-negative" in response.json()["detail"]

    def test_invalid_address_rejected(self, client):
        response = client.post(
            "/api/update-player-data",
            json={"player_address": "wallet", "score_amount": 1, "transaction_amount": 1},
        )
        assert response.status_code == 400

    def test_missing_fields_rejected(self, client):
        response = client.post("/api/update-player-data", json={"player_address": WALLET_A})
        assert response.status_code == 422

    def test_unknown_player_has_zero_stats(self, client):
        stats = client.get(f"/api/player/{WALLET_B}").json()
        assert stats["total_matches"] == 0
        assert stats["efficiency"] == 0.0

    def test_bad_address_lookup(self, client):
        assert client.get("/api/player/nobody").status_code == 400


class TestLeaderboard:

    def test_empty(self, client):
        assert client.get("/api/leaderboard").json() == {"success": True, "leaderboard": []}

    def test_ranked(self, client):
        for address, score, matches in ((WALLET_A, 2, 4), (WALLET_B, 3, 3)):
            client.post(
                "/api/update-player-data",
                json={"player_address": address, "score_amount": score, "transaction_amount": matches},
            )

        board = client.get(
            "/api/leaderboard",
            params={"current_user_address": WALLET_A, "current_username": "me"},
        ).json()["leaderboard"]

        assert [e["wallet_address"] for e in board] == [WALLET_B.lower(), WALLET_A]
        assert board[0]["username"] == "Player_bbbbbb"
        assert board[1]["username"] == "me"
        assert board[1]["rank"] == 2
