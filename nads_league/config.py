"""
Game configuration
"""
import os
from dotenv import load_dotenv

load_dotenv()

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class GameSettings:
    """Game settings from environment variables"""

    # Game metadata
    GAME_NAME: str = "League Of Nads"
    GAME_DESCRIPTION: str = "A mini football manager game with a shared leaderboard"
    GAME_URL: str = os.getenv("GAME_URL", "https://forward-race.vercel.app")

    # Address that submits scores for this game
    GAME_WALLET_ADDRESS: str = os.getenv("GAME_WALLET_ADDRESS", ZERO_ADDRESS)

    # Storage
    DATABASE_PATH: str = os.getenv("DATABASE_PATH", "league_of_nads.db")

    # Extra CORS origins (comma-separated)
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Simulation
    BASE_GOAL_RATE: float = 0.5  # Poisson base rate for a striker
    MATCH_HISTORY_LIMIT: int = 50

    @property
    def game_address_configured(self) -> bool:
        return bool(self.GAME_WALLET_ADDRESS) and self.GAME_WALLET_ADDRESS != ZERO_ADDRESS

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = GameSettings()
