"""
League Of Nads - Football Manager Mini-Game API
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nads_league import __version__
from nads_league.config import settings
from nads_league.database import init_db
from nads_league.logging_config import configure_logging
from nads_league.api.match import router as match_router
from nads_league.api.player import router as player_router
from nads_league.api.leaderboard import router as leaderboard_router
from nads_league.api.strategy import router as strategy_router
from nads_league.api.schemas import GameInfoResponse

configure_logging(settings.LOG_LEVEL)

# Initialize FastAPI app
app = FastAPI(
    title="League Of Nads",
    description="Football Manager Mini-Game API",
    version=__version__,
)

default_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
default_origins.extend(settings.cors_origins)

# CORS middleware for the browser client
app.add_middleware(
    CORSMiddleware,
    allow_origins=default_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(match_router, prefix="/api")
app.include_router(player_router, prefix="/api")
app.include_router(leaderboard_router, prefix="/api")
app.include_router(strategy_router, prefix="/api")


@app.on_event("startup")
def startup_event():
    """Initialize database on startup"""
    init_db()


@app.get("/")
def root():
    """Health check endpoint"""
    return {
        "name": "League Of Nads API",
        "version": __version__,
        "status": "running",
    }


@app.get("/api/health")
def health_check():
    """API health check"""
    return {"status": "healthy"}


@app.get("/api/game", response_model=GameInfoResponse)
def game_info():
    """Game metadata"""
    return GameInfoResponse(
        name=settings.GAME_NAME,
        description=settings.GAME_DESCRIPTION,
        url=settings.GAME_URL,
        game_address=settings.GAME_WALLET_ADDRESS if settings.game_address_configured else None,
        base_goal_rate=settings.BASE_GOAL_RATE,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
