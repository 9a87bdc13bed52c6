"""
Leaderboard endpoint
"""
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nads_league.database import get_db
from nads_league.engine.score_ledger import ScoreLedger
from nads_league.engine.leaderboard import build_leaderboard
from nads_league.api.schemas import LeaderboardResponse, LeaderboardEntryResponse

router = APIRouter(tags=["Leaderboard"])


@router.get("/leaderboard", response_model=LeaderboardResponse)
def get_leaderboard(
    current_user_address: Optional[str] = None,
    current_username: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Ranked players, best efficiency first"""
    entries = build_leaderboard(
        ScoreLedger(db).tracked_players(),
        current_user_address=current_user_address,
        current_username=current_username,
    )
    return LeaderboardResponse(
        success=True,
        leaderboard=[LeaderboardEntryResponse.model_validate(e) for e in entries],
    )
