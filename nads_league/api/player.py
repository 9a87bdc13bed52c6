"""
Player data endpoints - score submission and stats
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from nads_league.config import settings
from nads_league.database import get_db
from nads_league.engine.score_ledger import ScoreLedger
from nads_league.api.schemas import (
    UpdatePlayerDataRequest, UpdatePlayerDataResponse,
    PlayerStatsResponse, MatchHistoryResponse, MatchOutcomeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Player"])


@router.post("/update-player-data", response_model=UpdatePlayerDataResponse)
def update_player_data(request: UpdatePlayerDataRequest, db: Session = Depends(get_db)):
    """Add score and transactions to a player's totals"""
    ledger = ScoreLedger(db)
    try:
        ledger.update_player_data(
            request.player_address,
            request.score_amount,
            request.transaction_amount,
            username=request.username,
        )
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    stats = ledger.get_player_stats(request.player_address)
    return UpdatePlayerDataResponse(
        success=True,
        message="Player data updated successfully",
        player=PlayerStatsResponse.from_stats(stats),
    )


@router.get("/player/{address}", response_model=PlayerStatsResponse)
def get_player(address: str, db: Session = Depends(get_db)):
    """Cumulative stats for a wallet (zeros if it has never played)"""
    try:
        stats = ScoreLedger(db).get_player_stats(address)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return PlayerStatsResponse.from_stats(stats)


@router.get("/player/{address}/matches", response_model=MatchHistoryResponse)
def get_player_matches(
    address: str,
    limit: int = Query(default=20, ge=1, le=settings.MATCH_HISTORY_LIMIT),
    db: Session = Depends(get_db),
):
    """Recent match outcomes, newest first"""
    ledger = ScoreLedger(db)
    try:
        stats = ledger.get_player_stats(address)
        outcomes = ledger.match_history(address, limit=limit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return MatchHistoryResponse(
        wallet_address=stats.wallet_address,
        matches=[MatchOutcomeResponse(**o.to_dict()) for o in outcomes],
    )
