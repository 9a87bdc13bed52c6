"""
Match simulation endpoints
"""
import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from nads_league.database import get_db
from nads_league.engine.match_engine import (
    MatchOutcome, simulate_match,
    get_strategy_multipliers, get_environmental_multipliers,
    get_strategy_description, get_environmental_description,
)
from nads_league.engine.game_state import GameStateManager
from nads_league.validators import StrategyChoiceValidator
from nads_league.api.schemas import (
    SimulateMatchRequest, SimulateMatchResponse, MatchOutcomeResponse,
    FactorBreakdown, PlayerStatsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/match", tags=["Match"])


def _outcome_response(outcome: MatchOutcome) -> MatchOutcomeResponse:
    return MatchOutcomeResponse(**outcome.to_dict())


def _breakdowns(outcome: MatchOutcome) -> dict:
    """Per-category multipliers with descriptions for the result screen"""
    strategy = [
        FactorBreakdown(
            category=category,
            option=outcome.strategy_choices.get(category, ""),
            multiplier=multiplier,
            description=get_strategy_description(outcome.strategy_choices.get(category, ""), category),
        )
        for category, multiplier in get_strategy_multipliers(outcome.strategy_choices).items()
    ]
    environment = [
        FactorBreakdown(
            category=category,
            option=outcome.environmental_factors[category],
            multiplier=multiplier,
            description=get_environmental_description(outcome.environmental_factors[category], category),
        )
        for category, multiplier in get_environmental_multipliers(outcome.environmental_factors).items()
    ]
    return {"strategy_breakdown": strategy, "environmental_breakdown": environment}


@router.post("/simulate", response_model=SimulateMatchResponse)
def simulate(request: SimulateMatchRequest, db: Session = Depends(get_db)):
    """
    Simulate a match.
    With a wallet address the player's efficiency is read from the ledger
    and the result is recorded; otherwise the simulation is stateless.
    """
    choices = request.choices.model_dump()
    validation = StrategyChoiceValidator.validate(choices)
    if not validation["valid"]:
        raise HTTPException(status_code=400, detail="; ".join(validation["errors"]))

    player = None
    if request.wallet_address:
        manager = GameStateManager(db)
        try:
            outcome, stats = manager.play_match(request.wallet_address, choices, username=request.username)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        player = PlayerStatsResponse.from_stats(stats)
        logger.info("Match %s for %s: %d goals", outcome.match_id, stats.wallet_address, outcome.goals_scored)
    else:
        try:
            outcome = simulate_match(choices, request.prior_efficiency)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    return SimulateMatchResponse(
        outcome=_outcome_response(outcome),
        player=player,
        **_breakdowns(outcome),
    )
