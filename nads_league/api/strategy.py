"""
Strategy option catalogue for the match setup screen
"""
from fastapi import APIRouter

from nads_league.engine.tables import (
    STRATEGY_CATEGORIES, ENVIRONMENT_CATEGORIES,
    STRATEGY_MULTIPLIERS, ENVIRONMENT_MULTIPLIERS,
)
from nads_league.engine.match_engine import get_strategy_description, get_environmental_description
from nads_league.api.schemas import StrategyOptionsResponse, CategoryOptions, OptionInfo

router = APIRouter(prefix="/strategy", tags=["Strategy"])


@router.get("/options", response_model=StrategyOptionsResponse)
def get_strategy_options():
    """Every category with its options, multipliers and descriptions"""
    strategic = [
        CategoryOptions(
            category=category,
            options=[
                OptionInfo(name=name, multiplier=value, description=get_strategy_description(name, category))
                for name, value in STRATEGY_MULTIPLIERS[category].items()
            ],
        )
        for category in STRATEGY_CATEGORIES
    ]
    environmental = [
        CategoryOptions(
            category=category,
            options=[
                OptionInfo(name=name, multiplier=value, description=get_environmental_description(name, category))
                for name, value in ENVIRONMENT_MULTIPLIERS[category].items()
            ],
        )
        for category in ENVIRONMENT_CATEGORIES
    ]
    return StrategyOptionsResponse(strategic=strategic, environmental=environmental)
