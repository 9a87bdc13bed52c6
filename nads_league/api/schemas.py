"""
Pydantic schemas for API request/response models
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Dict, List, Optional


# Strategy Schemas
class StrategyChoicesRequest(BaseModel):
    """The seven strategic choices; accepts snake_case or camelCase keys"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    formation: str
    defensive_philosophy: str
    training_focus: str
    attacking_approach: str
    striker_role: str
    tempo_style: str
    match_mentality: str


class OptionInfo(BaseModel):
    name: str
    multiplier: float
    description: str


class CategoryOptions(BaseModel):
    category: str
    options: List[OptionInfo]


class StrategyOptionsResponse(BaseModel):
    strategic: List[CategoryOptions]
    environmental: List[CategoryOptions]


class FactorBreakdown(BaseModel):
    category: str
    option: str
    multiplier: float
    description: str


# Match Schemas
class SimulateMatchRequest(BaseModel):
    choices: StrategyChoicesRequest
    wallet_address: Optional[str] = None
    username: Optional[str] = None
    prior_efficiency: float = Field(default=0.0, ge=0)


class MatchOutcomeResponse(BaseModel):
    match_id: str
    goals_scored: int
    lam: float
    strategy_choices: Dict[str, str]
    environmental_factors: Dict[str, str]
    strategy_multiplier: float
    environmental_multiplier: float
    efficiency_bonus: float
    timestamp: int


# Player Schemas
class PlayerStatsResponse(BaseModel):
    wallet_address: str
    username: Optional[str] = None
    total_goals: int
    total_matches: int
    efficiency: float

    @classmethod
    def from_stats(cls, stats) -> "PlayerStatsResponse":
        return cls(
            wallet_address=stats.wallet_address,
            username=stats.username,
            total_goals=stats.total_goals,
            total_matches=stats.total_matches,
            efficiency=stats.efficiency,
        )


class SimulateMatchResponse(BaseModel):
    outcome: MatchOutcomeResponse
    strategy_breakdown: List[FactorBreakdown]
    environmental_breakdown: List[FactorBreakdown]
    player: Optional[PlayerStatsResponse] = None


class UpdatePlayerDataRequest(BaseModel):
    player_address: str
    score_amount: int
    transaction_amount: int
    username: Optional[str] = None


class UpdatePlayerDataResponse(BaseModel):
    success: bool
    message: str
    player: PlayerStatsResponse


class MatchHistoryResponse(BaseModel):
    wallet_address: str
    matches: List[MatchOutcomeResponse]


# Leaderboard Schemas
class LeaderboardEntryResponse(BaseModel):
    rank: int
    username: str
    wallet_address: str
    total_goals: int
    total_matches: int
    efficiency: float

    class Config:
        from_attributes = True


class LeaderboardResponse(BaseModel):
    success: bool = True
    leaderboard: List[LeaderboardEntryResponse]


# Game Schemas
class GameInfoResponse(BaseModel):
    name: str
    description: str
    url: str
    game_address: Optional[str] = None
    base_goal_rate: float
