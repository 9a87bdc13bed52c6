"""
Match Engine - turns strategic choices and random match conditions into goals.

Goals follow a Poisson distribution whose rate is the base striker rate
scaled by the strategy multiplier, the environmental multiplier and the
player's efficiency bonus.
"""
import logging
import math
import random
import time
import uuid
from types import MappingProxyType
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from nads_league.config import settings
from nads_league.engine.tables import (
    STRATEGY_CATEGORIES,
    ENVIRONMENT_CATEGORIES,
    STRATEGY_MULTIPLIERS,
    ENVIRONMENT_MULTIPLIERS,
    STRATEGY_DESCRIPTIONS,
    ENVIRONMENT_DESCRIPTIONS,
    NO_DESCRIPTION,
    normalize_category,
    normalize_choices,
)

logger = logging.getLogger(__name__)

BASE_RATE = settings.BASE_GOAL_RATE

EFFICIENCY_BONUS_MIN = 0.8
EFFICIENCY_BONUS_MAX = 1.2
EFFICIENCY_BONUS_SLOPE = 0.4

# Poisson draws taking more iterations than this get logged
LONG_DRAW_ITERATIONS = 25


@dataclass(frozen=True)
class MatchOutcome:
    """Result of one simulated match"""
    goals_scored: int
    lam: float
    strategy_choices: Mapping[str, str]
    environmental_factors: Mapping[str, str]
    strategy_multiplier: float
    environmental_multiplier: float
    efficiency_bonus: float
    timestamp: int  # epoch milliseconds
    match_id: str = field(default="")

    def __post_init__(self):
        # Read-only views so the record cannot change after creation
        object.__setattr__(self, "strategy_choices", MappingProxyType(dict(self.strategy_choices)))
        object.__setattr__(self, "environmental_factors", MappingProxyType(dict(self.environmental_factors)))

    def to_dict(self) -> dict:
        return {
            "goals_scored": self.goals_scored,
            "lam": self.lam,
            "strategy_choices": dict(self.strategy_choices),
            "environmental_factors": dict(self.environmental_factors),
            "strategy_multiplier": self.strategy_multiplier,
            "environmental_multiplier": self.environmental_multiplier,
            "efficiency_bonus": self.efficiency_bonus,
            "timestamp": self.timestamp,
            "match_id": self.match_id,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "MatchOutcome":
        return cls(
            goals_scored=int(d["goals_scored"]),
            lam=float(d["lam"]),
            strategy_choices=dict(d.get("strategy_choices", {})),
            environmental_factors=dict(d.get("environmental_factors", {})),
            strategy_multiplier=float(d["strategy_multiplier"]),
            environmental_multiplier=float(d["environmental_multiplier"]),
            efficiency_bonus=float(d.get("efficiency_bonus", 1.0)),
            timestamp=int(d["timestamp"]),
            match_id=d.get("match_id", ""),
        )


def generate_environmental_factors(rng=None) -> Dict[str, str]:
    """Draw one option uniformly at random for each environmental category."""
    rng = rng or random
    return {
        category: rng.choice(list(ENVIRONMENT_MULTIPLIERS[category]))
        for category in ENVIRONMENT_CATEGORIES
    }


def _lookup(table: Mapping[str, Mapping[str, float]], category: str, option: Optional[str]) -> float:
    # Unknown options are neutral
    multiplier = table[category].get(option) if isinstance(option, str) else None
    if multiplier is None:
        logger.debug("No multiplier for %s=%r, using 1.0", category, option)
        return 1.0
    return multiplier


def calculate_strategy_multiplier(choices: Mapping[str, str]) -> float:
    """Product of the seven per-category strategy multipliers."""
    choices = normalize_choices(choices)
    total = 1.0
    for category in STRATEGY_CATEGORIES:
        total *= _lookup(STRATEGY_MULTIPLIERS, category, choices.get(category))
    return total


def calculate_environmental_multiplier(factors: Mapping[str, str]) -> float:
    """Product of the four per-category environmental multipliers."""
    factors = normalize_choices(factors)
    total = 1.0
    for category in ENVIRONMENT_CATEGORIES:
        total *= _lookup(ENVIRONMENT_MULTIPLIERS, category, factors.get(category))
    return total


def calculate_efficiency_bonus(efficiency: float) -> float:
    """
    Bonus from historical goals per match, in [0.8, 1.2].
    New players (efficiency 0) get a neutral 1.0.
    """
    if efficiency == 0:
        return 1.0
    raw = EFFICIENCY_BONUS_MIN + efficiency * EFFICIENCY_BONUS_SLOPE
    return max(EFFICIENCY_BONUS_MIN, min(EFFICIENCY_BONUS_MAX, raw))


def poisson_random(lam: float, rng=None) -> int:
    """
    Draw from Poisson(lam) by multiplying uniforms until the product
    falls to e^-lam. Only suitable for small lam.
    """
    if lam <= 0:
        return 0
    rng = rng or random
    threshold = math.exp(-lam)
    k = 0
    p = 1.0
    while True:
        k += 1
        p *= rng.random()
        if p <= threshold:
            break
    if k > LONG_DRAW_ITERATIONS:
        logger.warning("Long Poisson draw: %d iterations for lam=%.3f", k, lam)
    return k - 1


def _validate_efficiency(prior_efficiency) -> float:
    try:
        efficiency = float(prior_efficiency)
    except (TypeError, ValueError):
        raise ValueError(f"prior_efficiency must be a number, got {prior_efficiency!r}")
    if not math.isfinite(efficiency) or efficiency < 0:
        raise ValueError(f"prior_efficiency must be a finite number >= 0, got {prior_efficiency!r}")
    return efficiency


def _new_match_id(timestamp: int) -> str:
    return f"match_{timestamp}_{uuid.uuid4().hex[:9]}"


def simulate_match(
    choices: Mapping[str, str],
    prior_efficiency: float = 0.0,
    rng=None,
) -> MatchOutcome:
    """
    Simulate a match for the given strategic choices.

    prior_efficiency is the player's historical goals per match (0 when
    the player has no history). Environmental factors are drawn fresh
    for every call. Raises ValueError for negative or non-finite
    efficiency.
    """
    efficiency = _validate_efficiency(prior_efficiency)
    choices = normalize_choices(choices)

    environmental_factors = generate_environmental_factors(rng)

    strategy_multiplier = calculate_strategy_multiplier(choices)
    environmental_multiplier = calculate_environmental_multiplier(environmental_factors)
    efficiency_bonus = calculate_efficiency_bonus(efficiency)

    lam = BASE_RATE * strategy_multiplier * environmental_multiplier * efficiency_bonus
    goals_scored = poisson_random(lam, rng)

    timestamp = int(time.time() * 1000)
    outcome = MatchOutcome(
        goals_scored=goals_scored,
        lam=lam,
        strategy_choices=choices,
        environmental_factors=environmental_factors,
        strategy_multiplier=strategy_multiplier,
        environmental_multiplier=environmental_multiplier,
        efficiency_bonus=efficiency_bonus,
        timestamp=timestamp,
        match_id=_new_match_id(timestamp),
    )
    logger.debug(
        "Simulated %s: lam=%.3f goals=%d (strategy=%.3f env=%.3f bonus=%.2f)",
        outcome.match_id, lam, goals_scored,
        strategy_multiplier, environmental_multiplier, efficiency_bonus,
    )
    return outcome


# Display helpers

def get_strategy_multipliers(choices: Mapping[str, str]) -> Dict[str, float]:
    """Per-category strategy multipliers for display (7 entries)."""
    choices = normalize_choices(choices)
    return {
        category: _lookup(STRATEGY_MULTIPLIERS, category, choices.get(category))
        for category in STRATEGY_CATEGORIES
    }


def get_environmental_multipliers(factors: Mapping[str, str]) -> Dict[str, float]:
    """Per-category environmental multipliers for display (4 entries)."""
    factors = normalize_choices(factors)
    return {
        category: _lookup(ENVIRONMENT_MULTIPLIERS, category, factors.get(category))
        for category in ENVIRONMENT_CATEGORIES
    }


def get_strategy_description(choice: str, category: str) -> str:
    return STRATEGY_DESCRIPTIONS.get(normalize_category(category), {}).get(choice, NO_DESCRIPTION)


def get_environmental_description(choice: str, category: str) -> str:
    return ENVIRONMENT_DESCRIPTIONS.get(normalize_category(category), {}).get(choice, NO_DESCRIPTION)


class MatchEngine:
    """
    Holds a random source and runs simulations with it.
    Pass a seeded random.Random for reproducible matches.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def simulate(self, choices: Mapping[str, str], prior_efficiency: float = 0.0) -> MatchOutcome:
        return simulate_match(choices, prior_efficiency, rng=self.rng)
