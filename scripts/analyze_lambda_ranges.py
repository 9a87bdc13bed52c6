#!/usr/bin/env python3
"""
Check that the goal model produces sensible lambda and goal ranges.

Run with: python scripts/analyze_lambda_ranges.py

Success Criteria:
- All-best choices: mean goals between 1.5 and 5.5
- Neutral choices: mean goals between 0.3 and 0.8
- All-worst choices: 0 goals is the most common result
"""

import sys
import os
import random
from collections import Counter
from statistics import mean, pvariance
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from nads_league.engine.match_engine import MatchEngine, calculate_strategy_multiplier
from nads_league.engine.tables import STRATEGY_CATEGORIES, STRATEGY_MULTIPLIERS


def extreme_choices(pick) -> dict:
    """Pick the highest (max) or lowest (min) option in every category"""
    return {
        category: pick(STRATEGY_MULTIPLIERS[category], key=STRATEGY_MULTIPLIERS[category].get)
        for category in STRATEGY_CATEGORIES
    }


SCENARIOS = {
    "all_best": extreme_choices(max),
    "neutral": {
        "formation": "4-4-2",
        "defensive_philosophy": "Mid Block",
        "training_focus": "Team Shape",
        "attacking_approach": "Long Balls",
        "striker_role": "Target Man",
        "tempo_style": "Controlled Pace",
        "match_mentality": "Expressive",
    },
    "all_worst": extreme_choices(min),
}


def run_scenario(name: str, choices: dict, trials: int = 20000, seed: int = 7) -> dict:
    engine = MatchEngine(random.Random(seed))
    outcomes = [engine.simulate(choices) for _ in range(trials)]
    goals = [o.goals_scored for o in outcomes]
    lams = [o.lam for o in outcomes]
    counts = Counter(goals)
    return {
        "name": name,
        "strategy_multiplier": calculate_strategy_multiplier(choices),
        "mean_goals": mean(goals),
        "variance": pvariance(goals),
        "min_lam": min(lams),
        "max_lam": max(lams),
        "mode": counts.most_common(1)[0][0],
        "max_goals": max(goals),
    }


def main():
    print("=" * 72)
    print(f"{'Scenario':<12}{'Strategy x':>12}{'Mean':>8}{'Var':>8}{'Lambda range':>18}{'Mode':>6}{'Max':>6}")
    print("=" * 72)

    results = {name: run_scenario(name, choices) for name, choices in SCENARIOS.items()}
    for r in results.values():
        lam_range = f"{r['min_lam']:.2f}-{r['max_lam']:.2f}"
        print(f"{r['name']:<12}{r['strategy_multiplier']:>12.3f}{r['mean_goals']:>8.3f}"
              f"{r['variance']:>8.3f}{lam_range:>18}{r['mode']:>6}{r['max_goals']:>6}")

    failures = []
    if not 1.5 <= results["all_best"]["mean_goals"] <= 5.5:
        failures.append("all_best mean goals out of range")
    if not 0.3 <= results["neutral"]["mean_goals"] <= 0.8:
        failures.append("neutral mean goals out of range")
    if results["all_worst"]["mode"] != 0:
        failures.append("all_worst mode is not 0")

    print()
    if failures:
        for f in failures:
            print(f"FAIL: {f}")
        sys.exit(1)
    print("All criteria met.")


if __name__ == "__main__":
    main()
