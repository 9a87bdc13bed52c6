from nads_league.engine.tables import STRATEGY_CATEGORIES, STRATEGY_MULTIPLIERS, normalize_choices


class StrategyChoiceValidator:
    @staticmethod
    def validate(choices: dict) -> dict:
        """
        Validate a set of strategic choices.

        Rules:
        1. All 7 strategic categories present
        2. Each chosen option exists in its category's table
        3. No categories outside the strategic set
        """
        errors = []
        normalized = normalize_choices(choices or {})

        missing = [c for c in STRATEGY_CATEGORIES if c not in normalized]
        for category in missing:
            errors.append(f"Missing choice for {category}")

        unknown = []
        for category, option in normalized.items():
            if category not in STRATEGY_MULTIPLIERS:
                errors.append(f"Unknown strategic category: {category}")
                unknown.append(category)
            elif option not in STRATEGY_MULTIPLIERS[category]:
                errors.append(f"Unknown option for {category}: {option!r}")
                unknown.append(category)

        return {
            "valid": len(errors) == 0,
            "errors": errors,
            "missing": missing,
            "unknown": unknown,
        }
