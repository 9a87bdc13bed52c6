"""
Multiplier tables and descriptions for strategic choices and environmental factors.

Every category has six options. Strategy multipliers sit in [0.8, 1.3],
environmental multipliers in [0.85, 1.15].
"""
from typing import Dict

# Strategic categories (chosen by the manager)
STRATEGY_CATEGORIES = (
    "formation",
    "defensive_philosophy",
    "training_focus",
    "attacking_approach",
    "striker_role",
    "tempo_style",
    "match_mentality",
)

# Environmental categories (always random)
ENVIRONMENT_CATEGORIES = (
    "weather",
    "pitch_conditions",
    "match_atmosphere",
    "match_importance",
)

# Spelling used by the browser client
CAMEL_CASE_CATEGORIES = {
    "defensivePhilosophy": "defensive_philosophy",
    "trainingFocus": "training_focus",
    "attackingApproach": "attacking_approach",
    "strikerRole": "striker_role",
    "tempoStyle": "tempo_style",
    "matchMentality": "match_mentality",
    "pitchConditions": "pitch_conditions",
    "matchAtmosphere": "match_atmosphere",
    "matchImportance": "match_importance",
}


STRATEGY_MULTIPLIERS: Dict[str, Dict[str, float]] = {
    "formation": {
        "4-3-3": 1.2,
        "4-4-2": 1.0,
        "3-5-2": 0.9,
        "4-2-3-1": 1.1,
        "5-3-2": 0.8,
        "3-4-3": 1.3,
    },
    "defensive_philosophy": {
        "High Press": 1.2,
        "Gegenpressing": 1.3,
        "Mid Block": 1.0,
        "Low Block": 0.8,
        "Counter-Attack": 1.1,
        "Offside Trap": 1.0,
    },
    "training_focus": {
        "Set Pieces": 1.1,
        "Finishing Practice": 1.3,
        "Movement Drills": 1.2,
        "Team Shape": 1.0,
        "Individual Skills": 1.1,
        "Physical Prep": 0.9,
    },
    "attacking_approach": {
        "Wing Play": 1.1,
        "Through the Middle": 1.2,
        "Long Balls": 1.0,
        "Build-Up Play": 0.9,
        "Quick Transitions": 1.3,
        "Individual Brilliance": 1.1,
    },
    "striker_role": {
        "Target Man": 1.0,
        "Poacher": 1.3,
        "False 9": 1.1,
        "Wide Forward": 1.2,
        "Deep Striker": 1.0,
        "Penalty Box Predator": 1.2,
    },
    "tempo_style": {
        "High Tempo": 1.2,
        "Controlled Pace": 1.0,
        "Patient Build-Up": 0.8,
        "Direct Style": 1.3,
        "Reactive Play": 1.0,
        "Chaos Ball": 1.1,
    },
    "match_mentality": {
        "Aggressive": 1.2,
        "Confident": 1.1,
        "Cautious": 0.9,
        "Desperate": 1.3,
        "Clinical": 1.1,
        "Expressive": 1.0,
    },
}


ENVIRONMENT_MULTIPLIERS: Dict[str, Dict[str, float]] = {
    "weather": {
        "Perfect Day": 1.0,
        "Light Rain": 0.95,
        "Heavy Rain": 0.9,
        "Strong Wind": 0.9,
        "Cold Weather": 0.95,
        "Extreme Heat": 0.9,
    },
    "pitch_conditions": {
        "Perfect Grass": 1.0,
        "Worn Grass": 0.95,
        "Artificial Turf": 1.05,
        "Muddy Pitch": 0.85,
        "Dry/Hard Pitch": 1.05,
        "Newly Laid Grass": 0.9,
    },
    "match_atmosphere": {
        "Home + Electric Crowd": 1.15,
        "Home + Supportive Crowd": 1.1,
        "Home + Quiet Crowd": 1.0,
        "Away + Hostile Crowd": 0.85,
        "Away + Neutral Crowd": 0.95,
        "Away + Friendly Crowd": 1.0,
    },
    "match_importance": {
        "Cup Final": 1.1,
        "Derby Match": 1.05,
        "Regular League": 1.0,
        "End of Season": 0.95,
        "Relegation Battle": 1.05,
        "Dead Rubber": 0.9,
    },
}


STRATEGY_DESCRIPTIONS: Dict[str, Dict[str, str]] = {
    "formation": {
        "4-3-3": "Classic attacking setup with wide forwards",
        "4-4-2": "Traditional balanced approach with twin strikers",
        "3-5-2": "Wing-backs provide width, compact middle",
        "4-2-3-1": "Single striker with attacking midfield support",
        "5-3-2": "Defensive solidity, counter-attack ready",
        "3-4-3": "Aggressive, high attacking line",
    },
    "defensive_philosophy": {
        "High Press": "Aggressive pressing in opponent's half",
        "Gegenpressing": "Immediate counter-press after losing ball",
        "Mid Block": "Compact defensive shape in middle third",
        "Low Block": "Deep defensive line, absorb pressure",
        "Counter-Attack": "Sit deep, hit on quick transitions",
        "Offside Trap": "High line with coordinated stepping up",
    },
    "training_focus": {
        "Set Pieces": "Focus on corners, free kicks, penalties",
        "Finishing Practice": "Shooting accuracy and power training",
        "Movement Drills": "Practice runs, positioning, timing",
        "Team Shape": "Work on positional play and coordination",
        "Individual Skills": "Focus on 1v1 situations and technical work",
        "Physical Prep": "Fitness, sprint work, and strength training",
    },
    "attacking_approach": {
        "Wing Play": "Use crosses and wide attacks",
        "Through the Middle": "Central penetration and passing",
        "Long Balls": "Direct balls to striker",
        "Build-Up Play": "Patient possession-based attacks",
        "Quick Transitions": "Fast counter-attacks",
        "Individual Brilliance": "Give your best players freedom",
    },
    "striker_role": {
        "Target Man": "Hold up play, bring others into game",
        "Poacher": "Stay in box, focus purely on finishing",
        "False 9": "Drop deep, create space for others",
        "Wide Forward": "Drift wide, cut inside to shoot",
        "Deep Striker": "Link play, create as well as score",
        "Penalty Box Predator": "Attack crosses and rebounds",
    },
    "tempo_style": {
        "High Tempo": "Quick passing, constant movement",
        "Controlled Pace": "Dictate rhythm, vary speed",
        "Patient Build-Up": "Slow, methodical progression",
        "Direct Style": "Get ball forward quickly",
        "Reactive Play": "Adapt to opponent's tempo",
        "Chaos Ball": "High energy, unpredictable attacks",
    },
    "match_mentality": {
        "Aggressive": "Take risks, force the action",
        "Confident": "Believe in abilities, play natural game",
        "Cautious": "Avoid mistakes, build confidence gradually",
        "Desperate": "Throw everything forward, all-or-nothing",
        "Clinical": "Stay composed, take chances when they come",
        "Expressive": "Play with flair and creativity",
    },
}


ENVIRONMENT_DESCRIPTIONS: Dict[str, Dict[str, str]] = {
    "weather": {
        "Perfect Day": "Sunny, mild temperature, no wind - ideal conditions",
        "Light Rain": "Slippery surface affects passing and ball control",
        "Heavy Rain": "Difficult ball control, favors direct play",
        "Strong Wind": "Affects long passes and shooting accuracy",
        "Cold Weather": "Players need time to warm up, affects performance",
        "Extreme Heat": "Fatigue sets in faster, endurance matters more",
    },
    "pitch_conditions": {
        "Perfect Grass": "Pristine natural surface, optimal for all play styles",
        "Worn Grass": "Patches and divots affect ball roll and bounce",
        "Artificial Turf": "Consistent but fast surface, favors quick play",
        "Muddy Pitch": "Heavy, slow conditions favor physical play",
        "Dry/Hard Pitch": "Ball bounces more, favors technical players",
        "Newly Laid Grass": "Soft surface with unpredictable bounces",
    },
    "match_atmosphere": {
        "Home + Electric Crowd": "Maximum support, intimidating for opponents",
        "Home + Supportive Crowd": "Good backing from home fans",
        "Home + Quiet Crowd": "Neutral atmosphere at home stadium",
        "Away + Hostile Crowd": "Intimidating away environment",
        "Away + Neutral Crowd": "Standard away match difficulty",
        "Away + Friendly Crowd": "Welcoming or mixed support away",
    },
    "match_importance": {
        "Cup Final": "Big stage brings out the best in players",
        "Derby Match": "Extra motivation against local rivals",
        "Regular League": "Standard match pressure and motivation",
        "End of Season": "Some players already on vacation mode",
        "Relegation Battle": "Desperation brings extra intensity",
        "Dead Rubber": "Nothing to play for, low motivation",
    },
}

NO_DESCRIPTION = "No description available"


def normalize_category(name: str) -> str:
    """Map a camelCase category name to its snake_case key."""
    return CAMEL_CASE_CATEGORIES.get(name, name)


def normalize_choices(choices) -> Dict[str, str]:
    """Return a copy of a category->option mapping with snake_case keys."""
    return {normalize_category(category): option for category, option in choices.items()}
