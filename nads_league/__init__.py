"""
League Of Nads - football manager mini-game with a shared leaderboard
"""
__version__ = "0.1.0"
