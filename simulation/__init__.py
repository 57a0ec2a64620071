"""
Simulation engine for the basketball game sim.
Simulates games between two teams from ratings, producing a final score and
box-score stats, and accumulates those stats over a season.
"""
from .engine import GameOptions, simulate_game
from .modifiers import chemistry_modifier, game_modifiers, minutes_distribution
from .season_stats import SeasonStats, accumulate_game

__all__ = [
    "GameOptions",
    "simulate_game",
    "chemistry_modifier",
    "game_modifiers",
    "minutes_distribution",
    "SeasonStats",
    "accumulate_game",
]
