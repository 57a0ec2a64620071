"""
Data models for the game engine: players, teams, coaches and game results.
"""
from .coach import Coach, CoachModifiers
from .game_result import GameResult, PlayerGameStats, TeamGameResult
from .player import Measurables, Player, PlayerAttributes
from .team import Team

__all__ = [
    "Coach",
    "CoachModifiers",
    "GameResult",
    "Measurables",
    "Player",
    "PlayerAttributes",
    "PlayerGameStats",
    "Team",
    "TeamGameResult",
]
