"""
Domain models for HoopLog.
Contains the player/game data structures and computed report types.
"""

from .base import StatField, DictMixin
from .game import GameRecord, GameUpdate
from .player import Player
from .statistics import (
    PlayerTotals,
    PlayerAverages,
    BestGame,
    ChartRow,
    PlayerSummary,
)

__all__ = [
    # Base models
    "StatField",
    "DictMixin",

    # Game models
    "GameRecord",
    "GameUpdate",

    # Player models
    "Player",

    # Statistics models
    "PlayerTotals",
    "PlayerAverages",
    "BestGame",
    "ChartRow",
    "PlayerSummary",
]
