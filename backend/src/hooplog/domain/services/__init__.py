"""
Domain services for HoopLog.
Contains the player store and read-only statistics reports.
"""

from .base_service import ServiceResponse
from .player_service import PlayerService, PlayerEntry, DELETE_CONFIRMATION
from .stats_service import StatsService

__all__ = [
    "ServiceResponse",
    "PlayerService",
    "PlayerEntry",
    "DELETE_CONFIRMATION",
    "StatsService",
]
