"""
Player domain model.
"""

from dataclasses import dataclass, field
from typing import List

from .base import DictMixin
from .game import GameRecord


@dataclass
class Player(DictMixin):
    """
    A tracked player and the games recorded for them.
    The name is the player's identity within a store (exact match).
    """
    name: str
    games: List[GameRecord] = field(default_factory=list)

    @property
    def games_played(self) -> int:
        return len(self.games)

    @property
    def has_games(self) -> bool:
        return bool(self.games)

    @property
    def file_safe_name(self) -> str:
        """Name with spaces replaced by underscores, for export filenames."""
        return self.name.replace(" ", "_")
