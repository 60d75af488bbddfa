"""
Base domain models and common patterns for the stats tracker.
"""

from enum import Enum
from typing import Any, Dict, List


class StatField(str, Enum):
    """
    Integer stat columns of a game, in the order they are stored on disk.
    The enum value is the GameRecord attribute name.
    """
    POINTS = "points"
    REBOUNDS = "rebounds"
    ASSISTS = "assists"
    STEALS = "steals"
    BLOCKS = "blocks"
    FGM = "fgm"
    FGA = "fga"
    FG3M = "fg3m"
    FG3A = "fg3a"
    FTM = "ftm"
    FTA = "fta"

    @property
    def label(self) -> str:
        """Short display label used in prompts and CSV headers."""
        labels = {
            StatField.POINTS: "Points",
            StatField.REBOUNDS: "Rebounds",
            StatField.ASSISTS: "Assists",
            StatField.STEALS: "Steals",
            StatField.BLOCKS: "Blocks",
            StatField.FGM: "FGM",
            StatField.FGA: "FGA",
            StatField.FG3M: "3PM",
            StatField.FG3A: "3PA",
            StatField.FTM: "FTM",
            StatField.FTA: "FTA",
        }
        return labels[self]

    @property
    def prompt(self) -> str:
        """Longer prompt text for interactive entry."""
        prompts = {
            StatField.FGM: "Field goals made (FGM)",
            StatField.FGA: "Field goals attempted (FGA)",
            StatField.FG3M: "3-pointers made (3PM)",
            StatField.FG3A: "3-pointers attempted (3PA)",
            StatField.FTM: "Free throws made (FTM)",
            StatField.FTA: "Free throws attempted (FTA)",
        }
        return prompts.get(self, self.label)

    @classmethod
    def names(cls) -> List[str]:
        """Attribute names in storage order."""
        return [stat.value for stat in cls]


class DictMixin:
    """Shared dictionary conversion for dataclass-based models."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        result = {}
        for key, value in self.__dict__.items():
            if key.startswith('_'):
                continue
            if isinstance(value, Enum):
                result[key] = value.value
            elif hasattr(value, 'to_dict'):
                result[key] = value.to_dict()
            elif isinstance(value, list):
                result[key] = [
                    item.to_dict() if hasattr(item, 'to_dict') else item
                    for item in value
                ]
            else:
                result[key] = value
        return result
