"""
Game domain models: one recorded game and partial updates to it.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional

from ...core.exceptions import ValidationError
from ...core.utils import DataValidator
from ..metrics import game_efficiency, shooting_percentage
from .base import DictMixin, StatField


@dataclass
class GameRecord(DictMixin):
    """
    Stats for a single game played by one player.
    Dates are kept as YYYY-MM-DD strings so lexical order is chronological.
    """
    date: str = ""

    points: int = 0
    rebounds: int = 0
    assists: int = 0
    steals: int = 0
    blocks: int = 0

    fgm: int = 0   # Field goals made
    fga: int = 0   # Field goals attempted
    fg3m: int = 0  # 3-pointers made
    fg3a: int = 0  # 3-pointers attempted
    ftm: int = 0   # Free throws made
    fta: int = 0   # Free throws attempted

    # Surrogate key assigned by the store; positions shown to users are 1-based indexes
    game_id: Optional[int] = field(default=None, compare=False)

    @property
    def fg_pct(self) -> float:
        return shooting_percentage(self.fgm, self.fga)

    @property
    def fg3_pct(self) -> float:
        return shooting_percentage(self.fg3m, self.fg3a)

    @property
    def ft_pct(self) -> float:
        return shooting_percentage(self.ftm, self.fta)

    @property
    def efficiency(self) -> float:
        return game_efficiency(self)

    def reconcile_made_shots(self) -> bool:
        """
        Raise FGM to 3PM when more threes than field goals were entered.

        Returns True if the record was adjusted.
        """
        if self.fg3m > self.fgm:
            self.fgm = self.fg3m
            return True
        return False

    def stat_values(self) -> List[int]:
        """Integer stats in storage order."""
        return [getattr(self, name) for name in StatField.names()]

    @classmethod
    def from_values(cls, date: str, values: List[int]) -> 'GameRecord':
        """Build a record from a date and integer stats in storage order."""
        names = StatField.names()
        if len(values) != len(names):
            raise ValueError(f"Expected {len(names)} stat values, got {len(values)}")
        return cls(date=date, **dict(zip(names, values)))


@dataclass
class GameUpdate:
    """
    Partial update to a GameRecord.

    Every field is optional; only fields that are set get applied. Input that
    could not be parsed is listed in ``rejected`` and leaves that field unset.
    """
    date: Optional[str] = None

    points: Optional[int] = None
    rebounds: Optional[int] = None
    assists: Optional[int] = None
    steals: Optional[int] = None
    blocks: Optional[int] = None

    fgm: Optional[int] = None
    fga: Optional[int] = None
    fg3m: Optional[int] = None
    fg3a: Optional[int] = None
    ftm: Optional[int] = None
    fta: Optional[int] = None

    rejected: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_input(cls, changes: Mapping[str, Any]) -> 'GameUpdate':
        """
        Build an update from raw values keyed by field name.

        None and blank strings mean "keep the current value". Unknown keys
        raise ValidationError since they indicate a programming error rather
        than bad user input.
        """
        update = cls()
        stat_names = set(StatField.names())

        for name, raw in changes.items():
            if name != "date" and name not in stat_names:
                raise ValidationError(name, raw, "not an editable game field")
            if raw is None or (isinstance(raw, str) and not raw.strip()):
                continue

            try:
                if name == "date":
                    update.date = DataValidator.validate_game_date(str(raw))
                else:
                    setattr(update, name, DataValidator.parse_int(raw, name))
            except ValidationError:
                update.rejected[name] = raw

        return update

    @property
    def changed_fields(self) -> List[str]:
        """Names of the fields this update will write."""
        return [
            f.name for f in fields(self)
            if f.name != "rejected" and getattr(self, f.name) is not None
        ]

    def apply_to(self, record: GameRecord) -> List[str]:
        """Write the set fields onto ``record`` and return their names."""
        changed = self.changed_fields
        for name in changed:
            setattr(record, name, getattr(self, name))
        return changed
