"""
Statistics result models: totals, averages and report rows for a player.
These are computed on demand from a player's games and never stored.
"""

from dataclasses import dataclass
from typing import Optional

from ..metrics import per_game, shooting_percentage
from .base import DictMixin
from .game import GameRecord


@dataclass
class PlayerTotals(DictMixin):
    """
    Aggregated totals for a player over every recorded game.
    """
    games_played: int = 0

    total_points: int = 0
    total_rebounds: int = 0
    total_assists: int = 0
    total_steals: int = 0
    total_blocks: int = 0

    # Shooting totals
    total_fgm: int = 0
    total_fga: int = 0
    total_fg3m: int = 0
    total_fg3a: int = 0
    total_ftm: int = 0
    total_fta: int = 0

    def add_game(self, game: GameRecord) -> None:
        """Accumulate one game into the totals."""
        self.games_played += 1
        self.total_points += game.points
        self.total_rebounds += game.rebounds
        self.total_assists += game.assists
        self.total_steals += game.steals
        self.total_blocks += game.blocks
        self.total_fgm += game.fgm
        self.total_fga += game.fga
        self.total_fg3m += game.fg3m
        self.total_fg3a += game.fg3a
        self.total_ftm += game.ftm
        self.total_fta += game.fta

    @property
    def fg_percentage(self) -> float:
        return shooting_percentage(self.total_fgm, self.total_fga)

    @property
    def fg3_percentage(self) -> float:
        return shooting_percentage(self.total_fg3m, self.total_fg3a)

    @property
    def ft_percentage(self) -> float:
        return shooting_percentage(self.total_ftm, self.total_fta)


@dataclass
class PlayerAverages(DictMixin):
    """Per-game averages plus the simplified efficiency rating."""
    games_played: int = 0
    ppg: float = 0.0  # Points per game
    rpg: float = 0.0  # Rebounds per game
    apg: float = 0.0  # Assists per game
    spg: float = 0.0  # Steals per game
    bpg: float = 0.0  # Blocks per game
    efficiency_rating: float = 0.0

    @classmethod
    def from_totals(cls, totals: PlayerTotals, efficiency_rating: float) -> 'PlayerAverages':
        games = totals.games_played
        return cls(
            games_played=games,
            ppg=per_game(totals.total_points, games),
            rpg=per_game(totals.total_rebounds, games),
            apg=per_game(totals.total_assists, games),
            spg=per_game(totals.total_steals, games),
            bpg=per_game(totals.total_blocks, games),
            efficiency_rating=efficiency_rating,
        )


@dataclass
class BestGame:
    """A top scoring game and its 1-based position in the player's list."""
    number: int
    game: GameRecord


@dataclass
class ChartRow:
    """One bar of the points-per-game chart."""
    number: int
    date: str
    points: int
    stars: int

    @property
    def bar(self) -> str:
        return "*" * max(self.stars, 0)


@dataclass
class PlayerSummary(DictMixin):
    """One line of the quick report across all players."""
    name: str
    games_played: int
    ppg: Optional[float] = None
    efficiency_rating: Optional[float] = None
