"""
Derived basketball metrics.

All functions here are pure: they read game data and return numbers, with no
state and no side effects.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.game import GameRecord
    from .models.player import Player


def shooting_percentage(made: int, attempted: int) -> float:
    """Return ``100 * made / attempted``, or 0.0 when nothing was attempted."""
    if attempted == 0:
        return 0.0
    return 100.0 * made / attempted


def game_efficiency(game: "GameRecord") -> float:
    """
    Raw efficiency for a single game.

    Counting stats minus missed field goals and missed free throws:
        points + rebounds + assists + steals + blocks
        - ((fga - fgm) + (fta - ftm))
    """
    raw = game.points + game.rebounds + game.assists + game.steals + game.blocks
    raw -= (game.fga - game.fgm) + (game.fta - game.ftm)
    return float(raw)


def simple_efficiency_rating(player: "Player") -> float:
    """
    Simplified per-game efficiency rating.

    This is HoopLog's own transparent formula, not the NBA's PER or any other
    published statistic: the mean of ``game_efficiency`` over every game the
    player has recorded. A player with no games rates 0.0.
    """
    if not player.games:
        return 0.0
    total = sum(game_efficiency(game) for game in player.games)
    return total / len(player.games)


def per_game(total: float, games: int) -> float:
    """Arithmetic mean per game, 0.0 when no games were played."""
    if games == 0:
        return 0.0
    return total / games
