"""
Statistics domain service for player reports.
Read-only aggregations over a player's games.
"""

import logging
import math
from typing import Iterable, List, Optional

from ...config.settings import get_settings
from ..metrics import per_game, simple_efficiency_rating
from ..models.player import Player
from ..models.statistics import (
    BestGame, ChartRow, PlayerAverages, PlayerSummary, PlayerTotals
)

logger = logging.getLogger(__name__)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class StatsService:
    """
    Domain service for statistics-related operations.
    Computes totals, averages, best games and chart data on demand.
    """

    def __init__(self, points_per_star: Optional[int] = None):
        self.points_per_star = points_per_star or get_settings().chart_points_per_star

    def totals(self, player: Player) -> Optional[PlayerTotals]:
        """Totals and shooting percentages, or None if no games are recorded."""
        if not player.has_games:
            return None
        totals = PlayerTotals()
        for game in player.games:
            totals.add_game(game)
        return totals

    def averages(self, player: Player) -> Optional[PlayerAverages]:
        """Per-game averages and efficiency rating, or None if no games are recorded."""
        totals = self.totals(player)
        if totals is None:
            return None
        return PlayerAverages.from_totals(totals, simple_efficiency_rating(player))

    def best_scoring_games(self, player: Player) -> List[BestGame]:
        """Every game tied for the player's highest points, in current order."""
        if not player.has_games:
            return []
        best = max(game.points for game in player.games)
        return [
            BestGame(number=number, game=game)
            for number, game in enumerate(player.games, start=1)
            if game.points == best
        ]

    def points_chart(self, player: Player, points_per_star: Optional[int] = None) -> List[ChartRow]:
        """One chart row per game; each star stands for ``points_per_star`` points."""
        scale = points_per_star or self.points_per_star
        return [
            ChartRow(
                number=number,
                date=game.date,
                points=game.points,
                stars=round_half_away(game.points / scale),
            )
            for number, game in enumerate(player.games, start=1)
        ]

    def quick_summary(self, players: Iterable[Player]) -> List[PlayerSummary]:
        """Games, PPG and rating for every player."""
        summaries = []
        for player in players:
            summary = PlayerSummary(name=player.name, games_played=player.games_played)
            if player.has_games:
                total_points = sum(game.points for game in player.games)
                summary.ppg = per_game(total_points, player.games_played)
                summary.efficiency_rating = simple_efficiency_rating(player)
            summaries.append(summary)
        logger.debug(f"Built quick summary for {len(summaries)} players")
        return summaries
