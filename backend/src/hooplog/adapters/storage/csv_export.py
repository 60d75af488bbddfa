"""
CSV export of a player's games, for spreadsheets.
"""

import csv
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ...config.settings import get_settings
from ...core.error_handler import with_error_context
from ...core.exceptions import StorageException, StorageWriteError
from ...domain.models import GameRecord, Player, StatField
from .text_store import encode_utf8

logger = logging.getLogger(__name__)

CSV_HEADER = ["Date"] + [stat.label for stat in StatField] + ["FG%", "3P%", "FT%"]


def game_to_row(game: GameRecord) -> List[str]:
    """One CSV row: date, raw stats, then percentages to two decimals."""
    return (
        [game.date]
        + [str(value) for value in game.stat_values()]
        + [f"{pct:.2f}" for pct in (game.fg_pct, game.fg3_pct, game.ft_pct)]
    )


@dataclass
class ExportResult:
    """Outcome of exporting several players."""
    exported: List[Path] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.failed


class CsvExporter:
    """
    Writes one CSV file per player into an export directory.
    """

    def __init__(self, export_dir: Optional[Union[str, Path]] = None):
        self.export_dir = Path(export_dir if export_dir is not None else get_settings().export_dir)

    @staticmethod
    def default_filename(player: Player) -> str:
        return f"{player.file_safe_name}.csv"

    def resolve_path(self, filename: Union[str, Path]) -> Path:
        path = Path(filename)
        if path.is_absolute():
            return path
        return self.export_dir / path

    @with_error_context("export_csv")
    def export_player(self, player: Player, filename: Optional[Union[str, Path]] = None) -> Path:
        """
        Write every game of ``player`` in its current order.

        Without a filename the player's name is used, spaces replaced by
        underscores. Returns the path written.
        """
        path = self.resolve_path(filename or self.default_filename(player))

        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for game in player.games:
            writer.writerow(game_to_row(game))
        data = encode_utf8(buffer.getvalue(), str(path))

        try:
            with open(path, "wb") as out:
                out.write(data)
        except (OSError, ValueError) as e:
            # ValueError: a path the filesystem cannot encode (lone surrogate, NUL)
            raise StorageWriteError(str(path), original_error=e) from e

        logger.info(f"Exported {player.name} ({player.games_played} games) to {path}")
        return path

    def export_all(self, players: Iterable[Player]) -> ExportResult:
        """Export each player to its default filename, continuing past failures."""
        result = ExportResult()
        for player in players:
            try:
                result.exported.append(self.export_player(player))
            except StorageException as e:
                logger.error(f"CSV export failed for {player.name}: {e}")
                result.failed[player.name] = e.message
        return result
