"""
Player store service: owns every player and their games.

The store is an ordinary object handed to whoever needs it (shell, tests);
there is no module-level store.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple, Union

from ...adapters.storage.csv_export import CsvExporter, ExportResult
from ...adapters.storage.text_store import TextFileStore
from ...core.error_handler import with_error_context
from ...core.exceptions import GameNotFoundError, PlayerNotFoundError, ValidationError
from ...core.utils import DataValidator, LoggerFactory
from ..models.game import GameRecord, GameUpdate
from ..models.player import Player
from .base_service import ServiceResponse

DELETE_CONFIRMATION = "DELETE"


@dataclass
class PlayerEntry:
    """Where a player lives in the store and whether add_player created it."""
    index: int
    created: bool
    player: Player

    @property
    def number(self) -> int:
        """1-based position for display."""
        return self.index + 1


class PlayerService:
    """
    In-memory store of players with add/edit/delete/sort operations
    and whole-store save/load.
    """

    def __init__(
        self,
        text_store: Optional[TextFileStore] = None,
        exporter: Optional[CsvExporter] = None
    ):
        """
        Initialize an empty store.

        Args:
            text_store: Persistence backend (defaults to the configured data file)
            exporter: CSV exporter (defaults to the configured export directory)
        """
        self.text_store = text_store or TextFileStore()
        self.exporter = exporter or CsvExporter()
        self.logger = LoggerFactory.get_logger(self.__class__.__name__)
        self._players: List[Player] = []
        self._next_game_id = 1

    def __len__(self) -> int:
        return len(self._players)

    @property
    def players(self) -> Tuple[Player, ...]:
        return tuple(self._players)

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------

    def add_player(self, name: str) -> ServiceResponse[PlayerEntry]:
        """
        Add a player by name.

        An empty name is rejected. If the exact name already exists the
        existing entry is returned with ``created=False``.
        """
        try:
            DataValidator.validate_player_name(name)
        except ValidationError as e:
            self.logger.info(f"Rejected player name {name!r}: {e.constraint}")
            return ServiceResponse.rejected(e.constraint)

        index = self.find_player(name)
        if index is not None:
            return ServiceResponse.ok(PlayerEntry(index, False, self._players[index]))

        player = Player(name=name)
        self._players.append(player)
        self.logger.info(f"Added player '{name}' at position {len(self._players)}")
        return ServiceResponse.ok(PlayerEntry(len(self._players) - 1, True, player))

    def find_player(self, name: str) -> Optional[int]:
        """Index of the player with exactly this name, or None."""
        for index, player in enumerate(self._players):
            if player.name == name:
                return index
        return None

    def get_player(self, index: int) -> Player:
        """Player at a 0-based index."""
        if index < 0 or index >= len(self._players):
            raise PlayerNotFoundError(index=index)
        return self._players[index]

    def _require_owned(self, player: Player) -> None:
        if not any(owned is player for owned in self._players):
            raise PlayerNotFoundError(player_name=player.name)

    # ------------------------------------------------------------------
    # Games
    # ------------------------------------------------------------------

    def add_game(self, player: Player, record: GameRecord) -> ServiceResponse[GameRecord]:
        """
        Append a game to the player's list.

        More 3-pointers made than field goals made is corrected by raising
        FGM to match 3PM.
        """
        self._require_owned(player)

        adjusted = record.reconcile_made_shots()
        if adjusted:
            self.logger.warning(
                f"3PM > FGM for {player.name} on {record.date}; FGM raised to {record.fgm}"
            )

        record.game_id = self._issue_game_id()
        player.games.append(record)
        return ServiceResponse.ok(record, fgm_adjusted=adjusted, number=len(player.games))

    def edit_game(
        self,
        player: Player,
        number: int,
        changes: Union[GameUpdate, Mapping[str, Any]]
    ) -> ServiceResponse[GameRecord]:
        """
        Apply a partial update to the game at 1-based ``number``.

        Unset fields keep their values. Fields whose input could not be
        parsed are skipped and listed in ``metadata['rejected']``; the other
        fields in the same update still apply.
        """
        self._require_owned(player)
        if not self._in_range(player, number):
            return ServiceResponse.rejected(GameNotFoundError(number, len(player.games)).message)

        update = changes if isinstance(changes, GameUpdate) else GameUpdate.from_input(changes)
        record = player.games[number - 1]
        updated = update.apply_to(record)

        if update.rejected:
            self.logger.info(f"Kept previous values for unparsable fields: {sorted(update.rejected)}")
        return ServiceResponse.ok(record, updated=updated, rejected=dict(update.rejected))

    def delete_game(self, player: Player, number: int, confirmation: str) -> ServiceResponse[GameRecord]:
        """
        Remove the game at 1-based ``number``.

        Nothing is removed unless ``confirmation`` is exactly "DELETE".
        Later games move up one position.
        """
        self._require_owned(player)
        if not self._in_range(player, number):
            return ServiceResponse.rejected(GameNotFoundError(number, len(player.games)).message)

        if confirmation != DELETE_CONFIRMATION:
            return ServiceResponse.rejected("Deletion cancelled", cancelled=True)

        record = player.games.pop(number - 1)
        self.logger.info(f"Deleted game {number} ({record.date}) for {player.name}")
        return ServiceResponse.ok(record)

    def sort_by_date(self, player: Player) -> None:
        """Reorder games oldest to newest (YYYY-MM-DD sorts lexically)."""
        player.games.sort(key=lambda game: game.date)

    def sort_by_points(self, player: Player) -> None:
        """Reorder games highest to lowest scoring."""
        player.games.sort(key=lambda game: game.points, reverse=True)

    def find_game(self, player: Player, game_id: int) -> Optional[int]:
        """Current 1-based position of a game by its surrogate key."""
        for number, game in enumerate(player.games, start=1):
            if game.game_id == game_id:
                return number
        return None

    @staticmethod
    def _in_range(player: Player, number: int) -> bool:
        return 1 <= number <= len(player.games)

    def _issue_game_id(self) -> int:
        game_id = self._next_game_id
        self._next_game_id += 1
        return game_id

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def replace_players(self, players: List[Player]) -> None:
        """Discard the current store and take ownership of ``players``."""
        self._players = list(players)
        self._next_game_id = 1
        for player in self._players:
            for game in player.games:
                game.game_id = self._issue_game_id()

    @with_error_context("save")
    def save(self, path: Optional[str] = None) -> int:
        """Write the whole store; returns the number of players saved."""
        store = TextFileStore(path) if path else self.text_store
        return store.save(self._players)

    @with_error_context("load")
    def load(self, path: Optional[str] = None) -> int:
        """
        Replace the whole store with the file's contents.

        The in-memory store is untouched unless the entire file decodes.
        """
        store = TextFileStore(path) if path else self.text_store
        players = store.load()
        self.replace_players(players)
        self.logger.info(f"Replaced store with {len(players)} players from {store.path}")
        return len(players)

    def export_csv(self, player: Player, filename: Optional[str] = None):
        """Export one player's games; returns the path written."""
        return self.exporter.export_player(player, filename)

    def export_all_csv(self) -> ExportResult:
        """Export every player to its default CSV filename."""
        return self.exporter.export_all(self._players)
