"""
Whole-store persistence in HoopLog's line-oriented text format.

Layout (UTF-8, one record per line):

    <player count>
    <player name>
    <game count>
    <date> <points> <rebounds> <assists> <steals> <blocks> <fgm> <fga> <3pm> <3pa> <ftm> <fta>
    ...

Player names take a whole line and may contain spaces; dates are single
whitespace-free tokens. Files are always read and written whole. A crash in
the middle of a save can leave a truncated file behind.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ...config.settings import get_settings
from ...core.error_handler import with_error_context
from ...core.exceptions import (
    StorageFormatError, StorageNotFoundError, StorageWriteError
)
from ...domain.models import GameRecord, Player, StatField

logger = logging.getLogger(__name__)

GAME_LINE_FIELDS = 1 + len(StatField)


def _check_encodable(players: List[Player], path: Optional[str]) -> None:
    seen = set()
    for player in players:
        if not player.name:
            raise StorageFormatError(path, "cannot save a player with an empty name")
        if "\n" in player.name or "\r" in player.name:
            raise StorageFormatError(path, f"player name {player.name!r} contains a line break")
        if player.name in seen:
            raise StorageFormatError(path, f"duplicate player name {player.name!r}")
        seen.add(player.name)

        for number, game in enumerate(player.games, start=1):
            if not game.date or any(ch.isspace() for ch in game.date):
                raise StorageFormatError(
                    path,
                    f"game {number} of '{player.name}' has date {game.date!r}; "
                    "dates must be non-empty with no spaces"
                )


def encode_players(players: Iterable[Player], path: Optional[str] = None) -> str:
    """Encode players and their games to the text format."""
    players = list(players)
    _check_encodable(players, path)

    lines = [str(len(players))]
    for player in players:
        lines.append(player.name)
        lines.append(str(len(player.games)))
        for game in player.games:
            lines.append(" ".join([game.date] + [str(value) for value in game.stat_values()]))
    return "\n".join(lines) + "\n"


def encode_utf8(text: str, path: Optional[str] = None) -> bytes:
    """
    Encode finished file content to UTF-8 before any file is opened.

    Strings holding lone surrogates cannot be encoded; the failure is
    reported as a StorageFormatError naming the offending line.
    """
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        line_number = text.count("\n", 0, e.start) + 1
        raise StorageFormatError(
            path, f"cannot encode {e.object[e.start:e.end]!r} as UTF-8", line_number,
            original_error=e
        ) from e


class _LineReader:
    """Sequential line access that knows the current 1-based line number."""

    def __init__(self, text: str, path: Optional[str]):
        self.lines = [line.rstrip("\r") for line in text.split("\n")]
        if self.lines and self.lines[-1] == "":
            self.lines.pop()
        self.path = path
        self.position = 0

    @property
    def line_number(self) -> int:
        return self.position

    def next_line(self, expected: str) -> str:
        if self.position >= len(self.lines):
            raise StorageFormatError(
                self.path, f"unexpected end of file, expected {expected}", self.position + 1
            )
        line = self.lines[self.position]
        self.position += 1
        return line

    def error(self, reason: str) -> StorageFormatError:
        return StorageFormatError(self.path, reason, self.line_number)

    def read_count(self, expected: str) -> int:
        raw = self.next_line(expected)
        try:
            count = int(raw.strip())
        except ValueError:
            raise self.error(f"expected {expected}, got {raw!r}") from None
        if count < 0:
            raise self.error(f"{expected} cannot be negative, got {count}")
        return count

    def remaining_content(self) -> bool:
        return any(line.strip() for line in self.lines[self.position:])


def _decode_game(reader: _LineReader) -> GameRecord:
    raw = reader.next_line("a game line")
    tokens = raw.split()
    if len(tokens) != GAME_LINE_FIELDS:
        raise reader.error(
            f"expected {GAME_LINE_FIELDS} fields on a game line, got {len(tokens)}"
        )

    values = []
    for stat, token in zip(StatField, tokens[1:]):
        try:
            values.append(int(token))
        except ValueError:
            raise reader.error(f"{stat.label} must be an integer, got {token!r}") from None

    return GameRecord.from_values(tokens[0], values)


def decode_players(text: str, path: Optional[str] = None) -> List[Player]:
    """
    Decode the text format into a new list of players.

    Any malformed content fails the whole decode with StorageFormatError; a
    partially decoded list is never returned.
    """
    reader = _LineReader(text, path)
    player_count = reader.read_count("player count")

    players: List[Player] = []
    names = set()
    for _ in range(player_count):
        name = reader.next_line("a player name")
        if not name:
            raise reader.error("player name cannot be empty")
        if name in names:
            raise reader.error(f"duplicate player name {name!r}")
        names.add(name)

        player = Player(name=name)
        game_count = reader.read_count(f"game count for '{name}'")
        for _ in range(game_count):
            player.games.append(_decode_game(reader))
        players.append(player)

    if reader.remaining_content():
        raise StorageFormatError(
            path, f"unexpected content after {player_count} players", reader.line_number + 1
        )
    return players


class TextFileStore:
    """
    Reads and writes the whole player store as one text file.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path if path is not None else get_settings().data_file)

    @with_error_context("save_players")
    def save(self, players: Iterable[Player]) -> int:
        """
        Overwrite the file with every player, in store order.

        Returns the number of players written. Nothing is written if the store
        cannot be encoded or the file cannot be opened.
        """
        players = list(players)
        data = encode_utf8(encode_players(players, str(self.path)), str(self.path))
        try:
            with open(self.path, "wb") as out:
                out.write(data)
        except (OSError, ValueError) as e:
            raise StorageWriteError(str(self.path), original_error=e) from e

        logger.info(f"Saved {len(players)} players to {self.path}")
        return len(players)

    @with_error_context("load_players")
    def load(self) -> List[Player]:
        """Read and decode every player from the file."""
        try:
            with open(self.path, "r", encoding="utf-8", newline="") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise StorageFormatError(str(self.path), "file is not valid UTF-8", original_error=e) from e
        except OSError as e:
            raise StorageNotFoundError(str(self.path), original_error=e) from e

        players = decode_players(text, str(self.path))
        logger.info(f"Loaded {len(players)} players from {self.path}")
        return players
