#!/usr/bin/env python3
"""
Interactive menu shell for HoopLog.

The shell only gathers input and prints reports; all state lives in the
PlayerService it is given. Input and output functions are injectable so a
session can be scripted.
"""

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, Tuple

from ...config.settings import Settings, get_settings
from ...core.error_handler import ErrorHandler
from ...core.exceptions import ConfigurationError, ValidationError
from ...core.utils import DataValidator, LoggerFactory
from ...domain.models import GameRecord, Player, StatField
from ...domain.services import DELETE_CONFIRMATION, PlayerService, StatsService
from ..storage import CsvExporter, TextFileStore

logger = logging.getLogger(__name__)

MAIN_MENU = """
=== MAIN MENU ===
1. Add a player
2. Select player (open player menu)
3. Save all players to file
4. Load players from file
5. Export all players to individual CSV files
6. Quick report: list all players and averages
0. Exit"""

PLAYER_MENU_ITEMS = [
    "Add a game",
    "Edit a game",
    "Delete a game",
    "Sort games by date",
    "Sort games by points",
    "Show totals",
    "Show averages & rating",
    "Show best scoring game(s)",
    "ASCII chart: points per game",
    "Export player to CSV",
]


class StatsShell:
    """
    Menu-driven front end over a PlayerService.
    """

    def __init__(
        self,
        store: Optional[PlayerService] = None,
        stats: Optional[StatsService] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        handler: Optional[ErrorHandler] = None
    ):
        self.store = store if store is not None else PlayerService()
        self.stats = stats or StatsService()
        self.input_func = input_func or input
        self.output_func = output_func or print
        self.handler = handler or ErrorHandler()

    # ------------------------------------------------------------------
    # Input/output helpers
    # ------------------------------------------------------------------

    def say(self, text: str = "") -> None:
        self.output_func(text)

    def read_line(self, prompt: str) -> str:
        return self.input_func(prompt)

    def read_int(self, prompt: str) -> int:
        """Prompt until an integer is entered."""
        while True:
            raw = self.read_line(prompt)
            try:
                return DataValidator.parse_int(raw, "value")
            except ValidationError:
                self.say("Invalid integer. Try again.")

    def read_date(self, prompt: str) -> str:
        """Prompt until a single-token date is entered."""
        while True:
            try:
                return DataValidator.validate_game_date(self.read_line(prompt))
            except ValidationError as e:
                self.say(f"Invalid date: {e.constraint}. Try again.")

    def run_action(self, operation: str, action: Callable[[], None]) -> None:
        with self.handler.error_boundary(operation, report=self.say):
            action()

    # ------------------------------------------------------------------
    # Main menu
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Main loop; returns on 0 or end of input."""
        config = get_settings()
        self.say(f"{config.app_name} {config.app_version}: basketball statistics tracker")
        actions: Dict[int, Tuple[str, Callable[[], None]]] = {
            1: ("add_player", self.add_player),
            2: ("select_player", self.select_player),
            3: ("save", self.save_players),
            4: ("load", self.load_players),
            5: ("export_all", self.export_all),
            6: ("quick_summary", self.quick_summary),
        }

        try:
            while True:
                self.say(MAIN_MENU)
                choice = self.read_int("Choice: ")
                if choice == 0:
                    break
                if choice not in actions:
                    self.say("Invalid choice.")
                    continue
                self.run_action(*actions[choice])
        except EOFError:
            logger.debug("Input closed, leaving shell")

        self.say("Exiting program. Tip: save your data (option 3) before quitting.")

    def add_player(self) -> None:
        name = self.read_line("Enter new player's full name: ")
        response = self.store.add_player(name)
        if not response.success:
            self.say(f"{response.error[:1].upper()}{response.error[1:]}.")
            return

        entry = response.data
        if entry.created:
            self.say(f"Player '{name}' added (index {entry.number}).")
        else:
            self.say(f"Player already exists at index {entry.number}.")

    def select_player(self) -> None:
        if not len(self.store):
            self.say("No players available. Add a player first.")
            return

        self.say("\nPlayers:")
        for number, player in enumerate(self.store.players, start=1):
            self.say(f"{number}. {player.name} ({player.games_played} games)")

        choice = self.read_int("Select player number (0 to cancel): ")
        if choice == 0:
            return
        try:
            DataValidator.validate_position(choice, len(self.store), "player")
        except ValidationError:
            self.say("Invalid selection.")
            return
        self.player_menu(self.store.get_player(choice - 1))

    def save_players(self) -> None:
        count = self.store.save()
        self.say(f"Saved {count} players to '{self.store.text_store.path}'.")

    def load_players(self) -> None:
        count = self.store.load()
        self.say(f"Loaded {count} players from file.")

    def export_all(self) -> None:
        result = self.store.export_all_csv()
        for path in result.exported:
            self.say(f"Exported to CSV file '{path}'.")
        for name, error in result.failed.items():
            self.say(f"Could not export {name}: {error}")
        if result.success:
            self.say("All players exported to CSV files.")

    def quick_summary(self) -> None:
        self.say("\n=== Quick Player Summary ===")
        for summary in self.stats.quick_summary(self.store.players):
            line = f"{summary.name} - Games: {summary.games_played}"
            if summary.ppg is not None:
                line += f", PPG: {summary.ppg:.2f}, Rating: {summary.efficiency_rating:.2f}"
            self.say(line)

    # ------------------------------------------------------------------
    # Player menu
    # ------------------------------------------------------------------

    def player_menu(self, player: Player) -> None:
        actions: Dict[int, Tuple[str, Callable[[Player], None]]] = {
            1: ("add_game", self.enter_game),
            2: ("edit_game", self.edit_game),
            3: ("delete_game", self.delete_game),
            4: ("sort_by_date", self.sort_by_date),
            5: ("sort_by_points", self.sort_by_points),
            6: ("show_totals", self.show_totals),
            7: ("show_averages", self.show_averages),
            8: ("show_best_games", self.show_best_games),
            9: ("show_chart", self.show_chart),
            10: ("export_csv", self.export_player),
        }

        while True:
            self.say(f"\n=== Menu for {player.name} ===")
            for number, item in enumerate(PLAYER_MENU_ITEMS, start=1):
                self.say(f"{number}. {item}")
            self.say("0. Back to main menu")

            choice = self.read_int("Choice: ")
            if choice == 0:
                return
            if choice not in actions:
                self.say("Invalid choice.")
                continue
            operation, action = actions[choice]
            self.run_action(operation, lambda: action(player))

    def _list_games(self, player: Player) -> None:
        self.say(f"\nGames for {player.name}:")
        for number, game in enumerate(player.games, start=1):
            self.say(f"{number}. {game.date} - {game.points} pts")

    def enter_game(self, player: Player) -> None:
        self.say(f"\nEntering new game for {player.name}. Use YYYY-MM-DD for date.")
        date = self.read_date("Date (YYYY-MM-DD): ")
        values = [self.read_int(f"{stat.prompt}: ") for stat in StatField]

        response = self.store.add_game(player, GameRecord.from_values(date, values))
        if response.metadata.get("fgm_adjusted"):
            self.say("Warning: 3PM > FGM. Adjusting FGM to be at least 3PM.")
        self.say(f"Game added for {player.name} ({date}).")

    def _choose_game(self, player: Player, verb: str) -> Optional[int]:
        if not player.has_games:
            self.say(f"No games to {verb}.")
            return None
        self._list_games(player)
        number = self.read_int(f"Enter game number to {verb} (0 to cancel): ")
        return number or None

    def edit_game(self, player: Player) -> None:
        number = self._choose_game(player, "edit")
        if number is None:
            return
        if not 1 <= number <= player.games_played:
            self.say("Invalid game number.")
            return

        game = player.games[number - 1]
        self.say(f"Editing Game {number} ({game.date}). Press enter to keep current value.")
        changes = {"date": self.read_line(f"Date [{game.date}]: ")}
        for stat in StatField:
            changes[stat.value] = self.read_line(f"{stat.label} [{getattr(game, stat.value)}]: ")

        response = self.store.edit_game(player, number, changes)
        if not response.success:
            self.say(response.error)
            return
        for name in response.metadata["rejected"]:
            self.say(f"Invalid input for {name}; keeping previous value.")
        self.say("Game updated.")

    def delete_game(self, player: Player) -> None:
        number = self._choose_game(player, "delete")
        if number is None:
            return
        if not 1 <= number <= player.games_played:
            self.say("Invalid game number.")
            return

        confirmation = self.read_line(f"Type '{DELETE_CONFIRMATION}' to confirm deletion: ")
        response = self.store.delete_game(player, number, confirmation)
        self.say("Game deleted." if response.success else f"{response.error}.")

    def sort_by_date(self, player: Player) -> None:
        self.store.sort_by_date(player)
        self.say("Games sorted by date (oldest -> newest).")

    def sort_by_points(self, player: Player) -> None:
        self.store.sort_by_points(player)
        self.say("Games sorted by points (highest -> lowest).")

    def show_totals(self, player: Player) -> None:
        totals = self.stats.totals(player)
        if totals is None:
            self.say("No games to report.")
            return

        self.say(f"\n=== TOTALS for {player.name} ===")
        self.say(f"Games: {totals.games_played}")
        self.say(f"Points: {totals.total_points}")
        self.say(f"Rebounds: {totals.total_rebounds}")
        self.say(f"Assists: {totals.total_assists}")
        self.say(f"Steals: {totals.total_steals}")
        self.say(f"Blocks: {totals.total_blocks}")
        self.say(f"FG%: {totals.fg_percentage:.2f}% ({totals.total_fgm}/{totals.total_fga})")
        self.say(f"3P%: {totals.fg3_percentage:.2f}% ({totals.total_fg3m}/{totals.total_fg3a})")
        self.say(f"FT%: {totals.ft_percentage:.2f}% ({totals.total_ftm}/{totals.total_fta})")

    def show_averages(self, player: Player) -> None:
        averages = self.stats.averages(player)
        if averages is None:
            self.say("No games to report.")
            return

        self.say(f"\n=== AVERAGES for {player.name} ===")
        self.say(f"PPG: {averages.ppg:.2f}")
        self.say(f"RPG: {averages.rpg:.2f}")
        self.say(f"APG: {averages.apg:.2f}")
        self.say(f"SPG: {averages.spg:.2f}")
        self.say(f"BPG: {averages.bpg:.2f}")
        self.say(f"Efficiency rating (simplified): {averages.efficiency_rating:.2f}")

    def show_best_games(self, player: Player) -> None:
        best_games = self.stats.best_scoring_games(player)
        if not best_games:
            self.say("No games to report.")
            return

        self.say(f"\n=== Best Scoring Game(s): {best_games[0].game.points} pts ===")
        for best in best_games:
            game = best.game
            self.say(
                f"{best.number}. {game.date} - {game.points} pts, "
                f"FG%={game.fg_pct:.1f}%, 3P={game.fg3_pct:.1f}%"
            )

    def show_chart(self, player: Player) -> None:
        rows = self.stats.points_chart(player)
        if not rows:
            self.say("No games to chart.")
            return

        self.say(f"\n=== ASCII Chart: Points per Game (each '*' = {self.stats.points_per_star} points) ===")
        for row in rows:
            self.say(f"{row.number:>3} [{row.date}] {row.points:>3} | {row.bar}")

    def export_player(self, player: Player) -> None:
        filename = self.read_line("Filename for CSV (e.g., player.csv): ").strip()
        path = self.store.export_csv(player, filename or None)
        self.say(f"Exported {player.name} to CSV file '{path}'.")


def parse_arguments(argv: Optional[List[str]] = None, config: Optional[Settings] = None) -> argparse.Namespace:
    """Parse command line arguments; defaults come from ``config``."""
    config = config or get_settings()
    parser = argparse.ArgumentParser(
        description=f"{config.app_name} - personal basketball statistics tracker",
    )
    parser.add_argument("--data-file", default=config.data_file,
                        help=f"Save/load file (default: {config.data_file})")
    parser.add_argument("--export-dir", default=config.export_dir,
                        help=f"Directory for CSV exports (default: {config.export_dir})")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help=f"Log level (default: {config.log_level})")
    parser.add_argument("--load", action="store_true",
                        help="Load the data file before showing the menu")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the hooplog console script."""
    try:
        config = get_settings()
    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2

    args = parse_arguments(argv, config)
    if args.log_level:
        LoggerFactory.set_level(args.log_level)

    store = PlayerService(TextFileStore(args.data_file), CsvExporter(args.export_dir))
    shell = StatsShell(store)
    if args.load:
        shell.run_action("load", shell.load_players)
    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
