"""
Scripted sessions against the interactive shell.
"""

import os
import sys

import pytest

# Add backend src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend', 'src'))

from hooplog.adapters.console import StatsShell, main, parse_arguments
from hooplog.adapters.storage import CsvExporter, TextFileStore
from hooplog.config import get_settings
from hooplog.domain.models import Player
from hooplog.domain.services import PlayerService, StatsService
from test_utils import ScriptedConsole, TestDataFactory

REFERENCE_GAME_INPUT = ["2024-01-10", "20", "5", "3", "1", "0", "8", "15", "2", "5", "2", "3"]


@pytest.fixture
def store(tmp_path):
    return PlayerService(TextFileStore(tmp_path / "players_data.txt"), CsvExporter(tmp_path))


def run_session(store, lines):
    console = ScriptedConsole(lines)
    shell = StatsShell(
        store,
        StatsService(points_per_star=2),
        input_func=console.input,
        output_func=console.print,
    )
    shell.run()
    return console


class TestMainMenu:

    def test_add_player_and_game_then_averages(self, store):
        console = run_session(store, [
            "1", "Alex Morgan",
            "2", "1",
            "1", *REFERENCE_GAME_INPUT,
            "7",
            "0", "0",
        ])

        assert "Player 'Alex Morgan' added (index 1)." in console.output
        assert "Game added for Alex Morgan (2024-01-10)." in console.output
        assert "PPG: 20.00" in console.output
        assert "Efficiency rating (simplified): 21.00" in console.output
        assert store.players[0].games_played == 1

    def test_empty_and_duplicate_names(self, store):
        console = run_session(store, ["1", "", "1", "Sam", "1", "Sam", "0"])
        assert "Player name cannot be empty." in console.output
        assert "Player already exists at index 1." in console.output
        assert len(store) == 1

    def test_invalid_integers_reprompt(self, store):
        console = run_session(store, ["abc", "9", "0"])
        assert "Invalid integer. Try again." in console.output
        assert "Invalid choice." in console.output

    def test_end_of_input_exits(self, store):
        console = run_session(store, ["1"])
        assert console.output[-1].startswith("Exiting program.")

    def test_select_with_no_players(self, store):
        console = run_session(store, ["2", "0"])
        assert "No players available. Add a player first." in console.output

    def test_invalid_selection(self, store):
        store.add_player("Sam")
        console = run_session(store, ["2", "5", "0"])
        assert "Invalid selection." in console.output

    def test_save_and_load(self, store):
        store.replace_players(TestDataFactory.create_roster())
        console = run_session(store, ["3", "0"])
        assert f"Saved 3 players to '{store.text_store.path}'." in console.output

        fresh = PlayerService(store.text_store, store.exporter)
        console = run_session(fresh, ["4", "6", "0"])
        assert "Loaded 3 players from file." in console.output
        assert "Alex Morgan - Games: 2, PPG: 25.50, Rating: 26.00" in console.output
        assert "Jordan Lee Jr. - Games: 0" in console.output

    def test_load_missing_file_is_reported(self, store):
        store.add_player("Sam")
        console = run_session(store, ["4", "0"])
        assert f"No saved file '{store.text_store.path}' found" in console.output
        assert [player.name for player in store.players] == ["Sam"]

    def test_undecodable_name_is_rejected(self, store):
        console = run_session(store, ["1", "Bad\udcffName", "0"])
        assert "Player name must be valid UTF-8 text." in console.output
        assert len(store) == 0

    def test_unencodable_save_keeps_previous_file(self, store):
        store.replace_players(TestDataFactory.create_roster())
        store.save()
        path = store.text_store.path
        before = path.read_bytes()

        store.replace_players(TestDataFactory.create_roster() + [Player(name="Bad\udcffName")])
        console = run_session(store, ["3", "0"])

        assert any("cannot encode" in line for line in console.output)
        assert console.output[-1].startswith("Exiting program.")
        assert path.read_bytes() == before

    def test_export_all(self, store, tmp_path):
        store.replace_players(TestDataFactory.create_roster())
        console = run_session(store, ["5", "0"])
        assert "All players exported to CSV files." in console.output
        assert (tmp_path / "Alex_Morgan.csv").exists()
        assert (tmp_path / "Jordan_Lee_Jr..csv").exists()


class TestPlayerMenu:

    def setup_method(self):
        self.games = [
            TestDataFactory.create_game("2024-01-10"),
            TestDataFactory.create_game("2024-01-05", points=31),
        ]

    def _seed(self, store):
        player = store.add_player("Alex Morgan").data.player
        for game in self.games:
            store.add_game(player, game)
        return player

    def test_three_pointer_warning(self, store):
        store.add_player("Sam")
        game = ["2024-01-10", "15", "0", "0", "0", "0", "3", "10", "5", "8", "0", "0"]
        console = run_session(store, ["2", "1", "1", *game, "0", "0"])
        assert "Warning: 3PM > FGM. Adjusting FGM to be at least 3PM." in console.output
        assert store.players[0].games[0].fgm == 5

    def test_enter_game_reprompts_for_bad_dates(self, store):
        store.add_player("Sam")
        game = ["", "2024 01 10", *REFERENCE_GAME_INPUT]
        console = run_session(store, ["2", "1", "1", *game, "0", "3", "0"])

        assert "Invalid date: date cannot be empty. Try again." in console.output
        assert "Invalid date: date cannot contain spaces. Try again." in console.output
        assert store.players[0].games[0].date == "2024-01-10"
        assert f"Saved 1 players to '{store.text_store.path}'." in console.output

    def test_edit_keeps_blank_and_invalid_fields(self, store):
        player = self._seed(store)
        edits = ["", "abc", "9"] + [""] * 9
        console = run_session(store, ["2", "1", "2", "1", *edits, "0", "0"])
        assert "Invalid input for points; keeping previous value." in console.output
        assert "Game updated." in console.output
        assert player.games[0].points == 20
        assert player.games[0].rebounds == 9
        assert player.games[0].date == "2024-01-10"

    def test_edit_invalid_game_number(self, store):
        self._seed(store)
        console = run_session(store, ["2", "1", "2", "7", "0", "0"])
        assert "Invalid game number." in console.output

    def test_delete_requires_confirmation(self, store):
        player = self._seed(store)
        console = run_session(store, [
            "2", "1",
            "3", "1", "delete",
            "3", "1", "DELETE",
            "0", "0",
        ])
        assert "Deletion cancelled." in console.output
        assert "Game deleted." in console.output
        assert [game.date for game in player.games] == ["2024-01-05"]

    def test_no_games_messages(self, store):
        store.add_player("Sam")
        console = run_session(store, ["2", "1", "2", "3", "6", "8", "9", "0", "0"])
        assert "No games to edit." in console.output
        assert "No games to delete." in console.output
        assert console.output.count("No games to report.") == 2
        assert "No games to chart." in console.output

    def test_sorts_totals_best_and_chart(self, store):
        player = self._seed(store)
        console = run_session(store, ["2", "1", "4", "6", "8", "9", "5", "0", "0"])

        assert "Games sorted by date (oldest -> newest)." in console.output
        assert "Points: 51" in console.output
        assert "FG%: 53.33% (16/30)" in console.output
        assert "\n=== Best Scoring Game(s): 31 pts ===" in console.output
        assert "1. 2024-01-05 - 31 pts, FG%=53.3%, 3P=40.0%" in console.output
        assert "  1 [2024-01-05]  31 | ****************" in console.output
        assert "  2 [2024-01-10]  20 | **********" in console.output
        assert "Games sorted by points (highest -> lowest)." in console.output
        assert [game.points for game in player.games] == [31, 20]

    def test_export_player(self, store, tmp_path):
        self._seed(store)
        console = run_session(store, ["2", "1", "10", "", "10", "custom.csv", "0", "0"])
        assert (tmp_path / "Alex_Morgan.csv").exists()
        assert (tmp_path / "custom.csv").exists()
        assert f"Exported Alex Morgan to CSV file '{tmp_path / 'custom.csv'}'." in console.output


class TestCommandLine:

    def test_parse_arguments_defaults(self):
        args = parse_arguments([])
        assert args.data_file == "players_data.txt"
        assert args.load is False
        assert args.log_level is None

    def test_main_reports_bad_configuration(self, monkeypatch, capsys):
        monkeypatch.setenv("HOOPLOG_CHART_POINTS_PER_STAR", "0")
        get_settings.cache_clear()
        try:
            exit_code = main([])
        finally:
            get_settings.cache_clear()

        assert exit_code == 2
        assert "Configuration error for 'chart_points_per_star'" in capsys.readouterr().err

    def test_main_loads_and_runs(self, tmp_path, monkeypatch):
        data_file = tmp_path / "players_data.txt"
        TextFileStore(data_file).save(TestDataFactory.create_roster())

        console = ScriptedConsole(["6", "0"])
        monkeypatch.setattr("builtins.input", console.input)
        monkeypatch.setattr("builtins.print", console.print)

        exit_code = main(["--data-file", str(data_file), "--export-dir", str(tmp_path), "--load"])

        assert exit_code == 0
        assert "Loaded 3 players from file." in console.output
        assert "Sam - Games: 1, PPG: 8.00, Rating: 10.00" in console.output
