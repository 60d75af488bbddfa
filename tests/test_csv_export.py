"""
Tests for per-player CSV export.
"""

import csv
import os
import sys

import pytest

# Add backend src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend', 'src'))

from hooplog.adapters.storage import CSV_HEADER, CsvExporter, game_to_row
from hooplog.core.exceptions import StorageFormatError, StorageWriteError
from hooplog.domain.models import Player
from test_utils import TestDataFactory


class TestCsvExporter:

    def setup_method(self):
        self.player = TestDataFactory.create_player(games=[
            TestDataFactory.create_game("2024-01-12", points=9, fgm=0, fga=0, fg3m=0, fg3a=0, ftm=0, fta=0),
            TestDataFactory.create_game("2024-01-10"),
        ])

    def test_header(self):
        assert ",".join(CSV_HEADER) == (
            "Date,Points,Rebounds,Assists,Steals,Blocks,FGM,FGA,3PM,3PA,FTM,FTA,FG%,3P%,FT%"
        )

    def test_row_format(self):
        assert game_to_row(TestDataFactory.create_game()) == [
            "2024-01-10", "20", "5", "3", "1", "0", "8", "15", "2", "5", "2", "3",
            "53.33", "40.00", "66.67",
        ]

    def test_export_writes_games_in_current_order(self, tmp_path):
        path = CsvExporter(tmp_path).export_player(self.player, "alex.csv")
        assert path == tmp_path / "alex.csv"

        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == ",".join(CSV_HEADER)
        assert lines[1] == "2024-01-12,9,5,3,1,0,0,0,0,0,0,0,0.00,0.00,0.00"
        assert lines[2] == "2024-01-10,20,5,3,1,0,8,15,2,5,2,3,53.33,40.00,66.67"
        assert len(lines) == 3

    def test_export_is_valid_csv(self, tmp_path):
        path = CsvExporter(tmp_path).export_player(self.player)
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert [row["Points"] for row in rows] == ["9", "20"]
        assert rows[1]["FG%"] == "53.33"

    def test_default_filename(self, tmp_path):
        exporter = CsvExporter(tmp_path)
        assert exporter.default_filename(Player(name="Alex Morgan")) == "Alex_Morgan.csv"
        path = exporter.export_player(self.player)
        assert path.name == "Alex_Morgan.csv"

    def test_absolute_filename_ignores_export_dir(self, tmp_path):
        target = tmp_path / "elsewhere.csv"
        path = CsvExporter(tmp_path / "unused").export_player(self.player, str(target))
        assert path == target
        assert target.exists()

    def test_player_without_games_gets_header_only(self, tmp_path):
        path = CsvExporter(tmp_path).export_player(Player(name="Sam"))
        assert path.read_text(encoding="utf-8") == ",".join(CSV_HEADER) + "\n"

    def test_unwritable_destination(self, tmp_path):
        exporter = CsvExporter(tmp_path / "missing_dir")
        with pytest.raises(StorageWriteError) as exc_info:
            exporter.export_player(self.player)
        assert exc_info.value.context.operation == "export_csv"

    def test_export_all_continues_past_failures(self, tmp_path):
        (tmp_path / "Sam.csv").mkdir()
        players = [Player(name="Sam"), self.player]
        result = CsvExporter(tmp_path).export_all(players)
        assert result.success is False
        assert list(result.failed) == ["Sam"]
        assert result.exported == [tmp_path / "Alex_Morgan.csv"]

    def test_undecodable_text_keeps_previous_file(self, tmp_path):
        exporter = CsvExporter(tmp_path)
        path = exporter.export_player(self.player)
        before = path.read_bytes()

        self.player.games.append(TestDataFactory.create_game("2024-01-1\udcff"))
        with pytest.raises(StorageFormatError) as exc_info:
            exporter.export_player(self.player)

        assert exc_info.value.line_number == 4
        assert path.read_bytes() == before

    def test_export_all_reports_unencodable_player(self, tmp_path):
        broken = TestDataFactory.create_player("Sam", games=[TestDataFactory.create_game("x\udcff")])
        result = CsvExporter(tmp_path).export_all([broken, self.player])
        assert list(result.failed) == ["Sam"]
        assert result.exported == [tmp_path / "Alex_Morgan.csv"]
        assert not (tmp_path / "Sam.csv").exists()
