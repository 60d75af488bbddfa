"""
Storage adapters for HoopLog.
Whole-store text persistence and per-player CSV export.
"""

from .text_store import TextFileStore, encode_players, decode_players, encode_utf8
from .csv_export import CsvExporter, ExportResult, CSV_HEADER, game_to_row

__all__ = [
    # Text store
    "TextFileStore",
    "encode_players",
    "decode_players",
    "encode_utf8",

    # CSV export
    "CsvExporter",
    "ExportResult",
    "CSV_HEADER",
    "game_to_row",
]
