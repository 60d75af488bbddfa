"""
Console front end for HoopLog.
"""

from .shell import StatsShell, main, parse_arguments

__all__ = ["StatsShell", "main", "parse_arguments"]
