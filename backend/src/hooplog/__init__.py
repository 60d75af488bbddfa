"""
HoopLog: a personal basketball statistics tracker.
"""

__version__ = "0.1.0"
