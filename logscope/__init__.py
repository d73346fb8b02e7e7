"""Offline log file parser and summary reporter"""

__version__ = "0.1.0"
