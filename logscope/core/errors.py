# logscope/core/errors.py
from enum import Enum
from pathlib import Path
from typing import Union


class LogscopeError(Exception):
    """Base class for all logscope errors"""


class ParseErrorKind(Enum):
    MALFORMED_TIMESTAMP = "malformed timestamp"
    UNRECOGNIZED_LEVEL = "unrecognized level"
    UNMATCHED = "unmatched line"


class ParseError(LogscopeError):
    """A single line could not be turned into a LogRecord.

    Never fatal: the reader records the failure and moves on.
    """

    def __init__(self, kind: ParseErrorKind, line: str, detail: str = ""):
        self.kind = kind
        self.line = line
        self.detail = detail
        message = kind.value
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InputError(LogscopeError):
    """The log file is missing, unreadable or empty"""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class FilterError(LogscopeError):
    """A user supplied filter option could not be used"""
