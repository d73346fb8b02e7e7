# logscope/core/__init__.py
from .errors import FilterError, InputError, LogscopeError, ParseError, ParseErrorKind
from .log import (
    LogLevel,
    LogReader,
    LogRecord,
    ParseFailure,
    ParseOutcome,
    parse_line,
    parse_timestamp,
)
from .filter import LogFilter
from .collector import DataCollector
from .analyzer import Analyzer
from .reporter import Reporter

__all__ = [
    'LogscopeError',
    'ParseError',
    'ParseErrorKind',
    'InputError',
    'FilterError',
    'LogLevel',
    'LogRecord',
    'LogReader',
    'ParseFailure',
    'ParseOutcome',
    'parse_line',
    'parse_timestamp',
    'LogFilter',
    'DataCollector',
    'Analyzer',
    'Reporter',
]
