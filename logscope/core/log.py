# logscope/core/log.py
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Union

from logscope.config.settings import TIMESTAMP_FORMAT
from .errors import InputError, ParseError, ParseErrorKind

logger = logging.getLogger(__name__)

_TIMESTAMP = r"\d{4}-\d{2}-\d{2}[ T]\d{2}:\d{2}:\d{2}"
_TIMESTAMP_RE = re.compile(_TIMESTAMP)
_LINE_RE = re.compile(
    rf"(?:\[(?P<bracketed>{_TIMESTAMP})\]|(?P<timestamp>{_TIMESTAMP}))(?P<rest>(?: .*)?)"
)


class LogLevel(Enum):
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4

    @property
    def severity(self) -> int:
        return self.value

    @property
    def is_error(self) -> bool:
        return self in (LogLevel.ERROR, LogLevel.FATAL)

    @classmethod
    def from_token(cls, token: str) -> Optional['LogLevel']:
        """Map a level token (any case, common aliases included) to a level"""
        return _LEVEL_ALIASES.get(token.upper())

    def __str__(self) -> str:
        return self.name


_LEVEL_ALIASES = {
    "DEBUG": LogLevel.DEBUG,
    "DBG": LogLevel.DEBUG,
    "TRACE": LogLevel.DEBUG,
    "INFO": LogLevel.INFO,
    "INFORMATION": LogLevel.INFO,
    "WARN": LogLevel.WARN,
    "WARNING": LogLevel.WARN,
    "ERROR": LogLevel.ERROR,
    "ERR": LogLevel.ERROR,
    "FATAL": LogLevel.FATAL,
    "CRITICAL": LogLevel.FATAL,
    "CRIT": LogLevel.FATAL,
}


def parse_timestamp(text: str) -> datetime:
    """Parse a `YYYY-MM-DD HH:MM:SS` timestamp, `T` separator allowed.

    Raises:
        ValueError: If the text is not a valid timestamp
    """
    # strptime alone accepts one-digit fields
    if _TIMESTAMP_RE.fullmatch(text) is None:
        raise ValueError(f"timestamp {text!r} does not match YYYY-MM-DD HH:MM:SS")
    return datetime.strptime(text.replace("T", " ", 1), TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class LogRecord:
    """One successfully parsed log line"""
    timestamp: datetime
    level: LogLevel
    message: str
    line_number: int = field(default=0, compare=False)

    @classmethod
    def from_line(cls, line: str, line_number: int = 0) -> 'LogRecord':
        """Parse a log line into a LogRecord.

        Raises:
            ParseError: If the line does not have the
                `<timestamp> <level> <message>` shape
        """
        line = line.rstrip('\r\n')
        match = _LINE_RE.fullmatch(line)
        if match is None:
            raise ParseError(ParseErrorKind.UNMATCHED, line)

        raw_timestamp = match.group('timestamp') or match.group('bracketed')
        try:
            timestamp = parse_timestamp(raw_timestamp)
        except ValueError:
            raise ParseError(
                ParseErrorKind.MALFORMED_TIMESTAMP, line, repr(raw_timestamp)
            ) from None

        # rest is either empty or starts with the separator
        parts = match.group('rest')[1:].split(' ', 1)
        level = LogLevel.from_token(parts[0]) if parts[0] else None
        if level is None:
            raise ParseError(ParseErrorKind.UNRECOGNIZED_LEVEL, line, repr(parts[0]))

        return cls(
            timestamp=timestamp,
            level=level,
            message=parts[1] if len(parts) > 1 else "",
            line_number=line_number,
        )


def parse_line(raw: str) -> LogRecord:
    return LogRecord.from_line(raw)


@dataclass(frozen=True)
class ParseFailure:
    """A rejected line, kept for reporting"""
    line_number: int
    kind: ParseErrorKind
    line: str


@dataclass
class ParseOutcome:
    """Records and failures from one pass over a sequence of lines"""
    records: List[LogRecord] = field(default_factory=list)
    failures: List[ParseFailure] = field(default_factory=list)

    @property
    def skipped_lines(self) -> int:
        return len(self.failures)


class LogReader:
    """Reads log files into records, skipping lines that do not parse"""

    @staticmethod
    def parse_lines(lines: Iterable[str]) -> ParseOutcome:
        """Parse every non-blank line, collecting failures instead of raising"""
        outcome = ParseOutcome()
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                outcome.records.append(LogRecord.from_line(line, line_number))
            except ParseError as e:
                logger.debug("Skipping line %d (%s): %r", line_number, e, e.line)
                outcome.failures.append(ParseFailure(line_number, e.kind, e.line))
        return outcome

    @staticmethod
    def read_log(file_path: Union[str, Path]) -> ParseOutcome:
        """
        Read and parse a UTF-8 log file.

        Args:
            file_path: Path to the log file

        Returns:
            ParseOutcome with the parsed records in file order

        Raises:
            InputError: If the file is missing, unreadable or has no content
        """
        path = Path(file_path)
        if not path.exists():
            raise InputError(path, "file does not exist")
        if not path.is_file():
            raise InputError(path, "not a regular file")

        try:
            with open(path, 'r', encoding='utf-8', errors='replace') as f:
                outcome = LogReader.parse_lines(f)
        except OSError as e:
            raise InputError(path, f"cannot read file ({e.strerror or e})") from e

        if not outcome.records and not outcome.failures:
            raise InputError(path, "file is empty")

        if outcome.skipped_lines:
            logger.info(
                "Skipped %d unparsed line(s) in %s", outcome.skipped_lines, path
            )
        logger.info("Parsed %d record(s) from %s", len(outcome.records), path)
        return outcome
