# logscope/core/filter.py
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .errors import FilterError
from .log import LogLevel, LogRecord, parse_timestamp


@dataclass(frozen=True)
class LogFilter:
    """Conjunctive predicate applied to records before aggregation.

    Every option left as None accepts all records.
    """
    keyword: Optional[str] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    min_level: Optional[LogLevel] = None

    @classmethod
    def from_options(
        cls,
        keyword: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
        min_level: Optional[str] = None,
    ) -> 'LogFilter':
        """
        Build a filter from user supplied strings.

        Raises:
            FilterError: If a timestamp or level cannot be parsed
        """
        start_ts = _parse_bound('from', start)
        end_ts = _parse_bound('to', end)

        level = None
        if min_level is not None:
            level = LogLevel.from_token(min_level)
            if level is None:
                choices = ", ".join(lvl.name for lvl in LogLevel)
                raise FilterError(
                    f"Unknown log level {min_level!r} (expected one of {choices})"
                )

        return cls(keyword=keyword, start=start_ts, end=end_ts, min_level=level)

    @property
    def is_empty(self) -> bool:
        return (
            self.keyword is None
            and self.start is None
            and self.end is None
            and self.min_level is None
        )

    def matches(self, record: LogRecord) -> bool:
        if self.keyword is not None and self.keyword not in record.message:
            return False
        if self.start is not None and record.timestamp < self.start:
            return False
        if self.end is not None and record.timestamp > self.end:
            return False
        if self.min_level is not None and record.level.severity < self.min_level.severity:
            return False
        return True


def _parse_bound(name: str, value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return parse_timestamp(value)
    except ValueError:
        raise FilterError(
            f"Invalid '{name}' timestamp {value!r} (expected YYYY-MM-DD HH:MM:SS)"
        ) from None
