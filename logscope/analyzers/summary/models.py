# logscope/analyzers/summary/models.py
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Mapping, Optional, Tuple

from logscope.core import LogLevel, LogRecord
from logscope.utils import FormatString


@dataclass(frozen=True)
class KeywordCount:
    """A keyword and how often it appeared"""
    word: str
    count: int
    error_ratio: float = 0.0


@dataclass(frozen=True)
class TimeRange:
    """Earliest and latest timestamp among aggregated records"""
    start: datetime
    end: datetime

    @property
    def span_seconds(self) -> int:
        return int((self.end - self.start).total_seconds())

    @property
    def span_human(self) -> str:
        return FormatString.from_seconds(self.span_seconds)


@dataclass(frozen=True)
class AnalysisSummary:
    """Aggregate statistics for one analysis run"""
    total_lines: int
    level_counts: Mapping[LogLevel, int]
    top_keywords: Tuple[KeywordCount, ...]
    time_range: Optional[TimeRange]
    skipped_lines: int = 0

    @property
    def has_data(self) -> bool:
        return self.total_lines > 0


@dataclass
class SummaryStats:
    """Running totals filled by the summary collector"""
    total: int = 0
    level_counts: Counter = field(default_factory=Counter)
    keyword_counts: Counter = field(default_factory=Counter)
    keyword_error_counts: Counter = field(default_factory=Counter)
    earliest: Optional[datetime] = None
    latest: Optional[datetime] = None

    def add_record(self, record: LogRecord, keywords: Iterable[str]) -> None:
        self.total += 1
        self.level_counts[record.level] += 1

        for word in keywords:
            self.keyword_counts[word] += 1
            if record.level.is_error:
                self.keyword_error_counts[word] += 1

        # input may be unsorted, so track both ends explicitly
        if self.earliest is None or record.timestamp < self.earliest:
            self.earliest = record.timestamp
        if self.latest is None or record.timestamp > self.latest:
            self.latest = record.timestamp
