# logscope/analyzers/activity/models.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from logscope.core import LogRecord


@dataclass(frozen=True)
class ActivitySummary:
    """Throughput and error-rate figures for one analysis run"""
    total: int
    span_seconds: int
    rate_per_minute: float
    hourly_counts: Tuple[int, ...]
    peak_hour: Optional[int]
    error_rate: float
    mtbf_seconds: Optional[float]


@dataclass
class ActivityStats:
    """Running totals filled by the activity collector"""
    total: int = 0
    error_count: int = 0
    hourly_counts: List[int] = field(default_factory=lambda: [0] * 24)
    earliest: Optional[datetime] = None
    latest: Optional[datetime] = None

    def add_record(self, record: LogRecord) -> None:
        self.total += 1
        self.hourly_counts[record.timestamp.hour] += 1
        if record.level.is_error:
            self.error_count += 1

        if self.earliest is None or record.timestamp < self.earliest:
            self.earliest = record.timestamp
        if self.latest is None or record.timestamp > self.latest:
            self.latest = record.timestamp

    @property
    def span_seconds(self) -> int:
        """Seconds between first and last record, never less than 1"""
        if self.earliest is None or self.latest is None:
            return 0
        return max(1, int((self.latest - self.earliest).total_seconds()))
