# logscope/analyzers/summary/analyzer.py
from types import MappingProxyType
from typing import Iterable, Optional

from logscope.config.settings import DEFAULT_TOP_N
from logscope.core import Analyzer, LogFilter, LogRecord
from .collector import SummaryDataCollector
from .models import AnalysisSummary, KeywordCount, SummaryStats, TimeRange


class SummaryAnalyzer(Analyzer):
    def __init__(self, top_n: int = DEFAULT_TOP_N):
        if top_n < 1:
            raise ValueError(f"top_n must be at least 1, got {top_n}")
        self.top_n = top_n

    def analyze(self, stats: SummaryStats, skipped_lines: int = 0) -> AnalysisSummary:
        """Rank keywords and freeze the collected totals.

        Keywords with equal counts keep the order in which they were first
        seen (Counter.most_common is stable on insertion order).
        """
        top_keywords = tuple(
            KeywordCount(
                word=word,
                count=count,
                error_ratio=stats.keyword_error_counts[word] / count,
            )
            for word, count in stats.keyword_counts.most_common(self.top_n)
        )

        time_range = None
        if stats.earliest is not None and stats.latest is not None:
            time_range = TimeRange(start=stats.earliest, end=stats.latest)

        return AnalysisSummary(
            total_lines=stats.total,
            level_counts=MappingProxyType(dict(stats.level_counts)),
            top_keywords=top_keywords,
            time_range=time_range,
            skipped_lines=skipped_lines,
        )


def analyze(
    records: Iterable[LogRecord],
    log_filter: Optional[LogFilter] = None,
    top_n: int = DEFAULT_TOP_N,
    skipped_lines: int = 0,
) -> AnalysisSummary:
    """Summarize the records that pass the filter in a single pass"""
    analyzer = SummaryAnalyzer(top_n)

    collector = SummaryDataCollector(log_filter)
    for record in records:
        collector.process_entry(record)

    return analyzer.analyze(collector.stats, skipped_lines=skipped_lines)
