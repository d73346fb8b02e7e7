# logscope/analyzers/activity/analyzer.py
from logscope.core import Analyzer
from .models import ActivityStats, ActivitySummary


class ActivityAnalyzer(Analyzer):
    def analyze(self, stats: ActivityStats) -> ActivitySummary:
        """Derive rates from the collected totals

        Returns:
            ActivitySummary where:
                - rate_per_minute: records per minute over the observed span
                - peak_hour: busiest hour of day, earliest hour on ties
                - error_rate: percentage of ERROR and FATAL records
                - mtbf_seconds: mean seconds between errors, None below two errors
        """
        if stats.total == 0:
            return ActivitySummary(
                total=0,
                span_seconds=0,
                rate_per_minute=0.0,
                hourly_counts=tuple(stats.hourly_counts),
                peak_hour=None,
                error_rate=0.0,
                mtbf_seconds=None,
            )

        span = stats.span_seconds
        peak_hour = max(range(24), key=lambda hour: stats.hourly_counts[hour])

        mtbf = None
        if stats.error_count >= 2:
            mtbf = span / (stats.error_count - 1)

        return ActivitySummary(
            total=stats.total,
            span_seconds=span,
            rate_per_minute=stats.total / (span / 60),
            hourly_counts=tuple(stats.hourly_counts),
            peak_hour=peak_hour,
            error_rate=stats.error_count / stats.total * 100,
            mtbf_seconds=mtbf,
        )
