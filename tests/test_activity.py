import pytest

from logscope.analyzers.activity import ActivityAnalyzer, ActivityDataCollector
from logscope.core import LogFilter, LogLevel

from .conftest import make_record


def collect(records, log_filter=None):
    collector = ActivityDataCollector(log_filter)
    for record in records:
        collector.process_entry(record)
    return ActivityAnalyzer().analyze(collector.stats)


def test_no_records():
    result = collect([])
    assert result.total == 0
    assert result.peak_hour is None
    assert result.mtbf_seconds is None
    assert result.rate_per_minute == 0.0
    assert sum(result.hourly_counts) == 0


def test_rates_and_hourly_counts():
    records = [
        make_record("2026-01-15 08:00:00", LogLevel.INFO, "a"),
        make_record("2026-01-15 08:30:00", LogLevel.ERROR, "b"),
        make_record("2026-01-15 09:00:00", LogLevel.INFO, "c"),
        make_record("2026-01-15 08:10:00", LogLevel.FATAL, "d"),
    ]
    result = collect(records)

    assert result.total == 4
    assert result.span_seconds == 3600
    assert result.rate_per_minute == pytest.approx(4 / 60)
    assert result.hourly_counts[8] == 3
    assert result.hourly_counts[9] == 1
    assert result.peak_hour == 8
    assert result.error_rate == pytest.approx(50.0)
    assert result.mtbf_seconds == pytest.approx(3600.0)


def test_single_record_span_is_at_least_one_second():
    result = collect([make_record("2026-01-15 08:00:00", LogLevel.INFO, "only")])
    assert result.span_seconds == 1
    assert result.rate_per_minute == pytest.approx(60.0)


def test_peak_hour_tie_prefers_earliest_hour():
    records = [
        make_record("2026-01-15 14:00:00", LogLevel.INFO, "a"),
        make_record("2026-01-15 03:00:00", LogLevel.INFO, "b"),
    ]
    assert collect(records).peak_hour == 3


def test_mtbf_needs_two_errors():
    records = [
        make_record("2026-01-15 08:00:00", LogLevel.ERROR, "a"),
        make_record("2026-01-15 09:00:00", LogLevel.INFO, "b"),
    ]
    assert collect(records).mtbf_seconds is None


def test_filter_applies():
    records = [
        make_record("2026-01-15 08:00:00", LogLevel.ERROR, "timeout"),
        make_record("2026-01-15 09:00:00", LogLevel.INFO, "ok"),
    ]
    result = collect(records, LogFilter(keyword="timeout"))
    assert result.total == 1
    assert result.error_rate == pytest.approx(100.0)
