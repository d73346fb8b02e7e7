from datetime import datetime

import pytest

from logscope.core import (
    InputError,
    LogLevel,
    LogReader,
    LogRecord,
    ParseError,
    ParseErrorKind,
    parse_line,
)


def test_parse_well_formed_line():
    record = parse_line("2026-01-15 08:00:00 INFO database connected")
    assert record.timestamp == datetime(2026, 1, 15, 8, 0, 0)
    assert record.level is LogLevel.INFO
    assert record.message == "database connected"


@pytest.mark.parametrize(
    "token, level",
    [
        ("INFO", LogLevel.INFO),
        ("WARN", LogLevel.WARN),
        ("ERROR", LogLevel.ERROR),
        ("debug", LogLevel.DEBUG),
        ("TRACE", LogLevel.DEBUG),
        ("Warning", LogLevel.WARN),
        ("ERR", LogLevel.ERROR),
        ("CRITICAL", LogLevel.FATAL),
        ("FATAL", LogLevel.FATAL),
    ],
)
def test_parse_level_tokens(token, level):
    record = parse_line(f"2026-01-15 08:00:00 {token} something happened")
    assert record.level is level


@pytest.mark.parametrize(
    "line",
    [
        "[2026-01-15 08:00:00] WARN disk almost full",
        "2026-01-15T08:00:00 WARN disk almost full",
        "[2026-01-15T08:00:00] WARN disk almost full",
    ],
)
def test_parse_alternative_timestamp_forms(line):
    record = parse_line(line)
    assert record.timestamp == datetime(2026, 1, 15, 8, 0, 0)
    assert record.message == "disk almost full"


def test_message_is_not_trimmed():
    record = parse_line("2026-01-15 08:00:00 INFO  padded message  ")
    assert record.message == " padded message  "


def test_empty_message_is_allowed():
    record = parse_line("2026-01-15 08:00:00 INFO ")
    assert record.message == ""


def test_trailing_newline_is_removed():
    record = parse_line("2026-01-15 08:00:00 INFO started\r\n")
    assert record.message == "started"


@pytest.mark.parametrize(
    "line",
    [
        "2026-01-15 08:00:00 NOTICE something happened",
        "2026-01-15 08:00:00 database connected",
        "2026-01-15 08:00:00",
    ],
)
def test_unrecognized_level(line):
    with pytest.raises(ParseError) as exc:
        parse_line(line)
    assert exc.value.kind is ParseErrorKind.UNRECOGNIZED_LEVEL


@pytest.mark.parametrize(
    "line",
    [
        "2026-13-45 08:00:00 INFO bad date",
        "2026-01-15 25:61:00 INFO bad time",
        "[2026-13-45 08:00:00] INFO bad bracketed date",
    ],
)
def test_malformed_timestamp(line):
    with pytest.raises(ParseError) as exc:
        parse_line(line)
    assert exc.value.kind is ParseErrorKind.MALFORMED_TIMESTAMP


@pytest.mark.parametrize(
    "line",
    [
        "garbage line",
        "",
        "Jan 15 08:00:00 host app: started",
        "2026-01-15 INFO x",
        "[yesterday] INFO bad bracket",
        "[main] INFO worker started",
        "[2026-1-5 8:0:0] INFO one digit fields",
        "2026-1-5 8:0:0 INFO one digit fields",
    ],
)
def test_unmatched_line(line):
    with pytest.raises(ParseError) as exc:
        parse_line(line)
    assert exc.value.kind is ParseErrorKind.UNMATCHED
    assert exc.value.line == line


def test_parse_is_deterministic():
    line = "2026-01-15 09:00:00 ERROR timeout on database"
    assert parse_line(line) == parse_line(line)


def test_line_number_does_not_affect_equality():
    line = "2026-01-15 09:00:00 ERROR timeout on database"
    assert LogRecord.from_line(line, 7) == LogRecord.from_line(line, 1)


def test_parse_lines_skips_and_counts_failures(sample_lines):
    outcome = LogReader.parse_lines(sample_lines)
    assert len(outcome.records) == 2
    assert outcome.skipped_lines == 1
    failure = outcome.failures[0]
    assert failure.line_number == 3
    assert failure.kind is ParseErrorKind.UNMATCHED
    assert failure.line == "garbage line"


def test_parse_lines_ignores_blank_lines():
    outcome = LogReader.parse_lines(
        ["2026-01-15 08:00:00 INFO a message", "", "   ", "2026-01-15 08:00:01 INFO b"]
    )
    assert len(outcome.records) == 2
    assert outcome.skipped_lines == 0
    assert [r.line_number for r in outcome.records] == [1, 4]


def test_read_log(log_file):
    outcome = LogReader.read_log(log_file)
    assert [r.level for r in outcome.records] == [LogLevel.INFO, LogLevel.ERROR]
    assert outcome.records[1].message == "timeout on database"
    assert outcome.skipped_lines == 1


def test_read_log_missing_file(tmp_path):
    path = tmp_path / "missing.log"
    with pytest.raises(InputError) as exc:
        LogReader.read_log(path)
    assert exc.value.path == path
    assert "missing.log" in str(exc.value)


def test_read_log_empty_file(tmp_path):
    path = tmp_path / "empty.log"
    path.write_text("\n\n", encoding="utf-8")
    with pytest.raises(InputError) as exc:
        LogReader.read_log(path)
    assert "empty" in str(exc.value)


def test_read_log_directory(tmp_path):
    with pytest.raises(InputError):
        LogReader.read_log(tmp_path)


def test_read_log_replaces_invalid_utf8(tmp_path):
    path = tmp_path / "binary.log"
    path.write_bytes(b"2026-01-15 08:00:00 INFO caf\xe9 opened\n")
    outcome = LogReader.read_log(path)
    assert outcome.records[0].message == "caf\ufffd opened"
