import io
from datetime import datetime
from pathlib import Path

import pytest
from rich.console import Console

from logscope.core import LogLevel, LogRecord

SAMPLE_LINES = [
    "2026-01-15 08:00:00 INFO database connected",
    "2026-01-15 09:00:00 ERROR timeout on database",
    "garbage line",
]


def make_record(timestamp: str, level: LogLevel, message: str) -> LogRecord:
    return LogRecord(
        timestamp=datetime.strptime(timestamp, "%Y-%m-%d %H:%M:%S"),
        level=level,
        message=message,
    )


@pytest.fixture
def sample_lines():
    return list(SAMPLE_LINES)


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    path = tmp_path / "app.log"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def record_console() -> Console:
    return Console(
        record=True,
        file=io.StringIO(),
        width=120,
        color_system=None,
        highlight=False,
    )
