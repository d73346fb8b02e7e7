from abc import ABC, abstractmethod
from typing import Optional

from .filter import LogFilter
from .log import LogRecord


class DataCollector(ABC):
    """Base class for collecting statistics from log records"""
    def __init__(self, log_filter: Optional[LogFilter] = None):
        self.log_filter = log_filter or LogFilter()

    def is_interested(self, record: LogRecord) -> bool:
        """Determine if this collector should count the given record"""
        return self.log_filter.matches(record)

    @abstractmethod
    def process_entry(self, record: LogRecord) -> None:
        """Process a single log record"""
        pass
