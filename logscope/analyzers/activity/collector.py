from logscope.core import DataCollector, LogRecord
from .models import ActivityStats


class ActivityDataCollector(DataCollector):
    def __init__(self, log_filter=None):
        super().__init__(log_filter)
        self.stats = ActivityStats()

    def process_entry(self, record: LogRecord) -> None:
        if not self.is_interested(record):
            return

        self.stats.add_record(record)
