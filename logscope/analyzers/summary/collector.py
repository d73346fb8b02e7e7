# logscope/analyzers/summary/collector.py
import re
from typing import List, Optional

from logscope.config.settings import MIN_KEYWORD_LENGTH, STOPWORDS
from logscope.core import DataCollector, LogFilter, LogRecord
from .models import SummaryStats

# runs of letters and digits; underscores and punctuation split words
_WORD_RE = re.compile(r"[^\W_]+")


def extract_keywords(message: str) -> List[str]:
    """Lower-cased words of at least MIN_KEYWORD_LENGTH chars, stopwords removed"""
    return [
        word for word in _WORD_RE.findall(message.lower())
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOPWORDS
    ]


class SummaryDataCollector(DataCollector):
    def __init__(self, log_filter: Optional[LogFilter] = None):
        super().__init__(log_filter)
        self.stats = SummaryStats()

    def process_entry(self, record: LogRecord) -> None:
        """Fold one record into the running totals"""
        if not self.is_interested(record):
            return

        self.stats.add_record(record, extract_keywords(record.message))
