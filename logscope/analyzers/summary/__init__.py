# logscope/analyzers/summary/__init__.py
from .analyzer import SummaryAnalyzer, analyze
from .collector import SummaryDataCollector, extract_keywords
from .models import AnalysisSummary, KeywordCount, SummaryStats, TimeRange
from .reporter import SummaryReporter

__all__ = [
    'SummaryAnalyzer',
    'SummaryDataCollector',
    'SummaryStats',
    'SummaryReporter',
    'AnalysisSummary',
    'KeywordCount',
    'TimeRange',
    'analyze',
    'extract_keywords',
]
