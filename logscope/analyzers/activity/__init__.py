from .analyzer import ActivityAnalyzer
from .collector import ActivityDataCollector
from .models import ActivityStats, ActivitySummary
from .reporter import ActivityReporter

__all__ = [
    'ActivityAnalyzer',
    'ActivityDataCollector',
    'ActivityStats',
    'ActivitySummary',
    'ActivityReporter',
]
