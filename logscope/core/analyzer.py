from abc import ABC, abstractmethod
from typing import Any


class Analyzer(ABC):
    """Base class for turning collected data into a result"""
    @abstractmethod
    def analyze(self, data: Any) -> Any:
        """Analyze the collected data"""
        pass
