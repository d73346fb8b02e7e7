from abc import ABC, abstractmethod
from typing import Any, Optional

from rich.console import Console
from rich.theme import Theme

from logscope.config.theme import REPORT_THEME


class Reporter(ABC):
    """Base class for generating reports"""
    def __init__(self, console: Optional[Console] = None, color: bool = True):
        self.theme = Theme(REPORT_THEME)
        self.console = console or Console(no_color=not color, highlight=False)

    def generate_report(self, analysis_result: Any, **options: Any) -> None:
        """Generate and display the report"""
        # the console may be shared, so the theme only applies while rendering
        with self.console.use_theme(self.theme):
            self.render(analysis_result, **options)

    @abstractmethod
    def render(self, analysis_result: Any, **options: Any) -> None:
        """Print the report sections on self.console"""
        pass
