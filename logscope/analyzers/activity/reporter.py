# logscope/analyzers/activity/reporter.py
from rich.box import SIMPLE
from rich.table import Table

from logscope.core import Reporter
from logscope.utils import FormatString
from .models import ActivitySummary

HEATMAP_WIDTH = 40


class ActivityReporter(Reporter):
    def render(self, result: ActivitySummary, show_heatmap: bool = False) -> None:
        """Generate statistics and, optionally, an hourly heatmap"""
        if result.total == 0:
            return

        table = Table(
            title="Statistics",
            title_justify="left",
            show_header=False,
            box=SIMPLE,
        )
        table.add_column("Label", style="label")
        table.add_column("Value", style="number")

        table.add_row("Rate", f"{result.rate_per_minute:.1f} entries/min")
        table.add_row("Error rate", f"{result.error_rate:.1f}%")
        if result.mtbf_seconds is not None:
            table.add_row("MTBF errors", FormatString.from_seconds(result.mtbf_seconds))
        if result.peak_hour is not None:
            table.add_row(
                "Peak hour", f"{result.peak_hour:02d}:00 – {result.peak_hour:02d}:59"
            )
        self.console.print(table)

        if show_heatmap:
            self._print_heatmap(result)

    def _print_heatmap(self, result: ActivitySummary) -> None:
        self.console.print("Hourly Activity Heatmap", style="bold")
        self.console.print("")

        peak = max(max(result.hourly_counts), 1)
        for hour, count in enumerate(result.hourly_counts):
            bar = "▪" * (count * HEATMAP_WIDTH // peak)
            self.console.print(f"  {hour:02d}h │", style="timestamp", end="")
            self.console.print(f"{bar:<{HEATMAP_WIDTH}}", style="bar", end="")
            self.console.print(f"│ {count}")
        self.console.print("")
