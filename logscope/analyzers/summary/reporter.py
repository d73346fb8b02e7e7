# logscope/analyzers/summary/reporter.py
from pathlib import Path
from typing import Optional, Union

from rich.box import ROUNDED, SIMPLE
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from logscope.core import LogLevel, Reporter
from logscope.utils import FormatString
from .models import AnalysisSummary


class SummaryReporter(Reporter):
    def render(
        self,
        summary: AnalysisSummary,
        source: Optional[Union[str, Path]] = None,
    ) -> None:
        """Print the header, level distribution and top keywords"""
        title_panel = Panel(
            "Log Analysis Report",
            box=ROUNDED,
            style="title",
            padding=(0, 1),
            expand=False,
        )
        self.console.print(title_panel)
        self.console.print("")

        self._print_header(summary, source)

        if not summary.has_data:
            self.console.print("No entries matched the given filters.", style="skipped")
            return

        self._print_level_distribution(summary)
        self._print_top_keywords(summary)

    def _print_header(self, summary: AnalysisSummary, source) -> None:
        table = Table(show_header=False, box=None, collapse_padding=True)
        table.add_column("Label", style="label")
        table.add_column("Value", style="number")

        if source is not None:
            table.add_row("File", escape(str(source)))
        table.add_row("Entries", str(summary.total_lines))
        if summary.skipped_lines:
            table.add_row(
                "Skipped", f"[skipped]{summary.skipped_lines} unparsed lines[/skipped]"
            )
        if summary.time_range is not None:
            table.add_row(
                "Range",
                f"{FormatString.from_timestamp(summary.time_range.start)} → "
                f"{FormatString.from_timestamp(summary.time_range.end)}",
            )
            table.add_row("Span", summary.time_range.span_human)

        self.console.print(table)
        self.console.print("")

    def _print_level_distribution(self, summary: AnalysisSummary) -> None:
        table = Table(title="Log Level Distribution", title_justify="left", box=SIMPLE)
        table.add_column("Level")
        table.add_column("Count", justify="right", style="number")
        table.add_column("Share", justify="right")
        table.add_column("")

        # most severe first
        for level in sorted(LogLevel, key=lambda lvl: lvl.severity, reverse=True):
            count = summary.level_counts.get(level, 0)
            if count == 0:
                continue
            pct = count / summary.total_lines * 100
            style = f"level.{level.name.lower()}"
            table.add_row(
                f"[{style}]{level.name}[/{style}]",
                str(count),
                f"{pct:.1f}%",
                f"[{style}]{FormatString.bar(pct)}[/{style}]",
            )

        self.console.print(table)

    def _print_top_keywords(self, summary: AnalysisSummary) -> None:
        if not summary.top_keywords:
            return

        table = Table(title="Top Keywords", title_justify="left", box=SIMPLE)
        table.add_column("#", justify="right")
        table.add_column("Keyword", style="keyword")
        table.add_column("Count", justify="right", style="number")
        table.add_column("In errors", justify="right")

        for rank, keyword in enumerate(summary.top_keywords, start=1):
            in_errors = ""
            if keyword.error_ratio > 0:
                in_errors = f"{keyword.error_ratio * 100:.0f}%"
                if keyword.error_ratio > 0.5:
                    in_errors = f"[level.error]{in_errors}[/level.error]"
            table.add_row(str(rank), keyword.word, str(keyword.count), in_errors)

        self.console.print(table)
