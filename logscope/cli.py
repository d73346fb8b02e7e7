# logscope/cli.py
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .analyzers.activity import ActivityAnalyzer, ActivityDataCollector, ActivityReporter
from .analyzers.summary import SummaryReporter, analyze
from .config.settings import DEFAULT_TOP_N
from .core import FilterError, InputError, LogFilter, LogReader, ParseOutcome
from .utils import setup_logging

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="logscope",
        description="A lightweight tool for parsing and summarizing log files",
    )
    parser.add_argument("log_path", type=Path, help="Path to the log file to analyze")
    parser.add_argument(
        "-k", "--keyword", help="Only count entries whose message contains KEYWORD"
    )
    parser.add_argument(
        "--from",
        dest="start",
        metavar="TIMESTAMP",
        help="Only count entries at or after this time (YYYY-MM-DD HH:MM:SS)",
    )
    parser.add_argument(
        "--to",
        dest="end",
        metavar="TIMESTAMP",
        help="Only count entries at or before this time (YYYY-MM-DD HH:MM:SS)",
    )
    parser.add_argument(
        "-l", "--level", help="Only count entries at or above this level (e.g. WARN)"
    )
    parser.add_argument(
        "-n",
        "--top",
        type=positive_int,
        default=DEFAULT_TOP_N,
        help=f"Number of top keywords to show (default: {DEFAULT_TOP_N})",
    )
    parser.add_argument(
        "--heatmap", action="store_true", help="Show the hourly activity heatmap"
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable colored output"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    return parser.parse_args(argv)


def run_analysis(
    outcome: ParseOutcome,
    log_filter: LogFilter,
    args: argparse.Namespace,
    console: Optional[Console] = None,
) -> bool:
    """Run summary and activity analysis, returning False if nothing matched"""
    color = not args.no_color
    summary = analyze(
        outcome.records,
        log_filter,
        top_n=args.top,
        skipped_lines=outcome.skipped_lines,
    )
    if not summary.has_data:
        return False

    reporter = SummaryReporter(console, color=color)
    reporter.generate_report(summary, source=args.log_path)

    collector = ActivityDataCollector(log_filter)
    for record in outcome.records:
        collector.process_entry(record)

    analyzer = ActivityAnalyzer()
    result = analyzer.analyze(collector.stats)

    activity_reporter = ActivityReporter(reporter.console)
    activity_reporter.generate_report(result, show_heatmap=args.heatmap)
    return True


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose, color=not args.no_color)

    if console is None:
        console = Console(no_color=args.no_color, highlight=False)

    try:
        log_filter = LogFilter.from_options(
            keyword=args.keyword,
            start=args.start,
            end=args.end,
            min_level=args.level,
        )
        outcome = LogReader.read_log(args.log_path)
    except (InputError, FilterError) as e:
        console.print(f"Error: {e}", style="red", markup=False, soft_wrap=True)
        return 1

    if not log_filter.is_empty:
        logger.info("Applying filter: %s", log_filter)

    if not run_analysis(outcome, log_filter, args, console):
        console.print("No entries matched the given filters.", markup=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
