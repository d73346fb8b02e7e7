import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


def setup_logging(verbosity: int = 0, color: bool = True) -> None:
    """Route the logscope loggers to stderr through rich.

    verbosity 0 shows warnings, 1 info, 2 or more debug.
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True, no_color=not color),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="[%X]"))

    root = logging.getLogger("logscope")
    root.handlers = [handler]
    root.setLevel(level)
    root.propagate = False
