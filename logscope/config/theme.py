"""Color configuration for the console reports"""

FATAL = "bold red"
ERROR = "red"
WARN = "yellow"
INFO = "green"
DEBUG = "bright_black"

LEVEL_COLORS = {
    "FATAL": FATAL,
    "ERROR": ERROR,
    "WARN": WARN,
    "INFO": INFO,
    "DEBUG": DEBUG,
}

REPORT_THEME = {
    "title": "magenta",
    "label": "yellow",
    "number": "white",
    "timestamp": "bright_black",
    "keyword": "cyan",
    "skipped": "yellow",
    "bar": "cyan",
    **{f"level.{name.lower()}": color for name, color in LEVEL_COLORS.items()},
}
