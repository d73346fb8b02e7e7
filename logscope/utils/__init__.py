from .formatting import FormatString
from .logger import setup_logging

__all__ = ["FormatString", "setup_logging"]
