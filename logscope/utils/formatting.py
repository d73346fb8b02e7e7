from datetime import datetime

from logscope.config.settings import TIMESTAMP_FORMAT


class FormatString:
    @staticmethod
    def from_timestamp(timestamp: datetime) -> str:
        return timestamp.strftime(TIMESTAMP_FORMAT)

    @staticmethod
    def from_seconds(seconds: float) -> str:
        """Render a duration as `1h 2m 3s`, `2m 3s` or `3s`"""
        secs = int(seconds)
        h, rem = divmod(secs, 3600)
        m, s = divmod(rem, 60)
        if h > 0:
            return f"{h}h {m}m {s}s"
        if m > 0:
            return f"{m}m {s}s"
        return f"{s}s"

    @staticmethod
    def bar(percentage: float, width: int = 50, char: str = "█") -> str:
        """Horizontal bar, `width` characters at 100%"""
        return char * int(percentage / 100 * width)
