"""Process-wide logging setup, done once at startup from Settings."""

import logging
import sys

from signal_engine.config import Settings

_RESET = "\033[0m"
_BOLD = "\033[1m"
_LEVEL_COLORS = {
    logging.DEBUG: "\033[94m",
    logging.INFO: "\033[92m",
    logging.WARNING: "\033[93m",
    logging.ERROR: "\033[91m",
    logging.CRITICAL: "\033[91m",
}


class ColorFormatter(logging.Formatter):
    """Formatter that colours the level name with ANSI escapes."""

    def format(self, record: logging.LogRecord) -> str:
        color = _LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        original = record.levelname
        record.levelname = f"{color}{_BOLD}{original}{_RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def configure_logging(settings: Settings, stream=None) -> None:
    """Configure the root logger.

    Args:
        settings: Source of level, format and colour preference.
        stream: Output stream (default stderr).

    Raises:
        ValueError: If the configured level name is unknown.
    """
    stream = stream or sys.stderr
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.log_level}")

    handler = logging.StreamHandler(stream)
    use_color = settings.log_color and hasattr(stream, "isatty") and stream.isatty()
    formatter_cls = ColorFormatter if use_color else logging.Formatter
    handler.setFormatter(formatter_cls(settings.log_format, datefmt=settings.log_datefmt))

    logging.basicConfig(level=level, handlers=[handler], force=True)
