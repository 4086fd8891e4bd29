"""Logging setup for the console app."""

import logging
import sys
from pathlib import Path

LOGGER_NAME = "src.blades"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# ANSI colours per level name
LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[1;31m",
}
RESET = "\033[0m"


class ColorFormatter(logging.Formatter):
    """Colours the level name; leaves the record itself untouched."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelname)
        if not color:
            return message
        return message.replace(record.levelname, f"{color}{record.levelname}{RESET}", 1)


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    enable_color: bool = True,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Level name, e.g. "DEBUG".
        log_file: Optional file that receives the same records, uncoloured.
        enable_color: Colour level names on the console when it is a terminal.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    logger.handlers.clear()
    logger.propagate = False

    console = logging.StreamHandler(sys.stderr)
    use_color = enable_color and sys.stderr.isatty()
    console.setFormatter(ColorFormatter(LOG_FORMAT) if use_color else logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger
