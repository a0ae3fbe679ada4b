"""
Logging configuration for craftalog.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..settings import AppSettings, LoggingSettings


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for console output."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        formatted = super().format(record)

        # Color only the level name
        if record.levelname in formatted:
            formatted = formatted.replace(
                record.levelname, f"{color}{record.levelname}{reset}", 1
            )

        return formatted


class CSVFormatter(logging.Formatter):
    """CSV-safe formatter for file logging."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, self.datefmt)
        level = record.levelname.ljust(8)
        duration = f"{int(record.relativeCreated)} ms"
        module = record.name
        line_no = str(record.lineno)
        message = record.getMessage()

        # Escape quotes the standard CSV way
        message = message.replace('"', '""')

        return f'"{timestamp}";{level};"{duration}";"{module}";"{line_no}";"{message}"'


CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(message)s"
CONSOLE_DATEFMT = "%H:%M:%S"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _level_number(name: str, default: int) -> int:
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else default


def build_console_handler(settings: "LoggingSettings", level: Optional[str] = None) -> logging.Handler:
    """Stream handler for stderr, colored unless disabled."""
    formatter_class = ColoredFormatter if settings.console_use_colors else logging.Formatter
    handler = logging.StreamHandler()
    handler.setLevel(_level_number(level or settings.console_log_level, logging.INFO))
    handler.setFormatter(formatter_class(fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT))
    return handler


def build_file_handler(settings: "LoggingSettings") -> logging.Handler:
    """Rotating CSV handler.

    Raises:
        OSError: If the log directory or file cannot be created
    """
    log_path = Path(settings.log_file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=settings.log_file_max_bytes,
        backupCount=settings.log_file_backup_count,
        encoding="utf-8",
    )
    handler.setLevel(_level_number(settings.file_log_level, logging.DEBUG))
    handler.setFormatter(CSVFormatter(datefmt=FILE_DATEFMT))
    return handler


def setup_logging(settings: "AppSettings", level: Optional[str] = None) -> None:
    """
    Install console and CSV file handlers on the root logger.

    Previously installed root handlers are replaced, so calling this
    again after a settings change is safe.

    Args:
        settings: AppSettings holding the logging section
        level: Optional console level overriding the configured one
    """
    options = settings.logging
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    logging.getLogger("craftalog").setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    if options.console_logging:
        root_logger.addHandler(build_console_handler(options, level))

    file_handler = None
    if options.file_logging:
        try:
            file_handler = build_file_handler(options)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(f"Could not setup file logging: {e}")

    logger = logging.getLogger(__name__)
    if options.console_logging:
        logger.debug(
            f"Console logging: {level or options.console_log_level} "
            f"(colors: {options.console_use_colors})"
        )
    if file_handler is not None:
        logger.debug(
            f"File logging: {options.file_log_level} at {options.log_file_absolute_path}"
        )
