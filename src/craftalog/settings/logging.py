"""
Logging-related settings for craftalog.
"""

import logging
from pathlib import Path

from .base import SettingsSection

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE = "logs/craftalog.csv"
DEFAULT_MAX_FILE_MB = 10
DEFAULT_BACKUP_COUNT = 5
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(SettingsSection):
    """Console and rotating CSV file logging options."""

    def _get_int(self, key: str, default: int) -> int:
        value = self.settings.value(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _set_level(self, key: str, value: str) -> None:
        level = value.strip().upper()
        if level not in VALID_LEVELS:
            logger.warning(
                f"Invalid log level for {key}: {value}, keeping: {self._get_str(key, 'INFO')}"
            )
            return
        self.settings.setValue(key, level)
        self.settings.sync()

    def _set(self, key: str, value: object) -> None:
        self.settings.setValue(key, value)
        self.settings.sync()

    # Console

    @property
    def console_logging(self) -> bool:
        return self._get_bool("logging/console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set("logging/console_enabled", value)

    @property
    def console_log_level(self) -> str:
        """Minimum level shown on the console."""
        return self._get_str("logging/console_level", "INFO")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._set_level("logging/console_level", value)

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool("logging/console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set("logging/console_use_colors", value)

    # File

    @property
    def file_logging(self) -> bool:
        return self._get_bool("logging/file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set("logging/file_enabled", value)

    @property
    def file_log_level(self) -> str:
        """Minimum level written to the CSV log (DEBUG unless changed)."""
        return self._get_str("logging/file_level", "DEBUG")

    @file_log_level.setter
    def file_log_level(self, value: str) -> None:
        self._set_level("logging/file_level", value)

    @property
    def log_file_path(self) -> str:
        return self._get_str("logging/file_path", DEFAULT_LOG_FILE) or DEFAULT_LOG_FILE

    @log_file_path.setter
    def log_file_path(self, value: str) -> None:
        self._set("logging/file_path", str(value))

    @property
    def log_file_absolute_path(self) -> Path:
        return Path(self.log_file_path).resolve()

    @property
    def log_file_max_bytes(self) -> int:
        """Rotation threshold, stored in megabytes."""
        return max(1, self._get_int("logging/file_max_mb", DEFAULT_MAX_FILE_MB)) * 1024 * 1024

    @property
    def log_file_backup_count(self) -> int:
        return max(0, self._get_int("logging/file_backups", DEFAULT_BACKUP_COUNT))
