"""
Core settings management for craftalog.
"""

import logging
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QSettings

from .types import ConfigVersion, ValidationResult
from .validation import SettingsValidator
from .paths import PathSettings
from .pipeline import PipelineSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to build settings with cross-platform
    storage. Pass `settings_file` to keep everything in a single INI
    file instead of the per-user store.
    """

    def __init__(
        self, profile: str = "default", settings_file: Optional[str | Path] = None
    ):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Optional INI file used instead of the native store
        """
        if settings_file is not None:
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("craftalog", "craftalog")
        self.profile = profile

        # Use profile as a group: craftalog/craftalog/default/...
        self.settings.beginGroup(profile)

        # Initialize subsystems
        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._pipeline = PipelineSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        if not self.settings.contains("app/version"):
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        """Access path settings subsystem."""
        return self._paths

    @property
    def pipeline(self) -> PipelineSettings:
        """Access pipeline settings subsystem."""
        return self._pipeline

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value) if value is not None else ConfigVersion.CURRENT.value

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def source_path(self) -> Optional[Path]:
        """Get source pack root."""
        return self._paths.source_path

    @source_path.setter
    def source_path(self, value: Optional[Path]) -> None:
        """Set source pack root."""
        self._paths.source_path = value

    @property
    def recipes_path(self) -> Optional[Path]:
        return self._paths.recipes_path

    @property
    def block_textures_path(self) -> Optional[Path]:
        return self._paths.block_textures_path

    @property
    def item_textures_path(self) -> Optional[Path]:
        return self._paths.item_textures_path

    @property
    def output_path(self) -> Path:
        """Get dataset output directory."""
        return self._paths.output_path

    @output_path.setter
    def output_path(self, value: Path) -> None:
        self._paths.output_path = value

    @property
    def public_path(self) -> Path:
        """Get public asset directory."""
        return self._paths.public_path

    @public_path.setter
    def public_path(self, value: Path) -> None:
        self._paths.public_path = value

    # === PIPELINE SETTINGS (DELEGATED) ===

    @property
    def crafting_surface(self) -> str:
        return self._pipeline.crafting_surface

    @crafting_surface.setter
    def crafting_surface(self, value: str) -> None:
        self._pipeline.crafting_surface = value

    @property
    def extra_excluded_items(self) -> List[str]:
        return self._pipeline.extra_excluded_items

    @extra_excluded_items.setter
    def extra_excluded_items(self, value: List[str]) -> None:
        self._pipeline.extra_excluded_items = value

    @property
    def copy_textures(self) -> bool:
        return self._pipeline.copy_textures

    @copy_textures.setter
    def copy_textures(self, value: bool) -> None:
        self._pipeline.copy_textures = value

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get CSV log file path."""
        return self._logging.log_file_path

    @log_file_path.setter
    def log_file_path(self, value: str) -> None:
        self._logging.log_file_path = value

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
