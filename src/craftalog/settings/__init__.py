"""
Settings package for craftalog.

This package provides type-safe configuration management using Qt's
QSettings for cross-platform storage.

Usage:
    from craftalog.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .paths import PathSettings
from .pipeline import PipelineSettings
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "PathSettings",
    "PipelineSettings",
    "LoggingSettings",
]
