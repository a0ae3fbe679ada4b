"""
Settings validation system for craftalog.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        source = self.settings.source_path
        if source:
            if not source.exists():
                errors.append(f"Source path does not exist: {source}")
            else:
                recipes = self.settings.recipes_path
                if recipes and not recipes.is_dir():
                    errors.append(f"Recipe directory not found: {recipes}")
                for textures in (
                    self.settings.block_textures_path,
                    self.settings.item_textures_path,
                ):
                    if textures and not textures.is_dir():
                        warnings.append(f"Texture directory not found: {textures}")
        else:
            errors.append("Source path not set")

        output = self.settings.output_path
        if output.exists() and not output.is_dir():
            errors.append(f"Output path is not a directory: {output}")

        if not self.settings.crafting_surface:
            errors.append("Crafting surface not set")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
