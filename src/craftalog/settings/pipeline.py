"""
Pipeline settings for craftalog.
"""

import logging
from typing import List

from ..recipes.models import CRAFTING_TABLE
from .base import SettingsSection

logger = logging.getLogger(__name__)


class PipelineSettings(SettingsSection):
    """Manages recipe filtering and texture handling options."""

    @property
    def crafting_surface(self) -> str:
        """Get the crafting surface tag recipes must carry."""
        return self._get_str("pipeline/crafting_surface", CRAFTING_TABLE)

    @crafting_surface.setter
    def crafting_surface(self, value: str) -> None:
        value = value.strip()
        if not value:
            logger.warning(
                f"Empty crafting surface ignored, keeping: {self.crafting_surface}"
            )
            return
        self.settings.setValue("pipeline/crafting_surface", value)
        self.settings.sync()

    @property
    def extra_excluded_items(self) -> List[str]:
        """Get output ids excluded in addition to the built-in set."""
        return self._get_list("pipeline/extra_excluded_items", [])

    @extra_excluded_items.setter
    def extra_excluded_items(self, value: List[str]) -> None:
        self.settings.setValue("pipeline/extra_excluded_items", list(value))
        self.settings.sync()

    @property
    def copy_textures(self) -> bool:
        """Check if textures are copied into the public folder."""
        return self._get_bool("pipeline/copy_textures", True)

    @copy_textures.setter
    def copy_textures(self, value: bool) -> None:
        self.settings.setValue("pipeline/copy_textures", value)
        self.settings.sync()
