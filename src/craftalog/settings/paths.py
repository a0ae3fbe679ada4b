"""
Path-related settings for craftalog.
"""

from pathlib import Path
from typing import Optional

from .base import SettingsSection

DEFAULT_OUTPUT_DIR = "src/data/generated"
DEFAULT_PUBLIC_DIR = "public"


class PathSettings(SettingsSection):
    """Manages source and output locations."""

    @property
    def source_path(self) -> Optional[Path]:
        """Get the resource/behavior pack root (e.g. a bedrock-samples checkout)."""
        path_str = self._get_str("paths/source", "")
        return Path(path_str) if path_str else None

    @source_path.setter
    def source_path(self, value: Optional[Path]) -> None:
        """Set the source root."""
        self.settings.setValue("paths/source", str(value) if value else "")
        self.settings.sync()

    @property
    def recipes_path(self) -> Optional[Path]:
        """Get recipe directory (derived from source_path)."""
        if self.source_path:
            return self.source_path / "behavior_pack" / "recipes"
        return None

    @property
    def block_textures_path(self) -> Optional[Path]:
        """Get block texture directory (derived from source_path)."""
        if self.source_path:
            return self.source_path / "resource_pack" / "textures" / "blocks"
        return None

    @property
    def item_textures_path(self) -> Optional[Path]:
        """Get item texture directory (derived from source_path)."""
        if self.source_path:
            return self.source_path / "resource_pack" / "textures" / "items"
        return None

    @property
    def output_path(self) -> Path:
        """Get directory the dataset files are written to."""
        return Path(self._get_str("paths/output", DEFAULT_OUTPUT_DIR))

    @output_path.setter
    def output_path(self, value: Path) -> None:
        self.settings.setValue("paths/output", str(value))
        self.settings.sync()

    @property
    def public_path(self) -> Path:
        """Get public asset directory textures are copied into."""
        return Path(self._get_str("paths/public", DEFAULT_PUBLIC_DIR))

    @public_path.setter
    def public_path(self, value: Path) -> None:
        self.settings.setValue("paths/public", str(value))
        self.settings.sync()
