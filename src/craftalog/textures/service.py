"""
High-level service for resolving item textures.

Texture files in the resource pack are not named consistently with item
ids, so the service guesses candidate file names, copies the first match
into the public asset folder and returns its web path.
Responsibilities:
    * Build candidate file names for an item id
    * Locate and copy block/item textures
    * Produce ItemDetails (name + icon list) for every registered item
"""

import logging
import shutil
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..recipes.identifiers import display_name
from .models import (
    DERIVATIVE_SUFFIXES,
    PLACEHOLDER_ITEM,
    WOOD_TYPES,
    ItemDetails,
    TextureKind,
)


def _reversed_pair(name: str) -> Optional[str]:
    """Return ``b_a`` for a two-segment name ``a_b``, else None."""
    parts = name.split("_")
    if len(parts) == 2:
        return f"{parts[1]}_{parts[0]}"
    return None


def candidate_names(item_id: str) -> List[str]:
    """Return texture file stems to try for `item_id`, in priority order."""
    names = [item_id]

    reversed_id = _reversed_pair(item_id)
    if reversed_id:
        names.append(reversed_id)

    has_wood_type = any(item_id.startswith(wood + "_") for wood in WOOD_TYPES)
    if not has_wood_type and not item_id.startswith("stripped_"):
        for wood in WOOD_TYPES:
            names.append(f"{wood}_{item_id}")
            names.append(f"{item_id}_{wood}")

    for suffix in DERIVATIVE_SUFFIXES:
        if item_id.endswith(suffix):
            base_id = item_id.replace(suffix, "", 1)
            names.append(base_id)
            reversed_base = _reversed_pair(base_id)
            if reversed_base:
                names.append(reversed_base)

    if "door" in item_id:
        names.extend([f"{item_id}_upper", f"{item_id}_lower", f"{item_id}_top"])
        parts = item_id.split("_")
        if len(parts) == 2:
            names.append(f"door_{parts[0]}_upper")
            names.append(f"door_{parts[0]}_lower")

    return names


class TextureService:
    """Facade for texture lookup and copying.

    Args:
        block_textures_path: Source folder with block textures
        item_textures_path: Source folder with item textures
        public_path: Asset root; files land in ``<public>/textures/<kind>/``
        copy_files: When False, only check that a source file exists
    """

    def __init__(
        self,
        block_textures_path: Path,
        item_textures_path: Path,
        public_path: Path,
        copy_files: bool = True,
        web_prefix: str = "/textures",
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.source_dirs = {
            TextureKind.BLOCK: Path(block_textures_path),
            TextureKind.ITEM: Path(item_textures_path),
        }
        self.public_path = Path(public_path)
        self.copy_files = copy_files
        self.web_prefix = web_prefix.rstrip("/")
        self.textures_copied = 0

        for kind, source_dir in self.source_dirs.items():
            if not source_dir.is_dir():
                self.logger.warning(f"Texture folder for {kind.value} not found: {source_dir}")

    def web_path(self, name: str, kind: TextureKind) -> str:
        return f"{self.web_prefix}/{kind.value}/{name}.png"

    def _copy_texture(self, source: Path, dest: Path) -> bool:
        """Copy one texture file; False if the source is missing or unreadable."""
        if not source.is_file():
            return False
        if not self.copy_files:
            return True
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, dest)
        except OSError as e:
            self.logger.debug(f"Could not copy {source} -> {dest}: {e}")
            return False
        return True

    def find_texture(self, item_id: str, kind: TextureKind) -> Optional[str]:
        """Locate a texture for `item_id` and return its web path.

        The first existing candidate is copied to
        ``<public>/textures/<kind>/<item_id>.png``.
        """
        source_dir = self.source_dirs[kind]
        dest = self.public_path / "textures" / kind.value / f"{item_id}.png"

        for name in candidate_names(item_id):
            if self._copy_texture(source_dir / f"{name}.png", dest):
                return self.web_path(item_id, kind)
        return None

    def _block_icons(self, item_id: str) -> List[str]:
        """Return [top, side], [side] or [top] for a block, or []."""
        top = self.find_texture(f"{item_id}_top", TextureKind.BLOCK)
        side = self.find_texture(f"{item_id}_side", TextureKind.BLOCK) or self.find_texture(
            item_id, TextureKind.BLOCK
        )
        return [path for path in (top, side) if path]

    def resolve_icons(self, item_id: str) -> List[str]:
        """Return the icon paths for one item (0-2 entries).

        ``*_block`` ids prefer block textures, retrying without the suffix;
        everything else prefers the item texture and falls back to blocks.
        """
        icons: List[str] = []

        if item_id.endswith("_block"):
            icons = self._block_icons(item_id)
            if not icons:
                icons = self._block_icons(item_id[: -len("_block")])

        if not icons:
            item_texture = self.find_texture(item_id, TextureKind.ITEM)
            icons = [item_texture] if item_texture else self._block_icons(item_id)

        self.textures_copied += len(icons)
        return icons

    def placeholder_icon(self) -> str:
        found = self.find_texture(PLACEHOLDER_ITEM, TextureKind.ITEM)
        return found or self.web_path(PLACEHOLDER_ITEM, TextureKind.ITEM)

    def item_details(self, item_id: str) -> ItemDetails:
        """Build the display record for one item."""
        icons = self.resolve_icons(item_id)
        if not icons:
            self.logger.debug(f"No texture for {item_id}, using placeholder")
            icons = [self.placeholder_icon()]
        return ItemDetails(id=item_id, name=display_name(item_id), icon=tuple(icons))

    def build_item_details(self, item_ids: Iterable[str]) -> Dict[str, ItemDetails]:
        """Build display records for all items, keeping input order."""
        self.logger.info("Resolving textures...")
        details = {item_id: self.item_details(item_id) for item_id in item_ids}
        self.logger.info(
            f"Resolved {self.textures_copied} textures for {len(details)} items"
        )
        return details
