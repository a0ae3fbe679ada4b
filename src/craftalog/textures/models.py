"""
Data models for item textures and display details.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple


class TextureKind(Enum):
    """Texture folder an icon is looked up in."""

    BLOCK = "blocks"
    ITEM = "items"


# Wood types used to guess variant file names
WOOD_TYPES: Tuple[str, ...] = (
    "acacia",
    "birch",
    "cherry",
    "dark_oak",
    "jungle",
    "mangrove",
    "oak",
    "spruce",
    "bamboo",
    "crimson",
    "warped",
    "pale_oak",
)

# Derivative blocks fall back to their base block texture
DERIVATIVE_SUFFIXES: Tuple[str, ...] = (
    "_stairs",
    "_slab",
    "_wall",
    "_fence",
    "_fence_gate",
    "_button",
    "_pressure_plate",
    "_carpet",
)

PLACEHOLDER_ITEM = "stick"


@dataclass(frozen=True)
class ItemDetails:
    """Display record for an item.

    One icon path means a flat item icon, two mean a block drawn from its
    top and side textures.
    """

    id: str
    name: str
    icon: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_block(self) -> bool:
        return len(self.icon) == 2

    def to_json(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "icon": list(self.icon)}

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ItemDetails":
        icon: Any = data.get("icon") or []
        if isinstance(icon, str):
            icon = [icon]
        icons: List[str] = [str(path) for path in icon]
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or data["id"]),
            icon=tuple(icons),
        )
