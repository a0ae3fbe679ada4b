"""
Data models for the generated crafting dataset.
"""

from typing import List, Optional, TypeAlias

from ..textures.models import ItemDetails

ITEMS_FILE = "items.json"
ITEM_DETAILS_FILE = "item-details.json"
RECIPES_FILE = "item-recipes.json"

GRID_SLOTS = 9

CraftingGrid: TypeAlias = List[Optional[ItemDetails]]
"""Nine slots in row-major order, None for an empty slot."""


class DatasetError(Exception):
    """Raised when a dataset cannot be emitted or loaded."""
    pass
