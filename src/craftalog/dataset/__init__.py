"""
Generated crafting dataset.

Provides the in-memory dataset, its file emitter and the crafting grid
placement used to display recipes.
"""

from .dataset import CraftingDataset
from .emitter import DatasetEmitter
from .grid import get_crafting_table_state, get_result_item_details, place_recipe
from .models import (
    CraftingGrid,
    DatasetError,
    GRID_SLOTS,
    ITEMS_FILE,
    ITEM_DETAILS_FILE,
    RECIPES_FILE,
)

__all__ = [
    "CraftingDataset",
    "DatasetEmitter",
    "DatasetError",
    "CraftingGrid",
    "GRID_SLOTS",
    "ITEMS_FILE",
    "ITEM_DETAILS_FILE",
    "RECIPES_FILE",
    "get_crafting_table_state",
    "get_result_item_details",
    "place_recipe",
]
