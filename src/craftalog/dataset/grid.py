"""
Crafting grid placement.

Maps a recipe pattern onto the fixed 3x3 crafting table, centering
patterns smaller than the grid. Functions here only read their inputs
and never raise for missing data; problems are logged and the affected
slots stay empty.
"""

import logging
from typing import Mapping, Optional

from ..recipes.models import BLANK, GRID_SIZE, ItemList, Recipe
from ..textures.models import ItemDetails
from .models import GRID_SLOTS, CraftingGrid

logger = logging.getLogger(__name__)


def grid_offsets(recipe: Recipe, size: int = GRID_SIZE) -> tuple[int, int]:
    """Return (row offset, column offset) centering the pattern.

    Odd gaps put the extra empty row/column on the high side.
    """
    return (size - recipe.rows) // 2, (size - recipe.columns) // 2


def place_recipe(
    recipe: Recipe, item_details: Mapping[str, ItemDetails], recipe_id: str = ""
) -> CraftingGrid:
    """Place the first alternative of every pattern cell on the grid."""
    grid: CraftingGrid = [None] * GRID_SLOTS
    row_offset, col_offset = grid_offsets(recipe)

    for row_index, row in enumerate(recipe.pattern):
        for col_index, label in enumerate(row):
            if label == BLANK:
                continue
            ref = recipe.key.get(label)
            if ref is None:
                logger.warning(f"Label '{label}' of {recipe_id} has no key entry")
                continue
            if not isinstance(ref, ItemList):
                logger.warning(f"Label '{label}' of {recipe_id} is an unresolved tag: {ref}")
                continue
            item = ref.first()
            if item is None:
                continue

            details = item_details.get(item)
            if details is None:
                logger.warning(f"Item details not found for '{item}' in {recipe_id}")
                continue

            grid_row = row_index + row_offset
            grid_col = col_index + col_offset
            if not (0 <= grid_row < GRID_SIZE and 0 <= grid_col < GRID_SIZE):
                logger.warning(
                    f"Cell ({row_index}, {col_index}) of {recipe_id} is outside the grid"
                )
                continue
            grid[grid_row * GRID_SIZE + grid_col] = details

    return grid


def get_crafting_table_state(
    recipes: Mapping[str, Recipe],
    item_details: Mapping[str, ItemDetails],
    recipe_id: str,
) -> CraftingGrid:
    """Return the 9-slot grid for `recipe_id`; all empty if unknown."""
    if not recipe_id:
        logger.warning("Recipe id not provided")
        return [None] * GRID_SLOTS

    recipe = recipes.get(recipe_id)
    if recipe is None:
        logger.warning(f"No recipe found for '{recipe_id}'")
        return [None] * GRID_SLOTS

    return place_recipe(recipe, item_details, recipe_id)


def get_result_item_details(
    item_details: Mapping[str, ItemDetails], recipe_id: str
) -> Optional[ItemDetails]:
    """Return the details of a recipe's output item, or None."""
    if not recipe_id:
        logger.warning("Recipe id not provided")
        return None

    details = item_details.get(recipe_id)
    if details is None:
        logger.warning(f"No item details found for '{recipe_id}'")
    return details
