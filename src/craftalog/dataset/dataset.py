"""
In-memory crafting dataset.

CraftingDataset bundles the four generated tables and exposes the
lookups used by the presentation layer. Instances are built once by the
pipeline or loaded from emitted files, and are not modified afterwards.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, cast

import orjson

from ..recipes.managers import IngestState
from ..recipes.models import Recipe
from ..textures.models import ItemDetails
from . import grid
from .models import (
    ITEM_DETAILS_FILE,
    ITEMS_FILE,
    RECIPES_FILE,
    CraftingGrid,
    DatasetError,
)

logger = logging.getLogger(__name__)


@dataclass
class CraftingDataset:
    """Items, item groups, item details and recipes of one build."""

    items: List[str] = field(default_factory=list)
    item_groups: Dict[str, List[str]] = field(default_factory=dict)
    recipes: Dict[str, Recipe] = field(default_factory=dict)
    item_details: Dict[str, ItemDetails] = field(default_factory=dict)

    @classmethod
    def from_state(
        cls, state: IngestState, item_details: Mapping[str, ItemDetails]
    ) -> "CraftingDataset":
        """Snapshot a resolved IngestState together with item details."""
        return cls(
            items=state.items,
            item_groups={name: list(members) for name, members in state.item_groups.items()},
            recipes=dict(state.recipes),
            item_details=dict(item_details),
        )

    def get_crafting_table_state(self, recipe_id: str) -> CraftingGrid:
        """Return the 9-slot crafting grid for `recipe_id`."""
        return grid.get_crafting_table_state(self.recipes, self.item_details, recipe_id)

    def get_result_item_details(self, recipe_id: str) -> Optional[ItemDetails]:
        """Return the details of the item `recipe_id` produces."""
        return grid.get_result_item_details(self.item_details, recipe_id)

    def unresolved_recipes(self) -> List[str]:
        return [output_id for output_id, recipe in self.recipes.items() if not recipe.is_resolved()]

    # === LOADING ===

    @staticmethod
    def _read_json(path: Path) -> Dict[str, Any]:
        try:
            data = orjson.loads(path.read_bytes())
        except FileNotFoundError as e:
            raise DatasetError(f"Dataset file not found: {path}") from e
        except (OSError, orjson.JSONDecodeError) as e:
            raise DatasetError(f"Cannot read dataset file {path}: {e}") from e
        if not isinstance(data, dict):
            raise DatasetError(f"Dataset file {path} does not hold a JSON object")
        return cast(Dict[str, Any], data)

    @classmethod
    def load(cls, output_dir: str | Path) -> "CraftingDataset":
        """Load a dataset previously written by DatasetEmitter.

        Raises:
            DatasetError: If a file is missing or structurally invalid, or a
                recipe still holds a tag or a label without key entry
        """
        output_dir = Path(output_dir)
        items_data = cls._read_json(output_dir / ITEMS_FILE)
        details_data = cls._read_json(output_dir / ITEM_DETAILS_FILE)
        recipes_data = cls._read_json(output_dir / RECIPES_FILE)

        try:
            dataset = cls(
                items=[str(item) for item in items_data.get("items", [])],
                item_groups={
                    str(name): [str(m) for m in members]
                    for name, members in items_data.get("itemGroups", {}).items()
                },
                recipes={
                    output_id: Recipe.from_json(recipe)
                    for output_id, recipe in recipes_data.items()
                },
                item_details={
                    item_id: ItemDetails.from_json(details)
                    for item_id, details in details_data.items()
                },
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DatasetError(f"Invalid dataset in {output_dir}: {e}") from e

        for output_id, recipe in dataset.recipes.items():
            if not recipe.is_resolved():
                raise DatasetError(
                    f"Recipe '{output_id}' in {output_dir} has unresolved tags: {recipe.tag_names()}"
                )
            missing = recipe.missing_labels()
            if missing:
                raise DatasetError(
                    f"Recipe '{output_id}' in {output_dir} has labels without key entry: {missing}"
                )

        logger.info(
            f"Loaded dataset from {output_dir}: {len(dataset.items)} items, "
            f"{len(dataset.recipes)} recipes"
        )
        return dataset
