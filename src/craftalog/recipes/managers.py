"""
Registries for ingested crafting data.

Provides IngestState, the accumulator threaded through the ingestion and
tag resolution stages. It owns the item registry, the recipe table and
the item group table; nothing here is module-global.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .models import Recipe


@dataclass
class IngestReport:
    """Counters collected while ingesting a recipe directory."""

    files: int = 0
    parsed: int = 0
    malformed: int = 0
    excluded: int = 0
    filtered_surface: int = 0
    unsupported: int = 0
    overwritten: int = 0

    def summary(self) -> str:
        return (
            f"{self.parsed} recipes from {self.files} files "
            f"(malformed: {self.malformed}, excluded: {self.excluded}, "
            f"other surface: {self.filtered_surface}, "
            f"unsupported: {self.unsupported}, overwritten: {self.overwritten})"
        )


class IngestState:
    """Accumulator for items, recipes and item groups.

    Maintains three tables:
    - items: ordered set of canonical item ids (dict keys keep discovery order)
    - recipes: output item id -> Recipe (later registrations overwrite)
    - item_groups: group name -> ordered member list (filled by tag resolution)
    """

    def __init__(self):
        self._items: Dict[str, None] = {}
        self.recipes: Dict[str, Recipe] = {}
        self.item_groups: Dict[str, List[str]] = {}
        self.report = IngestReport()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.logger.debug("IngestState initialized")

    # Items

    def register_item(self, item_id: str) -> None:
        """Add an item id to the registry if not already known."""
        if item_id not in self._items:
            self._items[item_id] = None

    def register_items(self, item_ids: Iterable[str]) -> None:
        for item_id in item_ids:
            self.register_item(item_id)

    def has_item(self, item_id: str) -> bool:
        return item_id in self._items

    @property
    def items(self) -> List[str]:
        """Return the registered item ids in discovery order."""
        return list(self._items)

    # Recipes

    def add_recipe(self, output_id: str, recipe: Recipe, recipe_id: str = "") -> None:
        """Store the recipe for `output_id`, replacing any earlier one."""
        if output_id in self.recipes:
            self.report.overwritten += 1
            self.logger.debug(
                f"Recipe '{recipe_id}' overwrites earlier recipe for {output_id}"
            )
        self.recipes[output_id] = recipe
        self.report.parsed += 1

    def get_recipe(self, output_id: str) -> Optional[Recipe]:
        return self.recipes.get(output_id)

    def replace_recipes(self, recipes: Dict[str, Recipe]) -> None:
        """Swap in a new recipe table (same keys, same order)."""
        self.recipes = dict(recipes)

    # Groups

    def set_item_groups(self, groups: Dict[str, List[str]]) -> None:
        """Store finalized groups, dropping empty ones."""
        self.item_groups = {name: list(members) for name, members in groups.items() if members}
