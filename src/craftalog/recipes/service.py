"""
Main service for crafting recipe data.

Provides the high-level API for reading a recipe directory, ingesting the
crafting-table recipes and resolving their tag references.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .ingestor import RecipeIngestor
from .loaders import RecipeFileLoader
from .managers import IngestReport, IngestState
from .models import CRAFTING_TABLE, Recipe
from .tags import TagResolver


class RecipeDataService:
    """Service for crafting recipe data.

    Responsible for reading recipe JSON files in name order, keeping the
    recipes for one crafting surface, and resolving tag references into
    concrete item lists. Loading happens on construction; a missing or
    unreadable recipe directory raises RecipeSourceError.
    """

    def __init__(
        self,
        recipes_path: str | Path,
        surface: str = CRAFTING_TABLE,
        excluded_items: Optional[Iterable[str]] = None,
    ):
        """Initialize and load recipe data.

        Args:
            recipes_path: Directory holding the recipe JSON files
            surface: Crafting surface tag recipes must carry
            excluded_items: Extra output ids whose recipes are dropped
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.recipes_path = Path(recipes_path)

        # Initialize components
        self.loader = RecipeFileLoader()
        self.ingestor = RecipeIngestor(surface=surface, excluded_items=excluded_items)
        self.resolver = TagResolver()
        self.state = IngestState()

        self.logger.info(f"Initializing RecipeDataService with path: {self.recipes_path}")
        self._load_data()

    def _load_data(self) -> None:
        """Ingest every recipe file, then resolve tags."""
        self.logger.info("Parsing recipes...")
        self.ingestor.ingest_all(self.loader.iter_recipes(self.recipes_path), self.state)
        self.resolver.resolve_state(self.state)
        self.logger.info(
            f"Recipe loading completed. {len(self.state.recipes)} recipes, "
            f"{len(self.state.items)} items, {len(self.state.item_groups)} item groups"
        )

    # Public API methods - delegate to state

    @property
    def report(self) -> IngestReport:
        return self.state.report

    @property
    def items(self) -> List[str]:
        return self.state.items

    @property
    def recipes(self) -> Dict[str, Recipe]:
        return self.state.recipes

    @property
    def item_groups(self) -> Dict[str, List[str]]:
        return self.state.item_groups

    def get_recipe(self, output_id: str) -> Optional[Recipe]:
        """Return the recipe producing `output_id`, or None."""
        return self.state.get_recipe(output_id)
