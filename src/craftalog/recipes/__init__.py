"""
Module for working with crafting recipe definitions.

Provides services for reading raw recipe files, normalizing shaped and
shapeless crafting-table recipes, and resolving tag references into
concrete item groups.
"""

from .service import RecipeDataService
from .models import (
    RawRecipe,
    Recipe,
    IngredientRef,
    ItemList,
    TagRef,
    RecipeSourceError,
    CRAFTING_TABLE,
    EXCLUDED_ITEMS,
    NAMESPACE_PREFIX,
)
from .identifiers import normalize_identifier, display_name
from .managers import IngestState, IngestReport
from .loaders import RecipeFileLoader
from .ingestor import RecipeIngestor, RecipeKind, classify
from .shapeless import synthesize_pattern, row_lengths
from .tags import TagResolver

# Public exports
__all__ = [
    # Main service
    "RecipeDataService",
    # Models
    "RawRecipe",
    "Recipe",
    "IngredientRef",
    "ItemList",
    "TagRef",
    "RecipeSourceError",
    # Constants
    "CRAFTING_TABLE",
    "EXCLUDED_ITEMS",
    "NAMESPACE_PREFIX",
    # Helpers
    "normalize_identifier",
    "display_name",
    "synthesize_pattern",
    "row_lengths",
    "classify",
    # Component classes (for advanced usage)
    "IngestState",
    "IngestReport",
    "RecipeFileLoader",
    "RecipeIngestor",
    "RecipeKind",
    "TagResolver",
]
