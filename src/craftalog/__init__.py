"""
craftalog: crafting recipe dataset builder

Converts resource/behavior pack recipe definitions into a normalized
dataset of items, item groups and crafting-table recipes, and places
recipes on a 3x3 crafting grid for display.
"""

__version__ = "0.1.0"
__author__ = "craftalog Contributors"

# Core service imports
from .recipes import RecipeDataService, Recipe, ItemList, TagRef, normalize_identifier
from .textures import TextureService, ItemDetails
from .dataset import CraftingDataset, DatasetEmitter
from .builder import DatasetBuilder, BuildResult
from .utils.logging_config import setup_logging

__all__ = [
    # Services
    "RecipeDataService",
    "TextureService",
    "DatasetBuilder",
    "DatasetEmitter",

    # Logging
    "setup_logging",

    # Data models
    "Recipe",
    "ItemList",
    "TagRef",
    "ItemDetails",
    "CraftingDataset",
    "BuildResult",
    "normalize_identifier",
]
