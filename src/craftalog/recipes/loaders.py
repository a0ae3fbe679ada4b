"""
File loaders for recipe definitions.

Handles enumerating the recipe directory and decoding each JSON file
with orjson. Enumeration failures are fatal, per-file failures are not.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, cast

import orjson

from .models import RawRecipe, RecipeSourceError


class RecipeFileLoader:
    """Enumerates and decodes recipe JSON files in a stable order."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.logger.debug("RecipeFileLoader initialized")

    def list_recipe_files(self, recipes_path: Path) -> List[Path]:
        """Return the recipe files under `recipes_path`, sorted by name.

        Raises:
            RecipeSourceError: If the directory is missing or unreadable
        """
        if not recipes_path.is_dir():
            raise RecipeSourceError(f"Recipe directory not found: {recipes_path}")
        try:
            files = [
                p
                for p in recipes_path.iterdir()
                if p.is_file() and p.suffix.lower() == ".json"
            ]
        except OSError as e:
            raise RecipeSourceError(
                f"Cannot enumerate recipe directory {recipes_path}: {e}"
            ) from e

        files.sort(key=lambda p: p.name)
        self.logger.debug(f"Found {len(files)} recipe files in {recipes_path}")
        return files

    @staticmethod
    def read_recipe_file(json_file: Path) -> Optional[RawRecipe]:
        """Read and decode one recipe file.

        Returns None when the file cannot be read, is not valid JSON or
        does not hold a JSON object.
        """
        logger = logging.getLogger(f"{__name__}.RecipeFileLoader")
        try:
            with json_file.open("rb") as f:  # orjson works with bytes
                data = orjson.loads(f.read())
        except (OSError, orjson.JSONDecodeError) as e:
            logger.warning(f"Error reading recipe file {json_file.name}: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Recipe file {json_file.name} is not a JSON object")
            return None
        return cast(RawRecipe, data)

    def iter_recipes(
        self, recipes_path: Path
    ) -> Iterator[Tuple[str, Optional[RawRecipe]]]:
        """Yield (recipe_id, decoded definition or None) for every file.

        The recipe id is the file stem; it is only used for diagnostics.
        """
        for json_file in self.list_recipe_files(recipes_path):
            yield json_file.stem, self.read_recipe_file(json_file)
