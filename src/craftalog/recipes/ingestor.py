"""
Recipe ingestion.

Turns decoded recipe definitions into normalized Recipe records. Each
definition is classified (shaped, shapeless or other), filtered by
crafting surface and the exclusion set, validated, and registered in an
IngestState together with every item it references.
"""

import logging
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple, cast

from .identifiers import normalize_identifier
from .managers import IngestState
from .models import (
    CRAFTING_TABLE,
    EXCLUDED_ITEMS,
    GRID_SIZE,
    SHAPED_KEY,
    SHAPELESS_KEY,
    IngredientRef,
    ItemList,
    RawRecipe,
    Recipe,
    TagRef,
)
from .shapeless import synthesize_pattern


class RecipeKind(Enum):
    """Kind of a raw recipe definition."""

    SHAPED = "shaped"
    SHAPELESS = "shapeless"
    OTHER = "other"


class MalformedRecipe(Exception):
    """Raised internally when a definition lacks required data."""
    pass


def classify(raw: RawRecipe) -> Tuple[RecipeKind, Dict[str, Any]]:
    """Return the recipe kind and its body (empty dict for OTHER)."""
    shaped = raw.get(SHAPED_KEY)
    if isinstance(shaped, dict):
        return RecipeKind.SHAPED, cast(Dict[str, Any], shaped)
    shapeless = raw.get(SHAPELESS_KEY)
    if isinstance(shapeless, dict):
        return RecipeKind.SHAPELESS, cast(Dict[str, Any], shapeless)
    return RecipeKind.OTHER, {}


def parse_ingredient(value: Any) -> Optional[IngredientRef]:
    """Convert a raw key entry or ingredient into a reference.

    Objects with ``tag`` become TagRef, objects with ``item`` and bare
    strings become single-item lists. Anything else yields None.
    """
    if isinstance(value, str):
        return ItemList((normalize_identifier(value),))
    if isinstance(value, dict):
        data = cast(Dict[str, Any], value)
        tag = data.get("tag")
        if isinstance(tag, str) and tag:
            return TagRef(normalize_identifier(tag))
        item = data.get("item")
        if isinstance(item, str) and item:
            return ItemList((normalize_identifier(item),))
    return None


def parse_result(value: Any) -> Tuple[str, int]:
    """Return (output id, count) from a raw ``result`` value.

    Raises:
        MalformedRecipe: If no output item can be found
    """
    if isinstance(value, list) and value:
        value = cast(List[Any], value)[0]
    if isinstance(value, str) and value:
        return normalize_identifier(value), 1
    if isinstance(value, dict):
        data = cast(Dict[str, Any], value)
        item = data.get("item")
        if isinstance(item, str) and item:
            try:
                count = int(data.get("count") or 1)
            except (TypeError, ValueError):
                raise MalformedRecipe(f"invalid result count {data.get('count')!r}")
            return normalize_identifier(item), count
    raise MalformedRecipe("missing result item")


class RecipeIngestor:
    """Converts raw definitions for one crafting surface into recipes.

    Excluded outputs still contribute their ingredients to the item
    registry; only the recipe entry (and the output id) is withheld.
    """

    def __init__(
        self,
        surface: str = CRAFTING_TABLE,
        excluded_items: Optional[Iterable[str]] = None,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.surface = surface
        self.excluded_items: FrozenSet[str] = EXCLUDED_ITEMS | frozenset(
            excluded_items or ()
        )
        self.logger.debug(
            f"RecipeIngestor initialized for surface '{surface}' "
            f"({len(self.excluded_items)} excluded outputs)"
        )

    def _applies_to_surface(self, body: Dict[str, Any]) -> bool:
        tags = body.get("tags")
        return isinstance(tags, list) and self.surface in cast(List[Any], tags)

    def ingest(
        self, recipe_id: str, raw: Optional[RawRecipe], state: IngestState
    ) -> Optional[Recipe]:
        """Ingest one decoded definition into `state`.

        Args:
            recipe_id: File stem, used for diagnostics only
            raw: Decoded JSON object, or None if the file could not be decoded
            state: Accumulator receiving items and the recipe

        Returns:
            The stored Recipe, or None if the definition was skipped
        """
        state.report.files += 1
        if raw is None:
            state.report.malformed += 1
            return None

        kind, body = classify(raw)
        if kind is RecipeKind.OTHER:
            state.report.unsupported += 1
            return None
        if not self._applies_to_surface(body):
            state.report.filtered_surface += 1
            return None

        try:
            if kind is RecipeKind.SHAPED:
                output_id, recipe = self._parse_shaped(body)
            else:
                output_id, recipe = self._parse_shapeless(body)
        except MalformedRecipe as e:
            state.report.malformed += 1
            self.logger.warning(f"Skipping malformed recipe '{recipe_id}': {e}")
            return None

        # Ingredients are registered even when the output is excluded
        for ref in recipe.key.values():
            if isinstance(ref, ItemList):
                state.register_items(ref.items)

        if output_id in self.excluded_items:
            state.report.excluded += 1
            self.logger.debug(f"Excluded recipe '{recipe_id}' for {output_id}")
            return None

        state.register_item(output_id)
        state.add_recipe(output_id, recipe, recipe_id)
        return recipe

    def ingest_all(
        self, definitions: Iterable[Tuple[str, Optional[RawRecipe]]], state: IngestState
    ) -> IngestState:
        """Ingest every (recipe_id, definition) pair in order."""
        for recipe_id, raw in definitions:
            self.ingest(recipe_id, raw, state)
        self.logger.info(f"Ingested {state.report.summary()}")
        return state

    def _parse_shaped(self, body: Dict[str, Any]) -> Tuple[str, Recipe]:
        pattern = body.get("pattern")
        raw_key = body.get("key")
        if not pattern or not raw_key or not body.get("result"):
            raise MalformedRecipe("shaped recipe needs pattern, key and result")
        if not isinstance(pattern, list) or not all(
            isinstance(row, str) for row in cast(List[Any], pattern)
        ):
            raise MalformedRecipe("pattern must be a list of strings")
        if not isinstance(raw_key, dict):
            raise MalformedRecipe("key must be an object")

        key: Dict[str, IngredientRef] = {}
        for label, value in cast(Dict[str, Any], raw_key).items():
            ref = parse_ingredient(value)
            if ref is not None:
                key[label] = ref

        output_id, count = parse_result(body["result"])
        recipe = Recipe(
            shaped=True,
            pattern=tuple(cast(List[str], pattern)),
            key=key,
            count=count,
        )

        missing = recipe.missing_labels()
        if missing:
            raise MalformedRecipe(f"pattern labels without key entry: {missing}")
        if not recipe.fits_grid(GRID_SIZE):
            raise MalformedRecipe(
                f"pattern {list(recipe.pattern)} does not fit {GRID_SIZE}x{GRID_SIZE} "
                "or has a row wider than the first"
            )
        return output_id, recipe

    def _parse_shapeless(self, body: Dict[str, Any]) -> Tuple[str, Recipe]:
        ingredients = body.get("ingredients")
        if not ingredients or not body.get("result"):
            raise MalformedRecipe("shapeless recipe needs ingredients and result")
        if not isinstance(ingredients, list):
            raise MalformedRecipe("ingredients must be a list")

        refs: List[IngredientRef] = []
        for value in cast(List[Any], ingredients):
            ref = parse_ingredient(value)
            if ref is None:
                self.logger.debug(f"Ignoring unsupported ingredient {value!r}")
                continue
            refs.append(ref)

        output_id, count = parse_result(body["result"])
        try:
            pattern, key = synthesize_pattern(refs)
        except ValueError as e:
            raise MalformedRecipe(str(e)) from e
        return output_id, Recipe(shaped=False, pattern=pattern, key=key, count=count)
