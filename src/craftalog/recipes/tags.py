"""
Tag resolution for ingested recipes.

Item groups are not declared anywhere in the source data, so they are
inferred from the recipes themselves by name patterns, then every
symbolic tag reference is replaced with the group's concrete members.
"""

import logging
from typing import Dict, List, Mapping, Tuple

from .managers import IngestState
from .models import IngredientRef, ItemList, Recipe, TagRef

PLANKS_GROUP = "planks"
LOGS_GROUP = "logs"

# Substrings marking a plank source ingredient
LOG_MARKERS = ("log", "stem")


class TagResolver:
    """Two-pass resolver turning TagRef entries into ItemList entries.

    Pass 1 discovers group membership from recipe outputs and inputs.
    Pass 2 builds new Recipe objects with every tag substituted. Running
    it on already-resolved recipes changes nothing.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def discover_groups(self, recipes: Mapping[str, Recipe]) -> Dict[str, List[str]]:
        """Infer the known groups from recipe outputs and ingredients.

        Every output containing "planks" joins the planks group; every
        concrete ingredient of such a recipe containing "log" or "stem"
        joins the logs group. Order is first-seen, without duplicates.
        """
        groups: Dict[str, List[str]] = {PLANKS_GROUP: [], LOGS_GROUP: []}

        for output_id, recipe in recipes.items():
            if PLANKS_GROUP not in output_id:
                continue
            for ref in recipe.key.values():
                if not isinstance(ref, ItemList):
                    continue
                for item in ref.items:
                    if any(marker in item for marker in LOG_MARKERS):
                        if item not in groups[LOGS_GROUP]:
                            groups[LOGS_GROUP].append(item)
            if output_id not in groups[PLANKS_GROUP]:
                groups[PLANKS_GROUP].append(output_id)

        return groups

    def resolve_reference(
        self, ref: IngredientRef, groups: Mapping[str, List[str]]
    ) -> ItemList:
        """Return the concrete form of a single reference.

        A tag whose group is unknown or empty falls back to a list holding
        the tag name itself.
        """
        if isinstance(ref, ItemList):
            return ref
        members = groups.get(ref.tag)
        if members:
            return ItemList(tuple(members))
        self.logger.warning(
            f"Tag '{ref.tag}' resolves to no items, using the tag name as item"
        )
        return ItemList((ref.tag,))

    def resolve_recipe(self, recipe: Recipe, groups: Mapping[str, List[str]]) -> Recipe:
        """Return `recipe` with all tags substituted (same object if none)."""
        if recipe.is_resolved():
            return recipe
        key: Dict[str, IngredientRef] = {
            label: self.resolve_reference(ref, groups)
            for label, ref in recipe.key.items()
        }
        return recipe.with_key(key)

    def resolve(
        self, recipes: Mapping[str, Recipe]
    ) -> Tuple[Dict[str, Recipe], Dict[str, List[str]]]:
        """Resolve a recipe table.

        Returns:
            (resolved recipes in the same order, non-empty groups)
        """
        groups = self.discover_groups(recipes)
        resolved = {
            output_id: self.resolve_recipe(recipe, groups)
            for output_id, recipe in recipes.items()
        }
        finalized = {name: members for name, members in groups.items() if members}
        self.logger.debug(
            "Resolved groups: "
            + ", ".join(f"{name}={len(members)}" for name, members in groups.items())
        )
        return resolved, finalized

    def resolve_state(self, state: IngestState) -> IngestState:
        """Resolve the recipes held by `state` and store the groups."""
        resolved, groups = self.resolve(state.recipes)
        state.replace_recipes(resolved)
        state.set_item_groups(groups)
        return state
