"""
Data models for crafting recipes.

Contains the ingredient reference union, the Recipe record and the
constants shared by the ingestion and resolution stages. Models carry no
file-system logic.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Tuple, TypeAlias, Union, cast

# Raw definitions are plain dicts decoded from JSON
RawRecipe: TypeAlias = Dict[str, Any]
"""A single decoded recipe file (top-level JSON object)."""

# Recipe body keys inside a raw definition
SHAPED_KEY = "minecraft:recipe_shaped"
SHAPELESS_KEY = "minecraft:recipe_shapeless"

NAMESPACE_PREFIX = "minecraft:"
CRAFTING_TABLE = "crafting_table"

# Label alphabet for synthesized shapeless patterns
SHAPELESS_LABELS = "ABCDEFGHI"

GRID_SIZE = 3
BLANK = " "


class RecipeSourceError(Exception):
    """Raised when the recipe source directory cannot be enumerated."""
    pass


# Non-craftable, debug or education-edition outputs
EXCLUDED_ITEMS: FrozenSet[str] = frozenset(
    {
        "camera",
        "portfolio",
        "element",
        "compound",
        "sparkler",
        "balloon",
        "glow_stick",
        "ice_bomb",
        "super_fertilizer",
        "medicine",
        "rapid_fertilizer",
        "bleach",
        "heat_block",
    }
)


@dataclass(frozen=True)
class ItemList:
    """Concrete ingredient slot: any one of the listed items satisfies it."""

    items: Tuple[str, ...]

    def first(self) -> str | None:
        return self.items[0] if self.items else None

    def to_json(self) -> List[str]:
        return list(self.items)


@dataclass(frozen=True)
class TagRef:
    """Symbolic ingredient slot referring to an item group by name.

    Only exists between ingestion and tag resolution.
    """

    tag: str

    def to_json(self) -> Dict[str, str]:
        return {"tag": self.tag}


IngredientRef: TypeAlias = Union[ItemList, TagRef]
"""Either a concrete list of alternatives or a symbolic tag reference."""


def ingredient_from_json(value: Any) -> IngredientRef:
    """Build an ingredient reference from its emitted JSON form."""
    if isinstance(value, dict) and "tag" in value:
        return TagRef(str(cast(Dict[str, Any], value)["tag"]))
    if isinstance(value, list):
        return ItemList(tuple(str(v) for v in cast(List[Any], value)))
    raise ValueError(f"Unsupported ingredient value: {value!r}")


@dataclass(frozen=True)
class Recipe:
    """A crafting-table recipe keyed (externally) by its output item.

    `pattern` rows may be shorter than the first row; each character is a
    slot label or a blank. `key` maps every non-blank label to an
    ingredient reference and is stored as a read-only mapping.
    """

    shaped: bool
    pattern: Tuple[str, ...]
    key: Mapping[str, IngredientRef] = field(default_factory=dict)
    count: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", MappingProxyType(dict(self.key)))

    def __hash__(self) -> int:
        return hash((self.shaped, self.pattern, tuple(self.key.items()), self.count))

    @property
    def rows(self) -> int:
        return len(self.pattern)

    @property
    def columns(self) -> int:
        """Width of the first pattern row (0 for an empty pattern)."""
        return len(self.pattern[0]) if self.pattern else 0

    def labels(self) -> List[str]:
        """Return the distinct non-blank labels in pattern order."""
        seen: List[str] = []
        for row in self.pattern:
            for char in row:
                if char != BLANK and char not in seen:
                    seen.append(char)
        return seen

    def missing_labels(self) -> List[str]:
        """Return pattern labels that have no key entry."""
        return [label for label in self.labels() if label not in self.key]

    def fits_grid(self, size: int = GRID_SIZE) -> bool:
        """True when the pattern fits `size` and no row is wider than the first."""
        return (
            self.rows <= size
            and self.columns <= size
            and all(len(row) <= self.columns for row in self.pattern)
        )

    def is_resolved(self) -> bool:
        """True when no symbolic tag references remain in the key."""
        return not any(isinstance(ref, TagRef) for ref in self.key.values())

    def tag_names(self) -> List[str]:
        return [ref.tag for ref in self.key.values() if isinstance(ref, TagRef)]

    def with_key(self, key: Mapping[str, IngredientRef]) -> "Recipe":
        """Return a copy of this recipe with a different key."""
        return replace(self, key=key)

    def to_json(self) -> Dict[str, Any]:
        return {
            "shaped": self.shaped,
            "pattern": list(self.pattern),
            "key": {label: ref.to_json() for label, ref in self.key.items()},
            "count": self.count,
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Recipe":
        """Create a Recipe from its emitted JSON form."""
        raw_key = cast(Dict[str, Any], data.get("key") or {})
        return cls(
            shaped=bool(data.get("shaped", True)),
            pattern=tuple(str(row) for row in data.get("pattern") or []),
            key={label: ingredient_from_json(v) for label, v in raw_key.items()},
            count=int(data.get("count", 1)),
        )
