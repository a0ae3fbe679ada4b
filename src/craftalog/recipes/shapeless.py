"""
Pattern synthesis for shapeless recipes.

Shapeless recipes have no placement of their own, so one is generated:
each ingredient gets its own label and the labels are laid out in up to
three roughly even rows.
"""

import math
from typing import Dict, List, Sequence, Tuple

from .models import SHAPELESS_LABELS, IngredientRef


def row_lengths(count: int) -> List[int]:
    """Return the row partition for `count` ingredients.

    1-3 -> one row, 4-6 -> two rows (ceil(n/2) first), 7-9 -> three rows
    of ceil(n/3) with the last row taking the remainder.
    """
    if count < 1 or count > len(SHAPELESS_LABELS):
        raise ValueError(f"Shapeless recipes take 1-9 ingredients, got {count}")
    if count <= 3:
        return [count]
    if count <= 6:
        first = math.ceil(count / 2)
        return [first, count - first]
    third = math.ceil(count / 3)
    return [third, third, count - third * 2]


def synthesize_pattern(
    ingredients: Sequence[IngredientRef],
) -> Tuple[Tuple[str, ...], Dict[str, IngredientRef]]:
    """Build (pattern, key) for an ordered list of ingredients.

    Labels are assigned in input order with no deduplication: the same
    item listed twice occupies two slots.

    Raises:
        ValueError: If there are no ingredients or more than nine
    """
    lengths = row_lengths(len(ingredients))
    labels = SHAPELESS_LABELS[: len(ingredients)]
    key = {label: ref for label, ref in zip(labels, ingredients)}

    pattern: List[str] = []
    start = 0
    for length in lengths:
        pattern.append(labels[start : start + length])
        start += length
    return tuple(pattern), key
