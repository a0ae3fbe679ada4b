"""
Identifier helpers shared by the recipe and texture stages.
"""

from .models import NAMESPACE_PREFIX


def normalize_identifier(raw: str) -> str:
    """Strip the leading namespace prefix from a raw identifier.

    Only a leading ``minecraft:`` is removed; anything else is returned as-is.
    """
    if raw.startswith(NAMESPACE_PREFIX):
        return raw[len(NAMESPACE_PREFIX):]
    return raw


def display_name(item_id: str) -> str:
    """Derive a human-readable name, e.g. ``oak_planks`` -> ``Oak Planks``."""
    return " ".join(word[:1].upper() + word[1:] for word in item_id.split("_"))
