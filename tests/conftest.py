"""Shared fixtures: a small pack tree with recipes and textures."""

from pathlib import Path
from typing import Any, Dict

import orjson
import pytest

PNG_BYTES = b"\x89PNG\r\n\x1a\n"


def shaped(pattern: list[str], key: Dict[str, Any], result: Any, tags: Any = None) -> Dict[str, Any]:
    return {
        "format_version": "1.20.10",
        "minecraft:recipe_shaped": {
            "description": {"identifier": "test:recipe"},
            "tags": ["crafting_table"] if tags is None else tags,
            "pattern": pattern,
            "key": key,
            "result": result,
        },
    }


def shapeless(ingredients: list[Any], result: Any, tags: Any = None) -> Dict[str, Any]:
    return {
        "format_version": "1.20.10",
        "minecraft:recipe_shapeless": {
            "description": {"identifier": "test:recipe"},
            "tags": ["crafting_table"] if tags is None else tags,
            "ingredients": ingredients,
            "result": result,
        },
    }


SAMPLE_RECIPES: Dict[str, Any] = {
    "arrow": shaped(
        ["X", "#", "Y"],
        {
            "#": {"item": "minecraft:stick"},
            "X": {"item": "minecraft:flint"},
            "Y": {"item": "minecraft:feather"},
        },
        {"item": "minecraft:arrow", "count": 4},
    ),
    "camera": shaped(
        ["#X#"],
        {"#": {"item": "minecraft:iron_ingot"}, "X": {"item": "minecraft:glass_pane"}},
        {"item": "minecraft:camera"},
    ),
    "chest": shaped(
        ["###", "# #", "###"],
        {"#": {"tag": "minecraft:planks"}},
        {"item": "minecraft:chest"},
    ),
    "crimson_planks": shapeless(
        [{"item": "minecraft:crimson_stem"}],
        {"item": "minecraft:crimson_planks", "count": 4},
    ),
    "furnace_iron": {
        "format_version": "1.12",
        "minecraft:recipe_furnace": {
            "tags": ["furnace"],
            "input": "minecraft:iron_ore",
            "output": "minecraft:iron_ingot",
        },
    },
    "melon_block": shaped(
        ["MMM", "MMM", "MMM"],
        {"M": {"item": "minecraft:melon_slice"}},
        {"item": "minecraft:melon_block"},
    ),
    "missing_key": {
        "minecraft:recipe_shaped": {
            "tags": ["crafting_table"],
            "pattern": ["##"],
            "result": {"item": "minecraft:broken"},
        }
    },
    "oak_planks": shapeless(
        [{"item": "minecraft:oak_log"}],
        {"item": "minecraft:oak_planks", "count": 4},
    ),
    "stick": shaped(
        ["#", "#"],
        {"#": {"tag": "minecraft:planks"}},
        {"item": "minecraft:stick", "count": 4},
    ),
    "stone_slab_stonecutter": shaped(
        ["#"],
        {"#": {"item": "minecraft:stone"}},
        {"item": "minecraft:stone_slab", "count": 2},
        tags=["stonecutter"],
    ),
    "torch": shaped(
        ["X", "#"],
        {"#": {"item": "minecraft:stick"}, "X": {"item": "minecraft:coal"}},
        {"item": "minecraft:torch", "count": 4},
    ),
    "white_banner": shaped(
        ["###", "###", " | "],
        {"#": {"tag": "minecraft:wool"}, "|": {"item": "minecraft:stick"}},
        {"item": "minecraft:white_banner"},
    ),
}

BLOCK_TEXTURES = ["planks_oak", "melon_top", "melon_side", "crimson_planks"]
ITEM_TEXTURES = ["stick", "coal", "flint", "feather", "arrow"]


def write_recipes(recipes_dir: Path, recipes: Dict[str, Any]) -> None:
    recipes_dir.mkdir(parents=True, exist_ok=True)
    for name, data in recipes.items():
        (recipes_dir / f"{name}.json").write_bytes(orjson.dumps(data))


@pytest.fixture
def pack_dir(tmp_path: Path) -> Path:
    """Pack root laid out like bedrock-samples."""
    root = tmp_path / "bedrock-samples"
    recipes_dir = root / "behavior_pack" / "recipes"
    write_recipes(recipes_dir, SAMPLE_RECIPES)
    (recipes_dir / "zz_broken.json").write_text("{ not json", encoding="utf-8")

    blocks = root / "resource_pack" / "textures" / "blocks"
    items = root / "resource_pack" / "textures" / "items"
    blocks.mkdir(parents=True)
    items.mkdir(parents=True)
    for name in BLOCK_TEXTURES:
        (blocks / f"{name}.png").write_bytes(PNG_BYTES)
    for name in ITEM_TEXTURES:
        (items / f"{name}.png").write_bytes(PNG_BYTES)
    return root


@pytest.fixture
def recipes_dir(pack_dir: Path) -> Path:
    return pack_dir / "behavior_pack" / "recipes"
