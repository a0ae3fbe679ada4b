import os
from pathlib import Path

import pytest

from craftalog.builder import DatasetBuilder

SAMPLES_PATH = os.environ.get("BEDROCK_SAMPLES_PATH") or "bedrock-samples"


@pytest.mark.skipif(not Path(SAMPLES_PATH).exists(), reason="bedrock-samples checkout not found")
def test_build_bedrock_samples(tmp_path: Path) -> None:
    root = Path(SAMPLES_PATH)
    textures = root / "resource_pack" / "textures"
    builder = DatasetBuilder(
        recipes_path=root / "behavior_pack" / "recipes",
        block_textures_path=textures / "blocks",
        item_textures_path=textures / "items",
        output_path=tmp_path / "generated",
        public_path=tmp_path / "public",
        copy_textures=False,
    )
    dataset = builder.build_dataset().dataset

    assert "crafting_table" in dataset.recipes
    assert "oak_planks" in dataset.item_groups.get("planks", [])
    assert not dataset.unresolved_recipes()

    grid = dataset.get_crafting_table_state("crafting_table")
    assert sum(slot is not None for slot in grid) == 4
    print(f"✓ {len(dataset.recipes)} recipes, {len(dataset.items)} items")
