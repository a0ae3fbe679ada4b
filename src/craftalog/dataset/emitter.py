"""
Dataset emitter.

Serializes a CraftingDataset into three JSON files. Output depends only on
the dataset contents and their insertion order, so rebuilding from the
same source produces byte-identical files.
"""

import logging
from pathlib import Path
from typing import Dict, List

import orjson

from .dataset import CraftingDataset
from .models import ITEM_DETAILS_FILE, ITEMS_FILE, RECIPES_FILE, DatasetError

# No OPT_SORT_KEYS: discovery order is part of the output
DUMP_OPTIONS = orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE


class DatasetEmitter:
    """Writes the generated dataset files into an output directory."""

    def __init__(self, output_dir: str | Path):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.output_dir = Path(output_dir)

    @staticmethod
    def render(dataset: CraftingDataset) -> Dict[str, bytes]:
        """Serialize the dataset to {file name: bytes}.

        Raises:
            DatasetError: If a recipe still holds symbolic tag references
        """
        unresolved = dataset.unresolved_recipes()
        if unresolved:
            raise DatasetError(f"Recipes with unresolved tags: {unresolved}")

        items_doc = {"items": list(dataset.items), "itemGroups": dataset.item_groups}
        details_doc = {
            item_id: details.to_json() for item_id, details in dataset.item_details.items()
        }
        recipes_doc = {
            output_id: recipe.to_json() for output_id, recipe in dataset.recipes.items()
        }
        return {
            ITEMS_FILE: orjson.dumps(items_doc, option=DUMP_OPTIONS),
            ITEM_DETAILS_FILE: orjson.dumps(details_doc, option=DUMP_OPTIONS),
            RECIPES_FILE: orjson.dumps(recipes_doc, option=DUMP_OPTIONS),
        }

    def emit(self, dataset: CraftingDataset) -> List[Path]:
        """Write all dataset files and return their paths."""
        self.logger.info("Writing output files...")
        rendered = self.render(dataset)

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DatasetError(f"Cannot create output directory {self.output_dir}: {e}") from e

        written: List[Path] = []
        for file_name, payload in rendered.items():
            path = self.output_dir / file_name
            try:
                path.write_bytes(payload)
            except OSError as e:
                raise DatasetError(f"Cannot write {path}: {e}") from e
            written.append(path)

        self.logger.info(f"Generated {ITEMS_FILE} ({len(dataset.items)} items)")
        self.logger.info(f"Generated {ITEM_DETAILS_FILE} ({len(dataset.item_details)} items)")
        self.logger.info(f"Generated {RECIPES_FILE} ({len(dataset.recipes)} recipes)")
        return written
