"""
Main entry point for craftalog.
Usage: python -m craftalog [--source DIR] [--output DIR] [--public DIR]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .builder import DatasetBuilder
from .dataset import CraftingDataset, DatasetError
from .recipes import RecipeSourceError
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="craftalog",
        description="Build the crafting recipe dataset from a resource/behavior pack. "
        "Paths given on the command line are remembered for the profile.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--settings", type=Path, help="INI settings file to use")
    parser.add_argument("--profile", default="default", help="settings profile")
    parser.add_argument("--source", type=Path, help="pack root (bedrock-samples checkout)")
    parser.add_argument("--output", type=Path, help="directory for generated dataset files")
    parser.add_argument("--public", type=Path, help="asset directory textures are copied to")
    parser.add_argument(
        "--no-textures",
        action="store_true",
        help="resolve texture paths without copying files",
    )
    parser.add_argument(
        "--show",
        metavar="RECIPE_ID",
        help="print the crafting grid of a recipe from the generated dataset",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug output")
    return parser


def apply_overrides(settings: AppSettings, args: argparse.Namespace) -> None:
    """Store command-line paths in the settings profile."""
    if args.source:
        settings.source_path = args.source
    if args.output:
        settings.output_path = args.output
    if args.public:
        settings.public_path = args.public
    if args.no_textures:
        settings.copy_textures = False


def show_recipe(settings: AppSettings, recipe_id: str) -> int:
    """Log the 3x3 grid and result for one recipe of the emitted dataset."""
    logger = logging.getLogger(f"{__name__}.show_recipe")
    dataset = CraftingDataset.load(settings.output_path)
    grid = dataset.get_crafting_table_state(recipe_id)
    result = dataset.get_result_item_details(recipe_id)

    width = max([len(slot.name) for slot in grid if slot] + [1])
    for row in range(3):
        cells = grid[row * 3 : row * 3 + 3]
        logger.info(" | ".join((cell.name if cell else "").ljust(width) for cell in cells))
    recipe = dataset.recipes.get(recipe_id)
    if result and recipe:
        logger.info(f"=> {recipe.count}x {result.name}")
    return 0 if recipe else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(f"{__name__}.main")

    settings = AppSettings(profile=args.profile, settings_file=args.settings)
    setup_logging(settings, level="DEBUG" if args.verbose else None)
    logger.debug(f"Configuration loaded from {settings.get_settings_file_path()}")

    try:
        apply_overrides(settings, args)
        if args.show:
            return show_recipe(settings, args.show)

        result = DatasetBuilder.from_settings(settings).run()
        logger.info(f"Build finished: {result.report.summary()}")
        return 0

    except ConfigError as e:
        logger.error(f"Configuration validation failed: {e}")
        return 1
    except RecipeSourceError as e:
        logger.error(f"Cannot read recipes: {e}")
        return 1
    except DatasetError as e:
        logger.error(f"Dataset error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
