"""
Build orchestration.

Runs the recipe pipeline end to end: recipe ingestion and tag resolution,
texture resolution for every registered item, and dataset emission.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, TYPE_CHECKING

from .dataset import CraftingDataset, DatasetEmitter
from .recipes import CRAFTING_TABLE, IngestReport, RecipeDataService
from .settings.types import ConfigError
from .textures import TextureService

if TYPE_CHECKING:
    from .settings import AppSettings


@dataclass
class BuildResult:
    """Outcome of a build run."""

    dataset: CraftingDataset
    report: IngestReport
    written: List[Path] = field(default_factory=list)


class DatasetBuilder:
    """Builds the crafting dataset from a source pack.

    Args:
        recipes_path: Directory of recipe JSON files
        block_textures_path: Block texture folder
        item_textures_path: Item texture folder
        output_path: Directory receiving the dataset files
        public_path: Asset root receiving copied textures
        surface: Crafting surface tag to keep
        excluded_items: Extra excluded output ids
        copy_textures: When False textures are only looked up
    """

    def __init__(
        self,
        recipes_path: Path,
        block_textures_path: Path,
        item_textures_path: Path,
        output_path: Path,
        public_path: Path,
        surface: str = CRAFTING_TABLE,
        excluded_items: Optional[Iterable[str]] = None,
        copy_textures: bool = True,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.recipes_path = Path(recipes_path)
        self.block_textures_path = Path(block_textures_path)
        self.item_textures_path = Path(item_textures_path)
        self.output_path = Path(output_path)
        self.public_path = Path(public_path)
        self.surface = surface
        self.excluded_items = list(excluded_items or [])
        self.copy_textures = copy_textures

    @classmethod
    def from_settings(cls, settings: "AppSettings") -> "DatasetBuilder":
        """Create a builder from application settings.

        Raises:
            ConfigError: If the settings fail validation
        """
        validation = settings.validate()
        for warning in validation.warnings:
            logging.getLogger(__name__).warning(warning)
        if not validation.is_valid:
            raise ConfigError("; ".join(validation.errors))

        recipes_path = settings.recipes_path
        block_textures_path = settings.block_textures_path
        item_textures_path = settings.item_textures_path
        if recipes_path is None or block_textures_path is None or item_textures_path is None:
            raise ConfigError("Source path not set")

        return cls(
            recipes_path=recipes_path,
            block_textures_path=block_textures_path,
            item_textures_path=item_textures_path,
            output_path=settings.output_path,
            public_path=settings.public_path,
            surface=settings.crafting_surface,
            excluded_items=settings.extra_excluded_items,
            copy_textures=settings.copy_textures,
        )

    def build_dataset(self) -> BuildResult:
        """Ingest, resolve and attach item details without writing files.

        Raises:
            RecipeSourceError: If the recipe directory cannot be enumerated
        """
        service = RecipeDataService(
            self.recipes_path, surface=self.surface, excluded_items=self.excluded_items
        )
        textures = TextureService(
            self.block_textures_path,
            self.item_textures_path,
            self.public_path,
            copy_files=self.copy_textures,
        )
        item_details = textures.build_item_details(service.items)
        dataset = CraftingDataset.from_state(service.state, item_details)
        return BuildResult(dataset=dataset, report=service.report)

    def run(self) -> BuildResult:
        """Build the dataset and write it to the output directory."""
        result = self.build_dataset()
        result.written = DatasetEmitter(self.output_path).emit(result.dataset)
        self.logger.info("Done")
        return result
