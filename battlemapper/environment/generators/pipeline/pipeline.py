"""Pipeline generator that orchestrates layer-based map generation.

The PipelineGenerator runs a sequence of GenerationLayers, each transforming
a shared GenerationContext. This enables compositional map generation where
each layer focuses on one aspect of the map.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from battlemapper.environment.generators.base import BaseMapGenerator, BattleMapLayout

from .context import GenerationContext

if TYPE_CHECKING:
    from battlemapper.config import MapConfig
    from battlemapper.types import RandomSeed

    from .layer import GenerationLayer

logger = logging.getLogger(__name__)


class PipelineGenerator(BaseMapGenerator):
    """Map generator that runs layers sequentially on a shared context.

    The pipeline validates the configuration, creates an empty
    GenerationContext and passes it through each layer in order.

    Example:
        generator = PipelineGenerator(
            layers=[
                RoadNetworkLayer(),
                BuildingLayer(),
                OutdoorObstacleLayer(),
            ],
            map_config=MapConfig(width=48, height=48),
            seed=12345,
        )
        layout = generator.generate()

    Attributes:
        layers: List of GenerationLayer instances to apply.
        seed: Optional random seed for reproducible generation.
    """

    def __init__(
        self,
        layers: list[GenerationLayer],
        map_config: MapConfig,
        seed: RandomSeed = None,
    ) -> None:
        """Initialize the pipeline generator.

        Args:
            layers: List of GenerationLayer instances to apply in order.
            map_config: Settings for every run of this generator.
            seed: Optional random seed for deterministic generation.
        """
        super().__init__(map_config)
        self.layers = layers
        self.seed = seed

    def generate(self) -> BattleMapLayout:
        """Generate a layout by running all layers in sequence.

        Returns:
            The BattleMapLayout accumulated by the layers.

        Raises:
            ConfigurationError: If the configuration is infeasible.
        """
        self.map_config.validate()
        ctx = GenerationContext.create_empty(self.map_config, seed=self.seed)
        logger.info(
            f"Generating {self.map_width}x{self.map_height} battle map "
            f"(seed={self.seed!r})"
        )

        for layer in self.layers:
            layer.apply(ctx)

        layout = ctx.layout
        logger.info(
            f"Generated {len(layout.roads)} roads, {len(layout.buildings)} buildings, "
            f"{len(layout.outdoor_obstacles)} outdoor obstacles "
            f"({len(layout.placement_failures)} placement failures)"
        )
        return layout
