"""Generation context for the pipeline map generator.

The GenerationContext is a mutable container that holds all state during map
generation. Each layer in the pipeline receives the same context and modifies
it in place. It is the single owner of the ObstructionGrid and the random
stream for the duration of one run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from battlemapper import config
from battlemapper.config import MapConfig
from battlemapper.environment.generators.base import BattleMapLayout
from battlemapper.environment.obstruction import ObstructionGrid
from battlemapper.types import RandomSeed
from battlemapper.util.rng import RNG, RNGProvider

logger = logging.getLogger(__name__)


@dataclass
class GenerationContext:
    """Mutable state container passed through the generation pipeline.

    Attributes:
        config: The run's validated MapConfig.
        grid: Occupancy grid shared by every layer.
        layout: Output geometry accumulated by the layers.
        rng: The single random stream every layer draws from, in order.
        seed: Master seed the stream was derived from.
    """

    config: MapConfig
    grid: ObstructionGrid
    layout: BattleMapLayout
    rng: RNG
    seed: RandomSeed = None
    _next_building_id: int = field(default=0, repr=False)

    @classmethod
    def create_empty(
        cls,
        map_config: MapConfig,
        seed: RandomSeed = None,
    ) -> GenerationContext:
        """Create an empty generation context for one run.

        Args:
            map_config: Settings for the run.
            seed: Optional master seed for deterministic generation.

        Returns:
            A new GenerationContext with a clear grid and an empty layout.
        """
        grid = ObstructionGrid(map_config.width, map_config.height)
        layout = BattleMapLayout(
            width=map_config.width,
            height=map_config.height,
            road_width=map_config.road_width,
            road_margin=map_config.road_margin,
            seed=seed,
        )
        rng = RNGProvider(seed).get(config.MAP_RNG_DOMAIN)
        return cls(config=map_config, grid=grid, layout=layout, rng=rng, seed=seed)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def next_building_id(self) -> int:
        """Allocate and return the next building ID."""
        building_id = self._next_building_id
        self._next_building_id += 1
        return building_id

    def record_failure(self, message: str) -> None:
        """Note a feature that was skipped or kept partial."""
        logger.warning(message)
        self.layout.placement_failures.append(message)
