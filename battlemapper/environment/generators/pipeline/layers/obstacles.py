"""Outdoor obstacle layer.

Scatters bushes, rubble and similar single-cell obstacles over whatever is
still free once roads and buildings are in place. Density scales with the
free area, and each obstacle reserves its cell so none overlap.
"""

from __future__ import annotations

import logging

from battlemapper import config
from battlemapper.environment.generators.pipeline.context import GenerationContext
from battlemapper.environment.generators.pipeline.layer import GenerationLayer

logger = logging.getLogger(__name__)


class OutdoorObstacleLayer(GenerationLayer):
    """Places one obstacle per ``density_divisor`` free cells."""

    def __init__(self, density_divisor: int = config.OUTDOOR_OBSTACLE_DIVISOR) -> None:
        self.density_divisor = density_divisor

    def apply(self, ctx: GenerationContext) -> None:
        count = ctx.grid.unobstructed_count // self.density_divisor
        for placed in range(count):
            cell = ctx.grid.find_clear_tile(ctx.rng)
            if cell is None:
                ctx.record_failure(
                    f"Outdoor obstacles: placed {placed} of {count}, no clear tile left"
                )
                return
            ctx.grid.obstruct(cell.x, cell.y)
            ctx.layout.outdoor_obstacles.append(cell)

        logger.debug(f"Placed {count} outdoor obstacles")
