"""Building layer for battle map generation.

This layer places buildings in the space the roads left free. For each
building it:
- Finds a clear rectangle on the obstruction grid and reserves it
- Picks exterior door cells on the footprint's edge
- Subdivides the interior with a wall network, one door per wall
- Scatters indoor obstacles that avoid the walls
"""

from __future__ import annotations

import logging

from battlemapper import config
from battlemapper.environment.generators.buildings import (
    Building,
    InteriorWall,
    drawn_wall_length,
)
from battlemapper.environment.generators.line_network import PlacementFailed
from battlemapper.environment.generators.pipeline.context import GenerationContext
from battlemapper.environment.generators.pipeline.layer import GenerationLayer
from battlemapper.util.coordinates import Line, Point, Rectangle
from battlemapper.util.rng import RNG

logger = logging.getLogger(__name__)


def door_count_for(footprint: Rectangle) -> int:
    return footprint.perimeter // config.DOOR_PERIMETER_DIVISOR + 1


def wall_count_for(footprint: Rectangle, margin: int = config.WALL_MARGIN) -> int:
    """Interior walls for a footprint, or 0 if it is too small to hold any."""
    if not footprint.supports_margin(margin):
        return 0
    return footprint.area // config.WALL_AREA_DIVISOR


def obstacle_count_for(footprint: Rectangle) -> int:
    return footprint.area // config.OBSTACLE_AREA_DIVISOR


def pick_wall_door(line: Line, footprint: Rectangle, rng: RNG) -> InteriorWall:
    """Choose the door cell for one interior wall.

    The door sits one cell in from the wall's start on short walls, and
    anywhere that leaves at least one wall cell either side on longer ones.
    """
    drawn_length = drawn_wall_length(line, footprint)
    if drawn_length <= 1:
        door_offset = None
    elif drawn_length <= 3:
        door_offset = 1
    else:
        door_offset = rng.randrange(1, drawn_length - 2)
    return InteriorWall(line, drawn_length, door_offset)


class BuildingLayer(GenerationLayer):
    """Places buildings on free space and subdivides them into rooms.

    Footprints come from ObstructionGrid.find_clear_rectangle, so they never
    touch roads, road margins or each other. The search result is shrunk by
    one cell before use and only the shrunk footprint is reserved, leaving a
    free ring around every building.
    """

    def __init__(
        self,
        min_half_extent: int = config.BUILDING_MIN_HALF_EXTENT,
        wall_margin: int = config.WALL_MARGIN,
    ) -> None:
        """Initialize the building layer.

        Args:
            min_half_extent: Smallest half-extent of the footprint search.
            wall_margin: Clearance for interior walls.
        """
        self.min_half_extent = min_half_extent
        self.wall_margin = wall_margin

    def apply(self, ctx: GenerationContext) -> None:
        """Place the configured number of buildings.

        Args:
            ctx: The generation context to modify.
        """
        for index in range(ctx.config.building_count):
            area = ctx.grid.find_clear_rectangle(
                self.min_half_extent, ctx.config.building_size, ctx.rng
            )
            if area is None:
                ctx.record_failure(f"Building {index}: no clear rectangle found")
                continue
            building = self._create_building(ctx, area.shrink(1))
            ctx.layout.buildings.append(building)
            logger.debug(
                f"Building {building.id} at {building.footprint}: "
                f"{len(building.doors)} doors, {len(building.walls)} walls, "
                f"{len(building.obstacles)} obstacles"
            )

    def _create_building(self, ctx: GenerationContext, footprint: Rectangle) -> Building:
        building = Building(id=ctx.next_building_id(), footprint=footprint)

        for _ in range(door_count_for(footprint)):
            building.doors.append(footprint.find_exterior_point(ctx.rng))

        ctx.grid.obstruct_rectangle(footprint)

        lines = self._wall_lines(ctx, building)
        for line in lines:
            building.walls.append(pick_wall_door(line, footprint, ctx.rng))

        self._scatter_obstacles(ctx, building, lines)
        return building

    def _wall_lines(self, ctx: GenerationContext, building: Building) -> list[Line]:
        footprint = building.footprint
        wall_count = wall_count_for(footprint, self.wall_margin)
        if wall_count == 0:
            return []
        try:
            return footprint.divide_with_lines(wall_count, self.wall_margin, ctx.rng)
        except PlacementFailed as exc:
            ctx.record_failure(
                f"Building {building.id}: kept {len(exc.partial)} of "
                f"{wall_count} interior walls: {exc}"
            )
            return exc.partial

    def _scatter_obstacles(
        self, ctx: GenerationContext, building: Building, walls: list[Line]
    ) -> None:
        for _ in range(obstacle_count_for(building.footprint)):
            obstacle = self._find_obstacle_cell(ctx, building.footprint, walls)
            if obstacle is None:
                ctx.record_failure(
                    f"Building {building.id}: no wall-free cell for an obstacle"
                )
                return
            building.obstacles.append(obstacle)

    def _find_obstacle_cell(
        self, ctx: GenerationContext, footprint: Rectangle, walls: list[Line]
    ) -> Point | None:
        for _ in range(config.MAX_PLACEMENT_ATTEMPTS):
            candidate = footprint.find_point_within(
                config.INDOOR_OBSTACLE_MARGIN, ctx.rng
            )
            if not any(wall.point_intersects(candidate) for wall in walls):
                return candidate
        return None
