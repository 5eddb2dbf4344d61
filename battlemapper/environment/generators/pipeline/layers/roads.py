"""Road network layer for battle map generation.

This layer lays out the map's roads before anything else is placed:
- Grows a branching line network over the whole map
- Marks every road cell, plus a margin band on both sides, occupied
- Parks a cosmetic vehicle on each sufficiently long road
"""

from __future__ import annotations

import logging

from battlemapper import config
from battlemapper.environment.generators.base import Vehicle
from battlemapper.environment.generators.line_network import PlacementFailed
from battlemapper.environment.generators.pipeline.context import GenerationContext
from battlemapper.environment.generators.pipeline.layer import GenerationLayer
from battlemapper.types import CellMargin
from battlemapper.util.coordinates import Line, Orientation, Rectangle
from battlemapper.util.rng import coin_flip

logger = logging.getLogger(__name__)


def road_band(road: Line, margin: CellMargin) -> Rectangle | None:
    """Cells a road claims: its centerline widened by ``margin - 1`` each side.

    Returns None for zero-length roads, which claim nothing.
    """
    if road.length == 0:
        return None
    spread = margin - 1
    if road.orientation is Orientation.HORIZONTAL:
        return Rectangle(
            road.x, road.y - spread, road.x + road.length - 1, road.y + spread
        )
    return Rectangle(road.x - spread, road.y, road.x + spread, road.y + road.length - 1)


class RoadNetworkLayer(GenerationLayer):
    """Creates the road network and reserves its cells.

    Roads are the map-level line network: the first road crosses the whole
    map and every later one branches perpendicular off an earlier road.
    Each road keeps ``road_width // 2 + 1`` cells of clearance, and that
    band is marked occupied so buildings and obstacles stay off the road.
    """

    def __init__(self, place_vehicles: bool = True) -> None:
        """Initialize the road network layer.

        Args:
            place_vehicles: Whether to park vehicles on long roads.
        """
        self.place_vehicles = place_vehicles

    def apply(self, ctx: GenerationContext) -> None:
        """Create the roads and mark them occupied.

        Args:
            ctx: The generation context to modify.
        """
        margin = ctx.config.road_margin
        try:
            roads = ctx.grid.bounds.divide_with_lines(
                ctx.config.road_count, margin, ctx.rng
            )
        except PlacementFailed as exc:
            roads = exc.partial
            ctx.record_failure(
                f"Road network kept {len(roads)} of {ctx.config.road_count} roads: "
                f"{exc}"
            )

        for road in roads:
            band = road_band(road, margin)
            if band is not None:
                ctx.grid.obstruct_rectangle(band)
        ctx.layout.roads.extend(roads)

        if self.place_vehicles:
            self._park_vehicles(ctx, roads)

        logger.debug(
            f"Placed {len(roads)} roads; {ctx.grid.unobstructed_count} cells free"
        )

    def _park_vehicles(self, ctx: GenerationContext, roads: list[Line]) -> None:
        for road in roads:
            if road.length <= config.VEHICLE_MIN_ROAD_LENGTH:
                continue
            position = road.find_point_within(config.VEHICLE_MARGIN, ctx.rng)
            orientation = (
                Orientation.VERTICAL if coin_flip(ctx.rng) else Orientation.HORIZONTAL
            )
            ctx.layout.vehicles.append(Vehicle(position, orientation))
