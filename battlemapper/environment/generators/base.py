"""Base classes for battle map generation."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from battlemapper.util.coordinates import Line, Orientation, Point

if TYPE_CHECKING:
    from battlemapper.config import MapConfig
    from battlemapper.environment.generators.buildings import Building
    from battlemapper.types import CellMargin, RandomSeed, TileCoord


@dataclass(frozen=True)
class Vehicle:
    """A cosmetic parked vehicle on a road. It never occupies grid cells."""

    position: Point
    orientation: Orientation


@dataclass
class BattleMapLayout:
    """A container for all geometry produced by one generation run.

    This is everything a renderer needs to composite the final map. The
    occupancy grid used during generation is not part of it.

    Attributes:
        width: Map width in cells.
        height: Map height in cells.
        road_width: Visual road width in cells.
        road_margin: Clearance kept around each road centerline.
        roads: Road centerlines in placement order.
        vehicles: Parked vehicles, at most one per road.
        buildings: Buildings in placement order.
        outdoor_obstacles: Obstacle cells outside buildings.
        placement_failures: Human-readable notes for features that were
            skipped or kept partial because a search ran out of attempts.
        seed: Master seed the run was generated from.
    """

    width: TileCoord
    height: TileCoord
    road_width: int
    road_margin: CellMargin
    roads: list[Line] = field(default_factory=list)
    vehicles: list[Vehicle] = field(default_factory=list)
    buildings: list[Building] = field(default_factory=list)
    outdoor_obstacles: list[Point] = field(default_factory=list)
    placement_failures: list[str] = field(default_factory=list)
    seed: RandomSeed = None

    @property
    def complete(self) -> bool:
        """True if every requested feature was placed."""
        return not self.placement_failures


class BaseMapGenerator(abc.ABC):
    """Abstract base class for battle map generation algorithms."""

    def __init__(self, map_config: MapConfig) -> None:
        self.map_config = map_config

    @property
    def map_width(self) -> TileCoord:
        return self.map_config.width

    @property
    def map_height(self) -> TileCoord:
        return self.map_config.height

    @abc.abstractmethod
    def generate(self) -> BattleMapLayout:
        """Generate the map layout."""
        raise NotImplementedError
