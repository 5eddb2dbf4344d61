"""
Configuration constants.

Centralizes the magic numbers used by the battle map generator, plus the
MapConfig record that carries one run's external settings. Organized by
functional area for easy maintenance.
"""

from __future__ import annotations

from dataclasses import dataclass

from battlemapper.types import CellMargin, RandomSeed, TileCoord

# =============================================================================
# GENERAL
# =============================================================================

# RANDOM_SEED = None
RANDOM_SEED: RandomSeed = None

# Upper bound on retries for every randomized search (line derivation,
# clear-rectangle search, clear-tile search, indoor obstacle placement).
MAX_PLACEMENT_ATTEMPTS = 1000

# RNG domain used for a whole generation run.
MAP_RNG_DOMAIN = "map.battlemap"

# =============================================================================
# MAP DEFAULTS
# =============================================================================

DEFAULT_WIDTH = 48
DEFAULT_HEIGHT = 48
DEFAULT_ROAD_COUNT = 6
DEFAULT_ROAD_WIDTH = 2
DEFAULT_BUILDING_COUNT = 6
DEFAULT_BUILDING_SIZE = 16

# =============================================================================
# ROADS
# =============================================================================

# Roads longer than this get a parked vehicle.
VEHICLE_MIN_ROAD_LENGTH = 4
# Vehicles keep this many cells clear of either road end.
VEHICLE_MARGIN = 2

# =============================================================================
# BUILDINGS
# =============================================================================

# Smallest half-extent the clear-rectangle search starts from.
BUILDING_MIN_HALF_EXTENT = 3
# Clearance between interior walls and the footprint edge or crossing walls.
WALL_MARGIN = 3

# One exterior door per this many perimeter cells (plus one).
DOOR_PERIMETER_DIVISOR = 20
# One interior wall per this many footprint cells.
WALL_AREA_DIVISOR = 30
# One indoor obstacle per this many footprint cells.
OBSTACLE_AREA_DIVISOR = 50
# Indoor obstacles keep this many cells clear of the footprint edge.
INDOOR_OBSTACLE_MARGIN = 1

# =============================================================================
# OUTDOOR OBSTACLES
# =============================================================================

# One outdoor obstacle per this many free cells left after buildings.
OUTDOOR_OBSTACLE_DIVISOR = 50


class ConfigurationError(ValueError):
    """Raised when a configuration or size/margin relationship is infeasible."""


@dataclass(frozen=True)
class MapConfig:
    """External settings for one generation run.

    Attributes:
        width: Map width in cells.
        height: Map height in cells.
        road_count: Number of road segments in the network.
        road_width: Visual road width in cells.
        building_count: Number of buildings to attempt.
        building_size: Upper bound on a building footprint's extent.
    """

    width: TileCoord = DEFAULT_WIDTH
    height: TileCoord = DEFAULT_HEIGHT
    road_count: int = DEFAULT_ROAD_COUNT
    road_width: int = DEFAULT_ROAD_WIDTH
    building_count: int = DEFAULT_BUILDING_COUNT
    building_size: int = DEFAULT_BUILDING_SIZE

    @property
    def road_margin(self) -> CellMargin:
        """Clearance around a road centerline: half the width, plus one."""
        return self.road_width // 2 + 1

    def validate(self) -> None:
        """Fail fast on settings the geometry core cannot satisfy.

        Raises:
            ConfigurationError: If any setting is out of range or the map is
                too small for the margins derived from the settings.
        """
        for name in ("width", "height", "road_width", "building_size"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")
        for name in ("road_count", "building_count"):
            value = getattr(self, name)
            if value < 0:
                raise ConfigurationError(f"{name} must not be negative, got {value}")

        margin = self.road_margin
        if (
            self.road_count > 0
            and self.width <= margin * 2
            and self.height <= margin * 2
        ):
            raise ConfigurationError(
                f"configuration infeasible: a {self.width}x{self.height} map "
                f"cannot host roads with margin {margin}"
            )

        if self.building_count > 0:
            min_extent = (BUILDING_MIN_HALF_EXTENT + 1) * 2 + 1
            if self.width < min_extent or self.height < min_extent:
                raise ConfigurationError(
                    f"configuration infeasible: buildings need a map of at least "
                    f"{min_extent}x{min_extent}, got {self.width}x{self.height}"
                )
