"""Procedural battle map layouts: roads, buildings, rooms and obstacles."""

from battlemapper.config import ConfigurationError, MapConfig
from battlemapper.environment.generators import (
    BattleMapLayout,
    create_battlemap_pipeline,
)
from battlemapper.types import RandomSeed


def generate_battlemap(
    map_config: MapConfig | None = None, seed: RandomSeed = None
) -> BattleMapLayout:
    """Generate one battle map layout with the standard pipeline."""
    return create_battlemap_pipeline(map_config, seed).generate()


__all__ = [
    "BattleMapLayout",
    "ConfigurationError",
    "MapConfig",
    "generate_battlemap",
]
