"""Factory functions for creating pre-configured pipelines.

These functions provide convenient ways to create common pipeline
configurations without needing to manually assemble layers.

Currently implemented:
- "battlemap": Roads, then buildings with interior walls, then outdoor obstacles
"""

from __future__ import annotations

from battlemapper import config
from battlemapper.config import MapConfig
from battlemapper.types import RandomSeed

from .layers import BuildingLayer, OutdoorObstacleLayer, RoadNetworkLayer
from .pipeline import PipelineGenerator


def create_pipeline(
    name: str,
    map_config: MapConfig | None = None,
    seed: RandomSeed = None,
) -> PipelineGenerator:
    """Create a pre-configured pipeline by name.

    Available pipelines:
    - "battlemap": Urban battle map with roads, buildings and obstacles

    Args:
        name: Name of the pipeline configuration to use.
        map_config: Settings for the map. Defaults to MapConfig().
        seed: Optional random seed for deterministic generation.

    Returns:
        A configured PipelineGenerator ready to generate maps.

    Raises:
        ValueError: If the pipeline name is not recognized.
    """
    if name == "battlemap":
        return create_battlemap_pipeline(map_config, seed)
    raise ValueError(f"Unknown pipeline name: {name!r}")


def create_battlemap_pipeline(
    map_config: MapConfig | None = None,
    seed: RandomSeed = None,
) -> PipelineGenerator:
    """Create a battle map pipeline with default configuration.

    The battle map pipeline generates:
    1. Road network with margins and parked vehicles (RoadNetworkLayer)
    2. Buildings with doors, interior walls and crates (BuildingLayer)
    3. Outdoor obstacles on the remaining free cells (OutdoorObstacleLayer)

    Args:
        map_config: Settings for the map. Defaults to MapConfig().
        seed: Optional random seed for deterministic generation.
            If None, uses config.RANDOM_SEED.

    Returns:
        A configured PipelineGenerator.
    """
    if map_config is None:
        map_config = MapConfig()
    if seed is None:
        seed = config.RANDOM_SEED

    layers = [
        # 1. Roads first: everything else avoids them
        RoadNetworkLayer(),
        # 2. Buildings on the space the roads left clear
        BuildingLayer(),
        # 3. Outdoor clutter on whatever is still free
        OutdoorObstacleLayer(),
    ]

    return PipelineGenerator(layers=layers, map_config=map_config, seed=seed)
