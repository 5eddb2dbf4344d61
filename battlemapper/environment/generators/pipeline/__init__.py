"""Pipeline-based battle map generation.

This package provides a layered architecture for map generation. Each layer
transforms a shared GenerationContext, and the pipeline outputs a
BattleMapLayout for the renderer.

Example usage:
    from battlemapper.environment.generators.pipeline import create_pipeline

    generator = create_pipeline("battlemap", MapConfig(width=48, height=48))
    layout = generator.generate()

The pipeline can also be assembled manually for custom configurations:
    from battlemapper.environment.generators.pipeline import (
        PipelineGenerator,
        RoadNetworkLayer,
        BuildingLayer,
    )

    generator = PipelineGenerator(
        layers=[
            RoadNetworkLayer(place_vehicles=False),
            BuildingLayer(),
        ],
        map_config=MapConfig(road_count=3),
    )
"""

from .context import GenerationContext
from .factory import create_battlemap_pipeline, create_pipeline
from .layer import GenerationLayer
from .layers import BuildingLayer, OutdoorObstacleLayer, RoadNetworkLayer
from .pipeline import PipelineGenerator

__all__ = [
    "BuildingLayer",
    "GenerationContext",
    "GenerationLayer",
    "OutdoorObstacleLayer",
    "PipelineGenerator",
    "RoadNetworkLayer",
    "create_battlemap_pipeline",
    "create_pipeline",
]
