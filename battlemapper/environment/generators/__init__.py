"""Map generation algorithms for battlemapper.

This package provides:
- divide_with_lines: Randomized orthogonal line networks (roads, walls)
- PipelineGenerator: Layered pipeline that composes a full battle map

The standard battle map is built by composing layers:
- RoadNetworkLayer + BuildingLayer + OutdoorObstacleLayer
"""

from .base import BaseMapGenerator, BattleMapLayout, Vehicle
from .buildings import Building, InteriorWall
from .line_network import PlacementFailed, divide_with_lines, trace_line_network
from .pipeline import (
    BuildingLayer,
    GenerationContext,
    GenerationLayer,
    OutdoorObstacleLayer,
    PipelineGenerator,
    RoadNetworkLayer,
    create_battlemap_pipeline,
    create_pipeline,
)

__all__ = [
    "BaseMapGenerator",
    "BattleMapLayout",
    "Building",
    "BuildingLayer",
    "GenerationContext",
    "GenerationLayer",
    "InteriorWall",
    "OutdoorObstacleLayer",
    "PipelineGenerator",
    "PlacementFailed",
    "RoadNetworkLayer",
    "Vehicle",
    "create_battlemap_pipeline",
    "create_pipeline",
    "divide_with_lines",
    "trace_line_network",
]
