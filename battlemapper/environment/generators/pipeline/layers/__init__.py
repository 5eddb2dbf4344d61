"""Generation layers for the pipeline map generator.

Each layer transforms the GenerationContext in a specific way:
- Road layers: Grow the road network and reserve road margins
- Building layers: Place buildings, doors, interior walls and indoor obstacles
- Obstacle layers: Scatter outdoor obstacles over the remaining free cells
"""

from .buildings import BuildingLayer
from .obstacles import OutdoorObstacleLayer
from .roads import RoadNetworkLayer

__all__ = [
    "BuildingLayer",
    "OutdoorObstacleLayer",
    "RoadNetworkLayer",
]
