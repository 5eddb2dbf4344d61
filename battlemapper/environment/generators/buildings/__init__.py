"""Building representation for generated battle maps."""

from .building import Building, InteriorWall, drawn_wall_length

__all__ = [
    "Building",
    "InteriorWall",
    "drawn_wall_length",
]
