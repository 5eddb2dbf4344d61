"""Building and InteriorWall dataclasses for the generated layout.

A Building records everything the renderer needs to draw one structure: its
footprint (the outer wall ring plus floor), exterior door cells, interior
walls with one door each, and the obstacles scattered inside.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from battlemapper.util.coordinates import Line, Orientation, Point, Rectangle


@dataclass(frozen=True)
class InteriorWall:
    """One interior wall segment of a building.

    Attributes:
        line: The wall as generated by the line network.
        drawn_length: Cells of ``line`` that are actually wall. One shorter
            than the line when the wall ends strictly inside the footprint,
            so it stops before the wall it runs into.
        door_offset: Offset along ``line`` of the cell that is a door, or None
            when the wall is too short to hold one.
    """

    line: Line
    drawn_length: int
    door_offset: int | None

    @property
    def door(self) -> Point | None:
        if self.door_offset is None:
            return None
        return self.line.cell_at(self.door_offset)

    def wall_cells(self) -> list[Point]:
        """Drawn cells of the wall, excluding the door."""
        return [
            self.line.cell_at(offset)
            for offset in range(self.drawn_length)
            if offset != self.door_offset
        ]


def drawn_wall_length(line: Line, footprint: Rectangle) -> int:
    """Length of ``line`` that should be drawn as wall inside ``footprint``."""
    if line.orientation is Orientation.HORIZONTAL:
        interior = line.x > footprint.x1 and line.x + line.length <= footprint.x2
    else:
        interior = line.y > footprint.y1 and line.y + line.length <= footprint.y2
    if interior and line.length > 0:
        return line.length - 1
    return line.length


@dataclass
class Building:
    """A building placed on the battle map.

    The generator only fills the record in. ``interior_bounds``,
    ``contains_point`` and ``is_door`` are lookups for the renderer that
    composites the layout.

    Attributes:
        id: Unique identifier for this building, in placement order.
        footprint: Outer bounds; its edge cells are the exterior wall.
        doors: Exterior door cells on the footprint's edge.
        walls: Interior walls subdividing the footprint into rooms.
        obstacles: Indoor obstacle cells (crates and the like).
    """

    id: int
    footprint: Rectangle
    doors: list[Point] = field(default_factory=list)
    walls: list[InteriorWall] = field(default_factory=list)
    obstacles: list[Point] = field(default_factory=list)

    @property
    def interior_bounds(self) -> Rectangle:
        """The floor area inside the exterior wall."""
        return self.footprint.shrink(1)

    def contains_point(self, x: int, y: int) -> bool:
        return self.footprint.contains(Point(x, y))

    def is_door(self, point: Point) -> bool:
        return point in self.doors
