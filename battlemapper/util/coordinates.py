"""Cell-space value types: points, axis-aligned lines and rectangles.

All coordinates are integer map cells. Every type here is immutable and
compares structurally; operations that "modify" a shape return a new one.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

from battlemapper.util.rng import coin_flip

if TYPE_CHECKING:
    from battlemapper.types import CellMargin, TileCoord
    from battlemapper.util.rng import RNG


class Point(NamedTuple):
    """A single map cell."""

    x: TileCoord
    y: TileCoord


class Orientation(Enum):
    """Axis a Line runs along.

    Horizontal lines vary in x at a fixed y; vertical lines vary in y at a
    fixed x.
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def opposite(self) -> Orientation:
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


@dataclass(frozen=True)
class Line:
    """A one-cell-wide axis-aligned segment.

    The segment starts at (x, y) and covers ``length`` cells in the positive
    direction of its axis: x..x+length-1 for horizontal lines, y..y+length-1
    for vertical ones. Zero-length lines are legal and cover no cells.
    """

    x: TileCoord
    y: TileCoord
    orientation: Orientation
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"Line length must be non-negative, got {self.length}")

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def end(self) -> Point:
        """Last covered cell.

        Raises:
            ValueError: If the line has zero length.
        """
        if self.length == 0:
            raise ValueError("A zero-length line has no end cell")
        return self.cell_at(self.length - 1)

    @property
    def start(self) -> TileCoord:
        """First covered coordinate along the line's own axis."""
        return self.x if self.orientation is Orientation.HORIZONTAL else self.y

    @property
    def fixed(self) -> TileCoord:
        """The coordinate held constant along the line."""
        return self.y if self.orientation is Orientation.HORIZONTAL else self.x

    def spans(self, coord: TileCoord) -> bool:
        """Whether ``coord`` on the line's own axis falls inside the segment."""
        return self.start <= coord < self.start + self.length

    def cells(self) -> Iterator[Point]:
        """Yield every cell the segment covers, from the origin outward."""
        for offset in range(self.length):
            yield self.cell_at(offset)

    def cell_at(self, offset: int) -> Point:
        if self.orientation is Orientation.HORIZONTAL:
            return Point(self.x + offset, self.y)
        return Point(self.x, self.y + offset)

    def point_intersects(self, point: Point) -> bool:
        """True if ``point`` lies exactly on one of the segment's cells."""
        if self.orientation is Orientation.HORIZONTAL:
            return point.y == self.y and self.spans(point.x)
        return point.x == self.x and self.spans(point.y)

    def crosses(self, other: Line) -> bool:
        """True if two mutually perpendicular segments cross or touch.

        Parallel segments never cross, even when they overlap.
        """
        if self.orientation is other.orientation:
            return False
        return self.spans(other.fixed) and other.spans(self.fixed)

    def intersection_point_with(self, other: Line) -> Point:
        """Cell where this line's fixed axis meets ``other``'s fixed axis.

        Callers should check crosses() first; the point is computed from the
        lines' axes regardless of their extents.
        """
        if self.orientation is Orientation.HORIZONTAL:
            return Point(other.x, self.y)
        return Point(self.x, other.y)

    def find_point_within(self, margin: CellMargin, rng: RNG) -> Point:
        """Pick a random cell at least ``margin`` cells from either end.

        Raises:
            ValueError: If the line is not longer than twice the margin.
        """
        if self.length <= margin * 2:
            raise ValueError(
                f"Line of length {self.length} cannot host a point "
                f"with margin {margin}"
            )
        return self.cell_at(rng.randrange(margin, self.length - margin))


@dataclass(frozen=True)
class Rectangle:
    """Rectangle in cell coordinates with inclusive corners (x1, y1)-(x2, y2)."""

    x1: TileCoord
    y1: TileCoord
    x2: TileCoord
    y2: TileCoord

    def __post_init__(self) -> None:
        if self.x1 > self.x2 or self.y1 > self.y2:
            raise ValueError(
                f"Rectangle corners are inverted: "
                f"({self.x1}, {self.y1})-({self.x2}, {self.y2})"
            )

    @classmethod
    def from_center(
        cls, center: Point, half_width: int, half_height: int
    ) -> Rectangle:
        """Create a Rectangle spanning ``half_*`` cells either side of center."""
        return cls(
            center.x - half_width,
            center.y - half_height,
            center.x + half_width,
            center.y + half_height,
        )

    @property
    def width(self) -> TileCoord:
        return self.x2 - self.x1 + 1

    @property
    def height(self) -> TileCoord:
        return self.y2 - self.y1 + 1

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def perimeter(self) -> int:
        """Number of cells on the rectangle's boundary."""
        return self.width * 2 + self.height * 2 - 4

    def contains(self, point: Point) -> bool:
        return self.x1 <= point.x <= self.x2 and self.y1 <= point.y <= self.y2

    def divisible(self, min_size: int) -> bool:
        """Whether either axis can be split into two halves of ``min_size``."""
        return self.width >= min_size * 2 or self.height >= min_size * 2

    def supports_margin(self, margin: CellMargin) -> bool:
        """Whether at least one axis leaves room for a line with ``margin``."""
        return self.width > margin * 2 or self.height > margin * 2

    def divide_with_lines(
        self, line_count: int, line_margin: CellMargin, rng: RNG
    ) -> list[Line]:
        """Cover this rectangle with a branching network of perpendicular lines.

        See battlemapper.environment.generators.line_network.divide_with_lines.
        """
        from battlemapper.environment.generators.line_network import (
            divide_with_lines,
        )

        return divide_with_lines(self, line_count, line_margin, rng)

    def randomly_divide(self, min_size: int, rng: RNG) -> tuple[Rectangle, Rectangle]:
        """Split into two adjacent rectangles, each at least ``min_size`` wide.

        The split axis is random when both axes have room, otherwise forced
        to the axis that does.

        Raises:
            ValueError: If neither axis can be split.
        """
        can_split_x = self.width >= min_size * 2
        can_split_y = self.height >= min_size * 2
        if not (can_split_x or can_split_y):
            raise ValueError(f"{self} cannot be divided with min_size {min_size}")

        split_vertically = can_split_x and (not can_split_y or coin_flip(rng))
        if split_vertically:
            left_size = rng.randint(min_size, self.width - min_size)
            return (
                Rectangle(self.x1, self.y1, self.x1 + left_size - 1, self.y2),
                Rectangle(self.x1 + left_size, self.y1, self.x2, self.y2),
            )
        top_size = rng.randint(min_size, self.height - min_size)
        return (
            Rectangle(self.x1, self.y1, self.x2, self.y1 + top_size - 1),
            Rectangle(self.x1, self.y1 + top_size, self.x2, self.y2),
        )

    def intersection_with(self, other: Rectangle) -> Rectangle | None:
        """Overlapping area of the two rectangles, or None if they are disjoint."""
        x1 = max(self.x1, other.x1)
        y1 = max(self.y1, other.y1)
        x2 = min(self.x2, other.x2)
        y2 = min(self.y2, other.y2)
        if x1 > x2 or y1 > y2:
            return None
        return Rectangle(x1, y1, x2, y2)

    def connecting_border_with(self, other: Rectangle) -> Line:
        """The edge of this rectangle that faces a neighboring rectangle.

        The returned line lies on this rectangle's boundary and covers the
        cells where the two rectangles' extents overlap along that edge.

        Raises:
            ValueError: If the rectangles overlap.
        """
        if self.intersection_with(other) is not None:
            raise ValueError(f"{self} overlaps {other}; they share no border")

        if self.y2 < other.y1 or self.y1 > other.y2:
            x = max(self.x1, other.x1)
            y = self.y2 if self.y2 < other.y1 else self.y1
            length = max(0, min(self.x2, other.x2) - x + 1)
            return Line(x, y, Orientation.HORIZONTAL, length)

        y = max(self.y1, other.y1)
        x = self.x2 if self.x2 < other.x1 else self.x1
        length = max(0, min(self.y2, other.y2) - y + 1)
        return Line(x, y, Orientation.VERTICAL, length)

    def find_point_within(self, margin: CellMargin, rng: RNG) -> Point:
        """Pick a random cell at least ``margin`` cells inside every edge.

        Raises:
            ValueError: If either dimension is narrower than 2 * margin + 1.
        """
        if self.width < margin * 2 + 1 or self.height < margin * 2 + 1:
            raise ValueError(f"{self} has no interior cell with margin {margin}")
        return Point(
            rng.randrange(self.x1 + margin, self.x2 - margin + 1),
            rng.randrange(self.y1 + margin, self.y2 - margin + 1),
        )

    def find_exterior_point(self, rng: RNG) -> Point:
        """Pick a random non-corner cell on one of the four edges.

        Two coin flips choose the edge: first whether it is a top/bottom or
        left/right edge, then which of the pair.

        Raises:
            ValueError: If either dimension is below 3 (no non-corner cells).
        """
        if self.width < 3 or self.height < 3:
            raise ValueError(f"{self} has no non-corner edge cells")
        horizontal_wall = coin_flip(rng)
        lowest = coin_flip(rng)
        if horizontal_wall:
            x = rng.randrange(self.x1 + 1, self.x2)
            return Point(x, self.y1 if lowest else self.y2)
        y = rng.randrange(self.y1 + 1, self.y2)
        return Point(self.x1 if lowest else self.x2, y)

    def shrink(self, amount: int) -> Rectangle:
        """Return a copy with every edge moved ``amount`` cells inward.

        Raises:
            ValueError: If the result would be inverted.
        """
        return Rectangle(
            self.x1 + amount, self.y1 + amount, self.x2 - amount, self.y2 - amount
        )

    def inflate(self, amount: int) -> Rectangle:
        """Return a copy with every edge moved ``amount`` cells outward."""
        return self.shrink(-amount)
