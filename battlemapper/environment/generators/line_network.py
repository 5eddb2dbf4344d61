"""Randomized orthogonal line networks.

A line network is a tree of perpendicular segments grown inside a bounding
rectangle. The first segment crosses the whole rectangle; every later one
branches off a random existing segment at a random point, runs perpendicular
to it, and stops at the rectangle edge or at the nearest perpendicular
segment in its way. The same generator lays out map-level roads and
building-level interior walls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from battlemapper import config
from battlemapper.config import ConfigurationError
from battlemapper.util.coordinates import Line, Orientation, Point
from battlemapper.util.rng import coin_flip

if TYPE_CHECKING:
    from battlemapper.types import CellMargin
    from battlemapper.util.coordinates import Rectangle
    from battlemapper.util.rng import RNG

logger = logging.getLogger(__name__)


class PlacementFailed(Exception):
    """Raised when a line could not be placed within the retry budget.

    Attributes:
        partial: The lines placed before the failure, in placement order.
    """

    def __init__(self, message: str, partial: list[Line]) -> None:
        super().__init__(message)
        self.partial = partial


@dataclass(frozen=True)
class Derivation:
    """How a branch line was derived from an existing one.

    Attributes:
        origin_index: Index of the line the branch grew from.
        point: Cell on the origin line where the branch starts.
    """

    origin_index: int
    point: Point


@dataclass(frozen=True)
class TracedLine:
    """A placed line plus its derivation (None for the first line)."""

    line: Line
    derivation: Derivation | None


def divide_with_lines(
    rect: Rectangle,
    line_count: int,
    line_margin: CellMargin,
    rng: RNG,
    max_attempts: int = config.MAX_PLACEMENT_ATTEMPTS,
) -> list[Line]:
    """Grow a network of ``line_count`` perpendicular lines inside ``rect``.

    Args:
        rect: Bounding rectangle; every line stays inside it.
        line_count: Number of lines to place.
        line_margin: Minimum clearance between a branch point and the ends of
            its origin line, and between a branch and the bound it runs to.
        rng: Random source.
        max_attempts: Retries allowed per branch line.

    Returns:
        Exactly ``line_count`` lines in placement order.

    Raises:
        ConfigurationError: If ``rect`` is too small for ``line_margin``.
        PlacementFailed: If a branch could not be placed in time.
    """
    traced = trace_line_network(rect, line_count, line_margin, rng, max_attempts)
    return [entry.line for entry in traced]


def trace_line_network(
    rect: Rectangle,
    line_count: int,
    line_margin: CellMargin,
    rng: RNG,
    max_attempts: int = config.MAX_PLACEMENT_ATTEMPTS,
) -> list[TracedLine]:
    """Like divide_with_lines, but keep each branch's derivation."""
    if line_count <= 0:
        return []
    if not rect.supports_margin(line_margin):
        raise ConfigurationError(
            f"configuration infeasible: {rect} cannot host lines "
            f"with margin {line_margin}"
        )

    traced = [TracedLine(_first_line(rect, line_margin, rng), None)]
    while len(traced) < line_count:
        lines = [entry.line for entry in traced]
        traced.append(_branch_line(rect, lines, line_margin, rng, max_attempts))

    logger.debug(f"Placed {line_count} lines in {rect} with margin {line_margin}")
    return traced


def _first_line(rect: Rectangle, margin: CellMargin, rng: RNG) -> Line:
    vertical = coin_flip(rng)
    # A line's fixed coordinate needs the margin on the other axis.
    if rect.width <= margin * 2:
        vertical = False
    if rect.height <= margin * 2:
        vertical = True

    if vertical:
        low, high = rect.x1 + margin, rect.x2 - margin
        x = rect.x1 if low >= high else rng.randrange(low, high)
        return Line(x, rect.y1, Orientation.VERTICAL, rect.height)

    low, high = rect.y1 + margin, rect.y2 - margin
    y = rect.y1 if low >= high else rng.randrange(low, high)
    return Line(rect.x1, y, Orientation.HORIZONTAL, rect.width)


def _branch_line(
    rect: Rectangle,
    lines: list[Line],
    margin: CellMargin,
    rng: RNG,
    max_attempts: int,
) -> TracedLine:
    if all(line.length <= margin * 2 for line in lines):
        raise PlacementFailed(
            f"no line is longer than {margin * 2} cells to branch from",
            partial=lines,
        )

    for _ in range(max_attempts):
        origin_index = rng.randrange(0, len(lines))
        origin = lines[origin_index]
        if origin.length <= margin * 2:
            continue

        orientation = origin.orientation.opposite()
        point = origin.find_point_within(margin, rng)
        bounds = _growth_bounds(rect, lines, origin_index, orientation, point)
        if bounds is None:
            continue

        line = _extend(orientation, point, bounds, margin, rng)
        return TracedLine(line, Derivation(origin_index, point))

    raise PlacementFailed(
        f"could not place line {len(lines)} in {rect} after {max_attempts} attempts",
        partial=lines,
    )


def _growth_bounds(
    rect: Rectangle,
    lines: list[Line],
    origin_index: int,
    orientation: Orientation,
    point: Point,
) -> tuple[int, int] | None:
    """Nearest obstacles on either side of ``point`` along the new axis.

    Returns None when another line passes through ``point``, which makes the
    placement degenerate.
    """
    if orientation is Orientation.HORIZONTAL:
        along, across = point.x, point.y
        low, high = rect.x1, rect.x2
    else:
        along, across = point.y, point.x
        low, high = rect.y1, rect.y2

    for index, other in enumerate(lines):
        if index == origin_index:
            continue
        if other.point_intersects(point):
            return None
        # Only lines perpendicular to the new one can stop it.
        if other.orientation is orientation or not other.spans(across):
            continue
        if low < other.fixed < along:
            low = other.fixed
        elif along < other.fixed < high:
            high = other.fixed
    return low, high


def _extend(
    orientation: Orientation,
    point: Point,
    bounds: tuple[int, int],
    margin: CellMargin,
    rng: RNG,
) -> Line:
    low, high = bounds
    along = point.x if orientation is Orientation.HORIZONTAL else point.y

    if along - low < margin:
        toward_low = False
    elif high - along < margin:
        toward_low = True
    else:
        toward_low = coin_flip(rng)

    if toward_low:
        start, length = low, along - low
    else:
        start, length = along, high - along + 1

    if orientation is Orientation.HORIZONTAL:
        return Line(start, point.y, orientation, length)
    return Line(point.x, start, orientation, length)
