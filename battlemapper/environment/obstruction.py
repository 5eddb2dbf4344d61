"""Occupancy bookkeeping for the battle map.

The ObstructionGrid records which cells are already taken by roads (plus
their margins), building footprints and obstacles, and answers the free-space
queries the generators use to place new features.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from battlemapper import config
from battlemapper.config import ConfigurationError
from battlemapper.util.coordinates import Point, Rectangle

if TYPE_CHECKING:
    from battlemapper.types import TileCoord
    from battlemapper.util.rng import RNG

logger = logging.getLogger(__name__)


class ObstructionGrid:
    """Per-cell occupancy over a width x height map.

    ``cells[x, y]`` is True when the cell is occupied. The number of free
    cells is maintained on every write so it never has to be recounted.
    """

    def __init__(self, width: TileCoord, height: TileCoord) -> None:
        if width <= 0 or height <= 0:
            raise ConfigurationError(
                f"grid dimensions must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self.cells = np.zeros((width, height), dtype=np.bool_, order="F")
        self._unobstructed_count = width * height

    @property
    def bounds(self) -> Rectangle:
        return Rectangle(0, 0, self.width - 1, self.height - 1)

    @property
    def unobstructed_count(self) -> int:
        return self._unobstructed_count

    def get_unobstructed_count(self) -> int:
        """Number of cells currently free."""
        return self._unobstructed_count

    def in_bounds(self, x: TileCoord, y: TileCoord) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: TileCoord, y: TileCoord) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"cell ({x}, {y}) is outside the {self.width}x{self.height} grid"
            )

    def obstruct(self, x: TileCoord, y: TileCoord, occupied: bool = True) -> None:
        """Set one cell's occupancy, adjusting the free count by the change."""
        self._check_bounds(x, y)
        if self.cells[x, y] == occupied:
            return
        self.cells[x, y] = occupied
        self._unobstructed_count += -1 if occupied else 1

    def obstruct_rectangle(self, rect: Rectangle, occupied: bool = True) -> None:
        """Set every cell of ``rect`` (clipped to the grid) to ``occupied``."""
        clipped = rect.intersection_with(self.bounds)
        if clipped is None:
            return
        region = self.cells[clipped.x1 : clipped.x2 + 1, clipped.y1 : clipped.y2 + 1]
        changed = int(np.count_nonzero(region != occupied))
        region[...] = occupied
        self._unobstructed_count += -changed if occupied else changed

    def is_obstructed(self, x: TileCoord, y: TileCoord) -> bool:
        self._check_bounds(x, y)
        return bool(self.cells[x, y])

    def obstructed_rectangle(self, rect: Rectangle) -> bool:
        """True if any cell inside the inclusive rectangle is occupied.

        Raises:
            IndexError: If the rectangle extends past the grid.
        """
        self._check_bounds(rect.x1, rect.y1)
        self._check_bounds(rect.x2, rect.y2)
        return bool(np.any(self.cells[rect.x1 : rect.x2 + 1, rect.y1 : rect.y2 + 1]))

    def find_clear_tile(
        self, rng: RNG, max_attempts: int = config.MAX_PLACEMENT_ATTEMPTS
    ) -> Point | None:
        """Sample cells uniformly until a free one turns up.

        Returns:
            A free cell, or None if the grid is full or no free cell was hit
            within ``max_attempts`` samples.
        """
        if self._unobstructed_count == 0:
            return None
        for _ in range(max_attempts):
            x = rng.randrange(0, self.width)
            y = rng.randrange(0, self.height)
            if not self.cells[x, y]:
                return Point(x, y)
        logger.debug(f"No clear tile found after {max_attempts} attempts")
        return None

    def find_clear_rectangle(
        self,
        min_size: int,
        max_size: int,
        rng: RNG,
        max_attempts: int = config.MAX_PLACEMENT_ATTEMPTS,
    ) -> Rectangle | None:
        """Find a free rectangle grown outward from a random center.

        A center is sampled at least ``min_size + 1`` cells from the grid edge
        and accepted if the square of half-extent ``min_size`` around it,
        padded by one cell, is free. The half-extents then grow one cell at a
        time per axis until the next step would exceed ``max_size // 2``,
        come within three cells of the grid edge, or make the padded probe
        occupied. The padding keeps a one-cell gap between placed rectangles.

        Returns:
            The unpadded rectangle at the final half-extents, or None if no
            center was accepted within ``max_attempts`` samples.

        Raises:
            ConfigurationError: If the grid cannot fit a padded ``min_size``
                probe at all.
        """
        min_extent = (min_size + 1) * 2 + 1
        if self.width < min_extent or self.height < min_extent:
            raise ConfigurationError(
                f"a {self.width}x{self.height} grid cannot fit a rectangle with "
                f"half-extent {min_size} plus padding"
            )

        for _ in range(max_attempts):
            center = self.bounds.find_point_within(min_size + 1, rng)
            if self._probe_obstructed(center, min_size, min_size):
                continue
            size_x, size_y = self._grow(center, min_size, max_size)
            return Rectangle.from_center(center, size_x, size_y)

        logger.debug(
            f"No clear {min_size}..{max_size} rectangle found "
            f"after {max_attempts} attempts"
        )
        return None

    def _probe_obstructed(self, center: Point, size_x: int, size_y: int) -> bool:
        probe = Rectangle.from_center(center, size_x, size_y).inflate(1)
        return self.obstructed_rectangle(probe)

    def _grow(self, center: Point, min_size: int, max_size: int) -> tuple[int, int]:
        size_x = size_y = min_size
        growing_x = growing_y = True
        while growing_x or growing_y:
            if growing_x:
                if (
                    center.x > size_x + 2
                    and center.x + size_x < self.width - 3
                    and size_x < max_size // 2
                    and not self._probe_obstructed(center, size_x + 1, size_y)
                ):
                    size_x += 1
                else:
                    growing_x = False
            if growing_y:
                if (
                    center.y > size_y + 2
                    and center.y + size_y < self.height - 3
                    and size_y < max_size // 2
                    and not self._probe_obstructed(center, size_x, size_y + 1)
                ):
                    size_y += 1
                else:
                    growing_y = False
        return size_x, size_y
