"""Tests for the cell-space value types in battlemapper.util.coordinates."""

from __future__ import annotations

from random import Random

import pytest

from battlemapper.util.coordinates import Line, Orientation, Point, Rectangle

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


class TestPoint:
    """Tests for Point."""

    def test_structural_equality(self) -> None:
        assert Point(3, 4) == Point(3, 4)
        assert Point(3, 4) != Point(4, 3)

    def test_unpacks_as_tile_position(self) -> None:
        x, y = Point(5, 6)
        assert (x, y) == (5, 6)


class TestOrientation:
    def test_opposite(self) -> None:
        assert H.opposite() is V
        assert V.opposite() is H


class TestLine:
    """Tests for Line containment and point picking."""

    def test_negative_length_rejected(self) -> None:
        with pytest.raises(ValueError):
            Line(0, 0, H, -1)

    def test_zero_length_line_covers_nothing(self) -> None:
        line = Line(2, 2, H, 0)
        assert list(line.cells()) == []
        assert not line.point_intersects(Point(2, 2))

    def test_point_intersects_horizontal(self) -> None:
        """Cells [x, x+length) at the fixed y are on the line."""
        line = Line(2, 5, H, 4)
        assert line.point_intersects(Point(2, 5))
        assert line.point_intersects(Point(5, 5))
        assert not line.point_intersects(Point(6, 5))
        assert not line.point_intersects(Point(1, 5))
        assert not line.point_intersects(Point(3, 4))

    def test_point_intersects_vertical(self) -> None:
        line = Line(7, 1, V, 3)
        assert line.point_intersects(Point(7, 1))
        assert line.point_intersects(Point(7, 3))
        assert not line.point_intersects(Point(7, 4))
        assert not line.point_intersects(Point(6, 2))

    def test_cells_follow_axis(self) -> None:
        assert list(Line(1, 1, V, 3).cells()) == [Point(1, 1), Point(1, 2), Point(1, 3)]
        assert list(Line(1, 1, H, 2).cells()) == [Point(1, 1), Point(2, 1)]

    def test_end_is_last_cell(self) -> None:
        assert Line(2, 5, H, 4).end == Point(5, 5)
        assert Line(7, 1, V, 1).end == Point(7, 1)
        with pytest.raises(ValueError):
            _ = Line(0, 0, V, 0).end

    def test_find_point_within_respects_margin(self) -> None:
        """Picked points stay at least margin cells from both ends."""
        rng = Random(3)
        line = Line(10, 4, H, 12)
        for _ in range(200):
            point = line.find_point_within(3, rng)
            assert point.y == 4
            assert 13 <= point.x < 19

    def test_find_point_within_requires_length(self) -> None:
        with pytest.raises(ValueError):
            Line(0, 0, V, 6).find_point_within(3, Random(0))

    def test_crosses_perpendicular(self) -> None:
        horizontal = Line(0, 5, H, 10)
        vertical = Line(4, 0, V, 10)
        assert horizontal.crosses(vertical)
        assert vertical.crosses(horizontal)

    def test_crosses_when_touching_end(self) -> None:
        """A branch ending on another line counts as touching."""
        horizontal = Line(0, 5, H, 10)
        assert horizontal.crosses(Line(3, 0, V, 6))
        assert not horizontal.crosses(Line(3, 0, V, 5))

    def test_parallel_lines_never_cross(self) -> None:
        assert not Line(0, 5, H, 10).crosses(Line(2, 5, H, 10))

    def test_intersection_point_with(self) -> None:
        assert Line(0, 5, H, 10).intersection_point_with(Line(4, 0, V, 10)) == Point(
            4, 5
        )
        assert Line(4, 0, V, 10).intersection_point_with(Line(0, 5, H, 10)) == Point(
            4, 5
        )


class TestRectangle:
    """Tests for Rectangle measurements and subdivision."""

    def test_inverted_corners_rejected(self) -> None:
        with pytest.raises(ValueError):
            Rectangle(5, 0, 4, 3)

    def test_measurements(self) -> None:
        rect = Rectangle(0, 0, 9, 4)
        assert rect.width == 10
        assert rect.height == 5
        assert rect.area == 50
        assert rect.perimeter == 26

    def test_single_cell(self) -> None:
        rect = Rectangle(3, 3, 3, 3)
        assert rect.area == 1
        assert rect.contains(Point(3, 3))

    def test_from_center(self) -> None:
        assert Rectangle.from_center(Point(5, 5), 2, 1) == Rectangle(3, 4, 7, 6)

    def test_repr_names_corners(self) -> None:
        assert repr(Rectangle(1, 2, 3, 4)) == "Rectangle(x1=1, y1=2, x2=3, y2=4)"

    def test_shrink_and_inflate(self) -> None:
        rect = Rectangle(2, 2, 10, 8)
        assert rect.shrink(1) == Rectangle(3, 3, 9, 7)
        assert rect.inflate(1) == Rectangle(1, 1, 11, 9)
        assert rect.shrink(1).inflate(1) == rect

    def test_shrink_past_center_rejected(self) -> None:
        with pytest.raises(ValueError):
            Rectangle(0, 0, 3, 3).shrink(2)

    def test_shrink_returns_new_value(self) -> None:
        rect = Rectangle(0, 0, 5, 5)
        rect.shrink(1)
        assert rect == Rectangle(0, 0, 5, 5)

    def test_divisible(self) -> None:
        assert Rectangle(0, 0, 7, 2).divisible(4)
        assert not Rectangle(0, 0, 6, 6).divisible(4)

    def test_supports_margin(self) -> None:
        assert Rectangle(0, 0, 6, 0).supports_margin(3)
        assert not Rectangle(0, 0, 5, 5).supports_margin(3)

    def test_divide_with_zero_lines_is_empty(self) -> None:
        assert Rectangle(0, 0, 9, 9).divide_with_lines(0, 1, Random(0)) == []

    def test_divide_with_one_line_spans_rectangle(self) -> None:
        """A single line crosses the full 10x10 rectangle."""
        for seed in range(20):
            (line,) = Rectangle(0, 0, 9, 9).divide_with_lines(1, 1, Random(seed))
            assert line.length == 10
            assert 0 <= line.x <= 9
            assert 0 <= line.y <= 9

    def test_randomly_divide_produces_adjacent_halves(self) -> None:
        """The halves tile the original and respect min_size."""
        rect = Rectangle(0, 0, 19, 11)
        for seed in range(30):
            first, second = rect.randomly_divide(4, Random(seed))
            assert first.area + second.area == rect.area
            assert min(first.width, first.height) >= 4
            assert min(second.width, second.height) >= 4
            if first.y1 == second.y1:
                assert first.x2 + 1 == second.x1
                assert first.height == second.height == rect.height
            else:
                assert first.y2 + 1 == second.y1
                assert first.width == second.width == rect.width

    def test_randomly_divide_forces_axis_with_room(self) -> None:
        """A wide, short rectangle is always split left/right."""
        rect = Rectangle(0, 0, 19, 4)
        for seed in range(20):
            first, second = rect.randomly_divide(4, Random(seed))
            assert first.x1 == 0 and second.x2 == 19
            assert first.x2 + 1 == second.x1

    def test_randomly_divide_exact_fit(self) -> None:
        first, second = Rectangle(0, 0, 7, 2).randomly_divide(4, Random(0))
        assert first == Rectangle(0, 0, 3, 2)
        assert second == Rectangle(4, 0, 7, 2)

    def test_randomly_divide_requires_room(self) -> None:
        with pytest.raises(ValueError):
            Rectangle(0, 0, 5, 5).randomly_divide(4, Random(0))

    def test_intersection_with(self) -> None:
        a = Rectangle(0, 0, 5, 5)
        assert a.intersection_with(Rectangle(3, 4, 9, 9)) == Rectangle(3, 4, 5, 5)
        assert a.intersection_with(Rectangle(6, 0, 9, 5)) is None

    def test_connecting_border_below(self) -> None:
        """Border sits on this rectangle's bottom edge over the shared span."""
        top = Rectangle(0, 0, 9, 4)
        bottom = Rectangle(3, 5, 12, 9)
        assert top.connecting_border_with(bottom) == Line(3, 4, H, 7)
        assert bottom.connecting_border_with(top) == Line(3, 5, H, 7)

    def test_connecting_border_side(self) -> None:
        left = Rectangle(0, 2, 4, 8)
        right = Rectangle(6, 0, 9, 5)
        assert left.connecting_border_with(right) == Line(4, 2, V, 4)
        assert right.connecting_border_with(left) == Line(6, 2, V, 4)

    def test_connecting_border_rejects_overlap(self) -> None:
        with pytest.raises(ValueError):
            Rectangle(0, 0, 5, 5).connecting_border_with(Rectangle(5, 5, 8, 8))

    def test_find_point_within_respects_margin(self) -> None:
        rect = Rectangle(2, 3, 12, 9)
        rng = Random(11)
        for _ in range(200):
            point = rect.find_point_within(2, rng)
            assert 4 <= point.x <= 10
            assert 5 <= point.y <= 7

    def test_find_point_within_requires_room(self) -> None:
        with pytest.raises(ValueError):
            Rectangle(0, 0, 3, 9).find_point_within(2, Random(0))

    def test_find_exterior_point_on_edge_not_corner(self) -> None:
        """Points land on one of the four edges, never on a corner."""
        rect = Rectangle(2, 2, 8, 6)
        rng = Random(5)
        edges = set()
        for _ in range(400):
            point = rect.find_exterior_point(rng)
            on_x_edge = point.x in (rect.x1, rect.x2)
            on_y_edge = point.y in (rect.y1, rect.y2)
            assert on_x_edge != on_y_edge
            assert rect.contains(point)
            if point.x == rect.x1:
                edges.add("west")
            elif point.x == rect.x2:
                edges.add("east")
            elif point.y == rect.y1:
                edges.add("north")
            else:
                edges.add("south")
        assert edges == {"west", "east", "north", "south"}
