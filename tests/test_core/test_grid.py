"""Tests for grid geometry."""

import pytest

from tinytown.core.grid import Grid, GridPoint
from tinytown.core.vec2 import Vec2


class TestGrid:
    """Tests for grid-to-canvas mapping."""

    def test_origin_maps_one_cell_in(self):
        grid = Grid(600, 600)
        assert grid.to_canvas(GridPoint(0, 0)) == Vec2(100, 100)

    def test_mapping_uses_each_axis(self):
        grid = Grid(600, 300)
        assert grid.to_canvas(GridPoint(2, 1)) == Vec2(300, 100)

    def test_five_interior_lines_each_way(self):
        grid = Grid(600, 600)
        assert grid.vertical_lines() == pytest.approx([100, 200, 300, 400, 500])
        assert grid.horizontal_lines() == pytest.approx([100, 200, 300, 400, 500])

    def test_cell_size(self):
        grid = Grid(1200, 600, divisions=4)
        assert grid.cell_width == 300
        assert grid.cell_height == 150

    def test_contains_interior_points_only(self):
        grid = Grid(600, 600)
        assert grid.contains(GridPoint(0, 0))
        assert grid.contains(GridPoint(4, 4))
        assert not grid.contains(GridPoint(5, 0))
        assert not grid.contains(GridPoint(-1, 2))
