"""
Tests for the grid model and the slide transition function.
"""

import dataclasses

import pytest

from slidepath.core.maps import parse_grid
from slidepath.core.slide import DIRECTIONS, DOWN, LEFT, RIGHT, UP, axes, get_heuristic, manhattan, slide, slide_moves
from slidepath.core.types import Grid, MapError

from conftest import random_grid


class TestGrid:
    """Bounds, passability and the Manhattan heuristic."""

    def test_is_passable(self, small_grid: Grid) -> None:
        assert small_grid.is_passable((0, 0))
        assert small_grid.is_passable((1, 1))
        assert not small_grid.is_passable((0, 2))   # wall
        assert not small_grid.is_passable((2, 0))   # wall
        assert not small_grid.is_passable((-1, 0))
        assert not small_grid.is_passable((0, 3))
        assert not small_grid.is_passable((3, 0))

    def test_heuristic_is_manhattan_to_finish(self, small_grid: Grid) -> None:
        assert small_grid.heuristic((0, 0)) == 4
        assert small_grid.heuristic((1, 2)) == 1
        assert small_grid.heuristic((2, 2)) == 0

    def test_markers(self, small_grid: Grid) -> None:
        assert small_grid.start == (0, 0)
        assert small_grid.finish == (2, 2)
        assert small_grid.is_marker((0, 0))
        assert small_grid.is_marker((2, 2))
        assert not small_grid.is_marker((1, 1))

    def test_cells_compare_by_value(self, small_grid: Grid) -> None:
        seen = {(1, 2): "x"}
        r, c = 1, 2
        assert (r, c) in seen
        assert small_grid.is_marker(tuple([2, 2]))

    def test_start_on_wall_rejected(self) -> None:
        with pytest.raises(MapError):
            Grid(3, 1, ("0..",), (0, 0), (0, 2))

    def test_start_out_of_bounds_rejected(self) -> None:
        with pytest.raises(MapError):
            Grid(3, 1, ("...",), (0, 5), (0, 2))

    def test_ragged_cells_rejected(self) -> None:
        with pytest.raises(MapError):
            Grid(3, 2, ("...", ".."), (0, 0), (0, 2))

    def test_grid_is_frozen(self, small_grid: Grid) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            small_grid.start = (1, 1)  # type: ignore[misc]


class TestSlide:
    """Slides run until a wall, the edge, or a marker."""

    def test_slide_stops_before_wall(self, small_grid: Grid) -> None:
        assert slide(small_grid, (0, 0), RIGHT) == (0, 1)
        assert slide(small_grid, (0, 0), DOWN) == (1, 0)

    def test_slide_stops_at_edge(self, small_grid: Grid) -> None:
        assert slide(small_grid, (1, 0), RIGHT) == (1, 2)
        assert slide(small_grid, (0, 1), DOWN) == (2, 1)

    def test_slide_halts_on_finish(self, small_grid: Grid) -> None:
        assert slide(small_grid, (1, 2), DOWN) == (2, 2)
        assert slide(small_grid, (2, 1), RIGHT) == (2, 2)

    def test_slide_halts_on_start(self, small_grid: Grid) -> None:
        assert slide(small_grid, (1, 0), UP) == (0, 0)
        assert slide(small_grid, (0, 1), LEFT) == (0, 0)

    def test_slide_never_passes_a_marker(self) -> None:
        grid = parse_grid("S.F..")
        assert slide(grid, (0, 0), RIGHT) == (0, 2)
        assert slide(grid, (0, 4), LEFT) == (0, 2)

    def test_blocked_slide_returns_origin(self, small_grid: Grid) -> None:
        assert slide(small_grid, (0, 0), UP) == (0, 0)
        assert slide(small_grid, (0, 0), LEFT) == (0, 0)

    def test_slide_moves_skip_self_loops(self, small_grid: Grid) -> None:
        moves = list(slide_moves(small_grid, (0, 0)))
        assert moves == [(DOWN, (1, 0)), (RIGHT, (0, 1))]

    def test_long_slide_is_one_move(self) -> None:
        grid = parse_grid("S.........\n.........F")
        assert slide(grid, (0, 0), RIGHT) == (0, 9)

    @pytest.mark.parametrize("seed", range(12))
    def test_slide_is_total_and_in_bounds(self, seed: int) -> None:
        grid = random_grid(seed)
        for r in range(grid.height):
            for c in range(grid.width):
                if not grid.is_passable((r, c)):
                    continue
                for d in DIRECTIONS:
                    dest = slide(grid, (r, c), d)
                    assert grid.in_bounds(dest)
                    assert grid.is_passable(dest)
                    # stays on the same row or column
                    assert dest[0] == r or dest[1] == c


class TestHeuristics:
    def test_lookup(self) -> None:
        assert get_heuristic("manhattan") is manhattan
        assert get_heuristic("axes") is axes
        with pytest.raises(ValueError):
            get_heuristic("euclid")

    def test_axes_bound(self, small_grid: Grid) -> None:
        assert axes(small_grid, (0, 0)) == 2
        assert axes(small_grid, (1, 2)) == 1
        assert axes(small_grid, (2, 2)) == 0
