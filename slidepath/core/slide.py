#!/usr/bin/env python3
"""
Slide moves over a Grid.

A move picks one of the four cardinal directions and keeps going until the
next cell is a wall or off the grid. Landing on the start or the finish
halts the slide on that cell. Every slide is one edge of cost 1, however
many cells it crosses.
"""

from typing import Callable, Dict, Iterator, Tuple

from slidepath.core.types import Cell, Grid

Direction = Tuple[int, int]  # (d_row, d_col)

UP: Direction = (-1, 0)
DOWN: Direction = (1, 0)
LEFT: Direction = (0, -1)
RIGHT: Direction = (0, 1)

# expansion order; the engines rely on it for reproducible tie-breaks
DIRECTIONS: Tuple[Direction, ...] = (UP, DOWN, LEFT, RIGHT)

Heuristic = Callable[[Grid, Cell], int]


def slide(grid: Grid, c: Cell, d: Direction) -> Cell:
    """Return where a slide from `c` in direction `d` comes to rest.

    Returns `c` itself when the very first step is blocked.
    """
    r, col = c
    dr, dc = d
    while True:
        nxt = (r + dr, col + dc)
        if not grid.is_passable(nxt):
            break
        if grid.is_marker(nxt):
            return nxt
        r, col = nxt
    return (r, col)


def slide_moves(grid: Grid, c: Cell) -> Iterator[Tuple[Direction, Cell]]:
    """Yield (direction, destination) for every slide that actually moves."""
    for d in DIRECTIONS:
        dest = slide(grid, c, d)
        if dest != c:
            yield d, dest


# -------------------- heuristics --------------------

def manhattan(grid: Grid, c: Cell) -> int:
    return grid.heuristic(c)


def axes(grid: Grid, c: Cell) -> int:
    """Lower bound on slides left: each slide changes only a row or a column."""
    r, col = c
    fr, fc = grid.finish
    return int(r != fr) + int(col != fc)


HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "axes": axes,
}


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ValueError(f"unknown heuristic {name!r} (choose from {', '.join(HEURISTICS)})") from None
