#!/usr/bin/env python3
"""Turn a path of (row, col) cells into numbered, 1-indexed move lines."""

from typing import List, Sequence

from slidepath.core.types import Cell


def direction_name(prev: Cell, cur: Cell) -> str:
    """
    (0, 0) -> (0, 4) -> "Right"

    Row grows downward, column grows to the right.
    """
    dr = cur[0] - prev[0]
    dc = cur[1] - prev[1]
    if dc == 0 and dr > 0:
        return "Down"
    if dc == 0 and dr < 0:
        return "Up"
    if dr == 0 and dc > 0:
        return "Right"
    if dr == 0 and dc < 0:
        return "Left"
    raise ValueError(f"Non-cardinal step: {prev} -> {cur}")


def path_to_moves(path: Sequence[Cell]) -> List[str]:
    return [direction_name(a, b) for a, b in zip(path, path[1:])]


def _pos(c: Cell) -> str:
    # printed as (x, y), 1-indexed
    return f"({c[1] + 1}, {c[0] + 1})"


def render_path(path: Sequence[Cell]) -> List[str]:
    if not path:
        return ["No path found."]

    lines = ["Path found:", f"1. Start at {_pos(path[0])}"]
    for i, (prev, cur) in enumerate(zip(path, path[1:]), start=2):
        lines.append(f"{i}. Move to {direction_name(prev, cur)} {_pos(cur)}")
    lines.append(f"{len(path) + 1}. Done!")
    return lines
