#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any

Cell = Tuple[int, int]  # (row, col)

WALL = "0"
START = "S"
FINISH = "F"
FLOOR = "."


class MapError(ValueError):
    """Raised when a puzzle grid breaks its construction preconditions."""


@dataclass(frozen=True)
class Grid:
    """Read-only slide puzzle grid.

    `cells` holds one string per row, every row exactly `width` long.
    `start` and `finish` are the two stopping markers; a slide that reaches
    either of them halts there.
    """
    width: int
    height: int
    cells: Tuple[str, ...]             # [row][col]
    start: Cell
    finish: Cell

    def __post_init__(self) -> None:
        if self.height <= 0 or self.width <= 0:
            raise MapError("grid is empty")
        if len(self.cells) != self.height or any(len(r) != self.width for r in self.cells):
            raise MapError("cells size mismatch")
        for label, c in (("start", self.start), ("finish", self.finish)):
            if not self.in_bounds(c):
                raise MapError(f"{label} {c} out of bounds")
            if self.kind_at(c) == WALL:
                raise MapError(f"{label} {c} is a wall")

    def in_bounds(self, c: Cell) -> bool:
        r, col = c
        return 0 <= r < self.height and 0 <= col < self.width

    def kind_at(self, c: Cell) -> str:
        r, col = c
        return self.cells[r][col]

    def is_passable(self, c: Cell) -> bool:
        return self.in_bounds(c) and self.kind_at(c) != WALL

    def is_marker(self, c: Cell) -> bool:
        return c == self.start or c == self.finish

    def heuristic(self, c: Cell) -> int:
        """Manhattan distance to the finish."""
        r, col = c
        fr, fc = self.finish
        return abs(r - fr) + abs(col - fc)

    @property
    def size(self) -> int:
        return self.width * self.height


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
