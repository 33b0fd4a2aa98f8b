import random
from collections import deque
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from slidepath.core.maps import parse_grid
from slidepath.core.slide import DIRECTIONS, slide, slide_moves
from slidepath.core.types import Cell, Grid

MAPS_DIR = Path(__file__).resolve().parents[1] / "maps"


def bfs_moves(grid: Grid) -> Optional[int]:
    """Brute-force slide count from start to finish, None when unreachable."""
    dist: Dict[Cell, int] = {grid.start: 0}
    queue = deque([grid.start])
    while queue:
        cur = queue.popleft()
        if cur == grid.finish:
            return dist[cur]
        for _, nxt in slide_moves(grid, cur):
            if nxt not in dist:
                dist[nxt] = dist[cur] + 1
                queue.append(nxt)
    return None


def assert_valid_path(grid: Grid, path: List[Cell]) -> None:
    assert path[0] == grid.start
    assert path[-1] == grid.finish
    assert len(set(path)) == len(path)
    for a, b in zip(path, path[1:]):
        assert any(slide(grid, a, d) == b for d in DIRECTIONS), f"{a} -> {b} is not one slide"


def random_grid(seed: int, height: int = 6, width: int = 7) -> Grid:
    rng = random.Random(seed)
    rows = [["0" if rng.random() < 0.25 else "." for _ in range(width)] for _ in range(height)]
    cells = [(r, c) for r in range(height) for c in range(width)]
    (sr, sc), (fr, fc) = rng.sample(cells, 2)
    rows[sr][sc] = "S"
    rows[fr][fc] = "F"
    return parse_grid("\n".join("".join(r) for r in rows))


@pytest.fixture
def small_grid() -> Grid:
    return parse_grid("S.0\n...\n0.F")


@pytest.fixture
def walled_grid() -> Grid:
    return parse_grid("00000\n0S0F0\n00000")


@pytest.fixture
def maps_dir() -> Path:
    return MAPS_DIR
