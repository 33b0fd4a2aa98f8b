#!/usr/bin/env python3
"""
Puzzle loading.

Text format, one row per line:
    ...0S
    .0...
    F....
'0' is a wall, 'S' the start, 'F' the finish, anything else floor.
Short rows are right-padded with a wall (pad="wall") or floor (pad="floor").

JSON format: {"rows": ["...0S", ".0...", "F...."]}
"""

import json
from pathlib import Path
from typing import Iterable, List, Optional, Union

from slidepath.core.types import Cell, Grid, MapError, FINISH, FLOOR, START, WALL

PAD_CHARS = {"wall": WALL, "floor": FLOOR}


def _find_one(rows: List[str], mark: str) -> Cell:
    found = [(r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == mark]
    if not found:
        raise MapError(f"no '{mark}' cell in grid")
    if len(found) > 1:
        raise MapError(f"{len(found)} '{mark}' cells in grid, expected exactly one")
    return found[0]


def grid_from_rows(lines: Iterable[str], pad: str = "wall") -> Grid:
    if pad not in PAD_CHARS:
        raise MapError(f"unknown pad mode {pad!r}")
    raw = [line.rstrip("\r\n") for line in lines]
    width = max((len(line) for line in raw), default=0)
    if not raw or width == 0:
        raise MapError("grid is empty")
    rows = [line.ljust(width, PAD_CHARS[pad]) for line in raw]
    return Grid(width, len(rows), tuple(rows), _find_one(rows, START), _find_one(rows, FINISH))


def parse_grid(text: str, pad: str = "wall") -> Grid:
    """Parse puzzle text. Trailing blank lines are ignored."""
    return grid_from_rows(text.rstrip("\r\n").splitlines(), pad=pad)


def load_map(path: Union[str, Path], pad: str = "wall") -> Grid:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Puzzle file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix == ".json":
            try:
                data = json.load(f)
            except json.JSONDecodeError as ex:
                raise MapError(f"{path}: invalid JSON ({ex})") from ex
            rows = data.get("rows") if isinstance(data, dict) else None
            if not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
                raise MapError(f"{path}: expected an object with a 'rows' list of strings")
            return grid_from_rows(rows, pad=pad)
        return parse_grid(f.read(), pad=pad)


def list_maps(maps_dir: Union[str, Path]) -> List[Path]:
    maps_dir = Path(maps_dir)
    if not maps_dir.is_dir():
        return []
    return sorted(p for p in maps_dir.iterdir() if p.suffix in (".txt", ".json"))


def find_map(maps_dir: Union[str, Path], name: str) -> Optional[Path]:
    for p in list_maps(maps_dir):
        if p.stem == name or p.name == name:
            return p
    return None
