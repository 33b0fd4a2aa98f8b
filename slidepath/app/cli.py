#!/usr/bin/env python3
"""Command-line solver: load a puzzle, search it, print the numbered moves."""

import argparse
import logging
import os
import sys
import time
from typing import List, Optional, Sequence

from slidepath.core.algos import ALGOS, make_algo
from slidepath.core.config import PAD_MODES, resolve_settings
from slidepath.core.maps import load_map
from slidepath.core.render import render_path
from slidepath.core.slide import HEURISTICS
from slidepath.core.types import Cell, Grid, MapError

BENCH_LOGGER = logging.getLogger("slidepath.bench")


def _setup_bench_logging() -> None:
    if os.environ.get("SLIDEPATH_BENCHMARK", "0") != "1":
        return
    BENCH_LOGGER.setLevel(logging.INFO)
    if not BENCH_LOGGER.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
        BENCH_LOGGER.addHandler(handler)
    BENCH_LOGGER.propagate = False


def solve(grid: Grid, algo: str = "astar", heuristic: str = "axes") -> List[Cell]:
    impl = make_algo(algo, heuristic)
    impl.init(grid)
    res = impl.step()
    while res.status == "running":
        res = impl.step()
    path = res.path or []
    m = res.metrics
    BENCH_LOGGER.info("algo=%s popped=%d closed=%d path_len=%d",
                      m["algo"], m["popped"], m["closed_count"], m["path_len"])
    return path


def build_parser() -> argparse.ArgumentParser:
    settings = resolve_settings()
    parser = argparse.ArgumentParser(prog="slidepath", description="Shortest slide path through a puzzle grid")
    parser.add_argument("puzzle", nargs="?", default=str(settings.maps_dir / "puzzle_1.txt"),
                        help="Puzzle file (.txt rows or .json {'rows': [...]})")
    parser.add_argument("--pad", choices=PAD_MODES, default=settings.pad,
                        help="Filler for short rows")
    parser.add_argument("--heuristic", choices=tuple(HEURISTICS), default=settings.heuristic,
                        help="A* estimate; manhattan may return a longer route than the minimum")
    parser.add_argument("--algo", choices=ALGOS, default=settings.algo)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    _setup_bench_logging()
    try:
        args = build_parser().parse_args(argv)
    except ValueError as ex:
        print(f"Invalid configuration: {ex}")
        return 2

    try:
        grid = load_map(args.puzzle, pad=args.pad)
    except (OSError, MapError, UnicodeDecodeError) as ex:
        print(f"Error reading file: {ex}")
        return 1

    t0 = time.perf_counter()
    path = solve(grid, args.algo, args.heuristic)
    elapsed_ms = int((time.perf_counter() - t0) * 1000)

    for line in render_path(path):
        print(line)
    print(f"Time taken: {elapsed_ms} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
