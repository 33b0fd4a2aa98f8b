#!/usr/bin/env python3
"""Build a stepping search by key ("astar" / "dijkstra")."""

from typing import Union

from slidepath.core.astar import SlideAStar
from slidepath.core.dijkstra import SlideDijkstra
from slidepath.core.slide import get_heuristic

ALGOS = ("astar", "dijkstra")

Algo = Union[SlideAStar, SlideDijkstra]


def make_algo(algo: str = "astar", heuristic: str = "axes") -> Algo:
    """`heuristic` only applies to A*."""
    if algo == "dijkstra":
        return SlideDijkstra(name="Dijkstra")
    if algo == "astar":
        return SlideAStar(name=f"A* ({heuristic})", heuristic=get_heuristic(heuristic))
    raise ValueError(f"unknown algorithm {algo!r} (choose from {', '.join(ALGOS)})")
