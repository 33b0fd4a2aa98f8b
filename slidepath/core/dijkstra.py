#!/usr/bin/env python3

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import heapq
import logging

from slidepath.core.types import Cell, Grid, StepResult
from slidepath.core.slide import slide_moves
from slidepath.core.astar import reconstruct_path

logger = logging.getLogger(__name__)


@dataclass
class SlideDijkstra:
    """Uniform-cost search over slide moves; same stepping API as SlideAStar."""
    name: str = "Dijkstra"

    grid: Optional[Grid] = None
    open_pq: List[Tuple[int, int, Cell]] = field(default_factory=list)   # (g, seq, cell)
    open_set: set = field(default_factory=set)
    closed_set: set = field(default_factory=set)
    g: Dict[Cell, int] = field(default_factory=dict)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    popped_count: int = 0
    done: bool = False
    no_path: bool = False
    goal_cell: Optional[Cell] = None
    seq: int = 0

    def init(self, grid: Grid) -> None:
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        if self.grid is None:
            return
        self.open_pq.clear()
        self.open_set.clear()
        self.closed_set.clear()
        self.g.clear()
        self.parent.clear()
        self.popped_count = 0
        self.done = False
        self.no_path = False
        self.goal_cell = self.grid.finish
        self.seq = 0

        s = self.grid.start
        self.g[s] = 0
        heapq.heappush(self.open_pq, (0, self.seq, s))
        self.open_set.add(s)

    def _reconstruct_path(self, end: Cell) -> List[Cell]:
        return reconstruct_path(self.parent, self.grid.start, end, self.grid.size)

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = self._reconstruct_path(self.goal_cell)
            return StepResult(status="done", path=path,
                              metrics=self._metrics(path_len=len(path)))

        if self.no_path:
            return StepResult(status="no_path", path=[], metrics=self._metrics())

        if not self.open_pq:
            self.no_path = True
            logger.debug("%s: open set exhausted after %d pops, no path", self.name, self.popped_count)
            return StepResult(status="no_path", path=[], metrics=self._metrics())

        g_u, _, u = heapq.heappop(self.open_pq)
        if u in self.closed_set or g_u != self.g.get(u, float("inf")):
            return StepResult(status="running", current=u, metrics=self._metrics())

        self.popped_count += 1
        self.open_set.discard(u)
        self.closed_set.add(u)

        if u == self.goal_cell:
            self.done = True
            path = self._reconstruct_path(u)
            return StepResult(status="done", closed=[u], current=u, path=path,
                              metrics=self._metrics(path_len=len(path)))

        opened_now: List[Cell] = []
        for _, v in slide_moves(self.grid, u):
            if v in self.closed_set:
                continue
            alt = self.g[u] + 1
            if alt < self.g.get(v, float("inf")):
                self.g[v] = alt
                self.parent[v] = u
                self.seq += 1
                heapq.heappush(self.open_pq, (alt, self.seq, v))
                if v not in self.open_set:
                    self.open_set.add(v)
                    opened_now.append(v)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def run(self) -> List[Cell]:
        while True:
            res = self.step()
            if res.status in ("done", "no_path", "idle"):
                return res.path or []

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
            "total_cost": self.g.get(self.goal_cell) if self.done else None,
        }
