#!/usr/bin/env python3
"""
A* over slide moves — one expansion per step() for animation.

Implements the Algorithm API expected by the viewer:
- init(grid) - reset() - step() -> StepResult

Every slide is an edge of cost 1. The heuristic defaults to `axes`
(slides still needed, 0 / 1 / 2), which never overestimates, so the
result is a shortest path. `manhattan` (Grid.heuristic) can be passed
instead; it counts cells, overshoots on long slides and is not optimal.

Tie-breaking in the PQ:
- (f, h, -g, seq, cell): lower f, then lower h, then deeper g, then FIFO by seq.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import heapq
import logging
from math import inf

from slidepath.core.types import Cell, Grid, StepResult
from slidepath.core.slide import Heuristic, axes, slide_moves

logger = logging.getLogger(__name__)


def reconstruct_path(parent: Dict[Cell, Cell], start: Cell, end: Cell, limit: int) -> List[Cell]:
    """Walk predecessor links back from `end` to `start` (both inclusive).

    Raises RuntimeError if the chain breaks or runs longer than `limit` steps.
    """
    path: List[Cell] = [end]
    cur = end
    for _ in range(limit):
        if cur == start:
            path.reverse()
            return path
        if cur not in parent:
            raise RuntimeError(f"predecessor chain broken at {cur}")
        cur = parent[cur]
        path.append(cur)
    raise RuntimeError(f"predecessor chain from {end} does not reach {start} within {limit} steps")


@dataclass
class SlideAStar:
    name: str = "A*"
    heuristic: Heuristic = axes

    # Internal state
    grid: Optional[Grid] = None
    open_pq: List[Tuple[int, int, int, int, Cell]] = field(default_factory=list)  # (f, h, -g, seq, cell)
    open_set: set = field(default_factory=set)         # for overlay
    closed_set: set = field(default_factory=set)
    g: Dict[Cell, int] = field(default_factory=dict)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    popped_count: int = 0
    done: bool = False
    no_path: bool = False
    goal_cell: Optional[Cell] = None
    seq: int = 0  # monotonic counter for PQ stability

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid) -> None:
        """Initialize on a given grid."""
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed with the start node."""
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
        h0 = self._h(s)
        heapq.heappush(self.open_pq, (h0, h0, 0, self._bump(), s))
        self.open_set.add(s)

    # -------------------- helpers --------------------

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _h(self, c: Cell) -> int:
        return self.heuristic(self.grid, c)

    def _reconstruct_path(self, end: Cell) -> List[Cell]:
        return reconstruct_path(self.parent, self.grid.start, end, self.grid.size)

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE A* expansion step:
          - Pop the lowest-f node.
          - If finish, reconstruct and finish.
          - Else relax its slide destinations with edge cost 1.
        """
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

        # Pop best (f, h, -g, seq, u)
        _, _, neg_g_u, _, u = heapq.heappop(self.open_pq)
        g_u = -neg_g_u

        # Ignore stale pops
        if u in self.closed_set or g_u != self.g.get(u, inf):
            return StepResult(status="running", current=u, metrics=self._metrics())

        # Finalize u
        self.popped_count += 1
        self.open_set.discard(u)
        self.closed_set.add(u)

        if u == self.goal_cell:
            self.done = True
            path = self._reconstruct_path(u)
            logger.debug("%s: reached %s in %d moves", self.name, u, len(path) - 1)
            return StepResult(status="done", closed=[u], current=u, path=path,
                              metrics=self._metrics(path_len=len(path)))

        # Relax slide destinations
        opened_now: List[Cell] = []
        for _, v in slide_moves(self.grid, u):
            if v in self.closed_set or not self.grid.is_passable(v):
                continue
            alt = self.g[u] + 1
            if alt < self.g.get(v, inf):
                self.g[v] = alt
                self.parent[v] = u
                h_v = self._h(v)
                heapq.heappush(self.open_pq, (alt + h_v, h_v, -alt, self._bump(), v))
                if v not in self.open_set:
                    self.open_set.add(v)
                    opened_now.append(v)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def run(self) -> List[Cell]:
        """Step until done or exhausted; return the path ([] when there is none)."""
        while True:
            res = self.step()
            if res.status in ("done", "no_path", "idle"):
                return res.path or []

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
            "total_cost": self.g.get(self.goal_cell) if self.done else None,
        }


def find_shortest_path(grid: Grid, heuristic: Optional[Heuristic] = None) -> List[Cell]:
    """Run a full A* query over slide moves. Returns [] when the finish is unreachable."""
    algo = SlideAStar(heuristic=heuristic or axes)
    algo.init(grid)
    logger.debug("A* from %s to %s on %dx%d grid", grid.start, grid.finish, grid.height, grid.width)
    return algo.run()
