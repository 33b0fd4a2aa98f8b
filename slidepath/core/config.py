#!/usr/bin/env python3
"""
Runtime settings.

- ENV: SLIDEPATH_PAD=wall|floor, SLIDEPATH_HEURISTIC=axes|manhattan,
       SLIDEPATH_ALGO=astar|dijkstra, SLIDEPATH_MAPS=<dir>
- CLI: --pad=..., --heuristic=..., --algo=... (override the environment)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

from slidepath.core.algos import ALGOS
from slidepath.core.slide import HEURISTICS

_REPO_ROOT = Path(__file__).resolve().parents[2]

PAD_MODES = ("wall", "floor")


@dataclass(frozen=True)
class Settings:
    pad: str = "wall"
    heuristic: str = "axes"
    algo: str = "astar"
    maps_dir: Path = _REPO_ROOT / "maps"


def _flag(argv: Sequence[str], name: str) -> Optional[str]:
    value = None
    for arg in argv:
        if arg.startswith(f"--{name}="):
            value = arg.split("=", 1)[1]
    return value


def resolve_settings(argv: Sequence[str] = (), env: Optional[Mapping[str, str]] = None) -> Settings:
    """Environment first, then `--name=value` arguments on top."""
    env = os.environ if env is None else env
    pad = (_flag(argv, "pad") or env.get("SLIDEPATH_PAD", "wall")).lower()
    heuristic = (_flag(argv, "heuristic") or env.get("SLIDEPATH_HEURISTIC", "axes")).lower()
    algo = (_flag(argv, "algo") or env.get("SLIDEPATH_ALGO", "astar")).lower()
    maps_dir = Path(env.get("SLIDEPATH_MAPS", str(_REPO_ROOT / "maps")))

    if pad not in PAD_MODES:
        raise ValueError(f"pad must be one of {PAD_MODES}, got {pad!r}")
    if heuristic not in HEURISTICS:
        raise ValueError(f"heuristic must be one of {tuple(HEURISTICS)}, got {heuristic!r}")
    if algo not in ALGOS:
        raise ValueError(f"algo must be one of {ALGOS}, got {algo!r}")
    return Settings(pad=pad, heuristic=heuristic, algo=algo, maps_dir=maps_dir)
