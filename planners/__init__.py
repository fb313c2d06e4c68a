# -*- coding: utf-8 -*-
"""
Planners on maze grids with a unified API:
planner.plan(grid: MazeGrid) -> SearchResult(success, path, ...)

Planners take the move set at construction: cls(moves=...).
"""

from __future__ import annotations
from typing import Any, Dict, Type

from .jump_bfs import JumpBFSPlanner, MazeSearch, SearchState, find_path, submit_search
from .fifo_bfs import FIFOBFSPlanner

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type] = {
    "jump_bfs": JumpBFSPlanner,
    "fifo_bfs": FIFOBFSPlanner,
}


def get_planner(name: str, **kwargs) -> Any:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str
        One of: 'jump_bfs', 'fifo_bfs'
    kwargs : dict
        Passed to the planner constructor (e.g., moves=knight_moves())
    """
    name = name.strip().lower()
    if name not in PLANNERS:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
    return PLANNERS[name](**kwargs)


__all__ = [
    "JumpBFSPlanner",
    "FIFOBFSPlanner",
    "MazeSearch",
    "SearchState",
    "find_path",
    "submit_search",
    "get_planner",
    "PLANNERS",
]
