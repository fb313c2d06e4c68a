# -*- coding: utf-8 -*-
"""
Path checks used by tests and the benchmark CLI.

validate_path() returns a list of human-readable problems (empty = valid):
- path starts at START and ends at GOAL
- each consecutive pair is joined by exactly one move of the move set
- each step's target and blocking cells are EMPTY or GOAL
- no cell is visited twice

cross_check() compares a planner's hop count with the FIFO reference.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple

from maze.grid import CellKind, MazeGrid, PASSABLE_KINDS
from maze.moves import Move
from maze.result import SearchResult
from planners.fifo_bfs import FIFOBFSPlanner

Cell = Tuple[int, int]


def moves_between(a: Cell, b: Cell, moves: Sequence[Move]) -> List[Move]:
    d = (b[0] - a[0], b[1] - a[1])
    return [m for m in moves if m.offset == d]


def validate_path(grid: MazeGrid, moves: Sequence[Move], path: Optional[Sequence[Cell]]) -> List[str]:
    problems: List[str] = []
    if not path:
        return ["path is empty"]
    path = [tuple(p) for p in path]
    if path[0] != grid.find_unique(CellKind.START):
        problems.append(f"path starts at {path[0]}, not at START")
    if path[-1] != grid.find_unique(CellKind.GOAL):
        problems.append(f"path ends at {path[-1]}, not at GOAL")
    if len(set(path)) != len(path):
        problems.append("path revisits a cell")

    for i, (a, b) in enumerate(zip(path[:-1], path[1:])):
        used = moves_between(a, b, moves)
        if len(used) != 1:
            problems.append(f"step {i} {a}->{b} matches {len(used)} moves")
            continue
        m = used[0]
        if grid.kind_at(*b) not in PASSABLE_KINDS:
            problems.append(f"step {i} lands on {grid.kind_at(*b).name} at {b}")
        for c in m.blocking_cells(a):
            if grid.kind_at(*c) not in PASSABLE_KINDS:
                problems.append(f"step {i} jumps across {grid.kind_at(*c).name} at {c}")
    return problems


def cross_check(grid: MazeGrid, moves: Sequence[Move], result: SearchResult) -> Dict:
    """
    Compare ``result`` with the reference BFS. Returns a dict with
    'agree' (bool), 'reference_hops' (int or None) and 'problems'.
    """
    ref = FIFOBFSPlanner(moves).plan(grid)
    problems = validate_path(grid, moves, result.path) if result.success else []
    if ref.success != result.success:
        problems.append(f"success={result.success} but reference says {ref.success}")
    elif ref.success and ref.hops != result.hops:
        problems.append(f"{result.hops} hops but reference finds {ref.hops}")
    return {
        "agree": not problems,
        "reference_hops": ref.hops if ref.success else None,
        "problems": problems,
    }
