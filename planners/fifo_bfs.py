#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Plain FIFO Breadth-First Search (pop one cell at a time).

Written independently of MazeSearch and its ledger, and used as the
reference when cross-checking path lengths. Same legality rules: blocking
cells and target must be in bounds and EMPTY or GOAL.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple
from collections import deque

from maze.grid import CellKind, MazeGrid
from maze.moves import Move, knight_moves
from maze.result import SearchResult

Cell = Tuple[int, int]


class FIFOBFSPlanner:
    name = "fifo_bfs"

    def __init__(self, moves: Optional[Sequence[Move]] = None):
        self.moves = tuple(moves) if moves is not None else knight_moves()

    @staticmethod
    def _reconstruct(came_from: Dict[Cell, Cell], start: Cell, goal: Cell) -> List[Cell]:
        path = [goal]
        cur = goal
        while cur != start:
            cur = came_from[cur]
            path.append(cur)
        path.reverse()
        return path

    def distances(self, grid: MazeGrid) -> Dict[Cell, int]:
        """Hop distance from the start to every reachable cell."""
        start = grid.find_unique(CellKind.START)
        dist = {start: 0}
        self._bfs(grid, start, None, dist, {})
        return dist

    def _bfs(self, grid: MazeGrid, start: Cell, goal: Optional[Cell],
             dist: Dict[Cell, int], came_from: Dict[Cell, Cell]) -> bool:
        ok = grid.kinds
        H, W = ok.shape
        free = (ok == int(CellKind.EMPTY)) | (ok == int(CellKind.GOAL))

        def passable(c: Cell) -> bool:
            x, y = c
            return 0 <= x < W and 0 <= y < H and bool(free[y, x])

        dq = deque([start])
        while dq:
            cur = dq.popleft()
            if cur == goal:
                return True
            for m in self.moves:
                nxt = (cur[0] + m.dx, cur[1] + m.dy)
                if nxt in dist or not passable(nxt):
                    continue
                if not all(passable(b) for b in m.blocking_cells(cur)):
                    continue
                dist[nxt] = dist[cur] + 1
                came_from[nxt] = cur
                dq.append(nxt)
        return False

    def plan(self, grid: MazeGrid) -> SearchResult:
        start = grid.find_unique(CellKind.START)
        goal = grid.find_unique(CellKind.GOAL)
        dist = {start: 0}
        came_from: Dict[Cell, Cell] = {}
        if not self._bfs(grid, start, goal, dist, came_from):
            return SearchResult.failed(discovered=len(dist))
        path = self._reconstruct(came_from, start, goal)
        return SearchResult(True, path, [], levels=len(path) - 1, discovered=len(dist))
