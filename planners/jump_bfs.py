#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Level-synchronous BFS over a jump move set.

MazeSearch is the state machine for one search:

    INITIALIZED -> EXPANDING (repeatable) -> SUCCEEDED | FAILED

Each step() expands one whole BFS level: every pending record, in frontier
order, tries every move, in move-set order. A move is legal when all its
blocking cells and its target are in bounds and EMPTY or GOAL, and the target
is not yet in the ledger. The first record to land on the goal ends the
search at once; because all pending records share one distance, that record
is at minimum distance and ties go to (record order, move order).

Start == Goal is a caller precondition and is not checked.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future
from enum import Enum
from typing import List, Optional, Sequence

from maze.errors import NoPathError, SearchTerminatedError
from maze.grid import Cell, CellKind, MazeGrid, PASSABLE_KINDS
from maze.ledger import VisitLedger
from maze.moves import Move, knight_moves
from maze.result import Completion, SearchResult

logger = logging.getLogger(__name__)


class SearchState(str, Enum):
    INITIALIZED = "initialized"
    EXPANDING = "expanding"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


TERMINAL_STATES = (SearchState.SUCCEEDED, SearchState.FAILED)


class MazeSearch:
    """One search over one grid. Not reusable once terminal."""

    def __init__(self, grid: MazeGrid, moves: Sequence[Move],
                 completion: Optional[Completion] = None):
        self.grid = grid
        self.moves = tuple(moves)
        self.completion = completion or Completion()

        # Raises CellNotFoundError before any state exists.
        self.start = grid.find_unique(CellKind.START)
        self.goal = grid.find_unique(CellKind.GOAL)

        self.ledger = VisitLedger(grid.width, grid.height)
        self.ledger.seed(self.start)
        self.state = SearchState.INITIALIZED
        self.levels = 0
        self.result: Optional[SearchResult] = None

    @property
    def done(self) -> bool:
        return self.state in TERMINAL_STATES

    # ------------------------------ validity ------------------------------- #

    def _passable(self, cell: Cell) -> bool:
        return self.grid.kind_at(cell[0], cell[1]) in PASSABLE_KINDS

    def is_move_ok(self, origin: Cell, move: Move) -> bool:
        for cell in move.blocking_cells(origin):
            if not self._passable(cell):
                return False
        to = move.target(origin)
        if not self._passable(to):
            return False
        return not self.ledger.is_visited(to)

    # ------------------------------ stepping ------------------------------- #

    def step(self) -> SearchState:
        """Expand one BFS level and return the new state."""
        if self.done:
            raise SearchTerminatedError(f"Search already {self.state.value}.")
        self.state = SearchState.EXPANDING

        ledger = self.ledger
        pending = ledger.pending_range()
        self.levels += 1
        end = pending.stop
        for i in pending:
            origin = ledger.records[i].position
            for move in self.moves:
                if not self.is_move_ok(origin, move):
                    continue
                j = ledger.discover(i, move.target(origin))
                if ledger.records[j].position == self.goal:
                    return self._finish(j)

        ledger.advance(end)
        if len(ledger) == end:
            # Nothing new was discovered, so the next level would be empty.
            return self._finish(None)
        logger.debug("level %d: expanded %d, frontier now %d",
                     self.levels, len(pending), len(ledger) - end)
        return self.state

    def run(self, max_levels: Optional[int] = None) -> Optional[SearchResult]:
        """
        Step until terminal. With ``max_levels``, stop after that many steps
        and return None if the search is still expanding; calling run() again
        resumes where it stopped.
        """
        taken = 0
        while not self.done:
            if max_levels is not None and taken >= max_levels:
                logger.debug("level budget of %d spent at level %d", max_levels, self.levels)
                return None
            self.step()
            taken += 1
        return self.result

    def _finish(self, goal_index: Optional[int]) -> SearchState:
        if goal_index is None:
            self.state = SearchState.FAILED
            self.result = SearchResult.failed(self.levels, len(self.ledger))
            logger.debug("no path after %d levels (%d cells reached)",
                         self.levels, len(self.ledger))
        else:
            records = self.ledger.chain(goal_index)
            self.state = SearchState.SUCCEEDED
            self.result = SearchResult(
                success=True,
                path=[r.position for r in records],
                records=records,
                levels=self.levels,
                discovered=len(self.ledger),
            )
            logger.debug("goal %s reached in %d hops", self.goal, len(records) - 1)
        self.completion.fire(self.result)
        return self.state


# --------------------------------- Planner --------------------------------- #

class JumpBFSPlanner:
    """
    Planner wrapper with the shared API:
        planner.plan(grid) -> SearchResult
    """

    name = "jump_bfs"

    def __init__(self, moves: Optional[Sequence[Move]] = None, max_levels: Optional[int] = None):
        self.moves = tuple(moves) if moves is not None else knight_moves()
        self.max_levels = max_levels

    def plan(self, grid: MazeGrid) -> SearchResult:
        search = MazeSearch(grid, self.moves)
        res = search.run(self.max_levels)
        if res is None:
            # Budget spent: report as no path found within the budget.
            return SearchResult.failed(search.levels, len(search.ledger))
        return res


def find_path(grid: MazeGrid, moves: Optional[Sequence[Move]] = None) -> Optional[List[Cell]]:
    """Shortest path as a list of cells, or None."""
    return JumpBFSPlanner(moves).plan(grid).path


def submit_search(executor: Executor, grid: MazeGrid,
                  moves: Optional[Sequence[Move]] = None) -> Future:
    """
    Run a search on ``executor``. The returned future resolves with the
    SearchResult on success and fails with NoPathError otherwise.
    """
    moves = tuple(moves) if moves is not None else knight_moves()

    def _job() -> SearchResult:
        completion = Completion()
        MazeSearch(grid, moves, completion).run()
        if not completion.result.success:
            raise NoPathError("Goal is unreachable.")
        return completion.result

    return executor.submit(_job)
