# -*- coding: utf-8 -*-
"""
Maze core: grid, move sets, visit ledger, results.
"""

from __future__ import annotations

from .errors import (
    MazeError,
    MalformedGridError,
    CellNotFoundError,
    SearchTerminatedError,
    NoPathError,
)
from .grid import Cell, CellKind, MazeGrid, PASSABLE_KINDS, SYMBOL_TO_KIND
from .moves import (
    BlockingRule,
    Move,
    MoveSet,
    MOVE_SETS,
    knight_moves,
    make_move_set,
    parse_move_set,
    format_move_set,
)
from .ledger import VisitLedger, VisitRecord
from .result import Completion, SearchResult

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "MazeError", "MalformedGridError", "CellNotFoundError",
    "SearchTerminatedError", "NoPathError",
    "Cell", "CellKind", "MazeGrid", "PASSABLE_KINDS", "SYMBOL_TO_KIND",
    "BlockingRule", "Move", "MoveSet", "MOVE_SETS", "knight_moves",
    "make_move_set", "parse_move_set", "format_move_set",
    "VisitLedger", "VisitRecord",
    "Completion", "SearchResult",
]
