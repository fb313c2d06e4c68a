#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Immutable 2-D maze grid.

Grid convention: coordinates are (x, y) with x = column and y = row. Cells
are stored row-major in a read-only int8 array ``kinds[y, x]``. Any lookup
outside the grid returns ``CellKind.OUT_OF_BOUNDS``; that kind is never
stored.

Textual symbols:
    ' '  EMPTY
    '*'  BLOCKED
    '+'  START
    'O'  GOAL
Any other symbol maps to OUT_OF_BOUNDS (an impassable cell).
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Iterable, List, Sequence, Tuple

import numpy as np

from .errors import CellNotFoundError, MalformedGridError

Cell = Tuple[int, int]  # (x, y)


class CellKind(IntEnum):
    EMPTY = 0
    START = 1
    GOAL = 2
    BLOCKED = 3
    OUT_OF_BOUNDS = 4


SYMBOL_TO_KIND: Dict[str, CellKind] = {
    " ": CellKind.EMPTY,
    "*": CellKind.BLOCKED,
    "+": CellKind.START,
    "O": CellKind.GOAL,
}

KIND_TO_SYMBOL: Dict[CellKind, str] = {v: k for k, v in SYMBOL_TO_KIND.items()}
KIND_TO_SYMBOL[CellKind.OUT_OF_BOUNDS] = "#"

# Kinds a move may land on or jump across.
PASSABLE_KINDS = (CellKind.EMPTY, CellKind.GOAL)


class MazeGrid:
    """Read-only cell classification lookup.

    Build with :meth:`from_rows` (text) or :meth:`from_array` (numpy). The
    backing array is copied and flagged non-writeable, so a grid can be shared
    between searches.
    """

    __slots__ = ("_kinds",)

    def __init__(self, kinds: np.ndarray):
        kinds = np.array(kinds, dtype=np.int8, copy=True)
        if kinds.ndim != 2 or kinds.shape[0] == 0 or kinds.shape[1] == 0:
            raise MalformedGridError(f"Grid must be a non-empty 2-D array, got shape {kinds.shape}.")
        if kinds.min() < 0 or kinds.max() > int(CellKind.OUT_OF_BOUNDS):
            raise MalformedGridError("Grid array holds values that are not CellKind codes.")
        kinds.setflags(write=False)
        self._kinds = kinds

    # ------------------------------ constructors ----------------------------- #

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "MazeGrid":
        rows = list(rows)
        if not rows or len(rows[0]) == 0:
            raise MalformedGridError("Maze has no rows or an empty first row.")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise MalformedGridError(
                    f"Row {y} has length {len(row)}, expected {width}."
                )
        kinds = np.empty((len(rows), width), dtype=np.int8)
        for y, row in enumerate(rows):
            kinds[y] = [SYMBOL_TO_KIND.get(ch, CellKind.OUT_OF_BOUNDS) for ch in row]
        return cls(kinds)

    @classmethod
    def from_array(cls, kinds: np.ndarray) -> "MazeGrid":
        return cls(kinds)

    # -------------------------------- queries -------------------------------- #

    @property
    def width(self) -> int:
        return int(self._kinds.shape[1])

    @property
    def height(self) -> int:
        return int(self._kinds.shape[0])

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width), numpy order."""
        return self._kinds.shape

    @property
    def kinds(self) -> np.ndarray:
        """Read-only view of the backing array, indexed [y, x]."""
        return self._kinds

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def kind_at(self, x: int, y: int) -> CellKind:
        if 0 <= x < self.width and 0 <= y < self.height:
            return CellKind(int(self._kinds[y, x]))
        return CellKind.OUT_OF_BOUNDS

    def is_passable(self, x: int, y: int) -> bool:
        return self.kind_at(x, y) in PASSABLE_KINDS

    def find_unique(self, kind: CellKind) -> Cell:
        """First cell of ``kind`` scanning x outer, y inner.

        Raises CellNotFoundError when the grid holds none. If several cells
        share the kind, the first in scan order wins.
        """
        # Transposed so argwhere walks columns first.
        hits = np.argwhere(self._kinds.T == int(kind))
        if hits.size == 0:
            raise CellNotFoundError(CellKind(kind))
        x, y = hits[0]
        return int(x), int(y)

    @property
    def start(self) -> Cell:
        return self.find_unique(CellKind.START)

    @property
    def goal(self) -> Cell:
        return self.find_unique(CellKind.GOAL)

    def count(self, kind: CellKind) -> int:
        return int(np.count_nonzero(self._kinds == int(kind)))

    def cells(self, kind: CellKind) -> List[Cell]:
        """All cells of ``kind`` in x-outer, y-inner order."""
        return [(int(x), int(y)) for x, y in np.argwhere(self._kinds.T == int(kind))]

    # ------------------------------ conversions ------------------------------ #

    def to_rows(self) -> List[str]:
        return ["".join(KIND_TO_SYMBOL[CellKind(int(v))] for v in row) for row in self._kinds]

    def with_cells(self, updates: Iterable[Tuple[Cell, CellKind]]) -> "MazeGrid":
        """New grid with some cells replaced; this grid is untouched."""
        kinds = self._kinds.copy()
        for (x, y), kind in updates:
            if not self.in_bounds(x, y):
                raise MalformedGridError(f"Cell {(x, y)} is outside a {self.width}x{self.height} grid.")
            kinds[y, x] = int(kind)
        return MazeGrid(kinds)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MazeGrid):
            return NotImplemented
        return np.array_equal(self._kinds, other._kinds)

    def __hash__(self) -> int:
        return hash((self._kinds.shape, self._kinds.tobytes()))

    def __repr__(self) -> str:
        return f"MazeGrid(width={self.width}, height={self.height})"
