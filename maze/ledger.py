# -*- coding: utf-8 -*-
"""
Visit ledger: arena of write-once visit records plus the BFS frontier.

Records live in one growable list; a record's predecessor is an index into
that list (None for the start). A per-cell int32 array maps each cell to its
record index, -1 meaning unvisited. The list doubles as the frontier: records
before ``expanded`` have been expanded, the rest are pending.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

Cell = Tuple[int, int]


@dataclass(frozen=True)
class VisitRecord:
    distance: int
    position: Cell
    predecessor: Optional[int] = None


class VisitLedger:
    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        self.index = np.full((self.height, self.width), -1, dtype=np.int32)
        self.records: List[VisitRecord] = []
        self.expanded = 0

    def __len__(self) -> int:
        return len(self.records)

    def seed(self, start: Cell) -> int:
        if self.records:
            raise RuntimeError("Ledger already seeded.")
        return self._append(VisitRecord(0, start, None))

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def is_visited(self, cell: Cell) -> bool:
        if not self.in_bounds(cell):
            return False
        x, y = cell
        return bool(self.index[y, x] >= 0)

    def record_at(self, cell: Cell) -> Optional[VisitRecord]:
        if not self.in_bounds(cell):
            return None
        x, y = cell
        i = int(self.index[y, x])
        return self.records[i] if i >= 0 else None

    def discover(self, parent: int, cell: Cell) -> int:
        """Append a record one step past ``parent``; returns its index."""
        if self.is_visited(cell):
            raise ValueError(f"Cell {cell} already visited.")
        rec = VisitRecord(self.records[parent].distance + 1, cell, parent)
        return self._append(rec)

    def _append(self, rec: VisitRecord) -> int:
        if not self.in_bounds(rec.position):
            raise ValueError(f"Cell {rec.position} is outside the {self.width}x{self.height} ledger.")
        x, y = rec.position
        i = len(self.records)
        self.records.append(rec)
        self.index[y, x] = i
        return i

    # ------------------------------ frontier ------------------------------- #

    def pending_range(self) -> range:
        return range(self.expanded, len(self.records))

    def advance(self, end: int) -> None:
        self.expanded = int(end)

    # ------------------------------- backtrack ----------------------------- #

    def chain(self, i: int) -> List[VisitRecord]:
        """Records from the start to record ``i`` inclusive."""
        out: List[VisitRecord] = []
        cur: Optional[int] = i
        while cur is not None:
            rec = self.records[cur]
            out.append(rec)
            cur = rec.predecessor
        out.reverse()
        return out

    def distances(self) -> np.ndarray:
        """Per-cell distance map, -1 where unvisited. Indexed [y, x]."""
        d = np.full((self.height, self.width), -1, dtype=np.int32)
        for rec in self.records:
            x, y = rec.position
            d[y, x] = rec.distance
        return d
