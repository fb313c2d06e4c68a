# -*- coding: utf-8 -*-
"""
Search outcomes and the one-shot completion signal.

SearchResult is what a search returns. Completion is the observer form of
the same outcome for hosts that want callbacks: exactly one of its two
channels fires, once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from .errors import SearchTerminatedError
from .ledger import VisitRecord

Cell = Tuple[int, int]


@dataclass(frozen=True)
class SearchResult:
    success: bool
    path: Optional[List[Cell]] = None
    records: List[VisitRecord] = field(default_factory=list)
    levels: int = 0          # expanding steps taken
    discovered: int = 0      # visit records created, start included

    @property
    def hops(self) -> int:
        return len(self.path) - 1 if self.path else 0

    def to_dict(self) -> Dict:
        return {"success": self.success, "path": self.path}

    @classmethod
    def failed(cls, levels: int = 0, discovered: int = 0) -> "SearchResult":
        return cls(False, None, [], levels, discovered)


class Completion:
    """Fire-once notification with 'succeeded' and 'failed' channels."""

    def __init__(self):
        self._on_success: List[Callable[[List[Cell]], None]] = []
        self._on_failure: List[Callable[[], None]] = []
        self.result: Optional[SearchResult] = None

    @property
    def fired(self) -> bool:
        return self.result is not None

    def on_success(self, fn: Callable[[List[Cell]], None]) -> None:
        self._on_success.append(fn)
        if self.result is not None and self.result.success:
            fn(self.result.path)

    def on_failure(self, fn: Callable[[], None]) -> None:
        self._on_failure.append(fn)
        if self.result is not None and not self.result.success:
            fn()

    def fire(self, result: SearchResult) -> None:
        if self.result is not None:
            raise SearchTerminatedError("Completion already fired.")
        self.result = result
        if result.success:
            for fn in self._on_success:
                fn(result.path)
        else:
            for fn in self._on_failure:
                fn()
