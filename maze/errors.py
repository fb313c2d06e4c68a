# -*- coding: utf-8 -*-
"""
Exceptions raised by the maze core.

Construction problems (bad rows, missing start/goal) are ValueErrors and stop
a search before it begins. Misuse of a finished search is a RuntimeError.
A search that finds no path is *not* an error; it returns a failed result.
"""

from __future__ import annotations


class MazeError(ValueError):
    """Base class for maze construction errors."""


class MalformedGridError(MazeError):
    """Rows of unequal length, empty grid, or a kinds array of the wrong shape."""


class CellNotFoundError(MazeError):
    """No cell of the requested kind exists in the grid."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"No {kind.name} cell found in grid.")


class SearchTerminatedError(RuntimeError):
    """A search (or its completion signal) was driven after it already finished."""


class NoPathError(RuntimeError):
    """Raised into futures returned by submit_search when the goal is unreachable."""
