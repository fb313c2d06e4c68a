# -*- coding: utf-8 -*-
"""
Text maze I/O.

One row per line, one character per cell (see maze.grid for symbols).
Trailing newlines are stripped; blank trailing lines are ignored, so a file
ending in a newline loads the same as one that does not.
"""

from __future__ import annotations

import os
from typing import List

from maze.grid import MazeGrid

DEFAULT_MAZE: List[str] = [
    "+                   ",
    "    * *****         ",
    "    *               ",
    "   **               ",
    "    *               ",
    "    *     *         ",
    "          *         ",
    "    *     *         ",
    "    *     *  *      ",
    "    *     *  *****  ",
    "    *     *  *      ",
    "***       *  *      ",
    "    *        *      ",
    " **********  *  ****",
    "          *  *      ",
    "             *      ",
    "        ******      ",
    "                    ",
    "        *           ",
    "        *          O",
]


def default_maze() -> MazeGrid:
    """The 20x20 demo maze: start top-left, goal bottom-right."""
    return MazeGrid.from_rows(DEFAULT_MAZE)


def parse_maze(text: str) -> MazeGrid:
    lines = text.split("\n")
    lines = [ln.rstrip("\r") for ln in lines]
    while lines and lines[-1] == "":
        lines.pop()
    return MazeGrid.from_rows(lines)


def load_maze(path: str) -> MazeGrid:
    with open(path, "r", encoding="utf-8") as f:
        return parse_maze(f.read())


def save_maze(grid: MazeGrid, path: str) -> None:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(grid.to_rows()) + "\n")
