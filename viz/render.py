# -*- coding: utf-8 -*-
"""
Maze rendering.

Reads only grid.kind_at / width / height and the path, so any planner's
output can be drawn.
"""

from __future__ import annotations

import os
from typing import List, Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt

from maze.grid import CellKind, MazeGrid

Cell = Tuple[int, int]

# RGB per cell kind
KIND_COLORS = {
    CellKind.EMPTY: (1.0, 1.0, 1.0),
    CellKind.BLOCKED: (0.86, 0.2, 0.18),
    CellKind.START: (0.27, 0.51, 0.71),
    CellKind.GOAL: (1.0, 0.84, 0.0),
    CellKind.OUT_OF_BOUNDS: (0.2, 0.2, 0.2),
}
PATH_COLOR = "hotpink"


def render_maze(grid: MazeGrid, path: Optional[Sequence[Cell]] = None, ax=None,
                title: Optional[str] = None, show_grid: bool = True):
    """
    Draw the maze on ``ax`` (a new figure if None).

    Layers:
      - cells colored by kind
      - grid lines
      - path as segments between cell centres
    """
    H, W = grid.height, grid.width
    if ax is None:
        _, ax = plt.subplots(figsize=(max(3, W / 3), max(3, H / 3)), dpi=120)

    rgb = np.ones((H, W, 3), dtype=float)
    for kind, color in KIND_COLORS.items():
        rgb[grid.kinds == int(kind)] = color

    # pixel (x, y) covers [x-0.5, x+0.5]; cell centres land on integers
    ax.imshow(rgb, interpolation="nearest", origin="upper")
    if show_grid:
        for i in range(W + 1):
            ax.axvline(i - 0.5, color="k", lw=0.5)
        for j in range(H + 1):
            ax.axhline(j - 0.5, color="k", lw=0.5)
    ax.set_xticks([]); ax.set_yticks([])

    if path:
        xs, ys = zip(*path)
        ax.plot(xs, ys, color=PATH_COLOR, lw=3, marker="o", markersize=3)

    if title:
        ax.set_title(title, fontsize=10)
    return ax


def save_maze_figure(grid: MazeGrid, path: Optional[Sequence[Cell]], out_path: str,
                     title: Optional[str] = None) -> str:
    fig, ax = plt.subplots(figsize=(max(3, grid.width / 3), max(3, grid.height / 3)), dpi=120)
    render_maze(grid, path, ax=ax, title=title)
    fig.tight_layout()
    d = os.path.dirname(out_path)
    if d:
        os.makedirs(d, exist_ok=True)
    fig.savefig(out_path, bbox_inches="tight")
    plt.close(fig)
    return out_path


def ascii_overlay(grid: MazeGrid, path: Optional[Sequence[Cell]] = None) -> List[str]:
    """Text rows with path cells marked '.'; start and goal keep their symbols."""
    rows = [list(r) for r in grid.to_rows()]
    for x, y in path or []:
        if grid.kind_at(x, y) == CellKind.EMPTY:
            rows[y][x] = "."
    return ["".join(r) for r in rows]
