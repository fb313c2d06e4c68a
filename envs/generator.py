#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random maze generator for jump-move search experiments.

Walls are stamped as small objects (rectangles, 1-wide bars, random blobs)
until a target density is met. Each new wall keeps a ``moat`` of free cells
from existing walls, so corridors stay open for jumps.

ensure_status:
    "any"     : no guarantee about path existence.
    "success" : the goal is reachable under the given move set.
    "failure" : the goal is unreachable under the given move set.
The guarantee is met by re-sampling; RuntimeError if ``max_tries`` runs out.

Dependencies:
    numpy
    scipy.ndimage   (binary dilation for the moat test)

Usage (quick smoke test):
    python3 -m envs.generator
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
from scipy.ndimage import binary_dilation

from maze.grid import Cell, CellKind, MazeGrid
from maze.moves import Move, knight_moves
from planners.fifo_bfs import FIFOBFSPlanner

ENSURE_STATUSES = ("any", "success", "failure")


@dataclass
class MazeEnvironment:
    """A generated maze plus the settings that produced it (for provenance)."""
    grid: MazeGrid
    settings: Dict
    rng: np.random.Generator

    @property
    def start(self) -> Cell:
        return self.grid.start

    @property
    def goal(self) -> Cell:
        return self.grid.goal

    @property
    def shape(self) -> Tuple[int, int]:
        return self.grid.shape


# ------------------------------ Wall shapes -------------------------------- #

def _rect_mask(rng: np.random.Generator, size: Tuple[int, int]) -> np.ndarray:
    lo, hi = size
    h = int(rng.integers(lo, hi + 1))
    w = int(rng.integers(lo, hi + 1))
    return np.ones((max(1, h), max(1, w)), dtype=bool)


def _bar_mask(rng: np.random.Generator, length: Tuple[int, int]) -> np.ndarray:
    n = int(rng.integers(length[0], length[1] + 1))
    if rng.random() < 0.5:
        return np.ones((1, n), dtype=bool)
    return np.ones((n, 1), dtype=bool)


def _blob_mask(rng: np.random.Generator, cells: Tuple[int, int]) -> np.ndarray:
    """Random 4-connected polyomino, cropped to its bounding box."""
    n = max(1, int(rng.integers(cells[0], cells[1] + 1)))
    side = int(np.ceil(np.sqrt(n))) + 4
    canvas = np.zeros((side, side), dtype=bool)
    r = c = side // 2
    canvas[r, c] = True
    coords = [(r, c)]
    deltas = [(-1, 0), (1, 0), (0, -1), (0, 1)]
    while len(coords) < n:
        br, bc = coords[int(rng.integers(0, len(coords)))]
        dr, dc = deltas[int(rng.integers(0, 4))]
        nr, nc = br + dr, bc + dc
        if 0 <= nr < side and 0 <= nc < side and not canvas[nr, nc]:
            canvas[nr, nc] = True
            coords.append((nr, nc))
    ys, xs = np.where(canvas)
    return canvas[ys.min():ys.max() + 1, xs.min():xs.max() + 1]


def _stamp(walls: np.ndarray, top_left: Tuple[int, int], mask: np.ndarray, moat: int) -> bool:
    """Stamp ``mask`` at (row, col) if it and its moat ring touch no wall."""
    H, W = walls.shape
    r0, c0 = top_left
    mr, mc = mask.shape
    if r0 < 0 or c0 < 0 or r0 + mr > H or c0 + mc > W:
        return False
    if moat > 0:
        padded = np.zeros_like(walls)
        padded[r0:r0 + mr, c0:c0 + mc] = mask
        ring = binary_dilation(padded, structure=np.ones((3, 3), dtype=bool), iterations=moat)
        if (ring & walls).any():
            return False
    elif (walls[r0:r0 + mr, c0:c0 + mc] & mask).any():
        return False
    walls[r0:r0 + mr, c0:c0 + mc] |= mask
    return True


# ------------------------------ Core generator ----------------------------- #

def _sample_walls(rng: np.random.Generator, H: int, W: int, density: float, moat: int,
                  shape_probs: Dict[str, float], max_place_tries: int) -> np.ndarray:
    walls = np.zeros((H, W), dtype=bool)
    target = int(round(float(np.clip(density, 0.0, 0.9)) * H * W))
    keys = list(shape_probs)
    p = np.array([shape_probs[k] for k in keys], dtype=float)
    p = p / p.sum()

    tries = 0
    while tries < max_place_tries and int(walls.sum()) < target:
        tries += 1
        shape = keys[rng.choice(len(keys), p=p)]
        if shape == "rect":
            mask = _rect_mask(rng, (1, 3))
        elif shape == "bar":
            mask = _bar_mask(rng, (2, max(2, min(H, W) // 3)))
        else:
            mask = _blob_mask(rng, (3, 8))
        mr, mc = mask.shape
        if mr > H or mc > W:
            continue
        r0 = int(rng.integers(0, H - mr + 1))
        c0 = int(rng.integers(0, W - mc + 1))
        _stamp(walls, (r0, c0), mask, moat)
    return walls


def generate_maze(
    H: int = 20,
    W: int = 20,
    *,
    density: float = 0.2,
    start: Cell = (0, 0),
    goal: Optional[Cell] = None,
    moves: Optional[Sequence[Move]] = None,
    moat: int = 1,
    shape_probs: Optional[Dict[str, float]] = None,
    ensure_status: str = "any",
    rng: Optional[np.random.Generator] = None,
    max_tries: int = 200,
    max_place_tries: int = 2000,
) -> MazeEnvironment:
    """
    Create a random H x W maze. ``start`` and ``goal`` are (x, y) cells; goal
    defaults to the bottom-right corner. ``moves`` is only used to check the
    ensure_status guarantee (defaults to knight moves).
    """
    if ensure_status not in ENSURE_STATUSES:
        raise ValueError(f"ensure_status must be one of {ENSURE_STATUSES}, got '{ensure_status}'")
    if goal is None:
        goal = (W - 1, H - 1)
    if start == goal:
        raise ValueError("start and goal must differ.")
    for name, (x, y) in (("start", start), ("goal", goal)):
        if not (0 <= x < W and 0 <= y < H):
            raise ValueError(f"{name} {(x, y)} is outside a {W}x{H} maze.")

    if shape_probs is None:
        shape_probs = {"rect": 0.4, "bar": 0.4, "blob": 0.2}
    moves = tuple(moves) if moves is not None else knight_moves()
    rng = rng or np.random.default_rng()
    checker = FIFOBFSPlanner(moves)

    settings = dict(
        H=H, W=W, density=density, start=start, goal=goal, moat=moat,
        shape_probs=shape_probs, ensure_status=ensure_status,
        moves=[str(m) for m in moves], max_tries=max_tries,
    )

    for attempt in range(1, max_tries + 1):
        walls = _sample_walls(rng, H, W, density, moat, shape_probs, max_place_tries)
        kinds = np.where(walls, int(CellKind.BLOCKED), int(CellKind.EMPTY)).astype(np.int8)
        kinds[start[1], start[0]] = int(CellKind.START)
        kinds[goal[1], goal[0]] = int(CellKind.GOAL)
        grid = MazeGrid(kinds)
        if ensure_status == "any":
            break
        solved = checker.plan(grid).success
        if solved == (ensure_status == "success"):
            break
    else:
        raise RuntimeError(
            f"Could not generate a '{ensure_status}' maze in {max_tries} tries "
            f"(size {W}x{H}, density {density})."
        )

    settings["attempts"] = attempt
    return MazeEnvironment(grid=grid, settings=settings, rng=rng)


# ---------------------------------- Demo ------------------------------------ #

if __name__ == "__main__":
    rng = np.random.default_rng(123)
    env = generate_maze(H=20, W=30, density=0.25, ensure_status="success", rng=rng)
    print("Maze:", env.shape, "Start:", env.start, "Goal:", env.goal)
    print("#Wall cells:", env.grid.count(CellKind.BLOCKED))
    print("\n".join(env.grid.to_rows()))
