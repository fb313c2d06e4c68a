#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
metrics.py
----------
Per-search metrics for benchmark CSVs.

- path_metrics(): hops, Euclidean length, jump/step counts of a path
- search_metrics(): path metrics + search bookkeeping (levels, discovered)
- summarize(): pandas aggregate over benchmark rows
"""

from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple
import math

import numpy as np
import pandas as pd

from maze.grid import CellKind, MazeGrid
from maze.result import SearchResult

Cell = Tuple[int, int]


def path_metrics(path: Optional[Sequence[Cell]]) -> Dict[str, float]:
    """Hops, Euclidean length, and unit-step vs jump counts of an (x,y) path."""
    if not path or len(path) < 2:
        return {"hops": 0, "geom_length": 0.0, "unit_steps": 0, "jumps": 0}
    pts = np.asarray(path, dtype=float)
    seg = np.diff(pts, axis=0)
    lengths = np.hypot(seg[:, 0], seg[:, 1])
    cheb = np.abs(seg).max(axis=1)
    unit = int(np.count_nonzero(cheb <= 1))
    return {
        "hops": int(len(path) - 1),
        "geom_length": float(lengths.sum()),
        "unit_steps": unit,
        "jumps": int(len(path) - 1 - unit),
    }


def search_metrics(grid: MazeGrid, result: SearchResult) -> Dict:
    free = grid.count(CellKind.EMPTY) + grid.count(CellKind.GOAL)
    row = {
        "success": int(result.success),
        "levels": result.levels,
        "discovered": result.discovered,
        # start is not free, so it is not counted in the coverage
        "coverage": (result.discovered - 1) / free if free else math.nan,
    }
    row.update(path_metrics(result.path))
    return row


def summarize(rows: List[Dict], by: Sequence[str] = ("W", "H", "density")) -> pd.DataFrame:
    df = pd.DataFrame(rows)
    if df.empty:
        return df
    # Timing and agreement columns only exist in benchmark rows.
    columns = {
        "runs": ("success", "size"),
        "success_rate": ("success", "mean"),
        "mean_hops": ("hops", "mean"),
        "mean_levels": ("levels", "mean"),
        "mean_time_s": ("time_s", "mean"),
        "agree_rate": ("agree", "mean"),
    }
    agg = {name: col for name, col in columns.items() if col[0] in df.columns}
    return df.groupby(list(by)).agg(**agg).reset_index()
