# -*- coding: utf-8 -*-
"""Rendering of mazes and paths (matplotlib figures, ASCII overlay)."""

from __future__ import annotations

from .render import render_maze, save_maze_figure, ascii_overlay

__all__ = ["render_maze", "save_maze_figure", "ascii_overlay"]
