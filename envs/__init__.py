# -*- coding: utf-8 -*-
"""
Maze sources.
Exposes:
- MazeEnvironment, generate_maze(...)   (random mazes, generator.py)
- default_maze(), parse_maze(), load_maze(), save_maze()   (maze_io.py)
"""

from __future__ import annotations

from .generator import MazeEnvironment, generate_maze
from .maze_io import DEFAULT_MAZE, default_maze, parse_maze, load_maze, save_maze

__all__ = [
    "MazeEnvironment",
    "generate_maze",
    "DEFAULT_MAZE",
    "default_maze",
    "parse_maze",
    "load_maze",
    "save_maze",
]
