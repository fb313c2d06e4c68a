#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest

from envs.generator import generate_maze
from envs.maze_io import DEFAULT_MAZE, default_maze, load_maze, parse_maze, save_maze
from maze.errors import MalformedGridError
from maze.grid import CellKind
from maze.moves import MOVE_SETS
from planners import FIFOBFSPlanner

def test_generate_places_start_goal_and_walls():
    env = generate_maze(H=12, W=15, density=0.2, rng=np.random.default_rng(0))
    assert env.shape == (12, 15)
    assert env.start == (0, 0)
    assert env.goal == (14, 11)
    assert env.grid.count(CellKind.START) == 1
    assert env.grid.count(CellKind.GOAL) == 1
    walls = env.grid.count(CellKind.BLOCKED)
    assert 0 < walls <= int(0.3 * 12 * 15)

def test_generate_is_reproducible():
    a = generate_maze(H=10, W=10, density=0.25, rng=np.random.default_rng(5))
    b = generate_maze(H=10, W=10, density=0.25, rng=np.random.default_rng(5))
    assert a.grid == b.grid

@pytest.mark.parametrize("status", ["success", "failure"])
def test_ensure_status(status):
    moves = MOVE_SETS["knight"]
    for seed in range(3):
        env = generate_maze(H=10, W=10, density=0.2, moves=moves, ensure_status=status,
                            rng=np.random.default_rng(seed))
        solved = FIFOBFSPlanner(moves).plan(env.grid).success
        assert solved == (status == "success")
        assert env.settings["attempts"] >= 1

def test_generate_rejects_bad_arguments():
    with pytest.raises(ValueError):
        generate_maze(H=5, W=5, ensure_status="near-failure")
    with pytest.raises(ValueError):
        generate_maze(H=5, W=5, start=(1, 1), goal=(1, 1))
    with pytest.raises(ValueError):
        generate_maze(H=5, W=5, goal=(5, 0))

def test_default_maze():
    g = default_maze()
    assert (g.width, g.height) == (20, 20)
    assert g.start == (0, 0)
    assert g.goal == (19, 19)
    assert g.to_rows() == DEFAULT_MAZE

def test_parse_ignores_trailing_newlines():
    g = parse_maze("+ *\r\n  O\n\n")
    assert g.to_rows() == ["+ *", "  O"]
    with pytest.raises(MalformedGridError):
        parse_maze("+ *\n O\n")

def test_save_and_load(tmp_path):
    g = default_maze()
    p = os.path.join(str(tmp_path), "mazes", "default.txt")
    save_maze(g, p)
    assert load_maze(p) == g
