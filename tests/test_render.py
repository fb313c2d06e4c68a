import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import matplotlib
matplotlib.use("Agg")

from maze.grid import MazeGrid
from viz.render import ascii_overlay, render_maze, save_maze_figure

def test_ascii_overlay_marks_path():
    g = MazeGrid.from_rows(["+  O", "  * "])
    assert ascii_overlay(g, [(0, 0), (1, 0), (2, 0), (3, 0)]) == ["+..O", "  * "]
    assert ascii_overlay(g, None) == ["+  O", "  * "]

def test_render_draws_path_segments():
    g = MazeGrid.from_rows(["+  ", "  O", "   "])
    ax = render_maze(g, [(0, 0), (2, 1)], title="1 hop")
    xs, ys = ax.lines[-1].get_data()
    assert list(xs) == [0, 2] and list(ys) == [0, 1]
    assert ax.get_title() == "1 hop"

def test_save_figure(tmp_path):
    g = MazeGrid.from_rows(["+ O"])
    out = save_maze_figure(g, [(0, 0), (1, 0), (2, 0)], os.path.join(str(tmp_path), "fig", "m.png"))
    assert os.path.isfile(out) and os.path.getsize(out) > 0
