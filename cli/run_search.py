#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_search.py
-------------
Solve one maze and print the shortest jump path.

Example:
    python -m cli.run_search                      # built-in 20x20 maze, knight jumps
    python -m cli.run_search --maze maps/m1.txt --moves knight_leg --png out/m1.png
    python -m cli.run_search --moves "1:0,-1:0,0:1,0:-1" --ascii

Maze files: one row per line; ' ' empty, '*' wall, '+' start, 'O' goal.
Exit status: 0 path found, 1 no path, 2 bad input.
"""

from __future__ import annotations
import argparse
import logging
import sys
import time
from typing import List, Optional

from maze.errors import MazeError
from maze.moves import format_move_set, parse_move_set
from envs.maze_io import default_maze, load_maze
from planners import get_planner, PLANNERS


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Shortest path through a maze under a jump move set.")
    ap.add_argument("--maze", type=str, default=None,
                    help="Path to a text maze (default: built-in 20x20 maze)")
    ap.add_argument("--moves", type=str, default="knight",
                    help="Preset (knight, knight_leg, knight_free, orthogonal, king) "
                         "or custom list like '2:1:midpoint,1:0'")
    ap.add_argument("--planner", type=str, default="jump_bfs", choices=sorted(PLANNERS),
                    help="Search implementation")
    ap.add_argument("--max-levels", type=int, default=None,
                    help="Stop after this many BFS levels (jump_bfs only)")
    ap.add_argument("--ascii", action="store_true", help="Print the maze with the path overlaid")
    ap.add_argument("--png", type=str, default=None, help="Save a rendered figure here")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        moves = parse_move_set(args.moves)
        grid = load_maze(args.maze) if args.maze else default_maze()
        kwargs = {"moves": moves}
        if args.planner == "jump_bfs":
            kwargs["max_levels"] = args.max_levels
        planner = get_planner(args.planner, **kwargs)

        t0 = time.perf_counter()
        res = planner.plan(grid)
        dt = time.perf_counter() - t0
    except (MazeError, ValueError, OSError) as e:
        print(f"[ERR] {e}", file=sys.stderr)
        return 2

    print(f"Maze {grid.width}x{grid.height}  start={grid.start}  goal={grid.goal}  "
          f"moves={format_move_set(moves)}")
    if res.success:
        print(f"Path ({res.hops} hops, {res.levels} levels, {res.discovered} cells reached, {dt*1000:.2f} ms):")
        print(" -> ".join(f"({x},{y})" for x, y in res.path))
    else:
        print(f"No path ({res.levels} levels, {res.discovered} cells reached, {dt*1000:.2f} ms).")

    if args.ascii:
        from viz.render import ascii_overlay
        print("\n".join(ascii_overlay(grid, res.path)))

    if args.png:
        from viz.render import save_maze_figure
        title = f"{res.hops} hops" if res.success else "no path"
        print("Saved:", save_maze_figure(grid, res.path, args.png, title=title))

    return 0 if res.success else 1


if __name__ == "__main__":
    sys.exit(main())
