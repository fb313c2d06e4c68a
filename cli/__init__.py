# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- run_search : solve one maze (text file or built-in) and print/render the path
- run_bench  : sweep random mazes, cross-check against the reference BFS, write CSV
"""
__all__ = [
    "run_search",
    "run_bench",
]
