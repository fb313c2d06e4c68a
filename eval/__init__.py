# -*- coding: utf-8 -*-
"""
Evaluation utilities: path validation, reference cross-check, metrics.
"""

from __future__ import annotations

from .validation import validate_path, cross_check, moves_between
from .metrics import path_metrics, search_metrics, summarize

__all__ = [
    "validate_path", "cross_check", "moves_between",
    "path_metrics", "search_metrics", "summarize",
]
