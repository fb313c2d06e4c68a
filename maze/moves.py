# -*- coding: utf-8 -*-
"""
Move sets: fixed displacements plus the cells a jump must clear.

A Move is one concrete type holding (dx, dy) and a BlockingRule:
- NONE      : only the destination is checked (plain steps).
- MIDPOINT  : one elbow cell, half-way along the dominant axis with zero
              offset on the other axis. For a knight jump (2, 1) that is
              (1, 0); for (1, -2) it is (0, -1).
- LEG       : every cell along the dominant axis from the origin up to and
              including the elbow, e.g. (1, 0) and (2, 0) for (2, 1).

The dominant axis is x when |dx| > |dy|, else y (ties go to y). Halving
truncates toward zero, and a zero offset yields no blocking cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Sequence, Tuple

Cell = Tuple[int, int]
MoveSet = Tuple["Move", ...]


class BlockingRule(str, Enum):
    NONE = "none"
    MIDPOINT = "midpoint"
    LEG = "leg"


def _dominant(dx: int, dy: int) -> Tuple[int, bool]:
    """(magnitude on the dominant axis, True if that axis is x)."""
    if abs(dx) > abs(dy):
        return dx, True
    return dy, False


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


@dataclass(frozen=True)
class Move:
    dx: int
    dy: int
    rule: BlockingRule = BlockingRule.NONE

    def __post_init__(self):
        if self.dx == 0 and self.dy == 0:
            raise ValueError("A move needs a non-zero displacement.")
        object.__setattr__(self, "rule", BlockingRule(self.rule))

    @property
    def offset(self) -> Cell:
        return (self.dx, self.dy)

    def target(self, origin: Cell) -> Cell:
        return (origin[0] + self.dx, origin[1] + self.dy)

    def blocking_offsets(self) -> List[Cell]:
        if self.rule is BlockingRule.NONE:
            return []
        m, on_x = _dominant(self.dx, self.dy)
        if self.rule is BlockingRule.MIDPOINT:
            half = int(m / 2)
            if half == 0:
                return []
            return [(half, 0)] if on_x else [(0, half)]
        # LEG
        s = _sign(m)
        steps = [s * k for k in range(1, abs(m) + 1)]
        if on_x:
            out = [(k, 0) for k in steps]
        else:
            out = [(0, k) for k in steps]
        # A straight jump's leg ends on the target itself; that is checked separately.
        return [o for o in out if o != self.offset]

    def blocking_cells(self, origin: Cell) -> List[Cell]:
        x, y = origin
        return [(x + ox, y + oy) for ox, oy in self.blocking_offsets()]

    def __str__(self) -> str:
        return f"{self.dx}:{self.dy}:{self.rule.value}"


# ------------------------------- Presets ----------------------------------- #

KNIGHT_OFFSETS: Tuple[Cell, ...] = (
    (2, 1), (2, -1), (1, 2), (1, -2),
    (-2, 1), (-2, -1), (-1, 2), (-1, -2),
)

ORTHOGONAL_OFFSETS: Tuple[Cell, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))

KING_OFFSETS: Tuple[Cell, ...] = (
    (1, 0), (0, 1), (-1, 0), (0, -1),
    (1, 1), (1, -1), (-1, 1), (-1, -1),
)


def _check_unique(moves: Sequence[Move]) -> None:
    seen = set()
    for m in moves:
        if m.offset in seen:
            raise ValueError(f"Duplicate displacement {m.offset} in move set.")
        seen.add(m.offset)


def make_move_set(offsets: Iterable[Cell], rule: BlockingRule = BlockingRule.NONE) -> MoveSet:
    moves = tuple(Move(int(dx), int(dy), rule) for dx, dy in offsets)
    _check_unique(moves)
    return moves


def knight_moves(rule: BlockingRule = BlockingRule.MIDPOINT) -> MoveSet:
    return make_move_set(KNIGHT_OFFSETS, rule)


MOVE_SETS: Dict[str, MoveSet] = {
    "knight": knight_moves(),
    "knight_free": knight_moves(BlockingRule.NONE),
    "knight_leg": knight_moves(BlockingRule.LEG),
    "orthogonal": make_move_set(ORTHOGONAL_OFFSETS),
    "king": make_move_set(KING_OFFSETS),
}


def parse_move_set(text: str) -> MoveSet:
    """
    Parse a move-set description.

    Either a preset name (see MOVE_SETS) or a comma-separated list of
    ``dx:dy`` / ``dx:dy:rule`` tokens, e.g. ``"2:1:midpoint,1:0"``.
    """
    text = text.strip()
    if text.lower() in MOVE_SETS:
        return MOVE_SETS[text.lower()]
    moves: List[Move] = []
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        parts = token.split(":")
        if len(parts) not in (2, 3):
            raise ValueError(
                f"Bad move '{token}', expected dx:dy or dx:dy:rule "
                f"(or a preset: {sorted(MOVE_SETS)})"
            )
        rule = BlockingRule(parts[2].strip().lower()) if len(parts) == 3 else BlockingRule.NONE
        moves.append(Move(int(parts[0]), int(parts[1]), rule))
    if not moves:
        raise ValueError("Move set is empty.")
    _check_unique(moves)
    return tuple(moves)


def format_move_set(moves: Sequence[Move]) -> str:
    for name, preset in MOVE_SETS.items():
        if tuple(moves) == preset:
            return name
    return ",".join(str(m) for m in moves)
