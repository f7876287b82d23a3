"""Core board engine."""

from .board import Board, Cell, DimensionMismatchError
from .game import GameOfLife, next_cell_state, step
from .patterns import Pattern, draw_named, draw_pattern, parse_pattern_name

__all__ = [
    "Board",
    "Cell",
    "DimensionMismatchError",
    "GameOfLife",
    "next_cell_state",
    "step",
    "Pattern",
    "draw_named",
    "draw_pattern",
    "parse_pattern_name",
]
