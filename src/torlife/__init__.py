"""Conway's Game of Life on a wrap-around board."""

__version__ = "0.1.0"

from .core.board import Board, Cell, DimensionMismatchError
from .core.game import GameOfLife, step
from .core.patterns import Pattern, draw_named, parse_pattern_name

__all__ = [
    "Board",
    "Cell",
    "DimensionMismatchError",
    "GameOfLife",
    "step",
    "Pattern",
    "draw_named",
    "parse_pattern_name",
]
