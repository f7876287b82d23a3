"""Seed patterns and name-based pattern selection."""

from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple
import logging

import numpy as np

from .board import Board, Cell

logger = logging.getLogger(__name__)


class Pattern(Enum):
    """Known seed patterns. Values are the names reported to users."""

    BLINKER = "Blinker"
    TOAD = "Toad"
    BEACON = "Beacon"
    RANDOM = "RANDOM"


# Fixed placements, laid out for the default 8x8 board
BLINKER_CELLS: List[Tuple[int, int]] = [(4, 3), (4, 4), (4, 5)]
TOAD_CELLS: List[Tuple[int, int]] = [(3, 3), (4, 3), (5, 3), (2, 4), (3, 4), (4, 4)]
BEACON_CUBES: List[Tuple[int, int]] = [(5, 1), (3, 3)]

RANDOM_FILL_PROBABILITY = 0.5


def parse_pattern_name(name: Optional[str]) -> Optional[Pattern]:
    """Look up a pattern by name, ignoring ASCII case.

    Args:
        name: Pattern name as typed by the user, or None

    Returns:
        Matching Pattern, or None if the name is absent or unknown
    """
    if not name:
        return None

    folded = name.lower()
    for pattern in Pattern:
        if pattern.value.lower() == folded:
            return pattern
    return None


def draw_cells(board: Board, cells: List[Tuple[int, int]]) -> None:
    """Fill each listed coordinate."""
    for x, y in cells:
        board.write(x, y, Cell.FILLED)


def draw_blinker(board: Board) -> None:
    draw_cells(board, BLINKER_CELLS)


def draw_toad(board: Board) -> None:
    draw_cells(board, TOAD_CELLS)


def draw_cube(board: Board, x: int, y: int) -> None:
    """Fill a 2x2 block whose top-left corner is (x, y)."""
    draw_cells(board, [(x, y), (x + 1, y), (x, y + 1), (x + 1, y + 1)])


def draw_beacon(board: Board) -> None:
    """Two diagonally touching cubes."""
    for x, y in BEACON_CUBES:
        draw_cube(board, x, y)


def draw_random(board: Board, rng: Optional[np.random.Generator] = None) -> None:
    """Fill each cell independently with probability one half.

    Cells that are not picked keep their current state.

    Args:
        board: Target board
        rng: Random source; a freshly entropy-seeded generator when None
    """
    if rng is None:
        rng = np.random.default_rng()

    mask = rng.random(board.cells.shape) < RANDOM_FILL_PROBABILITY
    board.fill_where(mask, Cell.FILLED)


def draw_pattern(board: Board, pattern: Pattern, rng: Optional[np.random.Generator] = None) -> None:
    """Draw one of the known patterns onto a board.

    Args:
        board: Target board
        pattern: Pattern to draw
        rng: Random source, only used by Pattern.RANDOM
    """
    if pattern is Pattern.RANDOM:
        draw_random(board, rng)
    else:
        _DRAWERS[pattern](board)


def draw_named(board: Board, name: Optional[str], rng: Optional[np.random.Generator] = None) -> Pattern:
    """Draw a pattern selected by name.

    Unknown, empty and missing names fall back to Pattern.RANDOM.

    Args:
        board: Target board
        name: Pattern name, case-insensitive
        rng: Random source for the random pattern

    Returns:
        The pattern that was actually drawn
    """
    pattern = parse_pattern_name(name)
    if pattern is None:
        if name:
            logger.info("Unknown pattern %r, using %s", name, Pattern.RANDOM.value)
        pattern = Pattern.RANDOM

    logger.debug("Drawing %s on %dx%d board", pattern.value, board.width, board.height)
    draw_pattern(board, pattern, rng)
    return pattern


def list_patterns() -> List[str]:
    """Names of all known patterns."""
    return [pattern.value for pattern in Pattern]


_DRAWERS: Dict[Pattern, Callable[[Board], None]] = {
    Pattern.BLINKER: draw_blinker,
    Pattern.TOAD: draw_toad,
    Pattern.BEACON: draw_beacon,
}
