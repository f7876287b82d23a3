"""Conway's Game of Life rules and double-buffered driver."""

from typing import Iterator, List, Optional
import logging

import numpy as np

from .board import Board, Cell, DimensionMismatchError
from .patterns import Pattern, draw_named

logger = logging.getLogger(__name__)

BOARD_SIZE = 8
GENERATION_COUNT = 4


def next_cell_state(center: Cell, count: int) -> Cell:
    """Apply Conway's rule to a single cell.

    - Filled cell with 2-3 filled neighbors survives
    - Empty cell with exactly 3 filled neighbors becomes filled
    - All other cells end up empty
    """
    if center == Cell.FILLED:
        return Cell.FILLED if count in (2, 3) else Cell.EMPTY
    return Cell.FILLED if count == 3 else Cell.EMPTY


def step(source: Board, target: Board) -> None:
    """Write the next generation of ``source`` into ``target``.

    ``source`` is only read, so cells may be visited in any order.

    Args:
        source: Current generation
        target: Board receiving the next generation

    Raises:
        DimensionMismatchError: If the boards differ in shape; target is
            left untouched
    """
    if source.shape != target.shape:
        logger.error("Mismatched boards during step: %s vs %s", source.shape, target.shape)
        raise DimensionMismatchError(source.shape, target.shape)

    for y in range(source.height):
        for x in range(source.width):
            center = source.read(x, y)
            count = source.alive_neighbor_count(x, y)
            target.write(x, y, next_cell_state(center, count))


class GameOfLife:
    """Double-buffered Game of Life simulation.

    Holds a front board (the current generation) and a back board that
    receives the next one. Stepping swaps the two references; no cells
    are copied.
    """

    def __init__(self, width: int = BOARD_SIZE, height: int = BOARD_SIZE) -> None:
        """Create both buffers.

        Args:
            width: Board width
            height: Board height
        """
        self._front = Board(width, height)
        self._back = Board(width, height)
        self._generation = 0
        self._population_history: List[int] = [self._front.population]

    @property
    def board(self) -> Board:
        """The current generation."""
        return self._front

    @property
    def back_board(self) -> Board:
        """The buffer the next generation is written into."""
        return self._back

    @property
    def generation(self) -> int:
        """Number of steps taken so far."""
        return self._generation

    @property
    def population(self) -> int:
        """Filled cells on the current board."""
        return self._front.population

    @property
    def population_history(self) -> List[int]:
        """Population after seeding and after every step."""
        return list(self._population_history)

    def seed(self, name: Optional[str] = None, rng: Optional[np.random.Generator] = None) -> Pattern:
        """Draw a named pattern onto the current board.

        Args:
            name: Pattern name; unknown or missing names draw a random board
            rng: Random source for the random pattern

        Returns:
            The pattern that was drawn
        """
        pattern = draw_named(self._front, name, rng)
        self._population_history = [self._front.population]
        return pattern

    def step(self) -> None:
        """Advance the simulation by one generation."""
        step(self._front, self._back)
        self.swap_buffers()

        self._generation += 1
        self._population_history.append(self.population)

    def swap_buffers(self) -> None:
        """Exchange the roles of the front and back boards."""
        self._front, self._back = self._back, self._front

    def iter_generations(self, count: int = GENERATION_COUNT) -> Iterator[Board]:
        """Yield the current board, then step, ``count`` times.

        Args:
            count: Number of generations to produce

        Yields:
            The board for each generation before it is stepped
        """
        for _ in range(count):
            yield self._front
            self.step()
