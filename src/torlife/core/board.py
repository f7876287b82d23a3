"""Board data structure for the toroidal Game of Life."""

from enum import IntEnum
from typing import List, Tuple
import numbers

import numpy as np
import torch
import torch.nn.functional as F

EMPTY_GLYPH = "."
FILLED_GLYPH = "X"

# Moore neighborhood, center excluded
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if not (dx == 0 and dy == 0)
)


class Cell(IntEnum):
    """State of a single board cell."""

    EMPTY = 0
    FILLED = 1


class DimensionMismatchError(ValueError):
    """Raised when two boards that must share a shape do not."""

    def __init__(self, expected: Tuple[int, int], actual: Tuple[int, int]) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Board dimensions don't match: {expected} vs {actual}")


class Board:
    """A fixed-size grid of cells whose edges wrap around.

    Cells are stored flat in row-major order, so the cell at (x, y) lives
    at index ``x + y * width``. Every read and write goes through
    :meth:`resolve`, which makes any integer coordinate valid.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create an all-empty board.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is not a positive integer
        """
        for size in (width, height):
            if not isinstance(size, numbers.Integral) or isinstance(size, bool):
                raise ValueError(f"Board dimensions must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")

        self._width = int(width)
        self._height = int(height)
        self._cells = np.full(self._width * self._height, Cell.EMPTY, dtype=np.int8)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Board dimensions as (width, height)."""
        return (self._width, self._height)

    @property
    def cells(self) -> np.ndarray:
        """Flat row-major cell array."""
        return self._cells

    @property
    def population(self) -> int:
        """Number of filled cells."""
        return int(np.count_nonzero(self._cells))

    def resolve(self, x: int, y: int) -> int:
        """Map any coordinate pair onto a flat cell index.

        Args:
            x: Column coordinate, may lie outside the board
            y: Row coordinate, may lie outside the board

        Returns:
            Index into :attr:`cells`
        """
        sx = x % self._width
        sy = y % self._height
        return sx + sy * self._width

    def read(self, x: int, y: int) -> Cell:
        """Get the cell at (x, y) with wraparound."""
        return Cell(int(self._cells[self.resolve(x, y)]))

    def write(self, x: int, y: int, value: Cell) -> None:
        """Set the cell at (x, y) with wraparound.

        Raises:
            ValueError: If value is not a valid cell state
        """
        self._cells[self.resolve(x, y)] = Cell(value)

    def fill(self, value: Cell) -> None:
        """Set every cell to the same value."""
        self._cells.fill(Cell(value))

    def clear(self) -> None:
        """Empty the board."""
        self.fill(Cell.EMPTY)

    def fill_where(self, mask: np.ndarray, value: Cell = Cell.FILLED) -> None:
        """Set the cells selected by a flat row-major boolean mask.

        Raises:
            ValueError: If the mask shape differs from the cell array
        """
        mask = np.asarray(mask, dtype=bool)
        if mask.shape != self._cells.shape:
            raise ValueError(f"Mask shape {mask.shape} doesn't match board cells {self._cells.shape}")

        self._cells[mask] = Cell(value)

    def neighbor_indices(self, x: int, y: int) -> List[int]:
        """Flat indices of the eight cells surrounding (x, y)."""
        return [self.resolve(x + dx, y + dy) for dx, dy in NEIGHBOR_OFFSETS]

    def alive_neighbor_count(self, x: int, y: int) -> int:
        """Count filled cells among the eight neighbors of (x, y).

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of filled neighbors (0-8)
        """
        count = 0
        for index in self.neighbor_indices(x, y):
            if self._cells[index] == Cell.FILLED:
                count += 1
        return count

    def neighbor_counts(self) -> np.ndarray:
        """Count filled neighbors for every cell at once.

        Uses a 3x3 convolution over a circularly padded copy of the
        board, so the result matches :meth:`alive_neighbor_count`. Stepping
        counts per cell; this is the whole-board cross-check for it.

        Returns:
            Array of shape (height, width) with neighbor counts
        """
        board = torch.from_numpy(self.to_array().astype(np.float32))
        board = board.reshape(1, 1, self._height, self._width)
        kernel = torch.ones(1, 1, 3, 3, dtype=torch.float32)
        kernel[0, 0, 1, 1] = 0

        padded = F.pad(board, (1, 1, 1, 1), mode="circular")
        counts = F.conv2d(padded, kernel)
        return counts[0, 0].numpy().astype(np.int8)

    def to_array(self) -> np.ndarray:
        """View the cells as a (height, width) array."""
        return self._cells.reshape(self._height, self._width)

    def filled_cells(self) -> List[Tuple[int, int]]:
        """Coordinates of filled cells in row-major order."""
        rows, cols = np.nonzero(self.to_array())
        return [(int(x), int(y)) for y, x in zip(rows, cols)]

    def render(self) -> str:
        """Render the board as text.

        Each row becomes one line of glyphs; a blank line follows the
        last row so consecutive boards stay visually separated.
        """
        lines = []
        for y in range(self._height):
            row = []
            for x in range(self._width):
                row.append(FILLED_GLYPH if self.read(x, y) == Cell.FILLED else EMPTY_GLYPH)
            lines.append("".join(row) + "\n")
        lines.append("\n")
        return "".join(lines)

    def __eq__(self, other: object) -> bool:
        """Check if two boards have the same shape and cells."""
        if not isinstance(other, Board):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(width={self._width}, height={self._height}, population={self.population})"
