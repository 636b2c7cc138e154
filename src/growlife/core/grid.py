"""Grid data structure for Conway's Game of Life."""

import logging
import re
from enum import IntEnum
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np
import torch
import torch.nn.functional as F

from .errors import EmptyPatternError, MalformedInputError

logger = logging.getLogger(__name__)

DEAD_GLYPH = "."
ALIVE_GLYPH = "O"

# Moore neighborhood, centre cell excluded
_NEIGHBOR_KERNEL = (
    torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
)
_NEIGHBOR_OFFSETS = tuple(
    (d_row, d_col) for d_row in (-1, 0, 1) for d_col in (-1, 0, 1) if (d_row, d_col) != (0, 0)
)
_ROW_SEPARATOR = re.compile(r"\r\n|\n")


class CellState(IntEnum):
    """State of a single cell."""

    DEAD = 0
    ALIVE = 1

    @classmethod
    def from_glyph(cls, glyph: str, dead: str = DEAD_GLYPH) -> "CellState":
        """Map a text glyph to a state: the dead glyph is DEAD, anything else ALIVE."""
        return cls.DEAD if glyph == dead else cls.ALIVE

    def to_glyph(self, dead: str = DEAD_GLYPH, alive: str = ALIVE_GLYPH) -> str:
        """Map this state back to its text glyph."""
        if self is CellState.ALIVE:
            return alive
        return dead


def _to_array(cells: Any) -> np.ndarray:
    """Validate a cell matrix and convert it to a fresh int8 array."""
    if isinstance(cells, np.ndarray):
        if cells.ndim != 2:
            raise MalformedInputError(f"Expected a 2D cell matrix, got {cells.ndim} dimension(s)")
        array = cells
    else:
        try:
            rows = [list(row) for row in cells]
        except TypeError as e:
            raise MalformedInputError(f"Cell matrix must be a sequence of rows: {e}") from e

        if not rows:
            raise EmptyPatternError("Pattern has no rows")

        widths = sorted({len(row) for row in rows})
        if len(widths) > 1:
            raise MalformedInputError(f"Rows have unequal lengths: {widths}")

        array = np.array(rows)
        if array.ndim != 2:
            raise MalformedInputError("Cells must be scalar 0/1 values")

    if array.shape[0] == 0 or array.shape[1] == 0:
        raise EmptyPatternError(f"Pattern has no cells (shape {array.shape})")

    if array.dtype.kind not in "biu" or not np.isin(array, (CellState.DEAD, CellState.ALIVE)).all():
        raise MalformedInputError("Cell values must be 0 (dead) or 1 (alive)")

    return array.astype(np.int8)


class Grid:
    """An immutable rectangular matrix of cells.

    Cells are stored in a read-only numpy array of shape (rows, cols).
    Every transformation returns a new Grid; an existing Grid never changes.
    """

    def __init__(self, cells: Any) -> None:
        """Initialize a grid.

        Args:
            cells: Another Grid, a 2D array, or a sequence of rows holding
                0/1 values (or CellState members)

        Raises:
            MalformedInputError: If rows differ in length or hold other values
            EmptyPatternError: If there are no rows or no columns
        """
        if isinstance(cells, Grid):
            self._cells = cells._cells
            return

        self._cells = _to_array(cells)
        self._cells.setflags(write=False)

    @classmethod
    def blank(cls, rows: int, cols: int) -> "Grid":
        """Create an all-dead grid of the given size."""
        return cls(np.zeros((rows, cols), dtype=np.int8))

    @classmethod
    def from_coordinates(cls, rows: int, cols: int, alive: Iterable[Tuple[int, int]]) -> "Grid":
        """Create a grid with the listed (row, col) cells alive.

        Raises:
            IndexError: If a coordinate lies outside the grid
        """
        cells = np.zeros((rows, cols), dtype=np.int8)
        for row, col in alive:
            if not (0 <= row < rows and 0 <= col < cols):
                raise IndexError(f"Coordinates ({row}, {col}) out of bounds")
            cells[row, col] = CellState.ALIVE
        return cls(cells)

    @property
    def cells(self) -> np.ndarray:
        """Get the (read-only) cell array."""
        return self._cells

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cells.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, cols)."""
        return (self.rows, self.cols)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, row: int, col: int) -> bool:
        """Whether (row, col) addresses a cell of this grid."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> CellState:
        """Get the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")
        return CellState(int(self._cells[row, col]))

    def is_alive(self, row: int, col: int) -> bool:
        """Whether a cell is alive; cells outside the grid read as dead."""
        if not self.in_bounds(row, col):
            return False
        return self.cell(row, col) is CellState.ALIVE

    def border_has_life(self) -> bool:
        """Whether any cell on the outer border is alive."""
        cells = self._cells
        return bool(cells[0].any() or cells[-1].any() or cells[:, 0].any() or cells[:, -1].any())

    def grow(self, ring: int = 1) -> "Grid":
        """Return a copy surrounded by `ring` layers of dead cells.

        The original content stays centred, so every cell moves by
        (+ring, +ring).
        """
        if ring < 0:
            raise ValueError(f"Ring width must be non-negative, got {ring}")
        return Grid(np.pad(self._cells, ring, mode="constant", constant_values=CellState.DEAD))

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col) or None if no living cells
        """
        living = np.nonzero(self._cells)
        if len(living[0]) == 0:
            return None

        min_row, max_row = int(living[0].min()), int(living[0].max())
        min_col, max_col = int(living[1].min()), int(living[1].max())

        return (min_row, min_col, max_row, max_col)

    def to_list(self) -> List[List[int]]:
        """Convert grid to nested list for serialization."""
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self.shape, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, population={self.population})"

    def __str__(self) -> str:
        """Plaintext representation, '.' for dead and 'O' for alive."""
        return format_grid(self)


def split_rows(text: str) -> List[str]:
    """Split text into lines on CRLF or LF only.

    Other line-break characters, such as form feeds, stay inside the line.
    """
    return _ROW_SEPARATOR.split(text)


def parse(text: str, dead: str = DEAD_GLYPH) -> Grid:
    """Read a grid from its plaintext form.

    Each non-empty line (split on CRLF or LF) is one row. The dead glyph
    maps to a dead cell and any other character to a live one. Lines are
    not padded here.

    Args:
        text: Newline separated rows
        dead: Glyph for dead cells

    Returns:
        New Grid

    Raises:
        MalformedInputError: If rows have unequal lengths
        EmptyPatternError: If the text holds no rows
    """
    lines = [line for line in split_rows(text) if line]
    if not lines:
        raise EmptyPatternError("Pattern text contains no rows")

    return Grid([[CellState.from_glyph(glyph, dead) for glyph in line] for line in lines])


def format_grid(grid: Grid, dead: str = DEAD_GLYPH, alive: str = ALIVE_GLYPH) -> str:
    """Write a grid in plaintext form, the inverse of parse()."""
    if dead == alive:
        raise ValueError(f"Dead and alive glyphs must differ, both are {dead!r}")

    glyphs = np.where(grid.cells == CellState.ALIVE, alive, dead)
    return "\n".join("".join(row) for row in glyphs)


def count_live_neighbors(grid: Grid, row: int, col: int) -> int:
    """Count living neighbors of a cell.

    Positions outside the grid count as dead; (row, col) itself may lie
    outside the grid.

    Returns:
        Number of living neighbors (0-8)
    """
    return sum(1 for d_row, d_col in _NEIGHBOR_OFFSETS if grid.is_alive(row + d_row, col + d_col))


def count_all_neighbors(grid: Grid) -> np.ndarray:
    """Count neighbors for all cells using PyTorch-accelerated convolution.

    Zero padding treats everything beyond the border as dead.

    Returns:
        2D int8 array of shape grid.shape with neighbor counts
    """
    source = torch.from_numpy(grid.cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)
    neighbors = F.conv2d(source, _NEIGHBOR_KERNEL, padding=1)
    return neighbors[0, 0].numpy().astype(np.int8)
