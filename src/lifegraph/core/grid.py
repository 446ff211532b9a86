"""Grid builder wiring a matrix of initial states into a cell graph."""

import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell
from .errors import EmptyGridError

logger = logging.getLogger(__name__)

# Offsets (row, column) wired from every cell: east, south-east, south.
WIRING_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 1), (1, 0))

# Live-neighbor kernel matching the wiring above plus its reciprocal edges.
# North-east and south-west corners are zero: those diagonals
# are never wired.
_NEIGHBOR_KERNEL = (
    torch.tensor([[1, 1, 0], [1, 0, 1], [0, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
)


class Grid:
    """Builds and owns the neighbor graph for a 2D matrix of cells.

    Each entry of the initial state becomes a Cell. Every cell is then
    connected to the cells east, south-east and south of it when those
    exist, and the reciprocal edges make the rest of its neighborhood.
    Rows may have different lengths; positions past the end of a row are
    simply skipped.

    Only the top-left cell is exposed directly. The remaining properties
    are read-only views over the whole matrix.
    """

    def __init__(self, initial_state: Iterable[Iterable[bool]] = ()) -> None:
        """Initialize a grid from a matrix of life states.

        Args:
            initial_state: Row-major matrix, truthy entries start alive
        """
        self._cells: List[List[Cell]] = [
            [Cell(alive=bool(state)) for state in row] for row in initial_state
        ]
        self._wire()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Built grid with %d rows, %d cells and %d edges",
                len(self._cells),
                sum(self.row_lengths),
                self.edge_count,
            )

    def _cell_at(self, row: int, column: int) -> Optional[Cell]:
        """Get the cell at a position, or None if there is no cell there."""
        if 0 <= row < len(self._cells) and 0 <= column < len(self._cells[row]):
            return self._cells[row][column]
        return None

    def _wire(self) -> None:
        """Connect every cell to its east, south-east and south cells."""
        for row, cells in enumerate(self._cells):
            for column, cell in enumerate(cells):
                neighbors = [
                    self._cell_at(row + d_row, column + d_column) for d_row, d_column in WIRING_OFFSETS
                ]
                cell.add_neighbors([neighbor for neighbor in neighbors if neighbor is not None])

    def root(self) -> Cell:
        """Get the top-left cell.

        Returns:
            The cell at row 0, column 0

        Raises:
            EmptyGridError: If the grid has no cell at the origin
        """
        if not self._cells or not self._cells[0]:
            raise EmptyGridError("Grid has no root cell: initial state is empty")

        return self._cells[0][0]

    @property
    def row_lengths(self) -> Tuple[int, ...]:
        """Number of cells in each row."""
        return tuple(len(cells) for cells in self._cells)

    @property
    def width(self) -> int:
        """Length of the widest row."""
        return max(self.row_lengths, default=0)

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self._cells)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self.to_array()))

    @property
    def edge_count(self) -> int:
        """Number of undirected neighbor edges."""
        return sum(cell.neighbor_count() for cells in self._cells for cell in cells) // 2

    def to_array(self) -> np.ndarray:
        """Convert the life states to an array.

        Short rows are padded with dead cells up to the widest row.

        Returns:
            Boolean array of shape (height, width)
        """
        states = np.zeros((self.height, self.width), dtype=bool)
        for row, cells in enumerate(self._cells):
            states[row, : len(cells)] = [cell.is_alive() for cell in cells]
        return states

    def neighbor_counts(self) -> List[List[int]]:
        """Count living neighbors for all cells using convolution.

        The result has the same ragged shape as the grid, and each value
        equals the matching cell's ``living_neighbor_count()``.

        Returns:
            Nested list with the living-neighbor count of every cell
        """
        if self.width == 0:
            return [[] for _ in self._cells]

        states = torch.from_numpy(self.to_array().astype(np.float32))
        # Zero padding: positions outside the grid (or a short row) are never neighbors
        counts = F.conv2d(states.unsqueeze(0).unsqueeze(0), _NEIGHBOR_KERNEL, padding=1)
        counts = counts[0, 0].round().to(torch.int64).numpy()

        return [counts[row, :length].tolist() for row, length in enumerate(self.row_lengths)]

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join(
            "".join("*" if cell.is_alive() else "." for cell in cells) for cells in self._cells
        )
