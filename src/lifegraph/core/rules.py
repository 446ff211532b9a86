"""Conway's Game of Life rule applied to a single cell."""

from .cell import Cell


def survives(alive: bool, living_neighbors: int) -> bool:
    """Live cell with exactly two living neighbors."""
    return alive and living_neighbors == 2


def born_or_survives(living_neighbors: int) -> bool:
    """Any cell with exactly three living neighbors."""
    return living_neighbors == 3


def next_alive(alive: bool, living_neighbors: int) -> bool:
    """Apply the rule to a plain state and live-neighbor count.

    Args:
        alive: Whether the cell is currently alive
        living_neighbors: Number of living neighbors

    Returns:
        Whether the cell is alive in the next generation
    """
    return survives(alive, living_neighbors) or born_or_survives(living_neighbors)


class RuleEngine:
    """Computes the next state of one cell.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    The bound cell and its neighbors are never modified.
    """

    def __init__(self, cell: Cell) -> None:
        """Bind the engine to a cell.

        Args:
            cell: The cell to evaluate
        """
        self.cell = cell

    def survives(self) -> bool:
        return survives(self.cell.is_alive(), self.cell.living_neighbor_count())

    def born_or_survives(self) -> bool:
        return born_or_survives(self.cell.living_neighbor_count())

    def next_state(self) -> Cell:
        """Build the cell's next-generation state.

        Returns:
            A new cell with no neighbors
        """
        return Cell(alive=next_alive(self.cell.is_alive(), self.cell.living_neighbor_count()))


LordOfTheCells = RuleEngine
