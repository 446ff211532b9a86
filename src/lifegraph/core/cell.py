"""Cell node for the cellular automaton neighbor graph."""

import logging
from typing import FrozenSet, Iterable, Set, Union

logger = logging.getLogger(__name__)


class Cell:
    """A single cell holding a life state and its neighbors.

    The neighbor relation is symmetric: whenever a cell gains a neighbor,
    that neighbor gains the cell in return. Cells hash by identity, so two
    cells with the same state are still distinct nodes in the graph.
    """

    def __init__(self, alive: bool = True) -> None:
        """Initialize a cell with no neighbors.

        Args:
            alive: Whether the cell starts alive
        """
        self._alive = bool(alive)
        self._neighbors: Set["Cell"] = set()

    @property
    def alive(self) -> bool:
        """Whether the cell is alive."""
        return self._alive

    @property
    def neighbors(self) -> FrozenSet["Cell"]:
        """Snapshot of the current neighbors."""
        return frozenset(self._neighbors)

    def is_alive(self) -> bool:
        return self._alive

    def add_neighbors(self, new_neighbors: Union["Cell", Iterable["Cell"]]) -> None:
        """Connect this cell to one or more neighbors.

        Both endpoints of every new edge are updated together. Neighbors that
        are already connected are left untouched, and a cell is never added
        as its own neighbor.

        Args:
            new_neighbors: A single cell or an iterable of cells
        """
        if isinstance(new_neighbors, Cell):
            new_neighbors = [new_neighbors]

        for neighbor in new_neighbors:
            if neighbor is self:
                logger.debug("Skipping self edge on %r", self)
                continue
            if neighbor in self._neighbors:
                continue

            self._neighbors.add(neighbor)
            neighbor._neighbors.add(self)

    def neighbor_count(self) -> int:
        return len(self._neighbors)

    def living_neighbor_count(self) -> int:
        """Count neighbors that are alive.

        Returns:
            Number of living neighbors
        """
        return sum(1 for neighbor in self._neighbors if neighbor.is_alive())

    def __repr__(self) -> str:
        state = "alive" if self._alive else "dead"
        return f"<Cell {state} neighbors={len(self._neighbors)} at {id(self):#x}>"
