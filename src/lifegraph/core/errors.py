"""Exceptions raised by the cell graph."""


class EmptyGridError(IndexError):
    """Raised when a cell is requested from a grid built without any cells."""

    def __init__(self, message: str = "Grid has no cells") -> None:
        super().__init__(message)
