"""Frontend interfaces for the cell graph."""

from .cli import CLICellGraph

__all__ = ["CLICellGraph"]
