"""Conway's Game of Life cells wired as a neighbor graph."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.errors import EmptyGridError
from .core.grid import Grid
from .core.patterns import Pattern, PatternLibrary
from .core.rules import LordOfTheCells, RuleEngine

__all__ = ["Cell", "EmptyGridError", "Grid", "LordOfTheCells", "Pattern", "PatternLibrary", "RuleEngine"]
