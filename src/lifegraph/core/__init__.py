"""Core cell graph logic."""

from .cell import Cell
from .errors import EmptyGridError
from .grid import Grid
from .patterns import Pattern, PatternLibrary, parse_state
from .rules import LordOfTheCells, RuleEngine, born_or_survives, next_alive, survives

__all__ = [
    "Cell",
    "EmptyGridError",
    "Grid",
    "LordOfTheCells",
    "Pattern",
    "PatternLibrary",
    "RuleEngine",
    "born_or_survives",
    "next_alive",
    "parse_state",
    "survives",
]
