"""Command-line interface for inspecting cell graphs."""

import argparse
import logging
import sys
from typing import Any, Dict, Optional

from ..core.grid import Grid
from ..core.patterns import PatternLibrary, parse_state
from ..core.rules import RuleEngine

logger = logging.getLogger(__name__)


class CLICellGraph:
    """Command-line interface for building and inspecting cell graphs."""

    def __init__(self) -> None:
        self.pattern_library = PatternLibrary()

    def build_grid(self, pattern: Optional[str] = None, state: Optional[str] = None) -> Grid:
        """Build a grid from a library pattern or an inline drawing.

        Args:
            pattern: Name of a library pattern
            state: Inline drawing such as ".*./.*./.*."

        Returns:
            Wired grid

        Raises:
            ValueError: If the pattern is unknown or the drawing is malformed
        """
        if pattern is not None:
            loaded_pattern = self.pattern_library.get_pattern(pattern)
            if loaded_pattern is None:
                raise ValueError(f"Pattern '{pattern}' not found")
            logger.debug("Loading pattern '%s'", pattern)
            return Grid(loaded_pattern.to_initial_state())

        return Grid(parse_state(state or ""))

    def inspect(self, grid: Grid) -> Dict[str, Any]:
        """Collect statistics about a grid and its root cell.

        Args:
            grid: Grid to inspect

        Returns:
            Dictionary of grid and root cell statistics

        Raises:
            EmptyGridError: If the grid has no root cell
        """
        root = grid.root()

        return {
            "rows": grid.height,
            "row_lengths": grid.row_lengths,
            "cells": sum(grid.row_lengths),
            "population": grid.population,
            "edges": grid.edge_count,
            "root_alive": root.is_alive(),
            "root_neighbors": root.neighbor_count(),
            "root_living_neighbors": root.living_neighbor_count(),
            "root_next_alive": RuleEngine(root).next_state().is_alive(),
        }

    def _format_grid(self, grid: Grid, max_size: int = 50) -> str:
        """Format grid for display, truncating if too large.

        Args:
            grid: Grid to format
            max_size: Maximum dimension to display

        Returns:
            Formatted grid string
        """
        if grid.width > max_size or grid.height > max_size:
            return f"Grid too large to display ({grid.width}x{grid.height})"

        return str(grid)

    def _format_counts(self, grid: Grid, max_size: int = 50) -> str:
        """Format the living-neighbor count of every cell, one row per line."""
        if grid.width > max_size or grid.height > max_size:
            return f"Grid too large to display ({grid.width}x{grid.height})"

        return "\n".join("".join(str(count) for count in row) for row in grid.neighbor_counts())

    def list_patterns(self) -> None:
        """List available patterns by category."""
        print("Available patterns:")

        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                if pattern:
                    size = pattern.get_size()
                    print(f"  {name}: {size[0]}x{size[1]}, {pattern.population} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Build a Game of Life cell graph and inspect its root cell",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Inspect a vertical blinker drawn inline
  lifegraph-cli --state ".*./.*./.*." --show-grid

  # Rows may have different lengths
  lifegraph-cli --state "***/**/***" --show-counts

  # Inspect a library pattern
  lifegraph-cli --pattern Glider --show-grid --show-counts

  # List available patterns
  lifegraph-cli --list-patterns
        """,
    )

    parser.add_argument("--pattern", type=str, help="Name of a library pattern to build")

    parser.add_argument(
        "--state",
        type=str,
        help="Inline drawing, '*' alive, '.' dead, rows separated by '/'",
    )

    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")

    parser.add_argument("--show-grid", action="store_true", help="Print the grid")

    parser.add_argument(
        "--show-counts",
        action="store_true",
        help="Print the living-neighbor count of every cell",
    )

    parser.add_argument(
        "--max-size",
        type=int,
        default=50,
        help="Largest grid dimension to print (default: 50)",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.pattern is not None and args.state is not None:
        errors.append("Use either --pattern or --state, not both")

    if args.pattern is None and args.state is None:
        errors.append("One of --pattern or --state is required")

    if args.max_size <= 0:
        errors.append("Max size must be positive")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def print_results(stats: Dict[str, Any]) -> None:
    """Print grid and root cell statistics.

    Args:
        stats: Statistics from CLICellGraph.inspect
    """
    lengths = ", ".join(str(length) for length in stats["row_lengths"])
    print(f"Rows: {stats['rows']} (lengths: {lengths})")
    print(f"Cells: {stats['cells']}, population: {stats['population']}, edges: {stats['edges']}")
    print(f"Root: {'alive' if stats['root_alive'] else 'dead'}")
    print(f"  Neighbors: {stats['root_neighbors']} ({stats['root_living_neighbors']} living)")
    print(f"  Next state: {'alive' if stats['root_next_alive'] else 'dead'}")


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cli = CLICellGraph()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.pattern is not None and cli.pattern_library.get_pattern(args.pattern) is None:
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(cli.pattern_library.list_patterns())}")
        print("Use --list-patterns to see detailed information")
        return 1

    try:
        grid = cli.build_grid(pattern=args.pattern, state=args.state)

        if args.show_grid:
            print("Grid:")
            print(cli._format_grid(grid, args.max_size))

        if args.show_counts:
            print("Living neighbors:")
            print(cli._format_counts(grid, args.max_size))

        print_results(cli.inspect(grid))
        return 0

    except (ValueError, IndexError) as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
