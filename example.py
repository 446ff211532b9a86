#!/usr/bin/env python3
"""
Example usage of the lifegraph package.
"""

from lifegraph import Grid, PatternLibrary, RuleEngine


def main():
    """Demonstrate programmatic usage of the lifegraph package."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    if glider:
        grid = Grid(glider.to_initial_state(width=6, height=6, offset_x=1, offset_y=1))

        print("Initial state:")
        print(grid)
        print(f"Population: {grid.population}, edges: {grid.edge_count}")
        print()

        print("Living neighbors:")
        for row in grid.neighbor_counts():
            print(" ".join(str(count) for count in row))
        print()

        root = grid.root()
        next_cell = RuleEngine(root).next_state()
        print(f"Root is {'alive' if root.is_alive() else 'dead'} with {len(root.neighbors)} neighbors")
        print(f"Root next state: {'alive' if next_cell.is_alive() else 'dead'}")


if __name__ == "__main__":
    main()
