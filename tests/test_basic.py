"""Basic tests for the lifegraph package."""

from lifegraph import Cell, Grid, PatternLibrary, RuleEngine


def test_cell_creation():
    """Test basic cell creation and wiring."""
    cell = Cell(alive=False)
    neighbor = Cell()
    cell.add_neighbors(neighbor)

    assert not cell.is_alive()
    assert cell.living_neighbor_count() == 1
    assert cell in neighbor.neighbors


def test_grid_creation():
    """Test basic grid creation."""
    grid = Grid([[False, True, False], [False, True, False], [False, True, False]])

    assert not grid.root().is_alive()
    assert len(grid.root().neighbors) == 3


def test_pattern_library():
    """Test pattern library has some patterns."""
    library = PatternLibrary()
    patterns = library.list_patterns()
    assert len(patterns) > 0
    assert "Glider" in patterns


def test_root_next_state():
    """Test the rule applied to the root of a block stays alive."""
    block = PatternLibrary().get_pattern("Block")
    grid = Grid(block.to_initial_state())

    # South-west diagonal is not wired, the root still sees all three block cells
    assert grid.root().living_neighbor_count() == 3
    assert RuleEngine(grid.root()).next_state().is_alive()
