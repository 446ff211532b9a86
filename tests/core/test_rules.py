"""Tests for the RuleEngine class."""

from unittest.mock import patch

import pytest

from lifegraph.core.cell import Cell
from lifegraph.core.rules import LordOfTheCells, RuleEngine, born_or_survives, next_alive, survives


def make_cell(alive: bool, living: int, dead: int = 0) -> Cell:
    """Create a cell with the given numbers of living and dead neighbors."""
    cell = Cell(alive=alive)
    cell.add_neighbors([Cell(alive=True) for _ in range(living)])
    cell.add_neighbors([Cell(alive=False) for _ in range(dead)])
    return cell


def canonical_rule(alive: bool, count: int) -> bool:
    """B3/S23: survive with 2 or 3, born with exactly 3."""
    if alive:
        return count in (2, 3)
    return count == 3


class TestRuleEngine:
    """Test cases for the RuleEngine class."""

    def test_alive_with_no_neighbors_dies(self):
        """Test a lonely live cell dies."""
        assert not RuleEngine(Cell()).next_state().is_alive()

    def test_alive_with_two_neighbors_survives(self):
        """Test a live cell with two living neighbors survives."""
        assert RuleEngine(make_cell(True, 2)).next_state().is_alive()

    def test_alive_with_four_neighbors_dies(self):
        """Test overpopulation kills a live cell."""
        assert not RuleEngine(make_cell(True, 4)).next_state().is_alive()

    def test_dead_with_two_neighbors_stays_dead(self):
        """Test two living neighbors do not bring a dead cell to life."""
        assert not RuleEngine(make_cell(False, 2)).next_state().is_alive()

    def test_dead_with_three_neighbors_is_born(self):
        """Test reproduction with exactly three living neighbors."""
        assert RuleEngine(make_cell(False, 3)).next_state().is_alive()

    def test_dead_neighbors_are_ignored(self):
        """Test only living neighbors count toward the rule."""
        assert RuleEngine(make_cell(True, 2, dead=5)).next_state().is_alive()
        assert not RuleEngine(make_cell(False, 2, dead=1)).next_state().is_alive()

    @pytest.mark.parametrize("alive", [True, False])
    @pytest.mark.parametrize("count", range(9))
    def test_matches_canonical_rule(self, alive, count):
        """Test every state and neighbor count against B3/S23."""
        cell = make_cell(alive, count, dead=8 - count)
        engine = RuleEngine(cell)

        expected = canonical_rule(alive, count)
        assert engine.next_state().is_alive() is expected
        assert (engine.survives() or engine.born_or_survives()) is expected
        assert next_alive(alive, count) is expected

    def test_next_state_is_unwired(self):
        """Test the next state is a new cell with no neighbors."""
        cell = make_cell(True, 2)
        result = RuleEngine(cell).next_state()

        assert result is not cell
        assert len(result.neighbors) == 0

    def test_does_not_mutate_cell(self):
        """Test evaluation leaves the cell and its neighbors untouched."""
        cell = make_cell(False, 3, dead=1)
        neighbors_before = cell.neighbors
        states_before = {neighbor: neighbor.is_alive() for neighbor in neighbors_before}

        RuleEngine(cell).next_state()

        assert not cell.is_alive()
        assert cell.neighbors == neighbors_before
        assert {n: n.is_alive() for n in cell.neighbors} == states_before
        for neighbor in neighbors_before:
            assert neighbor.neighbors == {cell}

    def test_repeated_calls_are_idempotent(self):
        """Test repeated evaluation gives equivalent new cells."""
        engine = RuleEngine(make_cell(True, 3))

        first = engine.next_state()
        second = engine.next_state()

        assert first is not second
        assert first.is_alive() == second.is_alive() is True

    def test_lord_of_the_cells_alias(self):
        """Test the LordOfTheCells name refers to the same engine."""
        assert LordOfTheCells is RuleEngine
        assert LordOfTheCells(cell=make_cell(False, 3)).next_state().is_alive()

    def test_next_state_applies_next_alive(self):
        """Test the engine evaluates the cell through the shared rule function."""
        cell = make_cell(True, 2, dead=1)

        with patch("lifegraph.core.rules.next_alive", return_value=False) as mock_rule:
            result = RuleEngine(cell).next_state()

        mock_rule.assert_called_once_with(True, 2)
        assert not result.is_alive()


class TestRuleFunctions:
    """Test cases for the rule on plain values."""

    def test_survives(self):
        """Test only a live cell with two living neighbors survives by this rule."""
        assert survives(True, 2)
        assert not survives(False, 2)
        assert not survives(True, 3)

    def test_born_or_survives(self):
        """Test exactly three living neighbors regardless of state."""
        assert born_or_survives(3)
        assert not born_or_survives(2)
        assert not born_or_survives(4)

    @pytest.mark.parametrize("alive", [True, False])
    @pytest.mark.parametrize("count", range(9))
    def test_engine_methods_match_functions(self, alive, count):
        """Test the engine's sub-rules agree with the plain functions."""
        engine = RuleEngine(make_cell(alive, count))

        assert engine.survives() is survives(alive, count)
        assert engine.born_or_survives() is born_or_survives(count)
