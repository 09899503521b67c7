"""Tests for cell states and the transition rule."""

import pytest

from conway.core.cell import CellState, transition


class TestCellState:
    """Test cases for CellState."""

    def test_values(self):
        """Test states map onto stored values."""
        assert CellState.DEAD == 0
        assert CellState.ALIVE == 1

    def test_is_alive(self):
        """Test liveness check."""
        assert CellState.ALIVE.is_alive
        assert not CellState.DEAD.is_alive

    def test_from_bool(self):
        """Test conversion from booleans."""
        assert CellState.from_bool(True) is CellState.ALIVE
        assert CellState.from_bool(False) is CellState.DEAD


class TestTransition:
    """Test the survival and birth rule."""

    @pytest.mark.parametrize("neighbors", [2, 3])
    def test_live_cell_survives(self, neighbors):
        """Test a live cell with 2 or 3 neighbors survives."""
        assert transition(CellState.ALIVE, neighbors) is CellState.ALIVE

    @pytest.mark.parametrize("neighbors", [0, 1, 4, 5, 6, 7, 8])
    def test_live_cell_dies(self, neighbors):
        """Test under- and overpopulation kill a live cell."""
        assert transition(CellState.ALIVE, neighbors) is CellState.DEAD

    def test_dead_cell_birth(self):
        """Test a dead cell with exactly 3 neighbors is born."""
        assert transition(CellState.DEAD, 3) is CellState.ALIVE

    @pytest.mark.parametrize("neighbors", [0, 1, 2, 4, 5, 6, 7, 8])
    def test_dead_cell_stays_dead(self, neighbors):
        """Test a dead cell without exactly 3 neighbors stays dead."""
        assert transition(CellState.DEAD, neighbors) is CellState.DEAD
