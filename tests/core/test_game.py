"""Tests for the GameOfLife class."""

import pytest

from conway.core.game import GameOfLife
from conway.core.grid import Boundary, Grid
from conway.core.patterns import PatternLibrary


class TestGameOfLife:
    """Test cases for the GameOfLife class."""

    def test_initialization(self):
        """Test game initialization."""
        grid = Grid(10, 10)
        game = GameOfLife(grid)

        assert game.grid is grid
        assert game.generation == 0
        assert game.population == 0
        assert game.population_history == [0]
        assert not game.cycle_detected
        assert game.cycle_length == 0

    def test_step_advances_generation(self):
        """Test each step advances the grid and generation counter."""
        grid = Grid.from_alive_cells(5, 5, [(2, 1), (2, 2), (2, 3)])
        game = GameOfLife(grid)

        game.step()
        assert game.generation == 1
        assert grid.is_alive(1, 2)
        assert not grid.is_alive(2, 1)
        assert game.population_history == [3, 3]

    def test_still_life_block(self):
        """Test a block is detected as a cycle of length 1."""
        grid = Grid.from_alive_cells(10, 10, [(4, 4), (4, 5), (5, 4), (5, 5)])
        game = GameOfLife(grid)

        final_generation, reason = game.run_until_stable(100)
        assert reason == "cycle"
        assert final_generation == 1
        assert game.cycle_length == 1
        assert game.population == 4

    def test_oscillator_blinker(self):
        """Test the blinker is detected as a period-2 cycle."""
        grid = Grid.from_alive_cells(10, 10, [(5, 4), (5, 5), (5, 6)])
        game = GameOfLife(grid)

        final_generation, reason = game.run_until_stable(100)
        assert reason == "cycle"
        assert final_generation == 2
        assert game.cycle_length == 2
        assert game.cycle_start_generation == 0

    def test_grid_edited_after_game_created(self):
        """Test the starting state is taken at the first step, not at construction."""
        grid = Grid(12, 12, boundary=Boundary.TOROIDAL)
        game = GameOfLife(grid)
        PatternLibrary().get_pattern("Glider").apply_to_grid(grid, 4, 4)

        assert game.run_until_stable(100) == (48, "cycle")
        assert game.cycle_start_generation == 0
        assert game.cycle_length == 48
        assert game.population_history[:2] == [5, 5]

    def test_edit_after_game_created_matches_populated_grid(self):
        """Test placing a pattern before or after creating the game gives the same result."""
        before = Grid.from_alive_cells(10, 10, [(5, 4), (5, 5), (5, 6)])
        expected = GameOfLife(before).run_until_stable(50)

        after = Grid(10, 10)
        game = GameOfLife(after)
        for x, y in [(5, 4), (5, 5), (5, 6)]:
            after.set_cell(x, y, True)

        assert game.run_until_stable(50) == expected == (2, "cycle")

    def test_extinction(self):
        """Test a dying pattern is reported as extinction."""
        grid = Grid.from_alive_cells(5, 5, [(0, 0), (4, 4)])
        game = GameOfLife(grid)

        final_generation, reason = game.run_until_stable(100)
        assert reason == "extinction"
        assert final_generation == 1
        assert game.population == 0

    def test_empty_grid_is_extinction(self):
        """Test an empty grid finishes as extinction rather than a cycle."""
        game = GameOfLife(Grid(5, 5))
        assert game.run_until_stable(10) == (1, "extinction")

    def test_max_generations(self):
        """Test a glider on a large torus runs to the generation limit."""
        grid = Grid.from_alive_cells(
            30, 30, [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], boundary=Boundary.TOROIDAL
        )
        game = GameOfLife(grid)

        assert game.run_until_stable(20) == (20, "max_generations")
        assert not game.cycle_detected

    def test_glider_cycle_on_small_torus(self):
        """Test a glider returns to its start after a full lap of the torus."""
        grid = Grid.from_alive_cells(
            6, 6, [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], boundary=Boundary.TOROIDAL
        )
        game = GameOfLife(grid)

        assert game.run_until_stable(100) == (24, "cycle")
        assert game.cycle_length == 24

    def test_run_with_callback(self):
        """Test run calls back once per generation with a snapshot."""
        grid = Grid.from_alive_cells(5, 5, [(2, 1), (2, 2), (2, 3)])
        game = GameOfLife(grid)
        seen = []

        game.run(3, callback=lambda generation, snapshot: seen.append((generation, int(snapshot.sum()))))

        assert seen == [(1, 3), (2, 3), (3, 3)]
        assert game.generation == 3

    def test_run_negative_generations(self):
        """Test run rejects a negative generation count."""
        game = GameOfLife(Grid(3, 3))
        with pytest.raises(ValueError):
            game.run(-1)

    def test_reset(self):
        """Test reset clears counters and the grid."""
        grid = Grid.from_alive_cells(5, 5, [(2, 1), (2, 2), (2, 3)])
        game = GameOfLife(grid)
        game.run_until_stable(10)

        game.reset()
        assert game.generation == 0
        assert game.population == 0
        assert game.population_history == [0]
        assert not game.cycle_detected

    def test_clear_cycle_detection_after_edit(self):
        """Test cycle detection restarts from the edited grid."""
        grid = Grid.from_alive_cells(6, 6, [(1, 1), (1, 2), (2, 1), (2, 2)])
        game = GameOfLife(grid)
        game.run_until_stable(10)
        assert game.cycle_detected

        grid.set_cell(4, 4, True)
        game.clear_cycle_detection()
        assert not game.cycle_detected

        final_generation, reason = game.run_until_stable(10)
        assert reason == "cycle"
        assert final_generation == 3
        assert game.cycle_start_generation == 2

    def test_population_change_rate(self):
        """Test population change rate over recent history."""
        grid = Grid.from_alive_cells(5, 5, [(0, 0), (4, 4)])
        game = GameOfLife(grid)
        assert game.get_population_change_rate() == 0.0

        game.step()
        assert game.get_population_change_rate() == -2.0

    def test_get_statistics(self):
        """Test statistics contents."""
        grid = Grid.from_alive_cells(10, 10, [(5, 4), (5, 5), (5, 6)])
        game = GameOfLife(grid)
        game.step()

        stats = game.get_statistics()
        assert stats["generation"] == 1
        assert stats["population"] == 3
        assert stats["grid_size"] == (10, 10)
        assert stats["boundary"] == "dead"
        assert stats["population_density"] == pytest.approx(0.03)
        assert stats["bounding_box"] == (4, 5, 6, 5)
        assert stats["bounding_box_size"] == (3, 1)

    def test_statistics_empty_grid(self):
        """Test statistics for a grid with no living cells."""
        stats = GameOfLife(Grid(4, 4)).get_statistics()
        assert stats["bounding_box"] is None
        assert stats["bounding_box_size"] == (0, 0)
