"""Basic tests for the conway package."""

from conway import Boundary, GameOfLife, Grid, InvalidDimension, OutOfBounds, PatternLibrary


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = Grid(10, 10)
    assert grid.width == 10
    assert grid.is_alive(0, 0) is False

    grid.set_cell(5, 5, True)
    assert grid.is_alive(5, 5) is True


def test_errors_exported():
    """Test the error types are available from the package."""
    assert issubclass(InvalidDimension, ValueError)
    assert issubclass(OutOfBounds, IndexError)


def test_pattern_library():
    """Test pattern library has some patterns."""
    assert "Glider" in PatternLibrary().list_patterns()


def test_blinker_pattern():
    """Test the blinker oscillates on a toroidal grid."""
    grid = Grid(5, 5, boundary=Boundary.TOROIDAL)
    game = GameOfLife(grid)
    PatternLibrary().get_pattern("Blinker").apply_to_grid(grid, 1, 1)

    game.step()
    assert sorted(grid.alive_cells()) == [(2, 1), (2, 2), (2, 3)]

    game.step()
    assert sorted(grid.alive_cells()) == [(1, 2), (2, 2), (3, 2)]
