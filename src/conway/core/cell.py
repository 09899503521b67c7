"""Cell states and the Game of Life transition rule."""

from enum import IntEnum


# Neighbor counts that keep a live cell alive / bring a dead cell to life
SURVIVE_COUNTS = (2, 3)
BIRTH_COUNT = 3


class CellState(IntEnum):
    """State of a single cell. Values match what the grid stores."""

    DEAD = 0
    ALIVE = 1

    @property
    def is_alive(self) -> bool:
        return self is CellState.ALIVE

    @classmethod
    def from_bool(cls, alive: bool) -> "CellState":
        return cls.ALIVE if alive else cls.DEAD


def transition(state: CellState, neighbors: int) -> CellState:
    """Apply Conway's rule to one cell.

    Args:
        state: Current state of the cell
        neighbors: Number of live neighbors (0-8)

    Returns:
        State of the cell in the next generation
    """
    if state == CellState.ALIVE:
        return CellState.from_bool(neighbors in SURVIVE_COUNTS)
    return CellState.from_bool(neighbors == BIRTH_COUNT)
