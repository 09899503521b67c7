"""Grid data structure and generation logic for Conway's Game of Life."""

import logging
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union

import numpy as np
import torch
import torch.nn.functional as F

from .cell import BIRTH_COUNT, SURVIVE_COUNTS, CellState, transition
from .errors import InvalidDimension, OutOfBounds

logger = logging.getLogger(__name__)

Position = Tuple[int, int]
CellData = Union[np.ndarray, Sequence[Sequence[Union[bool, int]]]]

_NEIGHBOR_OFFSETS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]


class Boundary(Enum):
    """How neighbors that fall outside the grid are treated.

    DEAD: positions outside the grid are always dead.
    TOROIDAL: edges wrap around to the opposite edge.
    """

    DEAD = "dead"
    TOROIDAL = "toroidal"

    def resolve(self, x: int, y: int, width: int, height: int) -> Optional[Position]:
        """Map a possibly out-of-range position onto the grid.

        Returns:
            The in-grid position, or None if the position is outside the grid
            and counts as dead
        """
        if self is Boundary.TOROIDAL:
            return (x % width, y % height)
        if 0 <= x < width and 0 <= y < height:
            return (x, y)
        return None

    @property
    def padding_mode(self) -> str:
        """Padding mode used for whole-grid neighbor convolution."""
        return "circular" if self is Boundary.TOROIDAL else "constant"


def _is_index(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _is_dimension(value: object) -> bool:
    return _is_index(value) and value > 0


class Grid:
    """A fixed-size 2D grid of live and dead cells.

    Cells are stored in a numpy array indexed as ``cells[x, y]`` with shape
    ``(width, height)``. The grid is advanced one generation at a time with
    :meth:`advance`, which computes the whole next generation from the current
    one before replacing it.
    """

    def __init__(
        self,
        width: int,
        height: int,
        cells: Optional[CellData] = None,
        boundary: Boundary = Boundary.DEAD,
        seed: Optional[int] = None,
        probability: float = 0.5,
    ) -> None:
        """Initialize a new grid.

        The initial state is either explicit (``cells``) or pseudo-random from
        ``seed``, where each cell is alive with chance ``probability``. With
        neither, every cell starts dead.

        Args:
            width: Number of columns
            height: Number of rows
            cells: Optional per-cell states with shape (width, height)
            boundary: Boundary policy for neighbor counting
            seed: Optional seed for random initialization
            probability: Chance each cell is alive when seeded (0.0 to 1.0)

        Raises:
            InvalidDimension: If width or height is not a positive integer
            ValueError: If cells has the wrong shape, both cells and seed are
                given, or probability is outside [0, 1]
        """
        if not (_is_dimension(width) and _is_dimension(height)):
            raise InvalidDimension(width, height)
        if cells is not None and seed is not None:
            raise ValueError("Pass either explicit cells or a seed, not both")

        self.width = int(width)
        self.height = int(height)
        self.boundary = Boundary(boundary)
        self._cells = np.zeros((self.width, self.height), dtype=np.int8)

        if cells is not None:
            self.load(cells)
        elif seed is not None:
            self.randomize(probability, seed)

        # Whole-grid neighbor counting runs as a single 3x3 convolution
        torch.set_num_threads(1)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

        logger.debug("Created %dx%d grid (boundary=%s)", self.width, self.height, self.boundary.value)

    @classmethod
    def from_alive_cells(
        cls,
        width: int,
        height: int,
        alive_cells: Iterable[Position],
        boundary: Boundary = Boundary.DEAD,
    ) -> "Grid":
        """Create a grid with only the given cells alive.

        Args:
            width: Number of columns
            height: Number of rows
            alive_cells: (x, y) positions of living cells
            boundary: Boundary policy for neighbor counting

        Raises:
            InvalidDimension: If width or height is not positive
            OutOfBounds: If any position lies outside the grid
        """
        grid = cls(width, height, boundary=boundary)
        for x, y in alive_cells:
            grid.set_cell(x, y, True)
        return grid

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        seed: Optional[int] = None,
        probability: float = 0.5,
        boundary: Boundary = Boundary.DEAD,
    ) -> "Grid":
        """Create a randomly populated grid.

        Passing the same seed gives the same grid; ``seed=None`` draws fresh
        entropy.
        """
        grid = cls(width, height, boundary=boundary)
        grid.randomize(probability, seed)
        return grid

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def _check_bounds(self, x: int, y: int) -> None:
        if not (_is_index(x) and _is_index(y) and 0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds((x, y), self.shape)

    def is_alive(self, x: int, y: int) -> bool:
        """Check whether a cell is alive.

        Raises:
            OutOfBounds: If (x, y) is outside the grid
        """
        self._check_bounds(x, y)
        return bool(self._cells[x, y])

    def state(self, x: int, y: int) -> CellState:
        """Get the state of a cell as a CellState."""
        return CellState.from_bool(self.is_alive(x, y))

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Raises:
            OutOfBounds: If (x, y) is outside the grid
        """
        self._check_bounds(x, y)
        self._cells[x, y] = CellState.from_bool(alive)

    def toggle_cell(self, x: int, y: int) -> bool:
        """Toggle the state of a cell.

        Returns:
            New state of the cell
        """
        new_state = not self.is_alive(x, y)
        self.set_cell(x, y, new_state)
        return new_state

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(CellState.DEAD)

    def randomize(self, probability: float = 0.5, seed: Optional[int] = None) -> None:
        """Randomly populate the grid.

        Args:
            probability: Chance each cell will be alive (0.0 to 1.0)
            seed: Optional seed for reproducible populations

        Raises:
            ValueError: If probability is outside [0, 1]
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

        rng = np.random.default_rng(seed)
        mask = rng.random((self.width, self.height)) < probability
        self._cells = mask.astype(np.int8)

    def load(self, cells: CellData) -> None:
        """Replace every cell state with explicit values.

        Args:
            cells: Truthy/falsy values with shape (width, height)

        Raises:
            ValueError: If the data shape doesn't match the grid
        """
        arr = np.asarray(cells)
        if arr.shape != self.shape:
            raise ValueError(f"Data shape {arr.shape} doesn't match grid {self.shape}")
        self._cells = (arr != 0).astype(np.int8)

    def neighbor_count(self, x: int, y: int) -> int:
        """Count living neighbors of a cell.

        Neighbors outside the grid are resolved with the grid's boundary
        policy.

        Returns:
            Number of living neighbors (0-8)

        Raises:
            OutOfBounds: If (x, y) is outside the grid
        """
        self._check_bounds(x, y)

        count = 0
        for dx, dy in _NEIGHBOR_OFFSETS:
            position = self.boundary.resolve(x + dx, y + dy, self.width, self.height)
            if position is not None:
                count += int(self._cells[position])
        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Returns:
            Array of shape (width, height) with neighbor counts
        """
        # Torch expects (batch, channel, height, width), so transpose
        current = torch.from_numpy(np.ascontiguousarray(self._cells.T, dtype=np.float32))
        current = current.reshape(1, 1, self.height, self.width)
        padded = F.pad(current, (1, 1, 1, 1), mode=self.boundary.padding_mode)
        neighbors = F.conv2d(padded, self._torch_kernel)
        return neighbors[0, 0].numpy().astype(np.int8).T

    def next_cell_state(self, x: int, y: int) -> bool:
        """Compute a cell's next state from the current generation.

        Does not modify the grid.
        """
        return transition(self.state(x, y), self.neighbor_count(x, y)).is_alive

    def advance(self) -> None:
        """Advance the grid by one generation.

        Every neighbor count is taken from the current generation and the new
        generation is built in a separate buffer, which replaces the current
        one only once all cells have been evaluated.
        """
        neighbors = self.count_all_neighbors()
        current = self._cells

        survive = (current == CellState.ALIVE) & np.isin(neighbors, SURVIVE_COUNTS)
        birth = (current == CellState.DEAD) & (neighbors == BIRTH_COUNT)

        self._cells = (survive | birth).astype(np.int8)
        logger.debug("Advanced grid: population %d -> %d", int(np.count_nonzero(current)), self.population)

    def snapshot(self) -> np.ndarray:
        """Get a read-only copy of all cell states.

        Returns:
            Boolean array of shape (width, height), indexed [x, y]
        """
        view = self._cells.astype(bool)
        view.setflags(write=False)
        return view

    def alive_cells(self) -> Iterator[Position]:
        """Yield (x, y) coordinates of every living cell."""
        xs, ys = np.nonzero(self._cells)
        for x, y in zip(xs, ys):
            yield (int(x), int(y))

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        xs, ys = np.nonzero(self._cells)
        if len(xs) == 0:
            return None
        return (int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max()))

    def tobytes(self) -> bytes:
        """Raw cell data, used as a hashable key for the current generation."""
        return self._cells.tobytes()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.shape == other.shape
            and self.boundary == other.boundary
            and np.array_equal(self._cells, other._cells)
        )

    def __repr__(self) -> str:
        return f"Grid({self.width}, {self.height}, boundary={self.boundary}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        result = []
        for y in range(self.height):
            result.append("".join("*" if self._cells[x, y] else "." for x in range(self.width)))
        return "\n".join(result)
