"""Simulation driver for Conway's Game of Life."""

import logging
from collections import deque
from typing import Callable, Deque, Dict, Optional, Tuple

import numpy as np

from .grid import Grid

logger = logging.getLogger(__name__)

GenerationCallback = Callable[[int, np.ndarray], None]


class GameOfLife:
    """Drives a grid through successive generations.

    Tracks the generation number and population history, and detects when
    the grid revisits an earlier state (a cycle) or dies out.
    """

    def __init__(self, grid: Grid, history_size: int = 100, max_tracked_states: int = 1000) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The grid to simulate
            history_size: Number of population counts to keep
            max_tracked_states: Number of past generations remembered for
                cycle detection
        """
        self.grid = grid
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=history_size)
        self._state_history: Deque[bytes] = deque(maxlen=max_tracked_states)
        self._seen_states: Dict[bytes, int] = {}
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0
        self._baseline_pending = True

        self._update_population_history()

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        """Whether a cycle has been detected."""
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> None:
        """Advance the simulation by one generation."""
        if self._baseline_pending:
            self._take_baseline()
        self.grid.advance()
        self._generation += 1
        self._update_population_history()
        self._check_for_cycles()

    def run(self, generations: int, callback: Optional[GenerationCallback] = None) -> None:
        """Advance a fixed number of generations.

        Args:
            generations: Number of generations to run
            callback: Called with (generation, snapshot) after every step
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        for _ in range(generations):
            self.step()
            if callback is not None:
                callback(self._generation, self.grid.snapshot())

    def run_until_stable(
        self, max_generations: int = 10000, callback: Optional[GenerationCallback] = None
    ) -> Tuple[int, str]:
        """Run simulation until it dies out or cycles.

        Args:
            max_generations: Maximum generations to run
            callback: Called with (generation, snapshot) after every step

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'cycle', 'extinction', 'max_generations'
        """
        for _ in range(max_generations):
            self.step()
            if callback is not None:
                callback(self._generation, self.grid.snapshot())

            if self.population == 0:
                return self._generation, "extinction"

            if self._cycle_detected:
                return self._generation, "cycle"

        return self._generation, "max_generations"

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def _take_baseline(self) -> None:
        """Record the state the next step starts from.

        Deferred to the first step so the grid can be edited after the game
        is created.
        """
        if self._generation == 0 and self._population_history:
            self._population_history[-1] = self.population
        self._record_state()
        self._baseline_pending = False

    def _record_state(self) -> None:
        state = self.grid.tobytes()
        if len(self._state_history) == self._state_history.maxlen:
            self._seen_states.pop(self._state_history[0], None)
        self._state_history.append(state)
        self._seen_states[state] = self._generation

    def _check_for_cycles(self) -> None:
        """Check whether the current generation repeats an earlier one."""
        if self._cycle_detected:
            return

        first_occurrence = self._seen_states.get(self.grid.tobytes())
        if first_occurrence is not None:
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            logger.debug(
                "Cycle of length %d detected at generation %d", self._cycle_length, self._generation
            )
            return

        self._record_state()

    def reset(self, clear_grid: bool = True) -> None:
        """Reset the simulation.

        Args:
            clear_grid: Whether to clear the grid as well
        """
        if clear_grid:
            self.grid.clear()

        self._generation = 0
        self._population_history.clear()
        self.clear_cycle_detection()
        self._update_population_history()

    def clear_cycle_detection(self) -> None:
        """Forget previously seen states.

        Call this after editing the grid by hand, since earlier generations
        no longer describe where the simulation came from.
        """
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0
        self._seen_states.clear()
        self._state_history.clear()
        self._baseline_pending = True

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Average population change per generation over a recent window."""
        recent_history = list(self._population_history)[-window_size:]
        if len(recent_history) < 2:
            return 0.0
        return float(np.mean(np.diff(recent_history)))

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with generation, population and cycle information
        """
        bbox = self.grid.get_bounding_box()

        stats = {
            "generation": self._generation,
            "population": self.population,
            "population_change_rate": self.get_population_change_rate(),
            "population_history": list(self._population_history),
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "grid_size": self.grid.shape,
            "boundary": self.grid.boundary.value,
            "population_density": self.population / (self.grid.width * self.grid.height),
        }

        if bbox:
            box_width = bbox[2] - bbox[0] + 1
            box_height = bbox[3] - bbox[1] + 1
            stats["bounding_box"] = bbox
            stats["bounding_box_size"] = (box_width, box_height)
        else:
            stats["bounding_box"] = None
            stats["bounding_box_size"] = (0, 0)

        return stats
