"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from ..core.errors import GameError
from ..core.game import GameOfLife
from ..core.grid import Boundary, Grid
from ..core.patterns import PatternLibrary
from .text import format_grid


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    width: int = 50
    height: int = 50
    toroidal: bool = False
    population_rate: float = 0.5
    seed: Optional[int] = None
    pattern: Optional[str] = None
    pattern_x: Optional[int] = None
    pattern_y: Optional[int] = None
    max_generations: int = 1000

    @property
    def boundary(self) -> Boundary:
        return Boundary.TOROIDAL if self.toroidal else Boundary.DEAD

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "SimulationConfig":
        """Build a configuration from parsed command-line arguments."""
        return cls(
            width=args.width,
            height=args.height,
            toroidal=args.toroidal,
            population_rate=args.population,
            seed=args.seed,
            pattern=args.pattern,
            pattern_x=args.pattern_x,
            pattern_y=args.pattern_y,
            max_generations=args.max_generations,
        )


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self) -> None:
        self.pattern_library = PatternLibrary()

    def build_grid(self, config: SimulationConfig) -> Grid:
        """Create the initial grid for a run.

        A named pattern is centered unless offsets are given; otherwise the
        grid is populated randomly from the configured seed.

        Raises:
            InvalidDimension: If the configured size is not positive
            ValueError: If the pattern is unknown
        """
        if config.pattern is None:
            return Grid.random(
                config.width,
                config.height,
                seed=config.seed,
                probability=config.population_rate,
                boundary=config.boundary,
            )

        pattern = self.pattern_library.get_pattern(config.pattern)
        if pattern is None:
            raise ValueError(f"Pattern '{config.pattern}' not found")
        pattern = pattern.normalize()

        grid = Grid(config.width, config.height, boundary=config.boundary)
        pattern_width, pattern_height = pattern.get_size()
        offset_x = config.pattern_x
        if offset_x is None:
            offset_x = max(0, (config.width - pattern_width) // 2)
        offset_y = config.pattern_y
        if offset_y is None:
            offset_y = max(0, (config.height - pattern_height) // 2)

        pattern.apply_to_grid(grid, offset_x, offset_y)
        return grid

    def run_simulation(
        self,
        config: SimulationConfig,
        verbose: bool = False,
        show_grid: bool = False,
        show_generations: bool = False,
    ) -> Tuple[int, str, dict]:
        """Run a Game of Life simulation.

        Args:
            config: Simulation configuration
            verbose: Print progress updates
            show_grid: Show initial and final grid states
            show_generations: Show the grid after every generation

        Returns:
            Tuple of (final_generation, finish_reason, statistics)
        """
        grid = self.build_grid(config)
        game = GameOfLife(grid)

        if verbose:
            print(f"Initialized {config.width}x{config.height} grid (boundary: {config.boundary.value})")
            if config.pattern:
                print(f"Loaded pattern '{config.pattern}'")
            else:
                print(f"Random population (rate: {config.population_rate:.2%}, seed: {config.seed})")

        initial_population = game.population

        if verbose:
            print(f"Initial population: {initial_population} cells")

        if show_grid or show_generations:
            print("\nInitial grid:")
            print(format_grid(grid.snapshot()))

        def show_generation(generation: int, snapshot: np.ndarray) -> None:
            print(f"\nGeneration {generation}:")
            print(format_grid(snapshot))

        if verbose:
            print(f"\nRunning simulation (max {config.max_generations} generations)...")

        start_time = time.time()
        final_generation, reason = game.run_until_stable(
            config.max_generations, callback=show_generation if show_generations else None
        )
        duration = time.time() - start_time

        stats = game.get_statistics()
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = final_generation / duration if duration > 0 else 0
        stats["initial_population"] = initial_population

        if show_grid and not show_generations:
            print(f"\nFinal grid (generation {final_generation}):")
            print(format_grid(grid.snapshot()))

        return final_generation, reason, stats

    def list_patterns(self) -> None:
        """List available patterns by category."""
        print("Available patterns:")
        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                size = pattern.get_size()
                print(f"  {name}: {size[0]}x{size[1]}, {len(pattern.cells)} cells")
                if pattern.description:
                    print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="conway-cli",
        description="Run Conway's Game of Life simulations from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a random 50x50 simulation, half the cells alive
  conway-cli --width 50 --height 50 --population 0.5 --seed 42

  # Run a glider on a 20x20 toroidal grid, printing every generation
  conway-cli -W 20 -H 20 --pattern Glider --toroidal --show-generations -m 40

  # List available patterns
  conway-cli --list-patterns
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=50, help="Grid width (default: 50)")
    parser.add_argument("-H", "--height", type=int, default=50, help="Grid height (default: 50)")
    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=0.5,
        help="Initial random population rate 0.0-1.0 (default: 0.5)",
    )
    parser.add_argument("-s", "--seed", type=int, help="Random seed for a reproducible initial grid")
    parser.add_argument(
        "-t",
        "--toroidal",
        action="store_true",
        help="Wrap edges around instead of treating cells outside the grid as dead",
    )

    # Pattern configuration
    parser.add_argument("--pattern", type=str, help="Load a named pattern instead of a random population")
    parser.add_argument("--pattern-x", type=int, help="X offset for pattern placement (default: centered)")
    parser.add_argument("--pattern-y", type=int, help="Y offset for pattern placement (default: centered)")

    # Simulation configuration
    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=1000,
        help="Maximum generations to simulate (default: 1000)",
    )

    # Output configuration
    parser.add_argument("-v", "--verbose", action="store_true", help="Print detailed progress information")
    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display initial and final grid states (small grids only)",
    )
    parser.add_argument(
        "--show-generations",
        action="store_true",
        help="Display the grid after every generation (small grids only)",
    )
    parser.add_argument("--list-patterns", action="store_true", help="List all available patterns and exit")

    return parser


def format_finish_reason(reason: str, stats: dict) -> str:
    """Format the simulation finish reason for display."""
    if reason == "cycle":
        return (
            f"Cycle detected (length {stats['cycle_length']}, "
            f"started at generation {stats['cycle_start_generation']})"
        )
    if reason == "extinction":
        return "All cells died"
    if reason == "max_generations":
        return "Reached maximum generations"
    return reason


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool) -> None:
    """Print simulation results."""
    print(f"\nSimulation completed after {final_generation} generations")
    print(f"Finish reason: {format_finish_reason(reason, stats)}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]} ({stats['boundary']} boundary)")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Population change rate: {stats['population_change_rate']:.2f}")
        print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
        print(f"  Speed: {stats['generations_per_second']:.0f} generations/second")
        if stats["bounding_box"]:
            box_width, box_height = stats["bounding_box_size"]
            print(f"  Bounding box: {box_width}x{box_height} at {stats['bounding_box'][:2]}")
    else:
        print(f"Population: {stats['initial_population']} -> {stats['population']}")


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments, printing any problems.

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")
    if args.height <= 0:
        errors.append("Height must be positive")
    if not 0.0 <= args.population <= 1.0:
        errors.append("Population rate must be between 0.0 and 1.0")
    if args.max_generations <= 0:
        errors.append("Max generations must be positive")
    if args.pattern_x is not None and args.pattern_x < 0:
        errors.append("Pattern X offset must be non-negative")
    if args.pattern_y is not None and args.pattern_y < 0:
        errors.append("Pattern Y offset must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits with 2 on unparsable flags and 0 for --help
        return 0 if e.code in (0, None) else 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.pattern and cli.pattern_library.get_pattern(args.pattern) is None:
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(cli.pattern_library.list_patterns())}")
        return 1

    try:
        final_generation, reason, stats = cli.run_simulation(
            SimulationConfig.from_args(args),
            verbose=args.verbose,
            show_grid=args.show_grid,
            show_generations=args.show_generations,
        )
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except (GameError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print_results(final_generation, reason, stats, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
