#!/usr/bin/env python3
"""
Example usage of the conway package.
"""

from conway import Boundary, GameOfLife, Grid, PatternLibrary
from conway.frontends.text import render


def main():
    """Run a glider around a small torus, printing each generation."""
    grid = Grid(12, 12, boundary=Boundary.TOROIDAL)
    game = GameOfLife(grid)

    glider = PatternLibrary().get_pattern("Glider")
    glider.apply_to_grid(grid, offset_x=4, offset_y=4)

    print("Initial state:")
    print(render(grid.snapshot()))
    print()

    def show(generation, snapshot):
        print(f"Generation {generation}:")
        print(render(snapshot))
        print()

    final_generation, reason = game.run_until_stable(100, callback=show)
    print(f"Stopped after {final_generation} generations: {reason}")

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        if key != "population_history":
            print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
