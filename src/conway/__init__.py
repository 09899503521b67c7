"""Conway's Game of Life on a fixed-size grid."""

__version__ = "0.1.0"

from .core.errors import GameError, InvalidDimension, OutOfBounds
from .core.grid import Boundary, Grid
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary

__all__ = [
    "GameError",
    "InvalidDimension",
    "OutOfBounds",
    "Boundary",
    "Grid",
    "GameOfLife",
    "Pattern",
    "PatternLibrary",
]
