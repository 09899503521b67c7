"""Core Game of Life logic."""

from .cell import CellState, transition
from .errors import GameError, InvalidDimension, OutOfBounds
from .grid import Boundary, Grid
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary

__all__ = [
    "CellState",
    "transition",
    "GameError",
    "InvalidDimension",
    "OutOfBounds",
    "Boundary",
    "Grid",
    "GameOfLife",
    "Pattern",
    "PatternLibrary",
]
