"""Errors raised by the grid engine."""

from typing import Tuple


class GameError(Exception):
    """Base class for Game of Life errors."""


class InvalidDimension(GameError, ValueError):
    """Raised when a grid is constructed with a non-positive width or height."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Grid dimensions must be positive integers, got {width}x{height}")


class OutOfBounds(GameError, IndexError):
    """Raised when a cell outside the grid is accessed.

    Attributes:
        position: The requested (x, y) position
        dimensions: The grid's (width, height)
    """

    def __init__(self, position: Tuple[int, int], dimensions: Tuple[int, int]) -> None:
        self.position = position
        self.dimensions = dimensions
        super().__init__(
            f"Coordinates {position} out of bounds for {dimensions[0]}x{dimensions[1]} grid"
        )
