"""Well-known Game of Life starting patterns."""

from typing import Dict, List, Optional, Tuple

from .errors import OutOfBounds
from .grid import Grid, Position


class Pattern:
    """A named set of live cells that can be placed on a grid."""

    def __init__(self, name: str, cells: List[Position], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def apply_to_grid(self, grid: Grid, offset_x: int = 0, offset_y: int = 0) -> None:
        """Clear the grid and place this pattern on it.

        Cells that land outside the grid are skipped.

        Args:
            grid: Target grid
            offset_x: Horizontal offset
            offset_y: Vertical offset
        """
        grid.clear()
        for x, y in self.cells:
            try:
                grid.set_cell(x + offset_x, y + offset_y, True)
            except OutOfBounds:
                continue

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box as (min_x, min_y, max_x, max_y)."""
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height)."""
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def normalize(self) -> "Pattern":
        """Return a copy with coordinates shifted to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description)

        min_x, min_y, _, _ = self.get_bounding_box()
        return Pattern(self.name, [(x - min_x, y - min_y) for x, y in self.cells], self.description)

    @classmethod
    def from_grid(cls, grid: Grid, name: str, description: str = "") -> "Pattern":
        """Create a pattern from the live cells of a grid."""
        return cls(name, list(grid.alive_cells()), description)

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


def _pulsar_cells() -> List[Position]:
    # One quadrant, mirrored across both axes of the 13x13 bounding box
    quadrant = [(2, 0), (3, 0), (4, 0), (0, 2), (0, 3), (0, 4), (5, 2), (5, 3), (5, 4), (2, 5), (3, 5), (4, 5)]
    cells = set()
    for x, y in quadrant:
        cells.update({(x, y), (12 - x, y), (x, 12 - y), (12 - x, 12 - y)})
    return sorted(cells, key=lambda c: (c[1], c[0]))


_CATEGORIES = {
    "Still Life": ["Block", "Beehive", "Loaf"],
    "Oscillators": ["Blinker", "Toad", "Beacon", "Pulsar"],
    "Spaceships": ["Glider", "Lightweight Spaceship"],
    "Methuselahs": ["R-pentomino", "Diehard", "Acorn"],
}


class PatternLibrary:
    """A collection of named patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))
        self.add_pattern(
            Pattern("Beehive", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)], "Beehive still life")
        )
        self.add_pattern(
            Pattern("Loaf", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (3, 2), (2, 3)], "Loaf still life")
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"))
        self.add_pattern(
            Pattern("Toad", [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)], "Period-2 oscillator")
        )
        self.add_pattern(
            Pattern("Beacon", [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)], "Period-2 oscillator")
        )
        self.add_pattern(Pattern("Pulsar", _pulsar_cells(), "Period-3 oscillator"))

        # Spaceships
        self.add_pattern(
            Pattern("Glider", [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], "Smallest spaceship, period-4")
        )
        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (3, 0), (4, 1), (0, 2), (4, 2), (1, 3), (2, 3), (3, 3), (4, 3)],
                "LWSS - Period-4 spaceship",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )
        self.add_pattern(
            Pattern(
                "Diehard",
                [(6, 0), (0, 1), (1, 1), (1, 2), (5, 2), (6, 2), (7, 2)],
                "Dies after exactly 130 generations",
            )
        )
        self.add_pattern(
            Pattern(
                "Acorn",
                [(1, 0), (3, 1), (0, 2), (1, 2), (4, 2), (5, 2), (6, 2)],
                "Takes 5206 generations to stabilize",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern, replacing any pattern with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, or None if not found."""
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get pattern names grouped by category.

        Patterns added by the caller are listed under "Custom".
        """
        categories = {category: list(names) for category, names in _CATEGORIES.items()}
        builtin = {name for names in _CATEGORIES.values() for name in names}
        categories["Custom"] = [name for name in self._patterns if name not in builtin]

        return {category: names for category, names in categories.items() if names}
