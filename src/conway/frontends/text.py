"""Plain-text rendering of grid snapshots."""

import numpy as np

ALIVE_CHAR = "*"
DEAD_CHAR = "."


def render(snapshot: np.ndarray, alive: str = ALIVE_CHAR, dead: str = DEAD_CHAR) -> str:
    """Render a snapshot as text, one row per line.

    Args:
        snapshot: Array of cell states indexed [x, y]
        alive: Character for living cells
        dead: Character for dead cells

    Returns:
        Rows joined by newlines, top row (y = 0) first
    """
    width, height = snapshot.shape
    rows = []
    for y in range(height):
        rows.append("".join(alive if snapshot[x, y] else dead for x in range(width)))
    return "\n".join(rows)


def format_grid(snapshot: np.ndarray, max_size: int = 50) -> str:
    """Render a snapshot, or a placeholder message if it is too large."""
    width, height = snapshot.shape
    if width > max_size or height > max_size:
        return f"Grid too large to display ({width}x{height})"
    return render(snapshot)
