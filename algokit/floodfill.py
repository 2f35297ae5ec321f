"""Four-directional flood fill on a rectangular grid."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def flood_fill(screen: Sequence[Sequence[Any]], x: int, y: int, new_color: Any) -> list[list[Any]]:
    """Return a copy of ``screen`` with the region around (x, y) recoloured.

    ``x`` is the row and ``y`` the column. Cells join the region when they
    share an edge with it and hold the colour the start cell had.
    """
    grid = [list(row) for row in screen]
    rows = len(grid)
    cols = len(grid[0]) if grid else 0
    if not (0 <= x < rows and 0 <= y < cols):
        raise IndexError(f"start cell ({x}, {y}) is outside the grid")

    old_color = grid[x][y]
    if old_color == new_color:
        return grid

    grid[x][y] = new_color
    pending = [(x, y)]
    while pending:
        px, py = pending.pop()
        for nx, ny in ((px + 1, py), (px - 1, py), (px, py + 1), (px, py - 1)):
            if 0 <= nx < rows and 0 <= ny < cols and grid[nx][ny] == old_color:
                grid[nx][ny] = new_color
                pending.append((nx, ny))
    return grid