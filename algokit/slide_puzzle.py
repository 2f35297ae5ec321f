"""Shortest solutions of small sliding-tile puzzles by breadth-first search.

A grid of ``rows x columns`` cells (at most nine) holds the numbers
``1 .. rows*columns - 1`` once each and a ``0`` for the empty space. The
solved grid reads ``1, 2, ..., 0`` row by row. States are kept as strings
of digits in row-major order.
"""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

MAX_CELLS = 9

# Directions the empty space is moved in: right, left, down, up.
_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


class InvalidGridError(ValueError):
    """Raised when a grid is not a valid puzzle."""


@dataclass(frozen=True)
class Step:
    """One state on a solution path and the tile moved to reach it."""

    state: str
    moved: int | None


@dataclass(frozen=True)
class Solution:
    """A shortest path from the starting state to the solved state."""

    steps: tuple[Step, ...]
    columns: int

    @property
    def moves(self) -> int:
        """Number of tile moves on the path."""
        return len(self.steps) - 1


def _check_size(rows: int, columns: int) -> None:
    if rows <= 0 or columns <= 0:
        raise InvalidGridError("grid must have at least one row and one column")
    if rows * columns > MAX_CELLS:
        raise InvalidGridError("Grid size is too big to handle")


def validate_grid(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Check that ``grid`` is a valid puzzle and return its (rows, columns)."""
    rows = len(grid)
    columns = len(grid[0]) if rows else 0
    if any(len(row) != columns for row in grid):
        raise InvalidGridError("all rows must have the same length")
    _check_size(rows, columns)
    cells = rows * columns
    values = [value for row in grid for value in row]
    for value in values:
        if not 0 <= value < cells:
            raise InvalidGridError(f"Sorry, Enter number is invalid: {value}")
    if sorted(values) != list(range(cells)):
        raise InvalidGridError("You have entered INVALID grid")
    return rows, columns


def grid_to_state(grid: Sequence[Sequence[int]]) -> str:
    """Validate ``grid`` and return it as a row-major string of digits."""
    validate_grid(grid)
    return "".join(str(value) for row in grid for value in row)


def is_solved(state: str) -> bool:
    """Return True if ``state`` reads ``1, 2, ..., 0``."""
    if not state:
        return False
    expected = "".join(str(i) for i in range(1, len(state))) + "0"
    return state == expected


def neighbours(state: str, columns: int) -> Iterator[tuple[str, int]]:
    """Yield each state one move away, with the tile moved into the space.

    The empty space is tried moving right, left, down and up, in that order.
    """
    if columns <= 0 or not state or len(state) % columns:
        raise ValueError("state length must be a positive multiple of columns")
    rows = len(state) // columns
    zero = state.index("0")
    row, col = divmod(zero, columns)
    for dr, dc in _DIRECTIONS:
        new_row, new_col = row + dr, col + dc
        if 0 <= new_row < rows and 0 <= new_col < columns:
            target = new_row * columns + new_col
            cells = list(state)
            cells[zero], cells[target] = cells[target], cells[zero]
            yield "".join(cells), int(state[target])


def solve(grid: Sequence[Sequence[int]]) -> Solution | None:
    """Return a shortest solution for ``grid``, or None if it cannot be solved."""
    _, columns = validate_grid(grid)
    start = grid_to_state(grid)
    came_from: dict[str, tuple[str | None, int | None]] = {start: (None, None)}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if is_solved(current):
            path: list[Step] = []
            node: str | None = current
            while node is not None:
                parent, moved = came_from[node]
                path.append(Step(node, moved))
                node = parent
            path.reverse()
            return Solution(tuple(path), columns)
        for nxt, moved in neighbours(current, columns):
            if nxt not in came_from:
                came_from[nxt] = (current, moved)
                queue.append(nxt)
    return None


def format_state(state: str, columns: int) -> str:
    """Render ``state`` as a grid with ``columns`` cells per row."""
    if columns <= 0:
        raise ValueError("columns must be positive")
    parts = ["\n"]
    for position, cell in enumerate(state, start=1):
        parts.append(cell)
        if position % columns == 0:
            parts.append("\n" + "---" * columns + "\n")
        else:
            parts.append(" | ")
    parts.append("\n")
    return "".join(parts)


def _read_int(raw: str) -> int:
    return int(raw.strip())


def main(argv: Sequence[str] | None = None) -> int:
    """Read a grid, solve it and print the path of moves."""
    parser = argparse.ArgumentParser(description="Solve a sliding-tile puzzle.")
    parser.add_argument("-r", "--rows", type=int, help="number of rows")
    parser.add_argument("-c", "--columns", type=int, help="number of columns")
    parser.add_argument("cells", nargs="*", type=int, help="grid cells in row-major order")
    args = parser.parse_args(argv)

    try:
        rows = args.rows if args.rows is not None else _read_int(
            input("\nEnter the desired number of rows: ")
        )
        columns = args.columns if args.columns is not None else _read_int(
            input("\nEnter the desired number of columns: ")
        )
        _check_size(rows, columns)
        cells = list(args.cells)
        if not cells:
            print(f"\nEnter the initial grid with {rows} rows and {columns} columns")
            print(
                f"Only distinct numbers between 1-{rows * columns - 1} "
                "and a 0 to represent an empty space\n"
            )
            while len(cells) < rows * columns:
                cells.extend(_read_int(token) for token in input().split())
        if len(cells) != rows * columns:
            raise InvalidGridError(f"expected {rows * columns} cells, got {len(cells)}")
        grid = [cells[i * columns : (i + 1) * columns] for i in range(rows)]
        solution = solve(grid)
    except InvalidGridError as exc:
        print(f"\n{exc}\n")
        return 1
    except (ValueError, EOFError):
        print("\nSorry, Enter number is invalid\n")
        return 1

    if solution is None:
        print("\nNot Possible")
        return 0

    print(f"\nShortest number of moves = {solution.moves}")
    for current, following in zip(solution.steps, solution.steps[1:] + (None,)):
        print(format_state(current.state, solution.columns), end="")
        if following is not None:
            print("Press any key to continue")
            print(f"\nMoving {following.moved} to reach next state:")
    return 0