"""Puzzles played out on two-dimensional grids and matrices."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

_MAGIC_SQUARES: tuple[tuple[tuple[int, ...], ...], ...] = (
    ((8, 3, 4), (1, 5, 9), (6, 7, 2)),
    ((8, 1, 6), (3, 5, 7), (4, 9, 2)),
    ((6, 7, 2), (1, 5, 9), (8, 3, 4)),
    ((4, 9, 2), (3, 5, 7), (8, 1, 6)),
    ((6, 1, 8), (7, 5, 3), (2, 9, 4)),
    ((4, 3, 8), (9, 5, 1), (2, 7, 6)),
    ((2, 7, 6), (9, 5, 1), (4, 3, 8)),
    ((2, 9, 4), (7, 5, 3), (6, 1, 8)),
)


def _line_faces(line: Sequence[int]) -> int:
    """Side faces seen from both ends of one line of stacks."""
    return line[0] + line[-1] + sum(abs(a - b) for a, b in pairwise(line))


def surface_area(grid: Sequence[Sequence[int]]) -> int:
    """Total exposed surface of unit cubes stacked to the heights in ``grid``."""
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must have at least one cell")
    height, width = len(rows), len(rows[0])
    columns = [list(col) for col in zip(*rows)]
    return (
        2 * height * width
        + sum(_line_faces(row) for row in rows)
        + sum(_line_faces(col) for col in columns)
    )


def _blast_zone(timers: list[list[int]]) -> set[tuple[int, int]]:
    """Cells destroyed when every bomb whose timer reads 1 goes off."""
    rows, cols = len(timers), len(timers[0])
    zone: set[tuple[int, int]] = set()
    for r, row in enumerate(timers):
        for c, timer in enumerate(row):
            if timer != 1:
                continue
            for dr, dc in ((0, 0), (1, 0), (-1, 0), (0, 1), (0, -1)):
                nr, nc = r + dr, c + dc
                if 0 <= nr < rows and 0 <= nc < cols:
                    zone.add((nr, nc))
    return zone


def _render(timers: list[list[int]]) -> list[str]:
    return ["".join("." if t == 0 else "O" for t in row) for row in timers]


def bomber_man(seconds: int, grid: Sequence[str]) -> list[str]:
    """State of the bomber-man grid after ``seconds`` seconds."""
    if seconds <= 1:
        return list(grid)
    width = len(grid[0])
    planted = [[1 if ch == "O" else 3 for ch in row[:width]] for row in grid]

    zone = _blast_zone(planted)
    first_blast = [
        [0 if (r, c) in zone else t - 1 for c, t in enumerate(row)]
        for r, row in enumerate(planted)
    ]

    replanted = [[1 if t == 2 else 3 for t in row] for row in first_blast]
    zone = _blast_zone(replanted)
    second_blast = [
        [
            0 if (r, c) in zone or first_blast[r][c] == 1 else t - 1
            for c, t in enumerate(row)
        ]
        for r, row in enumerate(replanted)
    ]

    if seconds % 2 == 0:
        return _render(planted)
    if (seconds + 1) % 4 == 0:
        return _render(first_blast)
    return _render(second_blast)


def cavity_map(grid: Sequence[str]) -> list[str]:
    """Mark with ``X`` each interior cell deeper than its four neighbours."""
    cells = [list(row) for row in grid]
    size = len(cells)
    for i in range(1, size - 1):
        for j in range(1, size - 1):
            depth = cells[i][j]
            neighbours = (cells[i - 1][j], cells[i + 1][j], cells[i][j - 1], cells[i][j + 1])
            if all(depth > other for other in neighbours):
                cells[i][j] = "X"
    return ["".join(row) for row in cells]


def grid_search(grid: Sequence[str], pattern: Sequence[str]) -> bool:
    """Whether ``pattern`` occurs as a contiguous block inside ``grid``."""
    if not pattern or not pattern[0]:
        raise ValueError("pattern must have at least one cell")
    height, width = len(pattern), len(pattern[0])
    rows = len(grid)
    cols = len(grid[0]) if grid else 0
    return any(
        all(grid[top + k][left:left + width] == pattern[k][:width] for k in range(height))
        for top in range(rows - height + 1)
        for left in range(cols - width + 1)
    )


def _ring(layer: int, rows: int, cols: int) -> list[tuple[int, int]]:
    """Cells of one layer, running down the left side and anticlockwise round."""
    bottom, right = rows - 1 - layer, cols - 1 - layer
    path = [(r, layer) for r in range(layer, bottom + 1)]
    path += [(bottom, c) for c in range(layer + 1, right + 1)]
    path += [(r, right) for r in range(bottom - 1, layer - 1, -1)]
    path += [(layer, c) for c in range(right - 1, layer, -1)]
    return path


def rotate_matrix_layers(matrix: Sequence[Sequence[int]], rotations: int) -> list[list[int]]:
    """Rotate every layer of ``matrix`` anticlockwise ``rotations`` times."""
    result = [list(row) for row in matrix]
    rows = len(result)
    cols = len(result[0]) if result else 0
    for layer in range(min(rows, cols) // 2):
        path = _ring(layer, rows, cols)
        values = [result[r][c] for r, c in path]
        shift = rotations % len(values)
        moved = values[len(values) - shift:] + values[:len(values) - shift]
        for (r, c), value in zip(path, moved):
            result[r][c] = value
    return result


def forming_magic_square(square: Sequence[Sequence[int]]) -> int:
    """Least total change that turns a 3x3 square into a magic square."""
    if len(square) != 3 or any(len(row) != 3 for row in square):
        raise ValueError("square must be 3x3")
    return min(
        sum(
            abs(value - target)
            for row, magic_row in zip(square, magic)
            for value, target in zip(row, magic_row)
        )
        for magic in _MAGIC_SQUARES
    )


def organizing_containers(containers: Sequence[Sequence[int]]) -> bool:
    """Whether swaps can leave every container holding a single ball type."""
    capacities = sorted(sum(row) for row in containers)
    type_counts = sorted(sum(col) for col in zip(*containers))
    return capacities == type_counts