"""Neighbour generation for 8-connected grid movement."""

from __future__ import annotations

from typing import List

from ...core.grid import Cell, Grid


def neighbors(grid: Grid, x: int, y: int) -> List[Cell]:
    """Return the passable neighbours of ``(x, y)``.

    Orthogonal cells come first (up, down, left, right), followed by the
    diagonals (up-left, down-right, down-left, up-right). A diagonal is only
    offered when both orthogonal cells flanking it are passable, so a walker
    never squeezes between two obstacles touching at a corner.
    """

    out: List[Cell] = []

    up = grid.is_passable(x, y - 1)
    if up:
        out.append(grid.cell_at(x, y - 1))

    down = grid.is_passable(x, y + 1)
    if down:
        out.append(grid.cell_at(x, y + 1))

    left = grid.is_passable(x - 1, y)
    if left:
        out.append(grid.cell_at(x - 1, y))

    right = grid.is_passable(x + 1, y)
    if right:
        out.append(grid.cell_at(x + 1, y))

    diagonals = (
        (up and left, x - 1, y - 1),
        (down and right, x + 1, y + 1),
        (down and left, x - 1, y + 1),
        (up and right, x + 1, y - 1),
    )
    for flanks_open, nx, ny in diagonals:
        if flanks_open and grid.is_passable(nx, ny):
            out.append(grid.cell_at(nx, ny))

    return out


def are_neighbors(grid: Grid, a: Cell, b: Cell) -> bool:
    """Return ``True`` if ``b`` is reachable from ``a`` in a single step."""

    return any(n.coords == b.coords for n in neighbors(grid, a.x, a.y))


__all__ = ["neighbors", "are_neighbors"]
