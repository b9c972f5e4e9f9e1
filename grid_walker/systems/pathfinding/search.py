"""Best-first grid path search."""

from __future__ import annotations

from dataclasses import dataclass
from heapq import heappop, heappush
from typing import List, Optional, Tuple
import logging

from ...core.grid import Coord, Grid
from .neighbors import neighbors
from .path import Path

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class _SearchNode:
    x: int
    y: int
    cost: int = 0
    parent: Optional["_SearchNode"] = None
    opened: bool = False
    closed: bool = False


def _manhattan(a: Coord, b: Coord) -> int:
    """Return the Manhattan distance between two coordinates.

    Used both as the per-step cost and, when enabled, as the heuristic. A
    diagonal step therefore costs 2.
    """

    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _reconstruct(grid: Grid, end: _SearchNode) -> Path:
    cells = []
    node: Optional[_SearchNode] = end
    while node is not None:
        cells.append(grid.cell_at(node.x, node.y))
        node = node.parent
    cells.reverse()
    return Path(tuple(cells), cost=end.cost)


class PathSearch:
    """Find the cheapest path between two cells of ``grid``.

    By default the frontier is ranked on accumulated cost alone, which makes
    this a uniform-cost search. With ``use_heuristic`` the ranking key becomes
    ``cost + manhattan(node, end)``; the heuristic never feeds into the stored
    cost. Ties go to the node discovered first. Closed nodes are never
    reopened, and a node's cost is fixed by the first parent that discovers
    it.
    """

    def __init__(self, grid: Grid, use_heuristic: bool = False) -> None:
        self.grid = grid
        self.use_heuristic = use_heuristic
        self.expanded: int = 0

    def _rank(self, node: _SearchNode, end: Coord) -> int:
        if self.use_heuristic:
            return node.cost + _manhattan((node.x, node.y), end)
        return node.cost

    def find_path(self, start: Coord, end: Coord) -> Optional[Path]:
        """Return a :class:`Path` from ``start`` to ``end`` or ``None`` if unreachable.

        Raises :class:`~grid_walker.core.grid.OutOfRangeError` when either
        endpoint lies outside the grid.
        """

        grid = self.grid
        grid.cell_at(*start)
        grid.cell_at(*end)

        # Fresh node table for every call.
        nodes: List[List[_SearchNode]] = [
            [_SearchNode(x, y) for y in range(grid.height)] for x in range(grid.width)
        ]
        start_node = nodes[start[0]][start[1]]
        end_node = nodes[end[0]][end[1]]

        seq = 0
        open_heap: List[Tuple[int, int, _SearchNode]] = []
        heappush(open_heap, (self._rank(start_node, end), seq, start_node))
        start_node.opened = True
        self.expanded = 0

        while open_heap:
            _, _, current = heappop(open_heap)

            if current is end_node:
                path = _reconstruct(grid, current)
                logger.debug(
                    "Path %s -> %s found: %d cells, cost %d, %d nodes expanded",
                    start, end, len(path), path.cost, self.expanded,
                )
                return path

            current.opened = False
            current.closed = True
            self.expanded += 1

            for cell in neighbors(grid, current.x, current.y):
                neighbour = nodes[cell.x][cell.y]
                if neighbour.opened or neighbour.closed:
                    continue
                neighbour.parent = current
                neighbour.cost = current.cost + _manhattan(
                    (current.x, current.y), (neighbour.x, neighbour.y)
                )
                neighbour.opened = True
                seq += 1
                heappush(open_heap, (self._rank(neighbour, end), seq, neighbour))

        logger.debug(
            "No path %s -> %s after expanding %d nodes", start, end, self.expanded
        )
        return None


def find_path(
    grid: Grid, start: Coord, end: Coord, use_heuristic: bool = False
) -> Optional[Path]:
    """Convenience wrapper running a one-off :class:`PathSearch`."""

    return PathSearch(grid, use_heuristic=use_heuristic).find_path(start, end)


__all__ = ["PathSearch", "find_path"]
