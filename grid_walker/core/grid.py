"""Fixed-size tile grid with static obstacles."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import Iterable, Iterator, List, Set, Tuple
import logging

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]

DEFAULT_OBSTACLE_PROBABILITY = 0.05


class OutOfRangeError(IndexError):
    """Raised when a coordinate outside the grid reaches an unchecked accessor."""

    def __init__(self, x: int, y: int, size: Coord) -> None:
        super().__init__(f"({x}, {y}) is outside grid of size {size[0]}x{size[1]}")
        self.x = x
        self.y = y
        self.size = size


@dataclass(frozen=True)
class Cell:
    """A single tile. ``blocked`` never changes after the grid is built."""

    x: int
    y: int
    blocked: bool = False

    @property
    def coords(self) -> Coord:
        return (self.x, self.y)


class Grid:
    """Rectangular array of :class:`Cell` objects stored as ``[row][col]``."""

    def __init__(
        self,
        width: int,
        height: int,
        blocked: Iterable[Coord] = (),
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        blocked_set = set(blocked)
        self._cells: List[List[Cell]] = [
            [Cell(x, y, (x, y) in blocked_set) for x in range(width)]
            for y in range(height)
        ]

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        obstacle_probability: float = DEFAULT_OBSTACLE_PROBABILITY,
        seed: int | None = None,
    ) -> "Grid":
        """Return a grid where each cell is blocked with ``obstacle_probability``."""

        if not 0.0 <= obstacle_probability <= 1.0:
            raise ValueError(
                f"obstacle_probability must be within [0, 1], got {obstacle_probability}"
            )
        rnd = Random(seed)
        blocked = [
            (x, y)
            for y in range(height)
            for x in range(width)
            if rnd.random() < obstacle_probability
        ]
        logger.debug(
            "Generated %dx%d grid with %d obstacles (p=%.3f, seed=%s)",
            width, height, len(blocked), obstacle_probability, seed,
        )
        return cls(width, height, blocked)

    @property
    def size(self) -> Coord:
        return (self.width, self.height)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_passable(self, x: int, y: int) -> bool:
        """Return ``False`` for blocked or out-of-bounds cells."""

        if not self.in_bounds(x, y):
            return False
        return not self._cells[y][x].blocked

    def cell_at(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)``; raises :class:`OutOfRangeError` when outside."""

        if not self.in_bounds(x, y):
            raise OutOfRangeError(x, y, self.size)
        return self._cells[y][x]

    def blocked_cells(self) -> Set[Coord]:
        return {cell.coords for cell in self if cell.blocked}

    def __iter__(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row


__all__ = ["Cell", "Coord", "Grid", "OutOfRangeError", "DEFAULT_OBSTACLE_PROBABILITY"]
