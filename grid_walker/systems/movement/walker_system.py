"""Walker system moving the agent along its current path."""

from __future__ import annotations

from typing import Optional
import logging

from ...core.grid import Cell, Coord, Grid
from ..pathfinding.path import PathCursor
from ..pathfinding.search import PathSearch

logger = logging.getLogger(__name__)

DEFAULT_TICKS_PER_STEP = 10


class WalkerSystem:
    """Hold the agent position and step it along a :class:`PathCursor`.

    ``update(tick)`` moves the agent one cell every ``ticks_per_step`` ticks.
    A new target replaces the current cursor, even mid-walk; an unreachable
    target leaves everything as it was.
    """

    def __init__(
        self,
        grid: Grid,
        start: Coord = (0, 0),
        ticks_per_step: int = DEFAULT_TICKS_PER_STEP,
        use_heuristic: bool = False,
    ) -> None:
        if ticks_per_step <= 0:
            raise ValueError(f"ticks_per_step must be positive, got {ticks_per_step}")
        if not grid.in_bounds(*start):
            raise ValueError(f"Walker start {start} is outside the grid {grid.size}")
        self.grid = grid
        self.position: Coord = (int(start[0]), int(start[1]))
        self.ticks_per_step = ticks_per_step
        self.use_heuristic = use_heuristic
        self.cursor: Optional[PathCursor] = None

    @property
    def end_cell(self) -> Optional[Cell]:
        if self.cursor is None:
            return None
        return self.cursor.end_cell()

    @property
    def is_moving(self) -> bool:
        return self.cursor is not None and not self.cursor.is_finished()

    def request_path(self, x: int, y: int) -> bool:
        """Search from the current position to ``(x, y)``.

        Returns ``True`` when a new path was installed.
        """

        target = (x, y)
        if target == self.position:
            logger.debug("WalkerSystem: target %s is the current position; ignored.", target)
            return False
        if not self.grid.in_bounds(x, y):
            logger.debug("WalkerSystem: target %s outside grid %s; ignored.", target, self.grid.size)
            return False

        path = PathSearch(self.grid, use_heuristic=self.use_heuristic).find_path(
            self.position, target
        )
        if path is None:
            logger.info("WalkerSystem: no path from %s to %s.", self.position, target)
            return False

        if self.is_moving:
            logger.debug(
                "WalkerSystem: abandoning path to %s with %d cells left.",
                self.cursor.end_cell().coords, self.cursor.remaining,
            )
        self.cursor = PathCursor(path)
        logger.info(
            "WalkerSystem: new path %s -> %s, %d steps, cost %d.",
            self.position, target, len(path) - 1, path.cost,
        )
        return True

    def update(self, tick: int) -> None:
        if self.cursor is None or self.cursor.is_finished():
            return
        if tick % self.ticks_per_step != 0:
            return

        cell = self.cursor.current_cell()
        self.position = cell.coords
        self.cursor.advance()
        if self.cursor.is_finished():
            logger.debug("[Tick %s] WalkerSystem: arrived at %s.", tick, self.position)


__all__ = ["WalkerSystem", "DEFAULT_TICKS_PER_STEP"]
