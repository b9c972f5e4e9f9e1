"""Simple world container for the grid, walker and clock."""

from __future__ import annotations

from typing import Optional

from .grid import Grid
from .time_manager import TimeManager
from ..systems.movement.walker_system import WalkerSystem


class World:
    """Lightweight holder wiring the grid, walker and time manager together."""

    def __init__(
        self,
        grid: Grid,
        walker: Optional[WalkerSystem] = None,
        time_manager: Optional[TimeManager] = None,
    ) -> None:
        self.grid = grid
        self.walker = walker if walker is not None else WalkerSystem(grid)
        self.time_manager = time_manager if time_manager is not None else TimeManager()

    @property
    def size(self) -> tuple[int, int]:
        return self.grid.size

    def tick(self, wait: bool = False) -> int:
        """Advance the clock one tick and run the walker for it.

        With ``wait`` the call blocks until the tick is due.
        """

        tm = self.time_manager
        if wait:
            tm.sleep_until_next_tick()
        else:
            tm.advance()
        self.walker.update(tm.tick_counter)
        return tm.tick_counter


__all__ = ["World"]
