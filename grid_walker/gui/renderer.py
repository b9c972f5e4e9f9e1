# grid_walker/gui/renderer.py
"""Renderer for drawing the grid, path goal and walker to a :class:`Window`."""

from __future__ import annotations

from typing import Any

from .window import Window

TILE_COLOR_MAP = {
    "free": (0, 0, 0),
    "obstacle": (105, 105, 105),  # #696969
    "goal": (0, 255, 0),
    "walker": (255, 0, 0),
}
STATUS_TEXT_COLOR = (255, 255, 255)


class Renderer:
    """Redraw the whole scene each frame. Reads world state, never mutates it."""

    def __init__(self, window: Window, show_status: bool = False) -> None:
        self.window = window
        self.show_status = show_status

    @property
    def tile_size(self) -> int:
        return getattr(self.window, "tile_size", 16)

    def screen_to_tile(self, screen_pos: tuple[int, int]) -> tuple[int, int]:
        """Convert a pixel position to integer tile coordinates."""
        ts = self.tile_size
        return screen_pos[0] // ts, screen_pos[1] // ts

    def _render_tiles(self, world: Any) -> None:
        for cell in world.grid:
            color = TILE_COLOR_MAP["obstacle"] if cell.blocked else TILE_COLOR_MAP["free"]
            self.window.fill_tile(cell.x, cell.y, color)

    def update(self, world: Any) -> None:
        self._render_tiles(world)

        walker = world.walker
        end = walker.end_cell
        if end is not None:
            self.window.fill_tile(end.x, end.y, TILE_COLOR_MAP["goal"])

        wx, wy = walker.position
        self.window.fill_tile(wx, wy, TILE_COLOR_MAP["walker"])

        if self.show_status:
            tm = getattr(world, "time_manager", None)
            current_tick = tm.tick_counter if tm else "N/A"
            goal_text = end.coords if end is not None else "-"
            self.window.draw_text(
                f"Pos:{walker.position} Goal:{goal_text} Tick:{current_tick}",
                5, 5, STATUS_TEXT_COLOR,
            )


__all__ = ["Renderer", "TILE_COLOR_MAP"]
