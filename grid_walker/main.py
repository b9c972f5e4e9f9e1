# grid_walker/main.py
"""World bootstrap and frame loop."""

from __future__ import annotations

from pathlib import Path
import logging

import pygame

from .config import CONFIG, Config, load_config
from .core.grid import Grid
from .core.time_manager import TimeManager
from .core.world import World
from .systems.movement.walker_system import WalkerSystem
from .gui.window import Window
from .gui.renderer import Renderer
from .gui import input as gui_input

logger = logging.getLogger(__name__)

BACKGROUND_COLOUR = (0, 0, 0)


def configure_logging(cfg: Config) -> None:
    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Apply per-module levels if defined
    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(cfg: Config) -> World:
    """Build a fresh grid, walker and clock from ``cfg``."""

    grid = Grid.random(
        cfg.grid.width,
        cfg.grid.height,
        obstacle_probability=cfg.grid.obstacle_probability,
        seed=cfg.grid.seed,
    )
    logger.info(
        "[Bootstrap] Grid %dx%d with %d obstacles (seed=%s)",
        grid.width, grid.height, len(grid.blocked_cells()), cfg.grid.seed,
    )
    walker = WalkerSystem(
        grid,
        start=cfg.walker.start,
        ticks_per_step=cfg.walker.ticks_per_step,
        use_heuristic=cfg.search.use_heuristic,
    )
    logger.info(
        "[Bootstrap] Walker at %s, one step every %d ticks, heuristic ranking %s",
        walker.position, walker.ticks_per_step,
        "on" if cfg.search.use_heuristic else "off",
    )
    return World(grid, walker, TimeManager(cfg.clock.tick_rate))


def run(world: World, renderer: Renderer) -> None:
    """Poll input, tick the walker and redraw until the window closes."""

    state = {"running": True, "paused": False}
    try:
        while state["running"]:
            gui_input.handle_events(world, renderer, state)
            if not state["running"]:
                break

            if state["paused"]:
                world.time_manager.sleep_until_next_tick()
            else:
                world.tick(wait=True)

            renderer.window.clear(BACKGROUND_COLOUR)
            renderer.update(world)
            renderer.window.refresh()
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")


def main(config_path: str | Path | None = None) -> None:
    """Run the app with ``config_path``, or with the import-time ``CONFIG``."""
    cfg = CONFIG if config_path is None else load_config(Path(config_path))
    configure_logging(cfg)

    world = bootstrap(cfg)

    pygame.init()
    try:
        window = Window(world.size, tile_size=cfg.grid.tile_size)
        renderer = Renderer(window)
        logger.info("Application started. Left click a tile to walk there.")
        run(world, renderer)
    finally:
        logger.info("Application shutting down...")
        if pygame.get_init():
            pygame.quit()


if __name__ == "__main__":
    main()
