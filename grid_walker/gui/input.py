"""Handle basic input events and turn clicks into walker targets."""

from __future__ import annotations

from typing import Any, Dict
import logging

import pygame

logger = logging.getLogger(__name__)


def handle_events(world: Any, renderer: Any, state: Dict[str, Any]) -> None:
    """Process ``pygame`` events and update ``state`` or the walker target."""

    for ev in pygame.event.get():
        if ev.type == pygame.QUIT:
            state["running"] = False
            return

        if ev.type == pygame.MOUSEBUTTONDOWN:
            if ev.button == 1: # Left click
                tx, ty = renderer.screen_to_tile(ev.pos)
                logger.debug("Click at screen %s -> tile (%d,%d)", ev.pos, tx, ty)
                world.walker.request_path(tx, ty)

        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_SPACE:
                state["paused"] = not state.get("paused", False)
                logger.info("Walker %s.", "paused" if state["paused"] else "resumed")
            elif ev.key == pygame.K_TAB:
                renderer.show_status = not renderer.show_status
            elif ev.key == pygame.K_ESCAPE:
                state["running"] = False
                return


__all__ = ["handle_events"]
