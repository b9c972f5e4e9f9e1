"""Simple configuration loader for grid_walker."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class GridConfig:
    """Configuration values for the grid section."""

    width: int = 40
    height: int = 30
    tile_size: int = 16
    obstacle_probability: float = 0.05
    seed: Optional[int] = None


@dataclass
class WalkerConfig:
    """Where the walker starts and how fast it moves."""

    start: tuple[int, int] = (0, 0)
    ticks_per_step: int = 10


@dataclass
class SearchConfig:
    """Path search options."""

    use_heuristic: bool = False


@dataclass
class ClockConfig:
    tick_rate: float = 60.0


@dataclass
class LoggingConfig:
    """Global and per-module log levels."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    walker: WalkerConfig
    search: SearchConfig
    clock: ClockConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid") or {}
    seed = grid_data.get("seed")
    grid = GridConfig(
        width=int(grid_data.get("width", 40)),
        height=int(grid_data.get("height", 30)),
        tile_size=int(grid_data.get("tile_size", 16)),
        obstacle_probability=float(grid_data.get("obstacle_probability", 0.05)),
        seed=int(seed) if seed is not None else None,
    )
    if grid.width <= 0 or grid.height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {grid.width}x{grid.height}")
    if grid.tile_size <= 0:
        raise ValueError(f"tile_size must be positive, got {grid.tile_size}")
    if not 0.0 <= grid.obstacle_probability <= 1.0:
        raise ValueError(
            f"obstacle_probability must be within [0, 1], got {grid.obstacle_probability}"
        )

    walker_data = data.get("walker") or {}
    start = walker_data.get("start", [0, 0])
    if not isinstance(start, (list, tuple)) or len(start) != 2:
        raise ValueError(f"walker.start must be two integers [x, y], got {start!r}")
    walker = WalkerConfig(
        start=(int(start[0]), int(start[1])),
        ticks_per_step=int(walker_data.get("ticks_per_step", 10)),
    )
    if walker.ticks_per_step <= 0:
        raise ValueError(f"ticks_per_step must be positive, got {walker.ticks_per_step}")

    search_data = data.get("search") or {}
    search = SearchConfig(use_heuristic=bool(search_data.get("use_heuristic", False)))

    clock_data = data.get("clock") or {}
    clock = ClockConfig(tick_rate=float(clock_data.get("tick_rate", 60)))

    logging_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(
        grid=grid,
        walker=walker,
        search=search,
        clock=clock,
        logging=logging_cfg,
    )


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "WalkerConfig",
    "SearchConfig",
    "ClockConfig",
    "LoggingConfig",
    "load_config",
]
