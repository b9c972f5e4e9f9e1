"""Completed paths and the cursor used to walk them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from ...core.grid import Cell


@dataclass(frozen=True)
class Path:
    """Ordered cells from start to end plus the accumulated cost of the end."""

    cells: Tuple[Cell, ...]
    cost: int = 0

    def __post_init__(self) -> None:
        if not self.cells:
            raise ValueError("Path must contain at least one cell")

    @property
    def start(self) -> Cell:
        return self.cells[0]

    @property
    def end(self) -> Cell:
        return self.cells[-1]

    def coords(self) -> list[tuple[int, int]]:
        return [cell.coords for cell in self.cells]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]


class PathCursor:
    """Step through a :class:`Path` one cell at a time.

    The cursor starts at index 1 because the walker already stands on the
    start cell. It is finished once the index runs past the last cell and
    there is no way back; walk a new path with a new cursor.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self.index = 1

    def current_cell(self) -> Cell:
        if self.is_finished():
            raise IndexError(
                f"PathCursor finished: index {self.index} >= length {len(self.path)}"
            )
        return self.path[self.index]

    def end_cell(self) -> Cell:
        return self.path.end

    def advance(self) -> None:
        # Callers check is_finished() first.
        self.index += 1

    def is_finished(self) -> bool:
        return self.index >= len(self.path)

    @property
    def remaining(self) -> int:
        return max(0, len(self.path) - self.index)

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        state = "finished" if self.is_finished() else f"active({self.index})"
        return f"PathCursor({state}, length={len(self.path)})"


__all__ = ["Path", "PathCursor"]
