# tests/conftest.py
import pytest

from grid_walker.gui.window import Window


class DummyWindow(Window):
    """Records draw calls instead of opening a display."""

    def __init__(self, tile_size: int = 16) -> None:
        self.tile_size = tile_size
        self.tiles = []
        self.text = []

    def fill_tile(self, x: int, y: int, colour) -> None:
        self.tiles.append(((x, y), colour))

    def draw_text(self, text: str, x: int, y: int, colour=(255, 255, 255)) -> None:
        self.text.append(text)

    def clear(self, color=(0, 0, 0)) -> None:  # pragma: no cover - not used
        pass

    def refresh(self) -> None:  # pragma: no cover - not used
        pass


@pytest.fixture
def dummy_window() -> DummyWindow:
    return DummyWindow()
