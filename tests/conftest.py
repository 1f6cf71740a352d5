from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Flat module layout: make the repo root importable without an install.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from tower_config import GameConfig  # noqa: E402
from tower_game import GameController  # noqa: E402


class RecordingCanvas:
    """Canvas stand-in that keeps every draw call as a tuple."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def fill_rect(self, rect, color, alpha=None) -> None:
        self.calls.append(("fill", tuple(rect), tuple(color), alpha))

    def outline_rect(self, rect, color, thickness=1) -> None:
        self.calls.append(("outline", tuple(rect), tuple(color), thickness))

    def text(self, text, pos, size, color) -> None:
        self.calls.append(("text", text, tuple(pos), size, tuple(color)))

    def texts(self) -> list[str]:
        return [c[1] for c in self.calls if c[0] == "text"]


@pytest.fixture()
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture()
def game(config: GameConfig) -> GameController:
    return GameController(config)


@pytest.fixture()
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture()
def align():
    """Put the moving block right above the tower top, shifted by offset."""

    def _align(game: GameController, offset: float = 0.0) -> None:
        game.current_block.left = game.tower.top().left + offset

    return _align
