import os
import random
import sys
from pathlib import Path

import pytest

# Ensure the src layout is importable without an install
SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Headless pygame for the client tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from flappy_dragon.data_models import GameConfig  # noqa: E402


class RecordingRenderer:
    """Collects draw calls instead of touching a window."""

    def __init__(self, width=80, height=50):
        self.width = width
        self.height = height
        self.cells = {}
        self.texts = []
        self.clears = 0

    def clear(self, bg=None):
        self.cells.clear()
        self.texts.clear()
        self.clears += 1

    def draw_cell(self, x, y, fg, bg, glyph):
        self.cells[(x, y)] = (glyph, fg)

    def print_text(self, x, y, text):
        self.texts.append((x, y, text))

    def print_centered(self, y, text):
        self.texts.append((None, y, text))

    def all_text(self):
        return [t for _, _, t in self.texts]


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def renderer():
    return RecordingRenderer()
