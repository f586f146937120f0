import os

import pytest

# Let DearCyGui create its context on machines without a display
os.environ.setdefault("SDL_VIDEODRIVER", "offscreen")


class FakeCanvas:
    """Stands in for the slide canvas: slides append to `content`."""

    def __init__(self):
        self.content = []
        self.clear_count = 0
        self.entered = 0

    def clear(self):
        self.content = []
        self.clear_count += 1

    def __getitem__(self, idx):
        return self.content[idx]

    def __enter__(self):
        self.entered += 1
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.entered -= 1
        return False


def drawing(name):
    """A slide function writing `name` into the canvas"""
    def draw(canvas):
        canvas.content.append(name)
    draw.__name__ = f"draw_{name}"
    return draw


@pytest.fixture
def canvas():
    return FakeCanvas()


@pytest.fixture
def C():
    """A DearCyGui context without an opened viewport"""
    dcg = pytest.importorskip("dearcygui")
    try:
        return dcg.Context()
    except Exception as e:
        pytest.skip(f"DearCyGui context unavailable: {e}")
