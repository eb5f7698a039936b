from __future__ import annotations

import os

import numpy as np
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class RecordingSurface:
    def __init__(self):
        self.calls = []
        self.paths = []
        self._current = None

    def clear_rect(self, x, y, w, h):
        self.calls.append(("clear_rect", x, y, w, h))

    def set_stroke_color(self, color):
        self.calls.append(("set_stroke_color", color))

    def begin_path(self):
        self.calls.append(("begin_path",))
        self._current = []

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))
        self._current.append((x, y))

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))
        self._current.append((x, y))

    def stroke(self):
        self.calls.append(("stroke",))
        self.paths.append(self._current)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture(scope="session")
def qapp():
    qtwidgets = pytest.importorskip("PySide6.QtWidgets")
    app = qtwidgets.QApplication.instance() or qtwidgets.QApplication([])
    yield app
