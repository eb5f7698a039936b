from __future__ import annotations

from typing import List, Protocol, Tuple

from PIL import Image, ImageDraw
from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QImage, QPainter, QPainterPath, QPen

from ..config import CANVAS_HEIGHT, CANVAS_WIDTH


class DrawingSurface(Protocol):
    def clear_rect(self, x: float, y: float, w: float, h: float) -> None: ...
    def set_stroke_color(self, color: str) -> None: ...
    def begin_path(self) -> None: ...
    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...
    def stroke(self) -> None: ...


class QImageSurface:
    """Draws onto a canvas-sized QImage, one QPainter per stroke."""

    def __init__(self, image: QImage | None = None):
        if image is None:
            image = QImage(CANVAS_WIDTH, CANVAS_HEIGHT, QImage.Format_ARGB32_Premultiplied)
            image.fill(Qt.transparent)
        self.image = image
        self.pen = QPen(QColor("white"))
        self.pen.setCosmetic(True)
        self.path = QPainterPath()

    def clear_rect(self, x, y, w, h):
        painter = QPainter(self.image)
        painter.setCompositionMode(QPainter.CompositionMode_Clear)
        painter.fillRect(QRectF(x, y, w, h), Qt.transparent)
        painter.end()

    def set_stroke_color(self, color):
        self.pen.setColor(QColor(color))

    def begin_path(self):
        self.path = QPainterPath()

    def move_to(self, x, y):
        self.path.moveTo(QPointF(x, y))

    def line_to(self, x, y):
        self.path.lineTo(QPointF(x, y))

    def stroke(self):
        painter = QPainter(self.image)
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setPen(self.pen)
        painter.drawPath(self.path)
        painter.end()


class PILSurface:
    """Pillow-backed surface for rendering frames without a display."""

    def __init__(self, image: Image.Image | None = None):
        if image is None:
            image = Image.new("RGBA", (CANVAS_WIDTH, CANVAS_HEIGHT), (0, 0, 0, 0))
        self.image = image
        self.draw = ImageDraw.Draw(self.image)
        self.color = "white"
        self.subpaths: List[List[Tuple[float, float]]] = []

    def clear_rect(self, x, y, w, h):
        # PIL rectangles include the far corner
        self.draw.rectangle((x, y, x + w - 1, y + h - 1), fill=(0, 0, 0, 0))

    def set_stroke_color(self, color):
        self.color = color

    def begin_path(self):
        self.subpaths = []

    def move_to(self, x, y):
        self.subpaths.append([(x, y)])

    def line_to(self, x, y):
        # with no current point this acts as move_to
        if not self.subpaths:
            self.subpaths.append([])
        self.subpaths[-1].append((x, y))

    def stroke(self):
        for points in self.subpaths:
            if len(points) >= 2:
                self.draw.line(points, fill=self.color, width=1)


def render_frame_image(field, time: float) -> Image.Image:
    """Render one frame of `field` into a fresh RGBA Pillow image."""
    from ..core.waves import render

    surface = PILSurface()
    render(surface, field, time)
    return surface.image
