# -*- coding: utf-8 -*-
"""
Noise terrain window
Generates a blurred white-noise field once, then redraws it every frame as
hot-pink scanlines with a travelling wave.
"""
from __future__ import annotations

import logging
import sys

import numpy as np
from PySide6.QtCore import Qt
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtWidgets import QApplication, QLabel, QVBoxLayout, QWidget

from noisewave.config import CANVAS_HEIGHT, CANVAS_WIDTH, NoiseParams
from noisewave.core.animation import AnimationDriver
from noisewave.core.convolve import convolve
from noisewave.core.kernel import build_gaussian_kernel, kernel_size_for
from noisewave.core.noise import generate_white_noise
from noisewave.core.normalize import normalize
from noisewave.utils.surfaces import QImageSurface

logger = logging.getLogger(__name__)


def build_terrain_field(
    width: int = NoiseParams.width,
    height: int = NoiseParams.height,
    sigma: float = NoiseParams.sigma,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    noise = generate_white_noise(width, height, rng)
    size = kernel_size_for(sigma)
    kernel = build_gaussian_kernel(size, sigma)
    logger.info("Smoothing %dx%d noise with %dx%d kernel (sigma=%s)", width, height, size, size, sigma)
    return normalize(convolve(noise, kernel))


class TerrainWindow(QWidget):
    def __init__(self, field: np.ndarray):
        super().__init__()
        self.setWindowTitle("noisewave")
        self.resize(CANVAS_WIDTH // 2, CANVAS_HEIGHT // 2)
        self.setStyleSheet("background:#000;")

        self.label = QLabel()
        self.label.setAlignment(Qt.AlignCenter)
        lay = QVBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.addWidget(self.label)

        self.surface = QImageSurface()
        self.driver = AnimationDriver(self.surface, field, on_frame=self._on_frame)
        self._pix = None

    def set_image(self, qimage: QImage):
        self._pix = QPixmap.fromImage(qimage)
        self._apply_fit()

    def _apply_fit(self):
        if self._pix is None:
            return
        self.label.setPixmap(self._pix.scaled(self.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation))

    def _on_frame(self, t: int):
        self.set_image(self.surface.image)

    def resizeEvent(self, e):
        super().resizeEvent(e)
        self._apply_fit()

    def showEvent(self, e):
        super().showEvent(e)
        self.driver.start()

    def closeEvent(self, e):
        self.driver.stop()
        super().closeEvent(e)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    try:
        app = QApplication(sys.argv)
        w = TerrainWindow(build_terrain_field())
        w.show()
        sys.exit(app.exec())
    except Exception:
        logger.exception("Fatal error while running the terrain window")
        sys.exit(1)


if __name__ == "__main__":
    main()
