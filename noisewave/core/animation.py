from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QTimer

from ..config import FRAME_INTERVAL_MS
from .waves import render

logger = logging.getLogger(__name__)


class AnimationDriver:
    """Redraws a field once per frame with a monotonically increasing time.

    Each tick renders, bumps the counter and only then arms the next tick, so
    a frame always completes before the following one is scheduled.
    """

    def __init__(
        self,
        surface,
        field,
        *,
        renderer: Callable = render,
        on_frame: Optional[Callable[[int], None]] = None,
        interval_ms: int = FRAME_INTERVAL_MS,
    ):
        self.surface = surface
        self.field = field
        self.renderer = renderer
        self.on_frame = on_frame
        self.interval_ms = int(interval_ms)
        self.time = 0
        self._running = False
        self._timer: Optional[QTimer] = None

    @property
    def is_running(self) -> bool:
        return self._running

    def tick(self) -> None:
        try:
            self.renderer(self.surface, self.field, self.time)
            self.time += 1
            if self.on_frame is not None:
                self.on_frame(self.time)
        except Exception:
            logger.exception("frame t=%d failed, stopping animation", self.time)
            self.stop()
            raise
        if self._running and self._timer is not None:
            self._timer.start(self.interval_ms)

    def start(self) -> None:
        if self._running:
            return
        if self._timer is None:
            self._timer = QTimer()
            self._timer.setSingleShot(True)
            self._timer.timeout.connect(self.tick)
        self._running = True
        self._timer.start(0)
        logger.info("animation started at t=%d", self.time)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._timer is not None:
            self._timer.stop()
        logger.info("animation stopped at t=%d", self.time)

    def run_frames(self, count: int) -> None:
        for _ in range(int(count)):
            self.tick()
