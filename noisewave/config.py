"""Fixed constants for the noise terrain demo."""

from __future__ import annotations

from dataclasses import dataclass

CANVAS_WIDTH = 1920
CANVAS_HEIGHT = 1080

STROKE_COLOR = "hotpink"
AMPLIFIER_SCALE = 100.0

FRAME_INTERVAL_MS = 16  # ~60 Hz refresh


@dataclass(frozen=True)
class WaveParams:
    amplitude: float = 35.0
    wavelength: float = 100.0
    speed: float = 0.005
    min_amp_factor: float = 0.5
    max_amp_factor: float = 1.0


@dataclass(frozen=True)
class NoiseParams:
    width: int = 500
    height: int = 500
    sigma: float = 8.0
