"""Scanline terrain projection and drawing.

Each row of a normalized field becomes one polyline across the canvas. The
field value lifts the line, scaled by a falloff that peaks at the centre
column, and a travelling sine wave shifts every point as `time` advances.
"""

from __future__ import annotations

import numpy as np

from ..config import AMPLIFIER_SCALE, CANVAS_HEIGHT, CANVAS_WIDTH, STROKE_COLOR, WaveParams
from ..utils.field_ops import as_field


def amp_falloff(cols: int, params: WaveParams) -> np.ndarray:
    center = cols / 2
    xs = np.arange(cols, dtype=np.float64)
    dist = np.abs(center - xs) / center
    return params.min_amp_factor + (params.max_amp_factor - params.min_amp_factor) * (1.0 - dist)


def wave_offset(cols: int, time: float, params: WaveParams) -> np.ndarray:
    xs = np.arange(cols, dtype=np.float64)
    return np.sin(xs / params.wavelength + time * params.speed) * params.amplitude


def project_scanlines(field, time: float, params: WaveParams = WaveParams()) -> tuple[np.ndarray, np.ndarray]:
    """Return screen coordinates for every field cell.

    `xs` has shape (cols,), shared by all rows; `ys` has the field's shape and
    is clamped into [0, CANVAS_HEIGHT - 1].
    """
    f = as_field(field)
    rows, cols = f.shape
    spacer_x = CANVAS_WIDTH / cols
    spacer_y = CANVAS_HEIGHT / rows
    amplifier = AMPLIFIER_SCALE * spacer_y

    xs = np.arange(cols, dtype=np.float64) * spacer_x
    baseline = np.arange(rows, dtype=np.float64)[:, np.newaxis] * spacer_y
    ys = baseline + f * (amplifier * amp_falloff(cols, params)) + wave_offset(cols, time, params)
    return xs, np.clip(ys, 0.0, CANVAS_HEIGHT - 1)


def render(surface, field, time: float, params: WaveParams = WaveParams()) -> None:
    xs, ys = project_scanlines(field, time, params)
    rows = ys.shape[0]
    spacer_y = CANVAS_HEIGHT / rows

    surface.clear_rect(0, 0, CANVAS_WIDTH, CANVAS_HEIGHT)
    surface.set_stroke_color(STROKE_COLOR)
    for y in range(rows):
        surface.begin_path()
        surface.move_to(0.0, y * spacer_y)
        for px, py in zip(xs, ys[y]):
            surface.line_to(float(px), float(py))
        surface.stroke()
