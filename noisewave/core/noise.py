from __future__ import annotations

import logging
import math

import numpy as np

from ..utils.field_ops import freeze

logger = logging.getLogger(__name__)


def generate_white_noise(width: int, height: int, rng: np.random.Generator | None = None) -> np.ndarray:
    """Return a (height, width) field of independent uniform draws in [0, 1)."""
    if (
        not (math.isfinite(width) and math.isfinite(height))
        or int(width) != width
        or int(height) != height
        or width <= 0
        or height <= 0
    ):
        raise ValueError(f"noise dimensions must be positive integers, got {width}x{height}")
    if rng is None:
        rng = np.random.default_rng()
    noise = rng.random((int(height), int(width)))
    logger.debug("generated %dx%d white noise", width, height)
    return freeze(noise)
