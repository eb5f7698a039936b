"""Separable Gaussian kernel construction.

The 2D kernel is the outer product of a sampled 1D Gaussian with itself,
normalized so the weights sum to one.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from ..utils.field_ops import freeze

logger = logging.getLogger(__name__)


def _check_sigma(sigma: float) -> None:
    if not math.isfinite(sigma) or sigma <= 0:
        raise ValueError(f"sigma must be a positive finite number, got {sigma}")


def gaussian(x, sigma: float):
    return (1.0 / (math.sqrt(2 * math.pi) * sigma)) * np.exp(-(np.asarray(x, dtype=np.float64) ** 2) / (2 * sigma * sigma))


def gaussian_vector(size: int, sigma: float) -> np.ndarray:
    half = size // 2
    xs = np.arange(size, dtype=np.float64) - half
    return gaussian(xs, sigma)


def kernel_size_for(sigma: float) -> int:
    """Side length covering +-3 sigma, rounded up to an odd value >= 3."""
    _check_sigma(sigma)
    size = max(3, math.ceil(6 * sigma))
    if size % 2 == 0:
        size += 1
    return size


def build_gaussian_kernel(size: int, sigma: float) -> np.ndarray:
    _check_sigma(sigma)
    if not math.isfinite(size) or int(size) != size or size < 3 or size % 2 == 0:
        raise ValueError(f"kernel size must be an odd integer >= 3, got {size}")
    vec = gaussian_vector(int(size), sigma)
    kernel = np.outer(vec, vec)
    kernel /= kernel.sum()
    logger.debug("built %dx%d gaussian kernel (sigma=%s)", size, size, sigma)
    return freeze(kernel)
