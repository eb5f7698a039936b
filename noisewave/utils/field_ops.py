from __future__ import annotations

import numpy as np


def as_field(values, name: str = "field") -> np.ndarray:
    """Coerce `values` into a 2D float64 array, failing fast on bad shapes.

    Raises ValueError for ragged, non-2D, empty or non-finite input.
    """
    try:
        arr = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be a rectangular grid of numbers: {e}") from e
    if arr.ndim != 2:
        raise ValueError(f"{name} must be 2D, got {arr.ndim}D")
    if arr.size == 0:
        raise ValueError(f"{name} must not be empty, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite values")
    return arr


def as_kernel(values) -> np.ndarray:
    k = as_field(values, "kernel")
    rows, cols = k.shape
    if rows != cols:
        raise ValueError(f"kernel must be square, got {rows}x{cols}")
    if rows < 3 or rows % 2 == 0:
        raise ValueError(f"kernel side must be odd and >= 3, got {rows}")
    return k


def freeze(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr
