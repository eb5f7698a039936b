from __future__ import annotations

import numpy as np

from ..utils.field_ops import as_field, freeze


def normalize(field) -> np.ndarray:
    """Rescale `field` into [0, 1]; a constant field maps to all zeros."""
    src = as_field(field)
    lo = src.min()
    hi = src.max()
    span = hi - lo
    if span == 0:
        span = 1.0
    return freeze((src - lo) / span)
