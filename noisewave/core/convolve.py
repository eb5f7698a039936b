from __future__ import annotations

import logging

import numpy as np
from scipy import ndimage as ndi

from ..utils.field_ops import as_field, as_kernel, freeze

logger = logging.getLogger(__name__)


def convolve(field, kernel) -> np.ndarray:
    """Apply `kernel` to `field`, renormalizing by the weights that land in bounds.

    Taps falling outside the field are skipped rather than zero-padded, so each
    output cell is divided by the sum of the weights actually used. Cells with
    no positive weight sum come out as 0.
    """
    src = as_field(field)
    k = as_kernel(kernel)
    # zero padding drops out-of-bounds taps from both sums
    weighted = ndi.correlate(src, k, mode="constant", cval=0.0)
    weights = ndi.correlate(np.ones_like(src), k, mode="constant", cval=0.0)
    out = np.zeros_like(src)
    np.divide(weighted, weights, out=out, where=weights > 0)
    logger.debug("convolved %s field with %dx%d kernel", src.shape, *k.shape)
    return freeze(out)
