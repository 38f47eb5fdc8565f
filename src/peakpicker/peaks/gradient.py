import logging
from collections.abc import Sequence

import numpy as np

from peakpicker.types import Array, Index


LOGGER = logging.getLogger('peakpicker')


def gradient(
    x: Array[float] | Sequence[float],
    y: Array[float] | Sequence[float],
    index: Index,
) -> float | None:
    """Calculate local gradient at the given index by central difference.

    Returns `None`, if the gradient is not computable (the index has no neighbor at one of the sides).
    Duplicated x values of neighbors are not handled: the gradient is `inf` or `nan` in this case.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    n_points = len(x)

    if not (0 < index < n_points-1):
        LOGGER.warning('gradient is not computable at index %s (n_points: %s)', index, n_points)
        return None

    with np.errstate(divide='ignore', invalid='ignore'):
        return float((y[index+1] - y[index-1]) / (x[index+1] - x[index-1]))
