import logging
from collections.abc import Sequence

import numpy as np

from peakpicker.peaks.gradient import gradient
from peakpicker.types import Array, Index


LOGGER = logging.getLogger('peakpicker')


def locate_peak(
    x: Array[float] | Sequence[float],
    y: Array[float] | Sequence[float],
    index: Index,
) -> Index | None:
    """Find the nearest peak by walking uphill along the curve from the given index.

    The direction of each step is given by the local gradient: forward, if the gradient is positive,
    and backward otherwise (zero gradient included). The walk stops at the first point, where the next
    step does not increase y. Returns `None`, if the gradient is not computable on the way.

    The gradient is checked before each step, so the walk steps from interior points only and
    the step never leaves the dataset; the bounds check of the step is never reached in practice.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    n_points = len(x)

    current = index
    while True:
        grad = gradient(x, y, current)
        if grad is None:
            LOGGER.debug('peak is not found from index %s', index)
            return None

        move = +1 if grad > 0 else -1

        step = current + move
        if not (0 <= step < n_points):
            return int(current)

        if y[step] > y[current]:
            current = step
            continue

        LOGGER.debug('peak is found at index %s (started from %s)', current, index)
        return int(current)
