import numpy as np
from scipy.spatial import distance as sp_distance

from peakpicker.types import Array


# --------        calculate distances        --------
def distance(
    x: Array[float],
    y: Array[float],
    x0: float,
    y0: float,
    scale: tuple[float, float] = (1, 1),
) -> Array[float]:
    """Calculate euclidean distance between points $(x, y)$ and the point $(x_0, y_0)$.

    Params:
        scale: tuple[float, float] - multipliers of x and y offsets (e.g. pixels per data unit)
    """
    sx, sy = scale

    points = np.column_stack([np.asarray(x, dtype=float)*sx, np.asarray(y, dtype=float)*sy])
    if len(points) == 0:
        return np.zeros(0)

    return sp_distance.cdist([[x0*sx, y0*sy]], points)[0]
