import numpy as np

from peakpicker.datasets import Dataset
from peakpicker.types import Index
from peakpicker.utils import distance


def find_nearest_points(
    dataset: Dataset,
    x: float,
    y: float,
    threshold: float,
    max_points: int = 1,
    scale: tuple[float, float] = (1, 1),
) -> tuple[Index, ...]:
    """Find up to `max_points` points of the dataset lying within `threshold` of the point $(x, y)$.

    Points are ordered by distance (closest first); exact ties are ordered by index.
    """
    assert max_points >= 1, f'`max_points` have to be positive: {max_points}'

    d = distance(dataset.x, dataset.y, x0=x, y0=y, scale=scale)

    index = np.argsort(d, kind='stable')
    index = index[d[index] <= threshold][:max_points]

    return tuple(int(i) for i in index)


def nearest(
    dataset: Dataset,
    x: float,
    y: float,
    threshold: float,
    max_points: int = 1,
    scale: tuple[float, float] = (1, 1),
) -> Index | None:
    """Find the closest point of the dataset lying within `threshold` of the point $(x, y)$."""
    index = find_nearest_points(
        dataset,
        x=x,
        y=y,
        threshold=threshold,
        max_points=max_points,
        scale=scale,
    )
    if not index:
        return None

    return index[0]
