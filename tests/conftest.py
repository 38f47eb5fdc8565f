import numpy as np
import pytest

from peakpicker import Dataset


@pytest.fixture
def x() -> list[float]:
    return [0, 1, 2, 3, 4, 5, 6]


@pytest.fixture
def y() -> list[float]:
    return [0, 1, 3, 2, 4, 0, -1]


@pytest.fixture
def dataset(x, y) -> Dataset:
    return Dataset(x, y)


@pytest.fixture
def spectrum() -> Dataset:
    """Smooth spectrum with two peaks at x=2.0 (index 200) and x=6.0 (index 600)."""
    x = np.linspace(0, 10, 1001)
    y = np.exp(-(x - 2)**2 / 0.1) + 0.5*np.exp(-(x - 6)**2 / 0.2)

    return Dataset(x, y)
