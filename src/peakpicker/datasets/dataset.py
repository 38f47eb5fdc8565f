from collections.abc import Sequence

import numpy as np

from peakpicker.types import Array, Frame, Index


class FactoryDataset:

    def __init__(self, frame: Frame):
        self.frame = frame

    def create_from_columns(self, x: str, y: str) -> 'Dataset':
        """Get a dataset from two columns of the frame."""

        for column in (x, y):
            if column not in self.frame.columns:
                raise KeyError(f'Column `{column}` not found!')

        return Dataset(
            x=self.frame[x].to_numpy(dtype=float),
            y=self.frame[y].to_numpy(dtype=float),
        )


class Dataset:
    """Ordered sequence of (x, y) pairs, read-only during a picking session."""
    factory = FactoryDataset

    def __init__(
        self,
        x: Array[float] | Sequence[float],
        y: Array[float] | Sequence[float],
    ) -> None:
        x = np.array(x, dtype=float)
        y = np.array(y, dtype=float)

        if x.ndim != 1 or y.ndim != 1:
            raise ValueError(f'`x` and `y` have to be 1-D arrays: {x.shape}, {y.shape}')
        if len(x) != len(y):
            raise ValueError(f'len of `x` have to be equal of len of `y`: {len(x)} != {len(y)}')

        x.flags.writeable = False
        y.flags.writeable = False

        self._x = x
        self._y = y

    @property
    def x(self) -> Array[float]:
        return self._x

    @property
    def y(self) -> Array[float]:
        return self._y

    @property
    def index(self) -> Array[Index]:
        return np.arange(len(self))

    def __getitem__(self, __index: Index) -> tuple[float, float]:
        return float(self.x[__index]), float(self.y[__index])

    def __len__(self) -> int:
        return len(self.x)

    def __repr__(self) -> str:
        cls = self.__class__

        return f'{cls.__name__}(n_points: {len(self)})'
