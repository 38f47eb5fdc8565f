import operator
from collections.abc import Iterable

import numpy as np
import pandas as pd

from peakpicker.datasets import Dataset
from peakpicker.types import Array, Frame, Index


class InvalidIndexError(IndexError):
    """Peak index is out of the dataset."""


class AnnotatedDataset:
    """Dataset with a boolean flag per point, which indicates a peak."""

    def __init__(self, dataset: Dataset, is_peak: Array[bool]) -> None:
        assert len(dataset) == len(is_peak), f'len of `is_peak` have to be equal of `n_points`: {len(dataset)}'

        is_peak = np.array(is_peak, dtype=bool)
        is_peak.flags.writeable = False

        self.dataset = dataset
        self._is_peak = is_peak

    @property
    def x(self) -> Array[float]:
        return self.dataset.x

    @property
    def y(self) -> Array[float]:
        return self.dataset.y

    @property
    def is_peak(self) -> Array[bool]:
        return self._is_peak

    @property
    def peaks(self) -> tuple[Index, ...]:
        """Sorted indices of peaks."""
        return tuple(np.flatnonzero(self.is_peak).tolist())

    @property
    def n_peaks(self) -> int:
        return int(np.sum(self.is_peak))

    def to_frame(self, column: str = 'peak') -> Frame:
        return pd.DataFrame({
            'x': self.x,
            'y': self.y,
            column: self.is_peak,
        })

    def __len__(self) -> int:
        return len(self.dataset)

    def __repr__(self) -> str:
        cls = self.__class__

        content = '; '.join([
            f'n_points: {len(self)}',
            f'peaks: {list(self.peaks)}',
        ])
        return f'{cls.__name__}({content})'


def annotate(
    dataset: Dataset,
    indices: Iterable[Index],
) -> AnnotatedDataset:
    """Annotate the dataset by peaks at the given indices."""

    is_peak = _get_mask(len(dataset), indices)
    return AnnotatedDataset(dataset, is_peak)


def add_peaks(
    frame: Frame,
    indices: Iterable[Index],
    column: str = 'peak',
) -> Frame:
    """Add a boolean column indicating peaks at the given (positional) indices to a copy of the frame.

    Example:
        frame = add_peaks(frame, [108, 451, 770])
    """

    is_peak = _get_mask(len(frame), indices)
    return frame.assign(**{column: is_peak})


def _get_mask(n_points: int, indices: Iterable[Index]) -> Array[bool]:
    indices = list(indices)

    try:
        index = np.array([operator.index(i) for i in indices], dtype=int)
    except TypeError as error:
        raise InvalidIndexError(f'Indices {indices} have to be integers!') from error

    invalid = index[(index < 0) | (index >= n_points)]
    if len(invalid) > 0:
        raise InvalidIndexError(f'Indices {invalid.tolist()} are out of range [0, {n_points})!')

    mask = np.full(n_points, False)
    mask[index] = True

    return mask
