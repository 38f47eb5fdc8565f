from .annotate import (
    AnnotatedDataset, InvalidIndexError, add_peaks, annotate,
)
from .datasets import Dataset
from .peaks import (
    find_nearest_points, gradient, locate_peak, nearest,
)
from .selection import (
    SelectionSet, toggle,
)
from .session import (
    ClickEvent, PeakExport, PeakPickerConfig, PickingSession,
)

__all__ = [
    'AnnotatedDataset', 'InvalidIndexError', 'add_peaks', 'annotate',
    'Dataset',
    'find_nearest_points', 'gradient', 'locate_peak', 'nearest',
    'SelectionSet', 'toggle',
    'ClickEvent', 'PeakExport', 'PeakPickerConfig', 'PickingSession',
]
