from .config import (
    PeakPickerConfig, PEAK_PICKER_CONFIG,
)
from .export import PeakExport
from .session import (
    ClickEvent, PickingSession,
)

__all__ = [
    'PeakPickerConfig', 'PEAK_PICKER_CONFIG',
    'PeakExport',
    'ClickEvent', 'PickingSession',
]
