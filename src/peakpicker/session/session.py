import logging
from dataclasses import dataclass

from peakpicker.annotate import AnnotatedDataset, annotate
from peakpicker.datasets import Dataset
from peakpicker.peaks import locate_peak, nearest
from peakpicker.selection import SelectionSet
from peakpicker.session.config import (
    PEAK_PICKER_CONFIG,
    PeakPickerConfig,
)
from peakpicker.session.export import PeakExport
from peakpicker.types import Index


LOGGER = logging.getLogger('peakpicker')


@dataclass(frozen=True)
class ClickEvent:
    """Click on a plot (in plot coordinates)."""
    x: float
    y: float


class PickingSession:

    def __init__(
        self,
        dataset: Dataset,
        config: PeakPickerConfig | None = None,
        name: str = 'df',
    ) -> None:
        """Interactive peak picking session over a dataset.

        A UI layer passes each click to `on_click` and redraws the returned annotated dataset.
        The session is finished by `finalize`, which returns the annotated dataset and the export of peaks.
        The annotated dataset holds x, y and peak flags only; to annotate the source frame with all its columns,
        apply the export to it: `add_peaks(frame, export.indices)`.

        Params:
            dataset: Dataset - dataset to pick peaks in
            config: PeakPickerConfig | None = None - session's config (`PEAK_PICKER_CONFIG` by default)
            name: str = 'df' - name of the dataset's variable in the exported code
        """
        self.dataset = dataset
        self.config = config or PEAK_PICKER_CONFIG
        self.name = name

        self._selection = SelectionSet()
        self._result = None

    @property
    def selection(self) -> tuple[Index, ...]:
        return self._selection.indices

    @property
    def annotated(self) -> AnnotatedDataset:
        return annotate(self.dataset, self.selection)

    @property
    def finalized(self) -> bool:
        return self._result is not None

    def resolve(self, event: ClickEvent) -> Index | None:
        """Resolve an index to toggle by the click."""

        index = nearest(
            self.dataset,
            x=event.x,
            y=event.y,
            threshold=self.config.threshold,
            scale=self.config.scale,
        )
        if index is None:
            LOGGER.debug('click (%s, %s) - no points within threshold', event.x, event.y)
            return None

        if self.config.find_nearest:
            peak = locate_peak(self.dataset.x, self.dataset.y, index)
            if peak is None:
                LOGGER.debug('click (%s, %s) - peak is not found from index %s', event.x, event.y, index)
                return None

            index = peak

        return index

    def on_click(self, event: ClickEvent) -> AnnotatedDataset:
        if self.finalized:
            raise RuntimeError('Session is finalized!')

        index = self.resolve(event)
        if index is not None:
            self._selection.toggle(index)
            LOGGER.debug('click (%s, %s) - toggled index %s, selection: %s', event.x, event.y, index, self.selection)

        return self.annotated

    def finalize(self) -> tuple[AnnotatedDataset, PeakExport]:
        if self._result is None:
            indices = self._selection.freeze()
            export = PeakExport(indices=indices, name=self.name)

            LOGGER.info('%s peaks found in the dataset', export.n_peaks)
            LOGGER.info('reproduce it by: %s', export.to_code())

            self._result = annotate(self.dataset, indices), export

        return self._result

    def __repr__(self) -> str:
        cls = self.__class__

        content = '; '.join([
            f'n_points: {len(self.dataset)}',
            f'selection: {list(self.selection)}',
            f'finalized: {self.finalized}',
        ])
        return f'{cls.__name__}({content})'
