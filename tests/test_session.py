"""Tests for the interactive picking session."""

import logging

import pandas as pd
import pytest

from peakpicker import (
    AnnotatedDataset,
    ClickEvent,
    PeakExport,
    PeakPickerConfig,
    PickingSession,
    add_peaks,
)


@pytest.fixture
def config() -> PeakPickerConfig:
    return PeakPickerConfig(threshold=1.0)


@pytest.fixture
def session(dataset, config) -> PickingSession:
    return PickingSession(dataset, config=config)


class TestPickingSession:
    """Tests for clicks in a picking session."""

    def test_snap_to_peak(self, session):
        """Test a click on a slope selects the peak."""
        annotated = session.on_click(ClickEvent(1.1, 1.2))

        assert isinstance(annotated, AnnotatedDataset)
        assert session.selection == (2,)
        assert annotated.peaks == (2,)

    def test_click_again_deselects(self, session):
        """Test a repeated click at the same peak deselects it."""
        session.on_click(ClickEvent(1.1, 1.2))
        annotated = session.on_click(ClickEvent(2.1, 2.9))

        assert session.selection == ()
        assert annotated.n_peaks == 0

    def test_selection_is_sorted(self, session):
        """Test selected peaks are sorted by index."""
        session.on_click(ClickEvent(5, 0))
        session.on_click(ClickEvent(1, 1))

        assert session.selection == (2, 4)

    def test_without_snap(self, dataset):
        """Test the nearest point is selected, if snapping to peaks is disabled."""
        session = PickingSession(dataset, config=PeakPickerConfig(threshold=1.0, find_nearest=False))

        session.on_click(ClickEvent(1, 1.1))
        assert session.selection == (1,)

    def test_click_far_away_is_ignored(self, session):
        """Test a click too far from the dataset changes nothing."""
        session.on_click(ClickEvent(1.1, 1.2))
        session.on_click(ClickEvent(100, 100))

        assert session.selection == (2,)

    def test_click_at_edge_is_ignored(self, session):
        """Test a click at the edge is ignored, if the peak is not found."""
        annotated = session.on_click(ClickEvent(0, 0))

        assert session.selection == ()
        assert annotated.n_peaks == 0

    def test_resolve(self, session):
        """Test resolve does not change the selection."""
        assert session.resolve(ClickEvent(3, 2)) == 4
        assert session.resolve(ClickEvent(6, -1)) is None
        assert session.selection == ()

    def test_scaled_threshold(self, dataset):
        """Test threshold is applied in scaled coordinates."""
        config = PeakPickerConfig(threshold=25, scale_x=100, scale_y=100, find_nearest=False)
        session = PickingSession(dataset, config=config)

        assert session.resolve(ClickEvent(2.1, 3.1)) == 2
        assert session.resolve(ClickEvent(2.5, 3.5)) is None


class TestPickingSessionFinalize:
    """Tests for finalizing a picking session."""

    def test_finalize(self, session):
        """Test the annotated dataset and the export are returned."""
        session.on_click(ClickEvent(4.9, 0.5))
        session.on_click(ClickEvent(1.9, 2.5))

        annotated, export = session.finalize()

        assert annotated.is_peak.tolist() == [False, False, True, False, True, False, False]
        assert isinstance(export, PeakExport)
        assert export.indices == (2, 4)
        assert export.to_code() == 'df = add_peaks(df, [2, 4])'

    def test_export_reproduces_annotation(self, session, dataset):
        """Test the exported indices reproduce the annotated frame."""
        session.on_click(ClickEvent(1.9, 2.5))
        annotated, export = session.finalize()

        frame = add_peaks(annotated.to_frame().drop(columns='peak'), export.indices)
        assert frame['peak'].tolist() == annotated.is_peak.tolist()

    def test_export_annotates_source_frame(self, session):
        """Test the exported indices annotate a source frame keeping all its columns."""
        frame = pd.DataFrame({
            'wavelength': [0, 1, 2, 3, 4, 5, 6],
            'intensity': [0, 1, 3, 2, 4, 0, -1],
            'label': 'sample',
        })

        session.on_click(ClickEvent(1.9, 2.5))
        session.on_click(ClickEvent(4.9, 0.5))
        _, export = session.finalize()

        result = add_peaks(frame, export.indices)
        assert list(result.columns) == ['wavelength', 'intensity', 'label', 'peak']
        assert result['peak'].tolist() == [False, False, True, False, True, False, False]

    def test_name(self, dataset, config):
        """Test name of the dataset's variable in the export."""
        session = PickingSession(dataset, config=config, name='spectrum')

        _, export = session.finalize()
        assert export.to_code() == 'spectrum = add_peaks(spectrum, [])'

    def test_finalize_is_idempotent(self, session):
        """Test finalize returns the same result twice."""
        session.on_click(ClickEvent(1.9, 2.5))

        assert session.finalize() is session.finalize()
        assert session.finalized

    def test_click_after_finalize(self, session):
        """Test clicks are rejected after the session is finalized."""
        session.finalize()

        with pytest.raises(RuntimeError):
            session.on_click(ClickEvent(1.9, 2.5))

    def test_finalize_is_logged(self, session, caplog):
        """Test number of peaks and the code are reported."""
        session.on_click(ClickEvent(1.9, 2.5))

        with caplog.at_level(logging.INFO, logger='peakpicker'):
            session.finalize()

        assert '1 peaks found in the dataset' in caplog.text
        assert 'df = add_peaks(df, [2])' in caplog.text
