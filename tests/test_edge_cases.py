"""
Edge case tests for UHC density plots.

Tests cover:
1. A grid with a single point
2. Simulations that failed on part of the grid
3. Ragged or non-numeric simulated densities
"""

import numpy as np
import pytest

from uhcplot import InvalidArgument, RecordingCanvas, simulation_envelope, uhc_density_plot


class TestSingleGridPoint:

    def test_single_point_plot(self):
        """One grid point still yields a (degenerate) band and a line."""
        densdat = {'x': [0.0], 'y': [0.2]}
        densrand = np.linspace(0.1, 0.3, 201).reshape(-1, 1)
        canvas = uhc_density_plot(densdat, densrand, canvas=RecordingCanvas())

        (band,) = canvas.find('fill_polygon')
        assert len(band.kwargs['x']) == 2
        assert band.kwargs['y'][0] == pytest.approx(0.295)
        assert band.kwargs['y'][1] == pytest.approx(0.105)


class TestPartiallyFailedSimulations:

    def test_missing_column_keeps_nan_in_band(self):
        """A grid point no simulation reached is left missing in the band."""
        densdat = {'x': [0, 1, 2], 'y': [0.1, 0.3, 0.1]}
        densrand = np.tile([0.1, 0.3, 0.1], (250, 1))
        densrand[:, 1] = np.nan
        canvas = uhc_density_plot(densdat, densrand, canvas=RecordingCanvas())

        (band,) = canvas.find('fill_polygon')
        assert np.isnan(band.kwargs['y'][1])
        assert np.isnan(band.kwargs['y'][4])
        assert not np.isnan(band.kwargs['y'][0])

    def test_none_entries_are_missing(self):
        densrand = [[0.1, None], [0.3, 0.4], [None, 0.6]]
        env = simulation_envelope(np.array(densrand, dtype=float))

        assert env.mean[0] == pytest.approx(0.2)
        assert env.mean[1] == pytest.approx(0.5)

    def test_missing_rows_do_not_shift_ylim(self):
        densdat = {'x': [0, 1], 'y': [0.2, 0.4]}
        densrand = np.full((250, 2), 0.3)
        densrand[::2] = np.nan
        canvas = uhc_density_plot(densdat, densrand, canvas=RecordingCanvas())

        (setup,) = canvas.find('setup_axes')
        assert setup.kwargs['ylim'] == (0.2, 0.4)


class TestMalformedEnsemble:

    def test_ragged_rows_raise(self):
        densdat = {'x': [0, 1], 'y': [0.2, 0.4]}
        with pytest.raises(InvalidArgument):
            uhc_density_plot(densdat, [[0.1, 0.2], [0.3]], canvas=RecordingCanvas())

    def test_three_dimensional_raises(self):
        """A raw (M, N, K) simulation array must be reduced upstream first."""
        densdat = {'x': [0, 1], 'y': [0.2, 0.4]}
        with pytest.raises(InvalidArgument):
            uhc_density_plot(densdat, np.ones((5, 2, 3)), canvas=RecordingCanvas())
