"""
Unit tests for band geometry.
"""

import numpy as np
import pytest

from uhcplot.core.geometry import band_polygon


class TestBandPolygon:
    """Tests for band_polygon() function."""

    def test_vertex_order(self):
        """Upper curve left to right, then lower curve right to left."""
        x = np.array([0.0, 1.0, 2.0])
        upper = np.array([3.0, 4.0, 5.0])
        lower = np.array([0.0, 1.0, 2.0])
        band = band_polygon(x, upper, lower)

        assert band.shape == (6, 2)
        np.testing.assert_array_equal(band[:, 0], [0, 1, 2, 2, 1, 0])
        np.testing.assert_array_equal(band[:, 1], [3, 4, 5, 2, 1, 0])

    def test_outline_is_closed_over_grid(self):
        """Both halves of the outline cover the same grid."""
        x = np.array([-1.0, 0.5, 2.0, 3.5])
        band = band_polygon(x, np.ones(4), np.zeros(4))

        np.testing.assert_array_equal(band[:4, 0], band[4:, 0][::-1])
        assert band[0, 0] == band[-1, 0] == -1.0

    def test_collapsed_band_has_zero_width(self):
        """Identical upper and lower curves retrace the same vertices."""
        x = np.array([0.0, 1.0, 2.0])
        y = np.array([0.1, 0.3, 0.1])
        band = band_polygon(x, y, y)

        np.testing.assert_array_equal(band[:3], band[3:][::-1])

    def test_shape_mismatch_raises(self):
        """Curves must live on the same grid."""
        with pytest.raises(ValueError):
            band_polygon(np.arange(3.0), np.ones(4), np.zeros(3))
