"""
Tests for the plotting helpers.
"""

import matplotlib.pyplot as plt
import pytest

from gbmsim.model import Bounds, Run
from gbmsim.visualization import nice_limits, plot_runs


class TestNiceLimits:
    """Test suite for nice_limits."""

    @pytest.mark.parametrize(
        "lo, hi, expected",
        [
            (0.0, 5.0, (0.0, 5.0)),
            (40.0, 60.0, (40.0, 60.0)),
            (0.3, 9.7, (0.0, 10.0)),
            (41.3, 58.9, (40.0, 60.0)),
            (0.0, 1.0, (0.0, 1.0)),
            (123.0, 987.0, (100.0, 1000.0)),
        ],
    )
    def test_rounds_outward(self, lo, hi, expected):
        """Ends snap outward to round tick steps."""
        assert nice_limits(lo, hi) == pytest.approx(expected)

    def test_degenerate_interval_unchanged(self):
        """A single-value interval is returned as is."""
        assert nice_limits(50.0, 50.0) == (50.0, 50.0)

    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_count_unchanged(self, count):
        """Without a positive tick count the interval is left alone."""
        assert nice_limits(0.3, 9.7, count=count) == (0.3, 9.7)

    def test_never_shrinks(self):
        """The niced interval contains the input interval."""
        lo, hi = nice_limits(12.34, 56.78)
        assert lo <= 12.34 and hi >= 56.78


class TestPlotRuns:
    """Test suite for plot_runs."""

    def test_one_line_per_run(self, run_a, run_b):
        """Each run is drawn as one line with niced axis limits."""
        fig = plot_runs([run_a, run_b], Bounds(0.0, 3.0, 45.0, 62.0))
        ax = fig.axes[0]

        assert len(ax.get_lines()) == 2
        assert ax.get_xlim() == pytest.approx((0.0, 3.0))
        assert ax.get_ylim() == pytest.approx((44.0, 62.0))
        assert ax.get_xlabel() == "Time"
        assert ax.get_ylabel() == "Price"
        plt.close(fig)

    def test_draws_on_given_axes(self, run_a):
        """An existing axes is reused."""
        fig, ax = plt.subplots()

        returned = plot_runs([run_a], Bounds.default(50.0, 5.0), ax=ax)

        assert returned is fig
        assert len(ax.get_lines()) == 1
        assert ax.get_ylim() == pytest.approx((40.0, 60.0))
        plt.close(fig)

    def test_no_runs(self):
        """With no runs only the default frame is drawn."""
        fig = plot_runs([], Bounds.default(50.0, 5.0))
        assert len(fig.axes[0].get_lines()) == 0
        plt.close(fig)
