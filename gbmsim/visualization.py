"""Plotting helpers for accumulated runs."""

import math
from typing import Optional, Sequence, Tuple

import matplotlib
# Use non-interactive backend for headless environments
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from gbmsim.model import Bounds, Run

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def _tick_increment(start: float, stop: float, count: int) -> float:
    # Positive: tick step. Negative: -1 / tick step (avoids float error below 1)
    step = (stop - start) / count
    if not (step > 0) or not math.isfinite(step):
        return 0.0
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    factor = 10 if error >= _E10 else 5 if error >= _E5 else 2 if error >= _E2 else 1
    if power >= 0:
        return factor * 10 ** power
    return -(10 ** -power) / factor


def nice_limits(lo: float, hi: float, count: int = 10) -> Tuple[float, float]:
    """Widen an interval so both ends fall on round tick steps.

    Parameters
    ----------
    lo, hi : float
        Interval to widen, with lo <= hi
    count : int, default=10
        Approximate number of ticks wanted

    Returns
    -------
    tuple
        (lo, hi) expanded outward; returned unchanged if the interval is
        empty or not finite, or if count is not positive
    """
    if count <= 0:
        return lo, hi

    previous = None
    while True:
        step = _tick_increment(lo, hi, count)
        if step == previous or step == 0:
            return lo, hi
        if step > 0:
            lo = math.floor(lo / step) * step
            hi = math.ceil(hi / step) * step
        else:
            lo = math.ceil(lo * step) / step
            hi = math.floor(hi * step) / step
        previous = step


def plot_runs(
    runs: Sequence[Run],
    bounds: Bounds,
    ax: Optional[Axes] = None,
    show_plot: bool = False,
) -> Figure:
    """Draw each run as a line, scaled to the given bounds.

    Parameters
    ----------
    runs : sequence of Run
        Runs to draw, in arrival order
    bounds : Bounds
        Extent of the accumulated dataset; niced before use as axis limits
    ax : matplotlib.axes.Axes, optional
        Axes to draw on. If None, a new figure is created.
    show_plot : bool, default=False
        Whether to display the plot

    Returns
    -------
    matplotlib.figure.Figure
        Figure holding the axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 10), dpi=100)
    else:
        fig = ax.figure

    for run in runs:
        ax.plot(
            run.times,
            run.prices,
            marker='o',
            markersize=3,
            linewidth=2.5,
        )

    ax.set_xlim(*nice_limits(bounds.time_min, bounds.time_max))
    ax.set_ylim(*nice_limits(bounds.price_min, bounds.price_max))
    ax.set_xlabel('Time')
    ax.set_ylabel('Price')
    ax.grid(True, alpha=0.1)

    if show_plot:
        plt.show()

    return fig
