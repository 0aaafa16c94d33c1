"""
Data types shared by the path generator and the run accumulator.

A run is one discretized GBM sample path, stored as two parallel numpy
arrays (time in years, price). Bounds are the axis-aligned rectangle that
contains every point accumulated so far.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Union

import numpy as np

from gbmsim.exceptions import InvalidParameterError


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidParameterError(name, value, "finite")


def _require_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise InvalidParameterError(name, value, "an integer >= 1")


def validate_path_inputs(
    spot_price: float,
    term: float,
    volatility: float,
    risk_free_rate: float,
    step_count: int,
) -> None:
    """Check the inputs needed to generate a single path.

    Raises
    ------
    InvalidParameterError
        If any input is non-finite or outside its allowed range
    """
    for name, value in (
        ("spot_price", spot_price),
        ("term", term),
        ("volatility", volatility),
        ("risk_free_rate", risk_free_rate),
    ):
        _require_finite(name, value)

    if spot_price <= 0:
        raise InvalidParameterError("spot_price", spot_price, "positive")
    if term <= 0:
        raise InvalidParameterError("term", term, "positive")
    if volatility < 0:
        raise InvalidParameterError("volatility", volatility, "non-negative")
    _require_count("step_count", step_count)


@dataclass(frozen=True)
class SimulationParameters:
    """Inputs collected for one simulation request.

    Parameters
    ----------
    spot_price : float
        Price at time 0
    strike_price : float
        Option strike; not used by the simulator, kept for display
    term : float
        Time horizon in years
    volatility : float
        Annualized volatility (sigma)
    risk_free_rate : float
        Annualized risk-free rate, used as the drift
    num_simulations : int
        Number of independent runs to generate
    step_count : int, default=50
        Number of time steps per run
    """

    spot_price: float
    strike_price: float
    term: float
    volatility: float
    risk_free_rate: float
    num_simulations: int
    step_count: int = 50

    @property
    def dt(self) -> float:
        return self.term / self.step_count

    def validate(self) -> "SimulationParameters":
        """Raise InvalidParameterError if the request cannot be simulated."""
        validate_path_inputs(
            self.spot_price,
            self.term,
            self.volatility,
            self.risk_free_rate,
            self.step_count,
        )
        _require_finite("strike_price", self.strike_price)
        _require_count("num_simulations", self.num_simulations)
        return self


class PricePoint(NamedTuple):
    time: float
    price: float


class Run:
    """Immutable sequence of price points from one simulation pass.

    Parameters
    ----------
    times : array-like
        Time of each point, in years
    prices : array-like
        Price at each point
    """

    __slots__ = ("_times", "_prices")

    def __init__(self, times, prices):
        times = np.array(times, dtype=float).ravel()
        prices = np.array(prices, dtype=float).ravel()
        if times.shape != prices.shape:
            raise ValueError(
                f"times and prices must have the same length, "
                f"got {times.size} and {prices.size}"
            )
        times.flags.writeable = False
        prices.flags.writeable = False
        self._times = times
        self._prices = prices

    @classmethod
    def empty(cls) -> "Run":
        return cls([], [])

    @property
    def times(self) -> np.ndarray:
        return self._times

    @property
    def prices(self) -> np.ndarray:
        return self._prices

    def points(self) -> List[PricePoint]:
        return list(self)

    def __len__(self) -> int:
        return self._times.size

    def __iter__(self) -> Iterator[PricePoint]:
        for t, p in zip(self._times, self._prices):
            yield PricePoint(float(t), float(p))

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return Run(self._times[index], self._prices[index])
        return PricePoint(float(self._times[index]), float(self._prices[index]))

    def __repr__(self) -> str:
        if not len(self):
            return "Run(empty)"
        return (
            f"Run(points={len(self)}, start={self._prices[0]:.4f}, "
            f"end={self._prices[-1]:.4f}, term={self._times[-1]:.4f})"
        )


@dataclass(frozen=True)
class Bounds:
    """Smallest rectangle containing a set of (time, price) points."""

    time_min: float
    time_max: float
    price_min: float
    price_max: float

    @classmethod
    def default(cls, spot_price: float, term: float, padding: float = 10.0) -> "Bounds":
        """Bounds shown before any run has been drawn."""
        return cls(0.0, float(term), float(spot_price) - padding, float(spot_price) + padding)

    @classmethod
    def from_arrays(cls, times: np.ndarray, prices: np.ndarray) -> "Bounds":
        """Scan the points and return their extent.

        Raises
        ------
        ValueError
            If there are no points to scan
        """
        if len(times) == 0:
            raise ValueError("Cannot compute bounds of an empty dataset")
        return cls(
            float(np.min(times)),
            float(np.max(times)),
            float(np.min(prices)),
            float(np.max(prices)),
        )

    def merge(self, other: "Bounds") -> "Bounds":
        return Bounds(
            min(self.time_min, other.time_min),
            max(self.time_max, other.time_max),
            min(self.price_min, other.price_min),
            max(self.price_max, other.price_max),
        )

    def contains(self, time: float, price: float) -> bool:
        return (
            self.time_min <= time <= self.time_max
            and self.price_min <= price <= self.price_max
        )
