"""Run accumulator for collecting simulated paths and tracking their bounds."""

import logging
from typing import List, Optional

import numpy as np
import pandas as pd

from gbmsim.config import SimulationConfig
from gbmsim.model import Bounds, Run

logger = logging.getLogger(__name__)


class RunAccumulator:
    """Collects runs in arrival order and tracks the bounds of all points.

    The accumulated dataset is owned here and only changes through
    ``append`` and ``reset``. Bounds always contain every accumulated
    point, so a display scaled to them never clips a path.

    Parameters
    ----------
    config : SimulationConfig, optional
        Supplies the default spot price, term and price padding used for
        the initial and reset bounds
    incremental : bool, default=False
        If True, merge each run's extent into the previous bounds instead
        of rescanning the full dataset. Both modes give identical bounds.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        incremental: bool = False,
    ):
        self.config = config or SimulationConfig()
        self.incremental = incremental

        self._runs: List[Run] = []
        self._bounds = self._default_bounds(
            self.config.default_spot_price, self.config.default_term
        )

    def _default_bounds(self, spot_price: float, term: float) -> Bounds:
        return Bounds.default(spot_price, term, padding=self.config.price_padding)

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @property
    def runs(self) -> List[Run]:
        """Accumulated runs in arrival order (a copy of the list)."""
        return list(self._runs)

    @property
    def num_runs(self) -> int:
        return len(self._runs)

    @property
    def num_points(self) -> int:
        return sum(len(run) for run in self._runs)

    @property
    def is_empty(self) -> bool:
        return self.num_points == 0

    @property
    def times(self) -> np.ndarray:
        """Time of every accumulated point, in arrival order."""
        if not self._runs:
            return np.empty(0)
        return np.concatenate([run.times for run in self._runs])

    @property
    def prices(self) -> np.ndarray:
        """Price of every accumulated point, in arrival order."""
        if not self._runs:
            return np.empty(0)
        return np.concatenate([run.prices for run in self._runs])

    def append(self, run: Run) -> Bounds:
        """Add a run to the dataset and return the updated bounds.

        Parameters
        ----------
        run : Run
            Run to append; an empty run leaves everything unchanged

        Returns
        -------
        Bounds
            Bounds over every accumulated point
        """
        if len(run) == 0:
            return self._bounds

        was_empty = self.is_empty
        self._runs.append(run)

        if self.incremental:
            run_bounds = Bounds.from_arrays(run.times, run.prices)
            # Defaults are discarded once real data arrives
            self._bounds = run_bounds if was_empty else self._bounds.merge(run_bounds)
        else:
            self._bounds = Bounds.from_arrays(self.times, self.prices)

        logger.debug(
            "Appended run %d (%d points), bounds=%s",
            len(self._runs), len(run), self._bounds,
        )
        return self._bounds

    def reset(
        self,
        default_spot_price: Optional[float] = None,
        default_term: Optional[float] = None,
    ) -> Bounds:
        """Clear the dataset and restore the default bounds.

        Parameters
        ----------
        default_spot_price : float, optional
            Centre of the default price range; falls back to the config
        default_term : float, optional
            End of the default time range; falls back to the config

        Returns
        -------
        Bounds
            [0, term] x [spot - padding, spot + padding]
        """
        if default_spot_price is None:
            default_spot_price = self.config.default_spot_price
        if default_term is None:
            default_term = self.config.default_term

        self._runs = []
        self._bounds = self._default_bounds(default_spot_price, default_term)
        return self._bounds

    def to_frame(self) -> pd.DataFrame:
        """Return the accumulated dataset as a DataFrame.

        Returns
        -------
        pd.DataFrame
            Columns ``run``, ``step``, ``time`` and ``price``, one row per
            point in arrival order
        """
        if not self._runs:
            return pd.DataFrame(
                {
                    "run": pd.Series(dtype=int),
                    "step": pd.Series(dtype=int),
                    "time": pd.Series(dtype=float),
                    "price": pd.Series(dtype=float),
                }
            )

        run_ids = np.concatenate(
            [np.full(len(run), i, dtype=int) for i, run in enumerate(self._runs)]
        )
        steps = np.concatenate([np.arange(len(run), dtype=int) for run in self._runs])
        return pd.DataFrame(
            {
                "run": run_ids,
                "step": steps,
                "time": self.times,
                "price": self.prices,
            }
        )
