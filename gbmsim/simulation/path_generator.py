"""Monte Carlo path generator using Geometric Brownian Motion."""

import logging
from typing import List, Optional

import numpy as np

from gbmsim.model import Run, SimulationParameters, validate_path_inputs
from gbmsim.simulation.normal import BoxMullerNormal

logger = logging.getLogger(__name__)


class PathGenerator:
    """Generates independent GBM sample paths under risk-neutral drift.

    The generator keeps no state between calls apart from its random
    source, so every path is independent of the ones before it.

    Parameters
    ----------
    rng : np.random.Generator, optional
        Uniform source fed to the Box-Muller transform. Anything with a
        numpy-compatible ``random(size)`` method works.
    seed : int, optional
        Random seed for reproducibility, used when ``rng`` is not given
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        self.seed = seed
        self.normal = BoxMullerNormal(rng=rng, seed=seed)

    def generate_path(
        self,
        spot_price: float,
        term: float,
        volatility: float,
        risk_free_rate: float,
        step_count: int = 50,
    ) -> Run:
        """Generate a single GBM path.

        S(t+dt) = S(t) * exp((r - 0.5*sigma^2)*dt + sigma*sqrt(dt)*Z)

        Parameters
        ----------
        spot_price : float
            Price at time 0
        term : float
            Time horizon in years
        volatility : float
            Annualized volatility (sigma)
        risk_free_rate : float
            Annualized risk-free rate (r)
        step_count : int, default=50
            Number of time steps

        Returns
        -------
        Run
            step_count + 1 points, starting at (0, spot_price)

        Raises
        ------
        InvalidParameterError
            If any input is outside its allowed range. Nothing is drawn
            from the random source in that case.
        """
        validate_path_inputs(spot_price, term, volatility, risk_free_rate, step_count)

        dt = term / step_count
        z = self.normal.sample(step_count)

        drift_term = (risk_free_rate - 0.5 * volatility ** 2) * dt
        diffusion_term = volatility * np.sqrt(dt) * z

        prices = np.empty(step_count + 1)
        prices[0] = spot_price
        prices[1:] = spot_price * np.cumprod(np.exp(drift_term + diffusion_term))

        times = np.arange(step_count + 1) * dt

        logger.debug(
            "Generated path: steps=%d dt=%.6f final=%.4f",
            step_count, dt, prices[-1],
        )
        return Run(times, prices)

    def generate_runs(self, params: SimulationParameters) -> List[Run]:
        """Generate ``params.num_simulations`` independent paths.

        Parameters
        ----------
        params : SimulationParameters
            Request to simulate; validated before any path is drawn

        Returns
        -------
        list of Run
            One run per simulation, in generation order
        """
        params.validate()
        return [
            self.generate_path(
                params.spot_price,
                params.term,
                params.volatility,
                params.risk_free_rate,
                params.step_count,
            )
            for _ in range(params.num_simulations)
        ]
