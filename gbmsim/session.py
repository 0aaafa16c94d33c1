"""Run and reset triggers tying the path generator to the run accumulator."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from gbmsim.config import SimulationConfig
from gbmsim.model import Bounds, Run, SimulationParameters
from gbmsim.simulation.path_generator import PathGenerator
from gbmsim.simulation.run_accumulator import RunAccumulator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunUpdate:
    run: Run
    bounds: Bounds      # bounds right after this run was appended


@dataclass(frozen=True)
class SimulationUpdate:
    params: SimulationParameters
    updates: List[RunUpdate] = field(default_factory=list)

    @property
    def runs(self) -> List[Run]:
        return [u.run for u in self.updates]

    @property
    def bounds(self) -> Bounds:
        return self.updates[-1].bounds


class SimulationSession:
    """Handles run and reset requests against one accumulated dataset.

    Parameters
    ----------
    generator : PathGenerator, optional
        Path source. If None, one is created from ``config.seed``.
    accumulator : RunAccumulator, optional
        Dataset owner. If None, an empty one is created from ``config``.
    config : SimulationConfig, optional
        Defaults for reset bounds and the random seed
    """

    def __init__(
        self,
        generator: Optional[PathGenerator] = None,
        accumulator: Optional[RunAccumulator] = None,
        config: Optional[SimulationConfig] = None,
    ):
        self.config = config or SimulationConfig()
        self.generator = generator or PathGenerator(seed=self.config.seed)
        self.accumulator = accumulator or RunAccumulator(self.config)

    @property
    def bounds(self) -> Bounds:
        return self.accumulator.bounds

    def run(self, params: SimulationParameters) -> SimulationUpdate:
        """Simulate ``params.num_simulations`` runs and accumulate them.

        Runs are appended one at a time so the caller can rescale after
        each path.

        Parameters
        ----------
        params : SimulationParameters
            Request to simulate

        Returns
        -------
        SimulationUpdate
            Each new run with the bounds after it was appended

        Raises
        ------
        InvalidParameterError
            If the request is invalid; the dataset is left unchanged
        """
        params.validate()

        logger.info(
            "Simulating %d run(s): spot=%.4f term=%.4f vol=%.4f r=%.4f steps=%d",
            params.num_simulations, params.spot_price, params.term,
            params.volatility, params.risk_free_rate, params.step_count,
        )

        updates = []
        for _ in range(params.num_simulations):
            run = self.generator.generate_path(
                params.spot_price,
                params.term,
                params.volatility,
                params.risk_free_rate,
                params.step_count,
            )
            bounds = self.accumulator.append(run)
            updates.append(RunUpdate(run=run, bounds=bounds))

        logger.info("Dataset now holds %d run(s)", self.accumulator.num_runs)
        return SimulationUpdate(params=params, updates=updates)

    def reset(self) -> Bounds:
        """Clear all runs and return the default bounds."""
        logger.info("Resetting dataset (%d run(s) cleared)", self.accumulator.num_runs)
        return self.accumulator.reset(
            self.config.default_spot_price, self.config.default_term
        )
