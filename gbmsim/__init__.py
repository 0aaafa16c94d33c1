"""Geometric Brownian Motion (GBM) sample-path simulator.

Generates independent Monte Carlo price paths under risk-neutral drift and
accumulates them with the bounds needed to scale a display consistently
across repeated runs.
"""

from gbmsim.config import SimulationConfig
from gbmsim.exceptions import InvalidParameterError
from gbmsim.model import Bounds, PricePoint, Run, SimulationParameters
from gbmsim.simulation import BoxMullerNormal, PathGenerator, RunAccumulator
from gbmsim.session import RunUpdate, SimulationSession, SimulationUpdate

__version__ = "1.0.0"
__all__ = [
    "SimulationConfig",
    "InvalidParameterError",
    "Bounds",
    "PricePoint",
    "Run",
    "SimulationParameters",
    "BoxMullerNormal",
    "PathGenerator",
    "RunAccumulator",
    "RunUpdate",
    "SimulationSession",
    "SimulationUpdate",
]
