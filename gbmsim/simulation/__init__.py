"""Simulation engine for generating and accumulating Monte Carlo paths."""

from gbmsim.simulation.normal import BoxMullerNormal
from gbmsim.simulation.path_generator import PathGenerator
from gbmsim.simulation.run_accumulator import RunAccumulator

__all__ = ["BoxMullerNormal", "PathGenerator", "RunAccumulator"]
