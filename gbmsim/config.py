"""Default settings for the path simulator."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SimulationConfig:
    # Reset target for the display bounds
    default_spot_price: float = 50.0
    default_term: float = 5.0          # years
    price_padding: float = 10.0        # +/- around the spot price

    # Simulation
    step_count: int = 50
    seed: Optional[int] = None
