import numpy as np
import pytest

from gbmsim.model import Run, SimulationParameters


class ScriptedUniforms:
    """Uniform source that replays a fixed list of draws, in order."""

    def __init__(self, values):
        self.values = [float(v) for v in values]
        self.consumed = 0
        self.calls = 0

    def random(self, size):
        n = int(np.prod(size))
        if self.consumed + n > len(self.values):
            raise AssertionError("uniform script exhausted")
        out = np.array(self.values[self.consumed:self.consumed + n])
        self.consumed += n
        self.calls += 1
        return out.reshape(size)


@pytest.fixture
def scripted_uniforms():
    return ScriptedUniforms


@pytest.fixture
def default_params():
    return SimulationParameters(
        spot_price=50.0,
        strike_price=55.0,
        term=5.0,
        volatility=0.2,
        risk_free_rate=0.05,
        num_simulations=3,
        step_count=50,
    )


@pytest.fixture
def run_a():
    return Run([0.0, 1.0, 2.0], [50.0, 55.0, 45.0])


@pytest.fixture
def run_b():
    return Run([0.0, 1.5, 3.0], [50.0, 62.0, 48.0])
