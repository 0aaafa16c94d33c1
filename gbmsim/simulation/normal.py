"""Standard-normal variates via the Box-Muller transform."""

import logging
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


class BoxMullerNormal:
    """Draws standard-normal variates from a uniform source.

    Each variate consumes one (U1, U2) pair, in that order, and uses only
    the cosine branch ``sqrt(-2 ln U1) * cos(2 pi U2)``. The sine branch
    is discarded, so every variate is built from a fresh pair.

    Parameters
    ----------
    rng : np.random.Generator, optional
        Uniform source. Anything with a numpy-compatible ``random(size)``
        method works. If None, a generator is created from ``seed``.
    seed : int, optional
        Seed used when ``rng`` is not given
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def sample(self, size: int) -> np.ndarray:
        """Draw ``size`` independent standard-normal variates.

        Parameters
        ----------
        size : int
            Number of variates

        Returns
        -------
        np.ndarray
            Array of shape (size,)
        """
        if size <= 0:
            return np.empty(0)

        # Row k holds (U1, U2) for variate k
        uniforms = np.array(self.rng.random((size, 2)), dtype=float)

        # random() draws from [0, 1); log(0) is undefined
        degenerate = np.flatnonzero(uniforms[:, 0] <= 0.0)
        if degenerate.size == 0:
            return self._transform(uniforms[:, 0], uniforms[:, 1])

        # A redraw must take the value right after its own pair, so from the
        # first zero onward the buffer is re-read as a flat stream
        first = int(degenerate[0])
        head = self._transform(uniforms[:first, 0], uniforms[:first, 1])
        buffered = iter(uniforms[first:].ravel().tolist())

        def next_uniform() -> float:
            value = next(buffered, None)
            if value is None:
                value = float(np.asarray(self.rng.random(1), dtype=float)[0])
            return value

        tail = np.empty(size - first)
        for i in range(tail.size):
            u1 = next_uniform()
            u2 = next_uniform()
            while u1 <= 0.0:
                logger.debug("Resampling zero uniform draw")
                u1 = next_uniform()
            tail[i] = self._transform(u1, u2)

        return np.concatenate([head, tail])

    @staticmethod
    def _transform(u1, u2):
        return np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)

    def standard_normal(self) -> float:
        """Draw a single standard-normal variate."""
        return float(self.sample(1)[0])
