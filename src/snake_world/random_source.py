"""Random number sources used for food placement."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class RandomSource(Protocol):
    """Anything that yields uniformly distributed reals in ``[0, 1)``."""

    def random(self) -> float: ...


class NumpyRandomSource:
    """NumPy-backed random source.

    Pass a *seed* for reproducible games, or an existing generator to share
    its stream with other components.
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def random(self) -> float:
        return float(self.rng.random())


def random_range(source: RandomSource, low: int, high: int) -> int:
    """Return an integer drawn uniformly from ``[low, high)``.

    The caller guarantees ``low < high``; it is not checked here.
    """
    return low + int(source.random() * (high - low))
