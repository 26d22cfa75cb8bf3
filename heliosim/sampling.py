"""Randomized sampling used by the spawn logic.

A single :class:`Sampler` wraps one ``numpy.random.Generator`` and is shared by
the whole simulation, so a fixed seed reproduces a run exactly.

``in_range`` keeps the reference rounding scheme: a uniform draw over
``[low - 0.5, high + 0.5)`` rounded to the nearest integer. The two endpoints
therefore carry roughly half the weight of the interior values. Results are
clamped into ``[low, high]``, since ties round to even and can otherwise land
one below ``low``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

import numpy as np

from heliosim.config import BoundingBox
from heliosim.geo import ProjectedPoint

T = TypeVar("T")


class Sampler:
    """Seeded random source for the simulation.

    Args:
        seed: Integer seed, an existing ``numpy.random.Generator`` to wrap, or
            ``None`` for OS entropy.

    Example:
        >>> sampler = Sampler(42)
        >>> 500 <= sampler.in_range(500, 700) <= 700
        True
    """

    rng: np.random.Generator

    def __init__(self, seed: int | np.random.Generator | None = None):
        if isinstance(seed, np.random.Generator):
            self.rng = seed
        else:
            self.rng = np.random.default_rng(seed)

    def uniform(self) -> float:
        """Uniform float in ``[0, 1)``."""
        return float(self.rng.random())

    def in_range(self, low: int, high: int) -> int:
        """Integer in ``[low, high]`` (inclusive), endpoints half-weighted."""
        if high < low:
            msg = f"empty range [{low}, {high}]"
            raise ValueError(msg)
        value = round(low - 0.5 + self.uniform() * (high - low + 1))
        return min(max(value, low), high)

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high)``."""
        return int(self.rng.integers(low, high))

    def maybe(self, p: float = 0.5) -> bool:
        """Coin flip that comes up True with probability ``p``."""
        return self.uniform() <= p

    def point_in(self, bounds: BoundingBox) -> ProjectedPoint:
        """Integer-valued projected point inside ``bounds``."""
        return ProjectedPoint(
            self.in_range(bounds.left_x, bounds.right_x),
            self.in_range(bounds.down_y, bounds.up_y),
        )

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            msg = "cannot choose from an empty sequence"
            raise ValueError(msg)
        return items[self.integer(0, len(items))]

    def distinct_pair(self, items: Sequence[T]) -> tuple[T, T]:
        """Two independently drawn items that differ by value.

        The second draw is repeated until it differs from the first.

        Raises:
            ValueError: If ``items`` holds fewer than two distinct values,
                where resampling could never terminate.
        """
        first = self.choice(items)
        if all(item == first for item in items):
            msg = "need at least two distinct items to draw a pair"
            raise ValueError(msg)
        second = self.choice(items)
        while second == first:
            second = self.choice(items)
        return first, second
