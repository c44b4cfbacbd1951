"""Closed and open real intervals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Interval:
    """A real interval from ``min`` to ``max``; empty by default."""

    min: float = math.inf
    max: float = -math.inf

    EMPTY: ClassVar[Interval]
    UNIVERSE: ClassVar[Interval]

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        """True if ``x`` lies in the closed interval."""
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        """True if ``x`` lies strictly inside the interval."""
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)