"""Simple and weighted moving averages over a trailing window."""

import math
from collections import deque

from .base import MovingAverage


class _RunningSum:
    """
    Neumaier-compensated running sum.

    Adding and removing values of very different magnitude keeps the low
    order part in `_comp`, so a huge value leaving the window does not wipe
    out the small ones still in it.
    """

    __slots__ = ("_sum", "_comp")

    def __init__(self, values: list[float]):
        self._sum = 0.0
        self._comp = 0.0
        self.reset(values)

    @property
    def value(self) -> float:
        return self._sum + self._comp

    def add(self, value: float) -> None:
        t = self._sum + value
        if abs(self._sum) >= abs(value):
            self._comp += (self._sum - t) + value
        else:
            self._comp += (value - t) + self._sum
        self._sum = t

    def subtract(self, other: "_RunningSum") -> None:
        self.add(-other._sum)
        self.add(-other._comp)

    def reset(self, values: list[float]) -> None:
        """Recompute from scratch; the residual keeps what rounding the total dropped."""
        try:
            total = math.fsum(values)
            residual = math.fsum([*values, -total]) if math.isfinite(total) else 0.0
        except (OverflowError, ValueError):
            # inf and -inf together, or an overflowing total
            total, residual = sum(values), 0.0
        self._sum = total
        self._comp = residual


class SMA(MovingAverage):
    """
    Simple Moving Average.

    The window is pre-filled with the seed value, so the average is defined
    from the very first step. A compensated running sum keeps each update
    O(1); it is rebuilt from the window every `period` steps, and at once
    whenever it stops being finite.
    """

    def __init__(self, period: int, value: float = 0.0):
        super().__init__(period)
        value = float(value)
        self._window: deque[float] = deque([value] * period, maxlen=period)
        self._sum = _RunningSum(list(self._window))
        self._steps = 0

    def next(self, value: float) -> float:
        value = float(value)
        self._sum.add(value)
        self._sum.add(-self._window[0])
        self._window.append(value)

        self._steps += 1
        if self._steps >= self.period or not math.isfinite(self._sum.value):
            self._sum.reset(list(self._window))
            self._steps = 0

        return self._sum.value / self.period


class WMA(MovingAverage):
    """
    Linearly Weighted Moving Average (newest observation weighs `period`).

    Keeps a running weighted numerator and a running window total:
    every step each older weight drops by one, which is the same as
    subtracting the previous window total. Both sums are rebuilt from the
    window like the SMA's.
    """

    def __init__(self, period: int, value: float = 0.0):
        super().__init__(period)
        value = float(value)
        self._window: deque[float] = deque([value] * period, maxlen=period)
        self._divisor = period * (period + 1) / 2
        self._total = _RunningSum([])
        self._numerator = _RunningSum([])
        self._rebuild()

    def _rebuild(self) -> None:
        self._total.reset(list(self._window))
        self._numerator.reset([w * x for w, x in enumerate(self._window, start=1)])
        self._steps = 0

    def next(self, value: float) -> float:
        value = float(value)
        self._numerator.add(self.period * value)
        self._numerator.subtract(self._total)
        self._total.add(value)
        self._total.add(-self._window[0])
        self._window.append(value)

        self._steps += 1
        if (
            self._steps >= self.period
            or not math.isfinite(self._numerator.value)
            or not math.isfinite(self._total.value)
        ):
            self._rebuild()

        return self._numerator.value / self._divisor
