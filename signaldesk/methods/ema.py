"""Exponentially smoothed moving averages."""

from .base import MovingAverage


class EMA(MovingAverage):
    """Exponential Moving Average, alpha = 2 / (period + 1)."""

    def __init__(self, period: int, value: float = 0.0):
        super().__init__(period)
        self.alpha = 2.0 / (period + 1.0)
        self._ema = float(value)

    def next(self, value: float) -> float:
        self._ema = (float(value) - self._ema) * self.alpha + self._ema
        return self._ema


class RMA(EMA):
    """Wilder's smoothed moving average (running moving average), alpha = 1 / period."""

    def __init__(self, period: int, value: float = 0.0):
        super().__init__(period, value)
        self.alpha = 1.0 / period
