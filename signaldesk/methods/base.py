"""Base class for running moving averages."""

import abc


class MovingAverage(abc.ABC):
    """
    Running state of one moving average.

    Each call to `next` consumes exactly one observation and returns the
    updated average. Implementations must run in O(1) per step and keep a
    fixed amount of memory bounded by `period`.
    """

    def __init__(self, period: int):
        if period <= 1:
            raise ValueError("period must be > 1")
        self.period = period

    @abc.abstractmethod
    def next(self, value: float) -> float:
        """Push a new observation and return the updated average."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(period={self.period})"
