"""
Building blocks shared by indicators: moving averages and crossing detection.
"""

from .base import MovingAverage
from .cross import Cross, sign
from .ema import EMA, RMA
from .ma import MA, MAKind, MAX_PERIOD
from .sma import SMA, WMA

__all__ = [
    "MovingAverage",
    "MA",
    "MAKind",
    "MAX_PERIOD",
    "SMA",
    "EMA",
    "WMA",
    "RMA",
    "Cross",
    "sign",
]
