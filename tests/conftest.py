# tests/conftest.py
import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from signaldesk.marketdata import Candle


def make_candle(i: int) -> Candle:
    """
    Deterministic candle series with monotonically increasing prices.
    """
    base = 100.0 + i
    return Candle(
        timestamp=f"2025-01-01T00:{i:02d}:00Z",
        open=base,
        high=base + 0.5,
        low=base - 0.5,
        close=base + 0.2,
        volume=1000.0,
    )


def price_candle(price: float, volume: float = 1.0, i: int = 0) -> Candle:
    """Flat candle where every price field (and so the typical price) equals `price`."""
    return Candle(
        timestamp=f"2025-01-01T00:{i:02d}:00Z",
        open=price,
        high=price,
        low=price,
        close=price,
        volume=volume,
    )


@pytest.fixture
def candle_factory():
    """
    Returns a function: (i:int) -> Candle
    """
    return make_candle


@pytest.fixture
def make_candles(candle_factory):
    """
    Returns a function: (n:int, start:int=0) -> list[Candle]
    """
    def _make(n: int, start: int = 0) -> list[Candle]:
        return [candle_factory(i) for i in range(start, start + n)]

    return _make


@pytest.fixture
def wave_candles():
    """
    Rising, then falling, then rising again prices with varying volume.

    Long enough to push every default-period indicator through several
    crossings.
    """
    prices = (
        [100.0 + i for i in range(40)]
        + [140.0 - 1.5 * i for i in range(60)]
        + [50.0 + 2.0 * i for i in range(50)]
    )
    return [
        price_candle(p, volume=500.0 + (i % 7) * 100.0, i=i % 60)
        for i, p in enumerate(prices)
    ]


@pytest.fixture
def restore_root_logger():
    """Snapshot and restore root logger handlers/level around a test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
