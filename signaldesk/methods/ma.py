# signaldesk/methods/ma.py
"""
Moving average selection.

An `MA` value names one averaging family plus its period. Indicator
configurations hold `MA` values and turn them into running averages
when an instance is initialised:

    ma = MA.parse("EMA(12)")
    state = ma.init(first_close)
    for candle in candles:
        value = state.next(candle.close)
"""

import enum
import re
from dataclasses import dataclass

from signaldesk.errors import ParameterParseError
from .base import MovingAverage
from .ema import EMA, RMA
from .sma import SMA, WMA

# Largest period any moving average accepts.
MAX_PERIOD = 255

_MA_PATTERN = re.compile(r"^\s*([A-Za-z]+)\s*(?:\(\s*(\S+?)\s*\)|[-\s:]\s*(\S+))\s*$")


class MAKind(enum.Enum):
    """Supported moving average families."""

    SMA = "SMA"
    EMA = "EMA"
    WMA = "WMA"
    RMA = "RMA"


_IMPLEMENTATIONS: dict[MAKind, type[MovingAverage]] = {
    MAKind.SMA: SMA,
    MAKind.EMA: EMA,
    MAKind.WMA: WMA,
    MAKind.RMA: RMA,
}


@dataclass(frozen=True)
class MA:
    """
    Moving average constructor: a family tag plus a period.

    Args:
        kind: Averaging family
        period: Window length / smoothing period, in [2, MAX_PERIOD]

    Raises:
        ParameterParseError: If the period is not an integer in range
    """

    kind: MAKind
    period: int

    def __post_init__(self) -> None:
        period = self.period
        if isinstance(period, bool) or not isinstance(period, int):
            raise ParameterParseError("period", str(period))
        if not 1 < period <= MAX_PERIOD:
            raise ParameterParseError("period", str(period))

    @classmethod
    def parse(cls, text: str) -> "MA":
        """
        Parse a textual moving average such as "SMA(20)", "ema-12" or "wma 9".

        Raises:
            ValueError: If the text is malformed, names an unknown family,
                or carries an out-of-range period
        """
        match = _MA_PATTERN.match(text)
        if match is None:
            raise ValueError(f"Invalid moving average: {text!r}")

        name, period_text = match.group(1), match.group(2) or match.group(3)
        try:
            kind = MAKind(name.upper())
        except ValueError:
            raise ValueError(f"Unknown moving average family: {name!r}") from None

        try:
            period = int(period_text)
        except ValueError:
            raise ParameterParseError("period", period_text) from None

        return cls(kind, period)

    def is_similar_to(self, other: "MA") -> bool:
        """True when both averages belong to the same family."""
        return self.kind is other.kind

    def init(self, value: float | None = None) -> MovingAverage:
        """Create a running average seeded with `value` (None seeds with 0.0)."""
        seed = 0.0 if value is None else float(value)
        return _IMPLEMENTATIONS[self.kind](self.period, seed)

    def __str__(self) -> str:
        return f"{self.kind.value}({self.period})"
