# signaldesk/indicators/envelopes.py
"""
Envelopes indicator implementation.

Envelopes draw two bands a fixed percentage above and below a moving
average. Prices breaking out of the envelope are treated as overextended.
"""

from dataclasses import dataclass, field

from signaldesk.action import Action
from signaldesk.marketdata import Candle, Source
from signaldesk.methods import MA, MAKind
from .base import IndicatorConfig, IndicatorInstance, IndicatorResult


@dataclass
class Envelopes(IndicatorConfig):
    """
    Envelopes configuration.

    Values:
        - upper bound: ma * (1 + k)
        - lower bound: ma * (1 - k)
        - raw `source2` value

    Signals:
        - `source2` strictly below the lower bound: full buy
        - `source2` strictly above the upper bound: full sell
        - otherwise: none

    Args:
        ma: Moving average of `source` forming the centerline (default: SMA(20))
        k: Relative band size, must be > 0 (default: 0.1)
        source: Candle field averaged into the centerline (default: close)
        source2: Candle field compared against the bands (default: close)

    Example:
        cfg = Envelopes(ma=MA(MAKind.SMA, 20), k=0.05)
        env = cfg.init(candles[0])

        for candle in candles:
            result = env.next(candle)
            if result.signal(0).is_buy:
                print("Price below the lower band")
    """

    NAME = "Envelopes"
    FIELDS = {
        "ma": MA.parse,
        "k": float,
        "source": Source.parse,
        "source2": Source.parse,
    }
    SIZE = (3, 1)

    ma: MA = field(default_factory=lambda: MA(MAKind.SMA, 20))
    k: float = 0.1
    source: Source = Source.CLOSE
    source2: Source = Source.CLOSE

    def validate(self) -> bool:
        return self.k > 0.0 and self.ma.period > 1

    def _create(self, candle: Candle) -> "EnvelopesInstance":
        return EnvelopesInstance(self, candle)


class EnvelopesInstance(IndicatorInstance):
    """Running Envelopes state."""

    def __init__(self, cfg: Envelopes, candle: Candle):
        super().__init__(cfg)
        self._ma = cfg.ma.init(candle.source(cfg.source))
        self._k_high = 1.0 + cfg.k
        self._k_low = 1.0 - cfg.k

    def next(self, candle: Candle) -> IndicatorResult:
        cfg = self._cfg
        center = self._ma.next(candle.source(cfg.source))
        upper, lower = center * self._k_high, center * self._k_low

        price = candle.source(cfg.source2)
        # Both bands can only be breached at once when the centerline is
        # negative; the two checks then cancel out to no signal.
        signal = (price < lower) - (price > upper)

        return IndicatorResult.new((upper, lower, price), (Action.from_sign(signal),))
