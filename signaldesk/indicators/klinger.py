# signaldesk/indicators/klinger.py
"""
Klinger Volume Oscillator implementation.

Volume is signed by the direction of the typical price change and fed
through a fast and a slow moving average; their difference is the
oscillator, smoothed again into a signal line.
"""

from dataclasses import dataclass, field

from signaldesk.marketdata import Candle
from signaldesk.methods import MA, MAKind, Cross, sign
from .base import IndicatorConfig, IndicatorInstance, IndicatorResult


@dataclass
class KlingerVolumeOscillator(IndicatorConfig):
    """
    Klinger Volume Oscillator configuration.

    Values:
        - main: ma1(signed volume) - ma2(signed volume)
        - signal line: signal(main)

    Signals:
        - main crossing 0.0: full buy upwards, full sell downwards
        - main crossing the signal line: full buy upwards, full sell downwards

    Args:
        ma1: Fast moving average (default: EMA(34))
        ma2: Slow moving average, same family as ma1 with a longer period
            (default: EMA(55))
        signal: Signal line moving average (default: EMA(13))
    """

    NAME = "KlingerVolumeOscillator"
    FIELDS = {
        "ma1": MA.parse,
        "ma2": MA.parse,
        "signal": MA.parse,
    }
    SIZE = (2, 2)

    ma1: MA = field(default_factory=lambda: MA(MAKind.EMA, 34))
    ma2: MA = field(default_factory=lambda: MA(MAKind.EMA, 55))
    signal: MA = field(default_factory=lambda: MA(MAKind.EMA, 13))

    def validate(self) -> bool:
        return (
            self.ma1.is_similar_to(self.ma2)
            and self.ma1.period > 1
            and self.signal.period > 1
            and self.ma1.period < self.ma2.period
        )

    def _create(self, candle: Candle) -> "KlingerVolumeOscillatorInstance":
        return KlingerVolumeOscillatorInstance(self, candle)


class KlingerVolumeOscillatorInstance(IndicatorInstance):
    """Running Klinger Volume Oscillator state."""

    def __init__(self, cfg: KlingerVolumeOscillator, candle: Candle):
        super().__init__(cfg)
        self._ma1 = cfg.ma1.init(0.0)
        self._ma2 = cfg.ma2.init(0.0)
        self._ma3 = cfg.signal.init(0.0)
        self._cross_zero = Cross()
        self._cross_signal = Cross()
        self._last_tp = candle.typical_price

    def next(self, candle: Candle) -> IndicatorResult:
        tp = candle.typical_price
        direction = sign(tp - self._last_tp)
        self._last_tp = tp

        # Flat typical price contributes exactly zero, whatever the volume.
        vol = direction * candle.volume if direction else 0.0

        ko = self._ma1.next(vol) - self._ma2.next(vol)
        line = self._ma3.next(ko)

        s1 = self._cross_zero.next(ko, 0.0)
        s2 = self._cross_signal.next(ko, line)

        return IndicatorResult.new((ko, line), (s1, s2))
