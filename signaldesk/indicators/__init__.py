# signaldesk/indicators/__init__.py
"""
Technical indicators built on the streaming configuration/instance contract.

A configuration is validated once and initialised from the first candle;
the resulting instance is then advanced one candle at a time and returns
a fixed-shape result (values + signals) on every step.

Example:
    from signaldesk.indicators import Envelopes, KlingerVolumeOscillator

    env = Envelopes(k=0.05).init(candles[0])
    kvo = KlingerVolumeOscillator().init(candles[0])

    # Update with each new candle
    for candle in candles:
        upper, lower, price = env.next(candle).values
        kvo_result = kvo.next(candle)
"""

from .base import IndicatorConfig, IndicatorInstance, IndicatorResult
from .envelopes import Envelopes, EnvelopesInstance
from .klinger import KlingerVolumeOscillator, KlingerVolumeOscillatorInstance

# Indicator configurations by NAME, used when building from config files.
INDICATORS: dict[str, type[IndicatorConfig]] = {
    cls.NAME: cls for cls in (Envelopes, KlingerVolumeOscillator)
}

__all__ = [
    "IndicatorConfig",
    "IndicatorInstance",
    "IndicatorResult",
    "Envelopes",
    "EnvelopesInstance",
    "KlingerVolumeOscillator",
    "KlingerVolumeOscillatorInstance",
    "INDICATORS",
]
