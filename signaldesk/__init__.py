# signaldesk/__init__.py
"""
Signaldesk - streaming technical indicators for trading strategies.

Indicators are described by a configuration, validated once, then
initialised from the first candle into a running instance that is
advanced one candle at a time in constant time per step.

Example:
    from signaldesk import Envelopes, MA, MAKind

    cfg = Envelopes(ma=MA(MAKind.EMA, 20), k=0.05)
    env = cfg.init(candles[0])

    for candle in candles:
        result = env.next(candle)
        if result.signal(0).is_buy:
            ...
"""

from .action import Action
from .errors import IndicatorError, ParameterParseError, WrongConfigurationError
from .marketdata import Candle, Source, load_candles_csv
from .methods import MA, MAKind, Cross
from .indicators import (
    INDICATORS,
    Envelopes,
    IndicatorConfig,
    IndicatorInstance,
    IndicatorResult,
    KlingerVolumeOscillator,
)
from .config import settings, load_indicator_config, build_indicator, build_indicators
from .runner import configure_logging, replay, collect, run

__version__ = "0.1.0"
__all__ = [
    "Action",
    "IndicatorError",
    "ParameterParseError",
    "WrongConfigurationError",
    "Candle",
    "Source",
    "load_candles_csv",
    "MA",
    "MAKind",
    "Cross",
    "INDICATORS",
    "IndicatorConfig",
    "IndicatorInstance",
    "IndicatorResult",
    "Envelopes",
    "KlingerVolumeOscillator",
    "settings",
    "load_indicator_config",
    "build_indicator",
    "build_indicators",
    "configure_logging",
    "replay",
    "collect",
    "run",
]
