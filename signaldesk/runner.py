# signaldesk/runner.py
"""
Driving indicators over candle streams.

Indicators themselves only ever see one candle at a time; the helpers
here feed a candle sequence through an instance in order and, when the
caller wants the full output history, accumulate it into numpy arrays.
"""

import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator

import numpy as np

from .config import build_indicators, load_indicator_config, settings
from .indicators import IndicatorConfig, IndicatorResult
from .marketdata import Candle, load_candles_csv

log = logging.getLogger(__name__)


def configure_logging(level: str = "INFO", force: bool = False) -> None:
    """
    Configure root logger with console output.

    By default, this is non-destructive: if the root logger already has handlers,
    it will do nothing (assuming the application has configured logging).

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        force: If True, clear existing handlers and force this configuration
    """
    root_logger = logging.getLogger()

    # If logging is already configured and we aren't forcing it, exit.
    if root_logger.hasHandlers() and not force:
        return

    root_logger.setLevel(level.upper())

    if force:
        root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def replay(config: IndicatorConfig, candles: Iterable[Candle]) -> Iterator[IndicatorResult]:
    """
    Yield one result per candle.

    The instance is initialised from the first candle and that same candle
    is then fed through `next`, so the output lines up with the input.
    Nothing is yielded for an empty sequence.

    Raises:
        WrongConfigurationError: If the configuration is invalid (raised
            when the first candle arrives)
    """
    it = iter(candles)
    first = next(it, None)
    if first is None:
        return

    instance = config.init(first)
    yield instance.next(first)
    for candle in it:
        yield instance.next(candle)


def collect(config: IndicatorConfig, candles: Iterable[Candle]) -> tuple[np.ndarray, np.ndarray]:
    """
    Replay `candles` and stack the results.

    Returns:
        (values, signals): float64 arrays shaped (n, value count) and
        (n, signal count); signals hold their strengths in [-1, 1]
    """
    n_values, n_signals = config.size()
    values: list[tuple[float, ...]] = []
    signals: list[list[float]] = []

    for result in replay(config, candles):
        values.append(result.values)
        signals.append([s.strength for s in result.signals])

    value_arr = np.array(values, dtype=np.float64).reshape(len(values), n_values)
    signal_arr = np.array(signals, dtype=np.float64).reshape(len(signals), n_signals)
    return value_arr, signal_arr


def run(
    config_path: str | Path,
    csv_path: str | Path,
    setup_logging: bool = True,
) -> dict[str, tuple[np.ndarray, np.ndarray]]:
    """
    Run every indicator from a YAML config over a candle CSV file.

    Args:
        config_path: YAML file with an `indicators` list
        csv_path: OHLCV candle CSV file
        setup_logging: If True, configure console logging from settings

    Returns:
        Mapping of indicator label -> (values, signals) arrays. Labels are
        the indicator NAME, suffixed with "#<n>" for repeated indicators.
    """
    if setup_logging:
        settings.validate()
        configure_logging(settings.log_level)

    configs = build_indicators(load_indicator_config(config_path))
    candles = load_candles_csv(csv_path, delimiter=settings.csv_delimiter)

    outputs: dict[str, tuple[np.ndarray, np.ndarray]] = {}
    for cfg in configs:
        label = cfg.NAME
        n = 2
        while label in outputs:
            label = f"{cfg.NAME}#{n}"
            n += 1

        values, signals = collect(cfg, candles)
        outputs[label] = (values, signals)

        log.info(
            "%s over %d candles: %d buy / %d sell signals",
            label,
            len(candles),
            int(np.count_nonzero(signals > 0)),
            int(np.count_nonzero(signals < 0)),
        )

    return outputs
