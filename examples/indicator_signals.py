"""Log Envelopes and Klinger signals for a candle CSV file."""
import argparse
import logging

from signaldesk import (
    Envelopes,
    KlingerVolumeOscillator,
    MA,
    MAKind,
    configure_logging,
    load_candles_csv,
)

log = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("csv", help="OHLCV candle CSV file")
    parser.add_argument("--k", type=float, default=0.05, help="Envelope band size")
    args = parser.parse_args()

    configure_logging("INFO")

    candles = load_candles_csv(args.csv)
    if not candles:
        log.warning("No candles in %s", args.csv)
        return

    env = Envelopes(ma=MA(MAKind.EMA, 20), k=args.k).init(candles[0])
    kvo = KlingerVolumeOscillator().init(candles[0])

    for candle in candles:
        env_result = env.next(candle)
        kvo_result = kvo.next(candle)

        upper, lower, price = env_result.values
        band_signal = env_result.signal(0)
        if not band_signal.is_none:
            log.info(
                "%s envelope %s: price %.5f outside [%.5f, %.5f]",
                candle.timestamp, band_signal, price, lower, upper,
            )

        zero_cross, line_cross = kvo_result.signals
        if not zero_cross.is_none or not line_cross.is_none:
            log.info(
                "%s klinger %.1f (signal %.1f): zero cross %s, signal-line cross %s",
                candle.timestamp, kvo_result.value(0), kvo_result.value(1),
                zero_cross, line_cross,
            )


if __name__ == "__main__":
    main()
