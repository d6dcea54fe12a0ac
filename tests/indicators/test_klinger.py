import pytest

from signaldesk.action import Action
from signaldesk.errors import ParameterParseError, WrongConfigurationError
from signaldesk.indicators.klinger import (
    KlingerVolumeOscillator,
    KlingerVolumeOscillatorInstance,
)
from signaldesk.marketdata import Candle
from signaldesk.methods import MA, MAKind


def candle(tp: float, volume: float) -> Candle:
    # high == low == close so the typical price equals `tp`
    return Candle(
        timestamp="2020-01-01T00:00:00Z",
        open=tp,
        high=tp,
        low=tp,
        close=tp,
        volume=volume,
    )


def sma_config() -> KlingerVolumeOscillator:
    return KlingerVolumeOscillator(
        ma1=MA(MAKind.SMA, 2),
        ma2=MA(MAKind.SMA, 3),
        signal=MA(MAKind.SMA, 2),
    )


class TestKlingerVolumeOscillator:
    def test_defaults(self) -> None:
        cfg = KlingerVolumeOscillator()
        assert cfg.ma1 == MA(MAKind.EMA, 34)
        assert cfg.ma2 == MA(MAKind.EMA, 55)
        assert cfg.signal == MA(MAKind.EMA, 13)
        assert cfg.size() == (2, 2)
        assert cfg.validate() is True

    def test_family_mismatch_is_invalid(self) -> None:
        cfg = KlingerVolumeOscillator(ma1=MA(MAKind.SMA, 34), ma2=MA(MAKind.EMA, 55))
        assert cfg.validate() is False
        with pytest.raises(WrongConfigurationError):
            cfg.init(candle(10.0, 1.0))

    @pytest.mark.parametrize("fast, slow", [(55, 34), (34, 34)])
    def test_fast_must_be_shorter_than_slow(self, fast, slow) -> None:
        cfg = KlingerVolumeOscillator(ma1=MA(MAKind.EMA, fast), ma2=MA(MAKind.EMA, slow))
        assert cfg.validate() is False

    def test_signal_family_is_free(self) -> None:
        cfg = KlingerVolumeOscillator(signal=MA(MAKind.WMA, 9))
        assert cfg.validate() is True

    def test_volume_is_signed_by_typical_price_direction(self) -> None:
        kvo = sma_config().init(candle(10.0, 50.0))

        # rising typical price: +volume into both averages
        kvo.next(candle(11.0, 100.0))
        assert list(kvo._ma1._window) == [0.0, 100.0]
        assert list(kvo._ma2._window) == [0.0, 0.0, 100.0]

        kvo.next(candle(12.0, 100.0))
        # falling typical price: -volume
        kvo.next(candle(11.0, 60.0))
        assert list(kvo._ma1._window) == [100.0, -60.0]
        assert list(kvo._ma2._window) == [100.0, 100.0, -60.0]

        # unchanged typical price: exactly zero, whatever the volume
        kvo.next(candle(11.0, 1e9))
        assert list(kvo._ma1._window) == [-60.0, 0.0]
        assert list(kvo._ma2._window) == [100.0, -60.0, 0.0]

    def test_flat_price_with_infinite_volume_contributes_zero(self) -> None:
        kvo = sma_config().init(candle(10.0, 1.0))
        result = kvo.next(candle(10.0, float("inf")))
        assert result.values == (0.0, 0.0)

    def test_values_and_crossings(self) -> None:
        kvo = sma_config().init(candle(10.0, 50.0))

        r1 = kvo.next(candle(11.0, 100.0))
        assert r1.values == pytest.approx((50.0 - 100.0 / 3, (50.0 - 100.0 / 3) / 2))
        assert r1.signals == (Action.NONE, Action.NONE)

        r2 = kvo.next(candle(12.0, 100.0))
        assert r2.value(0) == pytest.approx(100.0 - 200.0 / 3)
        assert r2.value(1) == pytest.approx(25.0)
        assert r2.signals == (Action.NONE, Action.NONE)

        # oscillator drops below zero and below its signal line
        r3 = kvo.next(candle(11.0, 60.0))
        assert r3.value(0) == pytest.approx(20.0 - 140.0 / 3)
        assert r3.signals == (Action.SELL_ALL, Action.SELL_ALL)

        r4 = kvo.next(candle(11.0, 1e9))
        assert r4.value(0) == pytest.approx(-30.0 - 40.0 / 3)
        assert r4.value(1) == pytest.approx(-35.0)
        assert r4.signals == (Action.NONE, Action.NONE)

        # and back above both
        r5 = kvo.next(candle(12.0, 100.0))
        assert r5.value(0) == pytest.approx(50.0 - 40.0 / 3)
        assert r5.signals == (Action.BUY_ALL, Action.BUY_ALL)

    def test_set_fields(self) -> None:
        cfg = KlingerVolumeOscillator()
        cfg.set("ma1", "sma(5)")
        cfg.set("ma2", "sma(10)")
        cfg.set("signal", "wma(3)")

        assert cfg == KlingerVolumeOscillator(
            ma1=MA(MAKind.SMA, 5), ma2=MA(MAKind.SMA, 10), signal=MA(MAKind.WMA, 3)
        )
        assert cfg.validate() is True

    def test_set_rejects_bad_value(self) -> None:
        cfg = KlingerVolumeOscillator()
        with pytest.raises(ParameterParseError) as exc_info:
            cfg.set("signal", "EMA(x)")
        assert exc_info.value.field == "signal"
        assert exc_info.value.value == "EMA(x)"

    def test_init_returns_instance(self) -> None:
        kvo = KlingerVolumeOscillator().init(candle(1.0, 1.0))
        assert isinstance(kvo, KlingerVolumeOscillatorInstance)
        assert kvo.size() == (2, 2)
