from pathlib import Path

import pytest

from signaldesk.marketdata import Candle, Source, load_candles_csv


def candle() -> Candle:
    return Candle(
        timestamp="2020-01-01T00:00:00Z",
        open=10.0,
        high=16.0,
        low=8.0,
        close=12.0,
        volume=250.0,
    )


class TestSource:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("close", Source.CLOSE),
            ("Close", Source.CLOSE),
            (" OPEN ", Source.OPEN),
            ("tp", Source.TP),
            ("typical_price", Source.TP),
            ("mid", Source.HL2),
            ("vol", Source.VOLUME),
            ("ohlc4", Source.OHLC4),
        ],
    )
    def test_parse(self, text, expected) -> None:
        assert Source.parse(text) is expected

    def test_parse_rejects_unknown(self) -> None:
        with pytest.raises(ValueError):
            Source.parse("vwap")

    def test_str_round_trips(self) -> None:
        for src in Source:
            assert Source.parse(str(src)) is src


class TestCandle:
    def test_derived_fields(self) -> None:
        c = candle()
        assert c.typical_price == pytest.approx(12.0)
        assert c.mid == pytest.approx(12.0)
        assert c.ohlc4 == pytest.approx(11.5)
        assert c.range == pytest.approx(8.0)

    @pytest.mark.parametrize(
        "src, expected",
        [
            (Source.OPEN, 10.0),
            (Source.HIGH, 16.0),
            (Source.LOW, 8.0),
            (Source.CLOSE, 12.0),
            (Source.VOLUME, 250.0),
            (Source.HL2, 12.0),
            (Source.TP, 12.0),
            (Source.OHLC4, 11.5),
        ],
    )
    def test_source(self, src, expected) -> None:
        assert candle().source(src) == pytest.approx(expected)

    def test_volume_defaults_to_zero(self) -> None:
        c = Candle(timestamp="t", open=1.0, high=1.0, low=1.0, close=1.0)
        assert c.volume == 0.0


class TestLoadCandlesCsv:
    def test_loads_with_aliases_and_blank_rows(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "candles.csv"
        csv_path.write_text(
            "Time,O,H,L,C,Vol\n"
            "2025-12-28T00:00:00Z,10,11,9,10.5,100\n"
            ",1,1,1,1,1\n"
            "2025-12-28T00:05:00Z,10.5,12,10,11,\n"
        )

        candles = load_candles_csv(csv_path)

        assert len(candles) == 2
        assert candles[0].timestamp == "2025-12-28T00:00:00Z"
        assert candles[0].high == 11.0
        assert candles[0].volume == 100.0
        assert candles[1].close == 11.0
        assert candles[1].volume == 0.0

    def test_volume_column_is_optional(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "candles.csv"
        csv_path.write_text("timestamp,open,high,low,close\n2025-01-01,1,2,0.5,1.5\n")

        [c] = load_candles_csv(csv_path)
        assert c.volume == 0.0
        assert c.low == 0.5

    def test_explicit_columns_and_delimiter(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "candles.csv"
        csv_path.write_text("when;a;b;c;d;qty\n2025-01-01;1;2;0;1;5\n")

        [c] = load_candles_csv(
            csv_path,
            timestamp_col="when",
            open_col="a",
            high_col="b",
            low_col="c",
            close_col="d",
            volume_col="qty",
            delimiter=";",
        )
        assert (c.open, c.high, c.low, c.close, c.volume) == (1.0, 2.0, 0.0, 1.0, 5.0)

    def test_missing_required_columns(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "candles.csv"
        csv_path.write_text("timestamp,open,close\n2025-01-01,1,1\n")

        with pytest.raises(ValueError) as exc_info:
            load_candles_csv(csv_path)
        assert "high" in str(exc_info.value)
        assert "low" in str(exc_info.value)

    def test_missing_explicit_column(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "candles.csv"
        csv_path.write_text("timestamp,open,high,low,close\n2025-01-01,1,1,1,1\n")

        with pytest.raises(ValueError):
            load_candles_csv(csv_path, volume_col="qty")

    def test_empty_file(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "candles.csv"
        csv_path.write_text("")

        with pytest.raises(ValueError):
            load_candles_csv(csv_path)
