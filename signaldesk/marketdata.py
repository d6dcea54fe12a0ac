# signaldesk/marketdata.py
"""
Market data - OHLCV candles and source selection.

Indicators read the candle fields they depend on through a `Source`
selector, so the same indicator can be configured to track closes,
typical prices, volume, etc.
"""

import csv
import enum
import logging
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)


class Source(enum.Enum):
    """Candle field selector used by indicator configurations."""

    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    CLOSE = "close"
    VOLUME = "volume"
    HL2 = "hl2"
    TP = "tp"
    OHLC4 = "ohlc4"

    @classmethod
    def parse(cls, text: str) -> "Source":
        """
        Parse a source name (case-insensitive).

        Raises:
            ValueError: If the name is not a known source
        """
        key = text.strip().lower()
        key = _SOURCE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown source: {text!r}") from None

    def __str__(self) -> str:
        return self.value


_SOURCE_ALIASES = {
    "o": "open",
    "h": "high",
    "l": "low",
    "c": "close",
    "v": "volume",
    "vol": "volume",
    "mid": "hl2",
    "typical": "tp",
    "typical_price": "tp",
}


@dataclass
class Candle:
    """
    Represents a single OHLCV candle.

    Attributes:
        timestamp: ISO 8601 timestamp or Unix timestamp string
        open: Opening price
        high: Highest price during period
        low: Lowest price during period
        close: Closing price
        volume: Trading volume (or 0 if unavailable)
    """

    timestamp: str
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0

    @property
    def typical_price(self) -> float:
        """Typical price (HLC/3)."""
        return (self.high + self.low + self.close) / 3

    @property
    def mid(self) -> float:
        """Calculate midpoint between high and low."""
        return (self.high + self.low) / 2

    @property
    def ohlc4(self) -> float:
        return (self.open + self.high + self.low + self.close) / 4

    @property
    def range(self) -> float:
        """Calculate candle range (high - low)."""
        return self.high - self.low

    def source(self, src: Source) -> float:
        """Return the value of the field selected by `src`."""
        if src is Source.OPEN:
            return self.open
        if src is Source.HIGH:
            return self.high
        if src is Source.LOW:
            return self.low
        if src is Source.CLOSE:
            return self.close
        if src is Source.VOLUME:
            return self.volume
        if src is Source.HL2:
            return self.mid
        if src is Source.TP:
            return self.typical_price
        if src is Source.OHLC4:
            return self.ohlc4
        raise ValueError(f"Unknown source: {src!r}")

    def __repr__(self) -> str:
        return (
            f"Candle(timestamp={self.timestamp}, "
            f"O={self.open:.5f}, H={self.high:.5f}, "
            f"L={self.low:.5f}, C={self.close:.5f}, "
            f"V={self.volume:.0f})"
        )


def load_candles_csv(
    path: str | Path,
    *,
    timestamp_col: str | None = None,
    open_col: str | None = None,
    high_col: str | None = None,
    low_col: str | None = None,
    close_col: str | None = None,
    volume_col: str | None = None,
    delimiter: str = ",",
) -> list[Candle]:
    """
    Load a candle series from CSV, oldest first.

    CSV requirements:
      - timestamp column (default autodetect)
      - open/high/low/close columns (default autodetect)
      - optional volume column (missing values read as 0.0)

    Rows are returned in file order; the file is expected to be sorted by
    timestamp already.
    """
    path = Path(path)

    def norm(s: str) -> str:
        return s.strip().lower()

    # canonical -> accepted aliases
    aliases = {
        "timestamp": ("timestamp", "time", "datetime", "date"),
        "open": ("open", "o"),
        "high": ("high", "h"),
        "low": ("low", "l"),
        "close": ("close", "c"),
        "volume": ("volume", "vol", "v"),
    }

    def fnum(val: str | None, default: float = 0.0) -> float:
        if val is None:
            return default
        s = str(val).strip()
        return default if s == "" else float(s)

    candles: list[Candle] = []
    skipped = 0

    with path.open("r", newline="") as f:
        reader = csv.DictReader(f, delimiter=delimiter)
        if reader.fieldnames is None:
            raise ValueError("CSV has no header row")

        header_map = {norm(h): h for h in reader.fieldnames if h is not None}

        def pick(explicit: str | None, key: str) -> str | None:
            if explicit:
                if norm(explicit) not in header_map:
                    raise ValueError(f"CSV missing column: {explicit}")
                return header_map[norm(explicit)]
            for a in aliases[key]:
                if a in header_map:
                    return header_map[a]
            return None

        ts_key = pick(timestamp_col, "timestamp")
        o_key = pick(open_col, "open")
        h_key = pick(high_col, "high")
        l_key = pick(low_col, "low")
        c_key = pick(close_col, "close")
        v_key = pick(volume_col, "volume")

        missing = [
            name
            for name, k in [
                ("timestamp", ts_key),
                ("open", o_key),
                ("high", h_key),
                ("low", l_key),
                ("close", c_key),
            ]
            if k is None
        ]
        if missing:
            raise ValueError(f"CSV missing required columns: {', '.join(missing)}")

        assert ts_key and o_key and h_key and l_key and c_key

        for line_no, row in enumerate(reader, start=2):
            ts = (row.get(ts_key) or "").strip()
            if not ts:
                skipped += 1
                log.debug("Skipping row %d of %s: empty timestamp", line_no, path)
                continue

            candles.append(
                Candle(
                    timestamp=ts,
                    open=fnum(row.get(o_key)),
                    high=fnum(row.get(h_key)),
                    low=fnum(row.get(l_key)),
                    close=fnum(row.get(c_key)),
                    volume=fnum(row.get(v_key)) if v_key else 0.0,
                )
            )

    log.info("Loaded %d candles from %s (%d skipped)", len(candles), path, skipped)
    return candles
