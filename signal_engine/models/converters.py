"""Converters from exchange kline payloads to Kline models.

Binance sends prices and volumes as strings and timestamps as epoch
milliseconds. Two shapes are supported:

- WebSocket ``kline`` events (``{"e": "kline", "s": ..., "k": {...}}``) or
  their inner ``"k"`` object
- REST ``/api/v3/klines`` rows (12-element arrays)
"""

from datetime import datetime, timezone
from typing import Any, Mapping, Sequence

from pydantic import ValidationError

from signal_engine.models.kline import Kline

# REST row layout
_REST_OPEN_TIME = 0
_REST_OPEN = 1
_REST_HIGH = 2
_REST_LOW = 3
_REST_CLOSE = 4
_REST_VOLUME = 5
_REST_QUOTE_VOLUME = 7
_REST_TRADES = 8
_REST_TAKER_BUY_BASE = 9
_REST_TAKER_BUY_QUOTE = 10
_REST_MIN_LENGTH = 11


# =============================================================================
# Timestamp conversion helpers
# =============================================================================

def ms_to_datetime(ms: int | float | str) -> datetime:
    """Convert epoch milliseconds to UTC datetime."""
    return datetime.fromtimestamp(int(ms) / 1000, tz=timezone.utc)


def datetime_to_ms(dt: datetime) -> int:
    """Convert datetime to epoch milliseconds."""
    return int(dt.timestamp() * 1000)


# =============================================================================
# Kline conversions
# =============================================================================

def kline_from_ws_payload(payload: Mapping[str, Any]) -> Kline:
    """Build a Kline from a Binance WebSocket kline event.

    Args:
        payload: Full event (with ``"k"``) or the inner kline object.

    Returns:
        Kline model

    Raises:
        ValueError: If required fields are missing or invalid.
    """
    data = payload.get("k", payload)
    symbol = data.get("s") or payload.get("s") or ""
    try:
        return Kline(
            start_time=ms_to_datetime(data["t"]),
            open=data["o"],
            close=data["c"],
            high=data["h"],
            low=data["l"],
            base_volume=data.get("v", 0),
            quote_volume=data.get("q", 0),
            taker_buy_base_volume=data.get("V", 0),
            taker_buy_quote_volume=data.get("Q", 0),
            number_of_trades=data.get("n", 0),
            symbol=symbol,
            interval=data.get("i", ""),
        )
    except KeyError as e:
        raise ValueError(f"Kline payload missing field {e}") from e
    except ValidationError as e:
        raise ValueError(f"Invalid kline payload: {e}") from e


def kline_from_rest_row(
    row: Sequence[Any],
    symbol: str = "",
    interval: str = "",
) -> Kline:
    """Build a Kline from a Binance REST klines row.

    Args:
        row: ``[open_time, open, high, low, close, volume, close_time,
            quote_volume, trades, taker_buy_base, taker_buy_quote, ignore]``
        symbol: Optional symbol to tag the kline with.
        interval: Optional interval to tag the kline with.

    Returns:
        Kline model

    Raises:
        ValueError: If the row is too short or holds invalid values.
    """
    if len(row) < _REST_MIN_LENGTH:
        raise ValueError(
            f"Kline row has {len(row)} fields, expected at least {_REST_MIN_LENGTH}"
        )
    try:
        return Kline(
            start_time=ms_to_datetime(row[_REST_OPEN_TIME]),
            open=row[_REST_OPEN],
            close=row[_REST_CLOSE],
            high=row[_REST_HIGH],
            low=row[_REST_LOW],
            base_volume=row[_REST_VOLUME],
            quote_volume=row[_REST_QUOTE_VOLUME],
            taker_buy_base_volume=row[_REST_TAKER_BUY_BASE],
            taker_buy_quote_volume=row[_REST_TAKER_BUY_QUOTE],
            number_of_trades=row[_REST_TRADES],
            symbol=symbol,
            interval=interval,
        )
    except ValidationError as e:
        raise ValueError(f"Invalid kline row: {e}") from e


def kline_to_rest_row(kline: Kline) -> list[Any]:
    """Inverse of ``kline_from_rest_row`` (close time and ignore left as 0)."""
    return [
        datetime_to_ms(kline.start_time),
        str(kline.open),
        str(kline.high),
        str(kline.low),
        str(kline.close),
        str(kline.base_volume),
        0,
        str(kline.quote_volume),
        kline.number_of_trades,
        str(kline.taker_buy_base_volume),
        str(kline.taker_buy_quote_volume),
        "0",
    ]
