"""Kline and signal models."""

from signal_engine.models.kline import Kline, KlineBuffer
from signal_engine.models.signal import Direction, Signal
from signal_engine.models.converters import (
    datetime_to_ms,
    kline_from_rest_row,
    kline_from_ws_payload,
    kline_to_rest_row,
    ms_to_datetime,
)

__all__ = [
    "Kline",
    "KlineBuffer",
    "Direction",
    "Signal",
    "datetime_to_ms",
    "kline_from_rest_row",
    "kline_from_ws_payload",
    "kline_to_rest_row",
    "ms_to_datetime",
]
