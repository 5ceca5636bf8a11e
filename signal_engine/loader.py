"""Kline file loading for offline evaluation.

Supported formats:
- JSON array of Binance REST kline rows
- JSON array of Binance WebSocket kline events (or their ``"k"`` objects)
- JSON array of objects keyed by Kline field names
- CSV with a header row of Kline field names
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Any

import orjson

from signal_engine.models import Kline, kline_from_rest_row, kline_from_ws_payload

logger = logging.getLogger(__name__)


def _kline_from_json_item(item: Any, index: int) -> Kline:
    if isinstance(item, list):
        return kline_from_rest_row(item)
    if isinstance(item, dict):
        if "k" in item or "t" in item:
            return kline_from_ws_payload(item)
        return Kline.model_validate(item)
    raise ValueError(f"Item {index}: expected array or object, got {type(item).__name__}")


def load_json_klines(path: Path) -> list[Kline]:
    """Read klines from a JSON array file."""
    data = orjson.loads(path.read_bytes())
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of klines")
    return [_kline_from_json_item(item, i) for i, item in enumerate(data)]


def load_csv_klines(path: Path) -> list[Kline]:
    """Read klines from a CSV file with a header row."""
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        # Empty cells fall back to model defaults
        return [
            Kline.model_validate({k: v for k, v in row.items() if v not in (None, "")})
            for row in reader
        ]


def load_klines(path: str | Path) -> list[Kline]:
    """Load klines from a .json or .csv file, sorted oldest first.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not a valid kline list.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        klines = load_json_klines(path)
    elif suffix == ".csv":
        klines = load_csv_klines(path)
    else:
        raise ValueError(f"Unsupported kline file type: {path.suffix or '(none)'}")

    klines.sort(key=lambda k: k.start_time)
    logger.info("Loaded %d klines from %s", len(klines), path)
    return klines
