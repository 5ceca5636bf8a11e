"""K-line (candlestick) data models."""

from datetime import datetime
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Kline(BaseModel):
    """K-line (candlestick) data model.

    One completed trading interval. Derived metrics are properties and are
    never stored.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    start_time: datetime
    open: float = Field(gt=0)
    close: float = Field(gt=0)
    high: float = Field(gt=0)
    low: float = Field(gt=0)
    base_volume: float = Field(default=0.0, ge=0)
    quote_volume: float = Field(default=0.0, ge=0)
    taker_buy_base_volume: float = Field(default=0.0, ge=0)
    taker_buy_quote_volume: float = Field(default=0.0, ge=0)
    number_of_trades: int = Field(default=0, ge=0)

    # Filled by the exchange converters, informational only
    symbol: str = ""
    interval: str = ""

    @model_validator(mode="after")
    def _check_shape(self) -> "Kline":
        if self.high < max(self.open, self.close):
            raise ValueError(
                f"high {self.high} is below max(open, close) "
                f"{max(self.open, self.close)}"
            )
        if self.low > min(self.open, self.close):
            raise ValueError(
                f"low {self.low} is above min(open, close) "
                f"{min(self.open, self.close)}"
            )
        if self.taker_buy_base_volume > self.base_volume:
            raise ValueError(
                f"taker buy volume {self.taker_buy_base_volume} exceeds "
                f"base volume {self.base_volume}"
            )
        return self

    @property
    def is_bullish(self) -> bool:
        """Check if this is a bullish (green) candle."""
        return self.close > self.open

    @property
    def is_bearish(self) -> bool:
        """Check if this is a bearish (red) candle."""
        return self.close < self.open

    @property
    def is_doji(self) -> bool:
        """Check if the candle closed exactly where it opened."""
        return self.close == self.open

    @property
    def body_size(self) -> float:
        """Get the absolute size of the candle body."""
        return abs(self.close - self.open)

    @property
    def upper_wick(self) -> float:
        """Distance from the high down to the top of the body."""
        return self.high - max(self.open, self.close)

    @property
    def lower_wick(self) -> float:
        """Distance from the bottom of the body down to the low."""
        return min(self.open, self.close) - self.low

    @property
    def range_size(self) -> float:
        """Get the full range (high - low) of the candle."""
        return self.high - self.low

    @property
    def body_ratio(self) -> float:
        """Body size as a fraction of the range (0 for a zero-range candle)."""
        if self.range_size == 0:
            return 0.0
        return self.body_size / self.range_size

    @property
    def price_change(self) -> float:
        return self.close - self.open

    @property
    def price_change_percent(self) -> float:
        """Open-to-close change in percent."""
        if self.open == 0:
            return 0.0
        return (self.close - self.open) / self.open * 100.0

    @property
    def typical_price(self) -> float:
        """(high + low + close) / 3."""
        return (self.high + self.low + self.close) / 3.0

    @property
    def weighted_close(self) -> float:
        """(high + low + 2 * close) / 4."""
        return (self.high + self.low + self.close + self.close) / 4.0

    @property
    def vwap(self) -> float:
        """Approximate VWAP of the interval (quote volume / base volume)."""
        if self.base_volume == 0:
            return 0.0
        return self.quote_volume / self.base_volume

    @property
    def buy_pressure(self) -> float:
        """Fraction of base volume bought by takers (0 when there is no volume)."""
        if self.base_volume == 0:
            return 0.0
        return self.taker_buy_base_volume / self.base_volume

    @property
    def sell_pressure(self) -> float:
        """Fraction of base volume sold by takers."""
        return 1.0 - self.buy_pressure


class KlineBuffer(BaseModel):
    """Buffer for storing recent K-lines of one instrument.

    Kept by the upstream data source; analyzers receive a ``snapshot()``.
    """

    symbol: str = ""
    interval: str = ""
    klines: list[Kline] = Field(default_factory=list)
    max_size: int = Field(default=200, gt=0)

    def add(self, kline: Kline) -> None:
        """Add a K-line to the buffer, maintaining max size."""
        if self.klines and kline.start_time <= self.klines[-1].start_time:
            # Update existing kline (same start time)
            if kline.start_time == self.klines[-1].start_time:
                self.klines[-1] = kline
            return

        self.klines.append(kline)
        if len(self.klines) > self.max_size:
            self.klines = self.klines[-self.max_size :]

    def extend(self, klines: Iterable[Kline]) -> None:
        """Add K-lines in order, applying the same rules as ``add``."""
        for kline in klines:
            self.add(kline)

    def snapshot(self) -> tuple[Kline, ...]:
        """Immutable view of the buffered klines, oldest first."""
        return tuple(self.klines)

    def closes(self) -> list[float]:
        """Get list of close prices."""
        return [k.close for k in self.klines]

    def volumes(self) -> list[float]:
        """Get list of base volumes."""
        return [k.base_volume for k in self.klines]

    def __len__(self) -> int:
        return len(self.klines)
