"""Bollinger-band reversion analyzer.

Fades closes outside the bands:
- Close above upper band -> SHORT
- Close below lower band -> LONG

Bands are SMA(20) +/- 2 population standard deviations of the closes.
"""

import logging
import math
from typing import Sequence

from pydantic import BaseModel, Field

from signal_engine.indicators import bollinger_bands
from signal_engine.models import Direction, Kline, Signal
from signal_engine.strategy.registry import register_strategy

logger = logging.getLogger(__name__)

BOLLINGER_STRATEGY_NAME = "bollinger_reversion"


class BollingerConfig(BaseModel):
    """Configuration for the Bollinger reversion analyzer."""

    period: int = Field(default=20, ge=2)
    num_std: float = Field(default=2.0, gt=0)


@register_strategy(BOLLINGER_STRATEGY_NAME)
class BollingerReversionStrategy:
    """Mean reversion on Bollinger band breaches.

    Weight is the price distance beyond the breached band; confidence is
    that distance relative to the band half-width, capped at 1.
    """

    config_model = BollingerConfig

    def __init__(self, config: BollingerConfig | None = None):
        self.config = config or BollingerConfig()

    @property
    def name(self) -> str:
        return BOLLINGER_STRATEGY_NAME

    @property
    def version(self) -> str:
        return "1.0.0"

    @property
    def min_klines(self) -> int:
        return self.config.period

    def evaluate(self, klines: Sequence[Kline]) -> Signal:
        if len(klines) < self.min_klines:
            return Signal.neutral()

        closes = [k.close for k in klines[-self.config.period :]]
        lower, middle, upper, std = bollinger_bands(
            closes, self.config.period, self.config.num_std
        )
        # Flat window: bands collapse onto the mean
        if std == 0 or not math.isfinite(std) or not math.isfinite(middle):
            return Signal.neutral()

        half_width = self.config.num_std * std
        last = closes[-1]

        if last > upper:
            distance = last - upper
            direction = Direction.SHORT
        elif last < lower:
            distance = lower - last
            direction = Direction.LONG
        else:
            return Signal.neutral()

        logger.debug(
            "Bollinger breach: close=%.8g middle=%.8g std=%.8g -> %s",
            last, middle, std, direction.name,
        )
        return Signal(
            direction=direction,
            weight=distance,
            confidence=min(1.0, distance / half_width),
        )
