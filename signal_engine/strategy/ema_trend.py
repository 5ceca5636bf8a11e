"""EMA trend analyzer.

Simple trend-following comparison:
- Fast EMA(9) above Slow EMA(21) -> LONG
- otherwise -> SHORT (equal EMAs also resolve to SHORT)

Each EMA is seeded with the close at the start of its own window.
"""

import logging
from typing import Sequence

from pydantic import BaseModel, Field, model_validator

from signal_engine.indicators import window_ema
from signal_engine.models import Direction, Kline, Signal
from signal_engine.strategy.registry import register_strategy

logger = logging.getLogger(__name__)

EMA_TREND_STRATEGY_NAME = "ema_trend"


class EmaTrendConfig(BaseModel):
    """Configuration for the EMA trend analyzer."""

    fast_period: int = Field(default=9, ge=1)
    slow_period: int = Field(default=21, ge=2)

    @model_validator(mode="after")
    def _fast_below_slow(self) -> "EmaTrendConfig":
        if self.fast_period >= self.slow_period:
            raise ValueError(
                f"fast_period ({self.fast_period}) must be below "
                f"slow_period ({self.slow_period})"
            )
        return self


@register_strategy(EMA_TREND_STRATEGY_NAME)
class EmaTrendStrategy:
    """Fast/slow EMA trend analyzer.

    Weight is the absolute EMA spread; confidence is the spread relative to
    the slow EMA, capped at 1.
    """

    config_model = EmaTrendConfig

    def __init__(self, config: EmaTrendConfig | None = None):
        self.config = config or EmaTrendConfig()

    @property
    def name(self) -> str:
        return EMA_TREND_STRATEGY_NAME

    @property
    def version(self) -> str:
        return "1.0.0"

    @property
    def min_klines(self) -> int:
        return self.config.slow_period + 1

    def evaluate(self, klines: Sequence[Kline]) -> Signal:
        if len(klines) < self.min_klines:
            return Signal.neutral()

        closes = [k.close for k in klines[-self.config.slow_period :]]
        fast = window_ema(closes, self.config.fast_period)
        slow = window_ema(closes, self.config.slow_period)
        if slow <= 0:
            return Signal.neutral()

        diff = fast - slow
        direction = Direction.LONG if diff > 0 else Direction.SHORT
        logger.debug(
            "EMA trend: fast=%.8g slow=%.8g -> %s", fast, slow, direction.name
        )
        return Signal(
            direction=direction,
            weight=abs(diff),
            confidence=min(1.0, abs(diff) / slow),
        )
