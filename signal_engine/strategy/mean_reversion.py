"""Mean-reversion z-score analyzer.

Prices tend to revert to their mean, so extreme deviations are faded:
- z-score above +threshold -> SHORT
- z-score below -threshold -> LONG
"""

import logging
import math
from typing import Sequence

from pydantic import BaseModel, Field

from signal_engine.indicators import mean, population_std
from signal_engine.models import Direction, Kline, Signal
from signal_engine.strategy.registry import register_strategy

logger = logging.getLogger(__name__)

MEAN_REVERSION_STRATEGY_NAME = "mean_reversion"


class MeanReversionConfig(BaseModel):
    """Configuration for the mean-reversion analyzer."""

    lookback_period: int = Field(default=20, ge=2)
    deviation_threshold: float = Field(default=1.5, gt=0)


@register_strategy(MEAN_REVERSION_STRATEGY_NAME)
class MeanReversionStrategy:
    """Z-score reversion analyzer."""

    config_model = MeanReversionConfig

    def __init__(self, config: MeanReversionConfig | None = None):
        self.config = config or MeanReversionConfig()

    @property
    def name(self) -> str:
        return MEAN_REVERSION_STRATEGY_NAME

    @property
    def version(self) -> str:
        return "1.0.0"

    @property
    def min_klines(self) -> int:
        return self.config.lookback_period

    def evaluate(self, klines: Sequence[Kline]) -> Signal:
        if len(klines) < self.min_klines:
            return Signal.neutral()

        closes = [k.close for k in klines[-self.config.lookback_period :]]
        avg = mean(closes)
        std = population_std(closes)
        if std == 0 or not math.isfinite(avg) or not math.isfinite(std):
            return Signal.neutral()

        current = closes[-1]
        z_score = (current - avg) / std
        if not math.isfinite(z_score):
            return Signal.neutral()
        threshold = self.config.deviation_threshold
        if abs(z_score) < threshold:
            return Signal.neutral()

        # Above the mean -> expect a move down, below -> expect a move up
        direction = Direction.SHORT if z_score > 0 else Direction.LONG
        logger.debug("Mean reversion: z=%.4f -> %s", z_score, direction.name)
        return Signal(
            direction=direction,
            weight=abs(current - avg),
            confidence=min(1.0, abs(z_score) / (threshold * 2)),
        )
