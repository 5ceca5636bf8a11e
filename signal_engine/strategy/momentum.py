"""Simple price momentum analyzer.

Averages the recent close-to-close percentage changes:
- Average change above +0.1% -> LONG
- Average change below -0.1% -> SHORT

Confidence is boosted when the individual moves mostly agree.
"""

import logging
import math
from typing import Sequence

from pydantic import BaseModel, Field

from signal_engine.indicators import pct_changes
from signal_engine.models import Direction, Kline, Signal
from signal_engine.strategy.registry import register_strategy

logger = logging.getLogger(__name__)

MOMENTUM_STRATEGY_NAME = "price_momentum"

# Average change (in percent) that maps to full base confidence
FULL_CONFIDENCE_CHANGE = 3.0
CONSISTENCY_BOOST = 0.2


class MomentumConfig(BaseModel):
    """Configuration for the price momentum analyzer."""

    lookback_period: int = Field(default=5, ge=2)
    # Percent; also the minimum size of a counted up/down move
    change_threshold: float = Field(default=0.1, ge=0)


@register_strategy(MOMENTUM_STRATEGY_NAME)
class PriceMomentumStrategy:
    """Average percentage change over the last ``lookback_period`` closes."""

    config_model = MomentumConfig

    def __init__(self, config: MomentumConfig | None = None):
        self.config = config or MomentumConfig()

    @property
    def name(self) -> str:
        return MOMENTUM_STRATEGY_NAME

    @property
    def version(self) -> str:
        return "1.0.0"

    @property
    def min_klines(self) -> int:
        return self.config.lookback_period + 1

    def evaluate(self, klines: Sequence[Kline]) -> Signal:
        if len(klines) < self.min_klines:
            return Signal.neutral()

        periods = self.config.lookback_period
        threshold = self.config.change_threshold
        changes = pct_changes([k.close for k in klines[-periods:]])

        positive = sum(1 for c in changes if c > threshold)
        negative = sum(1 for c in changes if c < -threshold)
        avg_change = sum(changes) / (periods - 1)
        # A move off a near-zero price can overflow the percentage
        if not math.isfinite(avg_change):
            return Signal.neutral()

        if abs(avg_change) < threshold:
            return Signal.neutral()

        confidence = min(1.0, abs(avg_change) / FULL_CONFIDENCE_CHANGE)
        if positive > negative * 2 and avg_change > 0:
            confidence = min(1.0, confidence + CONSISTENCY_BOOST)
        elif negative > positive * 2 and avg_change < 0:
            confidence = min(1.0, confidence + CONSISTENCY_BOOST)

        direction = Direction.LONG if avg_change > 0 else Direction.SHORT
        logger.debug(
            "Momentum: avg=%.4f%% up=%d down=%d -> %s",
            avg_change, positive, negative, direction.name,
        )
        return Signal(
            direction=direction,
            weight=abs(avg_change),
            confidence=confidence,
        )
