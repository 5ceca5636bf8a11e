"""Volume breakout analyzer.

A volume spike on a bar that closes near an extreme:
- Close in the top third -> LONG
- Close in the bottom third -> SHORT
"""

import logging
from typing import Sequence

from pydantic import BaseModel, Field

from signal_engine.indicators import mean
from signal_engine.models import Direction, Kline, Signal
from signal_engine.strategy.registry import register_strategy

logger = logging.getLogger(__name__)

VOLUME_BREAKOUT_STRATEGY_NAME = "volume_breakout"


class VolumeBreakoutConfig(BaseModel):
    """Configuration for the volume breakout analyzer."""

    min_klines: int = Field(default=15, ge=2)
    volume_multiplier: float = Field(default=1.8, gt=0)
    # Position of the close within the bar range (0 = low, 1 = high)
    upper_zone: float = Field(default=0.66, ge=0, le=1)
    lower_zone: float = Field(default=0.33, ge=0, le=1)


@register_strategy(VOLUME_BREAKOUT_STRATEGY_NAME)
class VolumeBreakoutStrategy:
    """Volume spike breakout analyzer.

    Weight is the latest bar range; confidence is the latest volume over
    twice the average volume of the preceding bars, capped at 1.
    """

    config_model = VolumeBreakoutConfig

    def __init__(self, config: VolumeBreakoutConfig | None = None):
        self.config = config or VolumeBreakoutConfig()

    @property
    def name(self) -> str:
        return VOLUME_BREAKOUT_STRATEGY_NAME

    @property
    def version(self) -> str:
        return "1.0.0"

    @property
    def min_klines(self) -> int:
        return self.config.min_klines

    def evaluate(self, klines: Sequence[Kline]) -> Signal:
        if len(klines) < self.min_klines:
            return Signal.neutral()

        avg_volume = mean([k.base_volume for k in klines[:-1]])
        last = klines[-1]
        bar_range = last.range_size
        if avg_volume == 0 or bar_range == 0:
            return Signal.neutral()

        volume = last.base_volume
        close_position = (last.close - last.low) / bar_range
        if volume <= avg_volume * self.config.volume_multiplier:
            return Signal.neutral()

        if close_position > self.config.upper_zone:
            direction = Direction.LONG
        elif close_position < self.config.lower_zone:
            direction = Direction.SHORT
        else:
            return Signal.neutral()

        logger.debug(
            "Volume breakout: volume=%.8g avg=%.8g pos=%.3f -> %s",
            volume, avg_volume, close_position, direction.name,
        )
        return Signal(
            direction=direction,
            weight=bar_range,
            confidence=min(1.0, volume / (avg_volume * 2)),
        )
