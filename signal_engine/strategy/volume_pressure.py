"""Volume-pressure analyzer.

Reads taker buy/sell pressure of the latest kline:
- High volume with buy pressure above threshold -> LONG
- High volume with sell pressure above threshold -> SHORT
- Normal volume with moderate one-sided pressure -> weak LONG/SHORT
"""

import logging
from typing import Sequence

from pydantic import BaseModel, Field

from signal_engine.indicators import mean
from signal_engine.models import Direction, Kline, Signal
from signal_engine.strategy.registry import register_strategy

logger = logging.getLogger(__name__)

VOLUME_PRESSURE_STRATEGY_NAME = "volume_pressure"

WEAK_SIGNAL_CONFIDENCE = 0.3


class VolumePressureConfig(BaseModel):
    """Configuration for the volume-pressure analyzer."""

    min_klines: int = Field(default=10, ge=2)
    volume_threshold: float = Field(default=1.5, gt=0)
    pressure_threshold: float = Field(default=0.6, ge=0.5, le=1)
    weak_pressure_threshold: float = Field(default=0.58, ge=0.5, le=1)


@register_strategy(VOLUME_PRESSURE_STRATEGY_NAME)
class VolumePressureStrategy:
    """Buy/sell pressure confirmed (or not) by volume.

    The average volume is taken over the whole history except the latest
    kline. Strong signals weigh the latest volume; weak ones weigh the
    pressure excess over 0.5.
    """

    config_model = VolumePressureConfig

    def __init__(self, config: VolumePressureConfig | None = None):
        self.config = config or VolumePressureConfig()

    @property
    def name(self) -> str:
        return VOLUME_PRESSURE_STRATEGY_NAME

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
        latest = klines[-1]
        current_volume = latest.base_volume
        if avg_volume == 0:
            return Signal.neutral()

        buy_pressure = latest.buy_pressure
        sell_pressure = latest.sell_pressure

        if current_volume <= avg_volume * self.config.volume_threshold:
            weak = self.config.weak_pressure_threshold
            if buy_pressure > weak:
                return Signal(
                    direction=Direction.LONG,
                    weight=buy_pressure - 0.5,
                    confidence=WEAK_SIGNAL_CONFIDENCE,
                )
            if sell_pressure > weak:
                return Signal(
                    direction=Direction.SHORT,
                    weight=sell_pressure - 0.5,
                    confidence=WEAK_SIGNAL_CONFIDENCE,
                )
            return Signal.neutral()

        volume_ratio = current_volume / avg_volume
        if buy_pressure > self.config.pressure_threshold:
            direction, pressure = Direction.LONG, buy_pressure
        elif sell_pressure > self.config.pressure_threshold:
            direction, pressure = Direction.SHORT, sell_pressure
        else:
            return Signal.neutral()

        logger.debug(
            "Volume pressure: ratio=%.3f pressure=%.3f -> %s",
            volume_ratio, pressure, direction.name,
        )
        return Signal(
            direction=direction,
            weight=current_volume,
            confidence=min(1.0, (pressure - 0.5) * 2 * (volume_ratio / 2)),
        )
