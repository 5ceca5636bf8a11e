"""Candlestick pattern analyzer.

Recognizes classic candle shapes on the last three klines. Multi-candle
patterns take priority over single-candle ones; the first match wins.

Multi-candle (c1, c2, c3 oldest to newest):
- Bullish / bearish engulfing        confidence 0.75
- Three white soldiers / black crows confidence 0.8
- Morning / evening star             confidence 0.7

Single-candle (latest):
- Marubozu                           confidence 0.7
- Hammer / shooting star             confidence 0.6
- Dragonfly / gravestone doji        confidence 0.4
- Reversal against previous candle   confidence 0.4
"""

import logging
from typing import Sequence

from signal_engine.models import Direction, Kline, Signal
from signal_engine.strategy.registry import register_strategy

logger = logging.getLogger(__name__)

CANDLESTICK_STRATEGY_NAME = "candlestick_pattern"

ENGULFING_CONFIDENCE = 0.75
THREE_CANDLES_CONFIDENCE = 0.8
STAR_CONFIDENCE = 0.7
MARUBOZU_CONFIDENCE = 0.7
HAMMER_CONFIDENCE = 0.6
DOJI_CONFIDENCE = 0.4
REVERSAL_CONFIDENCE = 0.4

SMALL_BODY_RATIO = 0.3
MARUBOZU_RATIO = 0.85
DOJI_RATIO = 0.15
REVERSAL_BODY_RATIO = 0.5
HAMMER_WICK_MULT = 2.5
HAMMER_OPPOSITE_WICK_MULT = 0.5
DOJI_WICK_RATIO = 0.6


def _is_small_body(kline: Kline) -> bool:
    if kline.range_size == 0:
        return True
    return kline.body_ratio < SMALL_BODY_RATIO


def _midpoint(kline: Kline) -> float:
    return (kline.open + kline.close) / 2


def _match(pattern: str, direction: Direction, weight: float, confidence: float) -> tuple:
    return pattern, Signal(direction=direction, weight=weight, confidence=confidence)


def match_multi_candle(c1: Kline, c2: Kline, c3: Kline) -> tuple[str, Signal] | None:
    """Match three-candle patterns.

    Returns:
        (pattern name, Signal) or None if nothing matched.
    """
    if (
        c2.is_bearish and c3.is_bullish
        and c3.open <= c2.close and c3.close >= c2.open
    ):
        return _match("bullish_engulfing", Direction.LONG, c3.body_size, ENGULFING_CONFIDENCE)

    if (
        c2.is_bullish and c3.is_bearish
        and c3.open >= c2.close and c3.close <= c2.open
    ):
        return _match("bearish_engulfing", Direction.SHORT, c3.body_size, ENGULFING_CONFIDENCE)

    if (
        c1.is_bullish and c2.is_bullish and c3.is_bullish
        and c1.close < c2.close < c3.close
    ):
        return _match(
            "three_white_soldiers", Direction.LONG,
            c3.close - c1.open, THREE_CANDLES_CONFIDENCE,
        )

    if (
        c1.is_bearish and c2.is_bearish and c3.is_bearish
        and c1.close > c2.close > c3.close
    ):
        return _match(
            "three_black_crows", Direction.SHORT,
            c1.open - c3.close, THREE_CANDLES_CONFIDENCE,
        )

    if (
        c1.is_bearish and _is_small_body(c2) and c3.is_bullish
        and c3.close > _midpoint(c1)
    ):
        return _match("morning_star", Direction.LONG, c3.body_size, STAR_CONFIDENCE)

    if (
        c1.is_bullish and _is_small_body(c2) and c3.is_bearish
        and c3.close < _midpoint(c1)
    ):
        return _match("evening_star", Direction.SHORT, c3.body_size, STAR_CONFIDENCE)

    return None


def match_single_candle(latest: Kline, previous: Kline) -> tuple[str, Signal] | None:
    """Match single-candle patterns on ``latest`` (range must be non-zero).

    Returns:
        (pattern name, Signal) or None if nothing actionable matched.
    """
    body = latest.body_size
    upper = latest.upper_wick
    lower = latest.lower_wick
    full_range = latest.range_size
    ratio = latest.body_ratio

    if ratio > MARUBOZU_RATIO:
        direction = Direction.LONG if latest.is_bullish else Direction.SHORT
        return _match("marubozu", direction, body, MARUBOZU_CONFIDENCE)

    if lower > body * HAMMER_WICK_MULT and upper < body * HAMMER_OPPOSITE_WICK_MULT:
        return _match("hammer", Direction.LONG, lower, HAMMER_CONFIDENCE)

    if upper > body * HAMMER_WICK_MULT and lower < body * HAMMER_OPPOSITE_WICK_MULT:
        return _match("shooting_star", Direction.SHORT, upper, HAMMER_CONFIDENCE)

    if ratio < DOJI_RATIO:
        if lower > full_range * DOJI_WICK_RATIO:
            return _match("dragonfly_doji", Direction.LONG, lower, DOJI_CONFIDENCE)
        if upper > full_range * DOJI_WICK_RATIO:
            return _match("gravestone_doji", Direction.SHORT, upper, DOJI_CONFIDENCE)
        # Standard doji: indecision
        return None

    if ratio > REVERSAL_BODY_RATIO:
        if latest.is_bullish and previous.is_bearish:
            return _match("bullish_reversal", Direction.LONG, body, REVERSAL_CONFIDENCE)
        if latest.is_bearish and previous.is_bullish:
            return _match("bearish_reversal", Direction.SHORT, body, REVERSAL_CONFIDENCE)

    return None


@register_strategy(CANDLESTICK_STRATEGY_NAME)
class CandlestickPatternStrategy:
    """Candlestick shape recognizer over the last three klines."""

    config_model = None

    @property
    def name(self) -> str:
        return CANDLESTICK_STRATEGY_NAME

    @property
    def version(self) -> str:
        return "1.0.0"

    @property
    def min_klines(self) -> int:
        return 3

    def evaluate(self, klines: Sequence[Kline]) -> Signal:
        if len(klines) < self.min_klines:
            return Signal.neutral()

        c1, c2, c3 = klines[-3], klines[-2], klines[-1]
        if c3.range_size == 0:
            return Signal.neutral()

        match = match_multi_candle(c1, c2, c3) or match_single_candle(c3, c2)
        if match is None:
            return Signal.neutral()

        pattern, signal = match
        logger.debug("Candlestick pattern: %s -> %s", pattern, signal.direction.name)
        return signal
