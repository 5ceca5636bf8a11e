"""Signal analyzers.

Public API:
- Strategy: Protocol that all analyzers implement
- register_strategy: Decorator to register an analyzer class
- create_strategy: Factory function to instantiate analyzers by name
- create_configured_strategy: Factory building the analyzer config from params
- list_strategies: Discover all registered analyzers
- get_strategy_class: Get analyzer class by name without instantiating

Importing this package auto-registers all built-in analyzers.
"""

from signal_engine.strategy.protocol import Strategy
from signal_engine.strategy.registry import (
    register_strategy,
    create_strategy,
    create_configured_strategy,
    list_strategies,
    get_strategy_class,
)

# Import built-in analyzers to trigger auto-registration
from signal_engine.strategy.bollinger import BollingerConfig, BollingerReversionStrategy
from signal_engine.strategy.candlestick import CandlestickPatternStrategy
from signal_engine.strategy.ema_trend import EmaTrendConfig, EmaTrendStrategy
from signal_engine.strategy.mean_reversion import MeanReversionConfig, MeanReversionStrategy
from signal_engine.strategy.momentum import MomentumConfig, PriceMomentumStrategy
from signal_engine.strategy.volume_breakout import VolumeBreakoutConfig, VolumeBreakoutStrategy
from signal_engine.strategy.volume_pressure import VolumePressureConfig, VolumePressureStrategy

__all__ = [
    "Strategy",
    "register_strategy",
    "create_strategy",
    "create_configured_strategy",
    "list_strategies",
    "get_strategy_class",
    "BollingerConfig",
    "BollingerReversionStrategy",
    "CandlestickPatternStrategy",
    "EmaTrendConfig",
    "EmaTrendStrategy",
    "MeanReversionConfig",
    "MeanReversionStrategy",
    "MomentumConfig",
    "PriceMomentumStrategy",
    "VolumeBreakoutConfig",
    "VolumeBreakoutStrategy",
    "VolumePressureConfig",
    "VolumePressureStrategy",
]
