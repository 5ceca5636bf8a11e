"""Technical signal generation engine.

Stateless analyzers that map a chronological kline history of one
instrument to a Signal (direction, weight, confidence). The core has no
I/O; loading, configuration and logging live at the edges.
"""

from signal_engine.models import Direction, Kline, KlineBuffer, Signal
from signal_engine.strategy import (
    Strategy,
    create_configured_strategy,
    create_strategy,
    list_strategies,
)

__all__ = [
    "Direction",
    "Kline",
    "KlineBuffer",
    "Signal",
    "Strategy",
    "create_configured_strategy",
    "create_strategy",
    "list_strategies",
]
