"""Strategy protocol defining the interface all analyzers must implement."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from signal_engine.models.kline import Kline
from signal_engine.models.signal import Signal


@runtime_checkable
class Strategy(Protocol):
    """Protocol that all signal analyzers must implement.

    Analyzers map a chronological kline history (oldest first) to a Signal:
    - they never mutate the input and keep no state between calls
    - the same input always yields the same Signal
    - insufficient or degenerate input yields ``Signal.neutral()``, never
      an exception
    """

    @property
    def name(self) -> str:
        """Unique analyzer identifier (e.g., 'bollinger_reversion')."""
        ...

    @property
    def version(self) -> str:
        """Analyzer version string (e.g., '1.0.0')."""
        ...

    @property
    def min_klines(self) -> int:
        """Minimum history length below which the analyzer returns neutral."""
        ...

    def evaluate(self, klines: Sequence[Kline]) -> Signal:
        """Evaluate the kline history and return a directional opinion.

        Args:
            klines: Closed klines of one instrument, oldest first.

        Returns:
            Signal for the latest kline.
        """
        ...
