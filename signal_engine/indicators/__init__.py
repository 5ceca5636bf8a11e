"""Technical indicators (pure math, no I/O)."""

from signal_engine.indicators.indicators import (
    bollinger_bands,
    mean,
    pct_changes,
    population_std,
    window_ema,
)

__all__ = [
    "bollinger_bands",
    "mean",
    "pct_changes",
    "population_std",
    "window_ema",
]
