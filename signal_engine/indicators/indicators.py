"""Technical indicators for signal generation.

Pure NumPy/Python math over sequences of floats. Window helpers operate on
the last ``period`` values of the input; callers check history length first.
"""

from typing import Sequence

import numpy as np


def _tail(values: Sequence[float], period: int) -> np.ndarray:
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")
    if len(values) < period:
        raise ValueError(f"need {period} values, got {len(values)}")
    return np.asarray(values[len(values) - period :], dtype=np.float64)


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean (0.0 for an empty sequence)."""
    if len(values) == 0:
        return 0.0
    # Sums of extreme prices may overflow to inf; callers check isfinite
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.mean(np.asarray(values, dtype=np.float64)))


def population_std(values: Sequence[float]) -> float:
    """Population standard deviation (divides by N, not N-1).

    Returns exactly 0.0 when all values are equal, so callers can rely on a
    zero check instead of rounding noise from the mean.
    """
    if len(values) == 0:
        return 0.0
    arr = np.asarray(values, dtype=np.float64)
    if arr.max() == arr.min():
        return 0.0
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.std(arr, ddof=0))


def window_ema(values: Sequence[float], period: int) -> float:
    """EMA of the last ``period`` values.

    Seeded with the first value of the window, then blended forward with
    ``k = 2 / (period + 1)``.
    """
    window = _tail(values, period)
    multiplier = 2.0 / (period + 1)

    result = float(window[0])
    for price in window[1:]:
        result = float(price) * multiplier + result * (1 - multiplier)
    return result


def bollinger_bands(
    values: Sequence[float],
    period: int = 20,
    num_std: float = 2.0,
) -> tuple[float, float, float, float]:
    """Bollinger bands over the last ``period`` values.

    Returns:
        (lower, middle, upper, std) with population std-dev.
    """
    window = _tail(values, period)
    middle = mean(window)
    std = population_std(window)
    return middle - num_std * std, middle, middle + num_std * std, std


def pct_changes(values: Sequence[float]) -> list[float]:
    """Consecutive percentage changes; a zero base yields a 0.0 change."""
    changes = []
    for prev, curr in zip(values, values[1:]):
        if prev == 0:
            changes.append(0.0)
        else:
            changes.append((curr - prev) / prev * 100.0)
    return changes
