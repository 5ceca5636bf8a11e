"""Tests for technical indicators."""

import pytest

from signal_engine.indicators import (
    bollinger_bands,
    mean,
    pct_changes,
    population_std,
    window_ema,
)


class TestMeanStd:
    """Tests for mean and population standard deviation."""

    def test_mean(self):
        assert mean([1.0, 2.0, 3.0, 4.0]) == 2.5

    def test_mean_empty(self):
        assert mean([]) == 0.0

    def test_population_std(self):
        # Classic example: mean 5, population std exactly 2
        values = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
        assert population_std(values) == pytest.approx(2.0)

    def test_population_std_not_sample(self):
        # Sample std of [1, 3] would be sqrt(2)
        assert population_std([1.0, 3.0]) == pytest.approx(1.0)

    def test_flat_series_is_exactly_zero(self):
        assert population_std([100.1] * 20) == 0.0

    def test_empty(self):
        assert population_std([]) == 0.0


class TestWindowEma:
    """Tests for the window-seeded EMA."""

    def test_seeded_with_first_value(self):
        # k = 0.5: 1 -> 1.5 -> 2.25
        assert window_ema([1.0, 2.0, 3.0], 3) == 2.25

    def test_uses_last_period_values(self):
        assert window_ema([50.0, 60.0, 1.0, 2.0, 3.0], 3) == 2.25

    def test_single_period(self):
        assert window_ema([5.0, 7.0], 1) == 7.0

    def test_rising_series_lags(self):
        values = [float(v) for v in range(1, 22)]
        assert window_ema(values, 9) < values[-1]
        assert window_ema(values, 9) > window_ema(values, 21)

    def test_insufficient_data(self):
        with pytest.raises(ValueError):
            window_ema([1.0, 2.0], 3)


class TestBollingerBands:
    """Tests for Bollinger band calculation."""

    def test_bands(self):
        values = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
        lower, middle, upper, std = bollinger_bands(values, period=8, num_std=2.0)

        assert middle == pytest.approx(5.0)
        assert std == pytest.approx(2.0)
        assert lower == pytest.approx(1.0)
        assert upper == pytest.approx(9.0)

    def test_uses_last_period_values(self):
        values = [1000.0] * 5 + [100.0] * 20
        lower, middle, upper, std = bollinger_bands(values, period=20)

        assert (lower, middle, upper, std) == (100.0, 100.0, 100.0, 0.0)


class TestPctChanges:
    """Tests for consecutive percentage changes."""

    def test_changes(self):
        assert pct_changes([100.0, 110.0, 99.0]) == pytest.approx([10.0, -10.0])

    def test_too_short(self):
        assert pct_changes([100.0]) == []
