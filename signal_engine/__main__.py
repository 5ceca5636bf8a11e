"""CLI entry point: evaluate analyzers over a kline file.

Usage:
    python -m signal_engine klines.json
    python -m signal_engine klines.csv --strategy ema_trend --strategy volume_breakout
    python -m signal_engine klines.json --window 100 --json
"""

import argparse
import logging
import sys

import orjson

from signal_engine.config import get_settings
from signal_engine.logging_config import configure_logging
from signal_engine.loader import load_klines
from signal_engine.models import KlineBuffer, Signal
from signal_engine.strategy import create_configured_strategy, list_strategies

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="signal-engine",
        description="Evaluate technical signal analyzers over a kline file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Available analyzers: {', '.join(list_strategies())}",
    )
    parser.add_argument("file", help="Kline file (.json or .csv)")
    parser.add_argument(
        "--strategy", "-s",
        action="append",
        default=None,
        help="Analyzer to run (repeatable, default: SIGNAL_STRATEGIES or all)",
    )
    parser.add_argument(
        "--window", "-w",
        type=int,
        default=None,
        help="Number of most recent klines to evaluate (default: SIGNAL_WINDOW)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging",
    )
    return parser.parse_args(argv)


def format_signal(name: str, signal: Signal) -> str:
    return (
        f"{name:<22} {signal.direction.name:<6} "
        f"weight={signal.weight:<14.6g} confidence={signal.confidence:.3f}"
    )


def evaluate_file(
    path: str,
    names: list[str],
    window: int,
    params: dict[str, dict],
) -> dict[str, Signal]:
    """Load klines, keep the last ``window`` and evaluate each analyzer."""
    strategies = [create_configured_strategy(name, params.get(name)) for name in names]

    buffer = KlineBuffer(max_size=window)
    buffer.extend(load_klines(path))
    klines = buffer.snapshot()

    results = {}
    for strategy in strategies:
        if len(klines) < strategy.min_klines:
            logger.warning(
                "%s needs %d klines, have %d", strategy.name, strategy.min_klines, len(klines)
            )
        results[strategy.name] = strategy.evaluate(klines)
    return results


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    if args.verbose:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    configure_logging(settings)

    names = args.strategy or settings.strategies or list_strategies()
    window = args.window or settings.window

    try:
        results = evaluate_file(args.file, names, window, settings.strategy_params)
    except (OSError, ValueError, KeyError) as e:
        logger.error("Evaluation failed: %s", e)
        return 1

    if args.json:
        payload = {
            name: {
                "direction": signal.direction.name,
                "weight": signal.weight,
                "confidence": signal.confidence,
                "kill": signal.kill,
            }
            for name, signal in results.items()
        }
        print(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())
    else:
        for name, signal in results.items():
            print(format_signal(name, signal))
    return 0


if __name__ == "__main__":
    sys.exit(main())
