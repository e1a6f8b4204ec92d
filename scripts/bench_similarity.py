#!/usr/bin/env python3
"""Benchmark threeset similarity on a representative pair of phrases."""

import argparse
import logging
import sys
import time
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from threeset.similarity import ThreeSetCompare  # noqa: E402

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

FIRST = "Сравнеие двух строк с помощью инвариантной метрики"
SECOND = "Сравнеие двух строк с помощью метрики, инвариантной к перестановке слов"


def run_benchmark(iterations: int) -> dict:
    """Time repeated comparisons and return the metrics."""
    comparator = ThreeSetCompare()

    start_time = time.perf_counter()
    for _ in range(iterations):
        score = comparator.similarity(FIRST, SECOND)
    elapsed = time.perf_counter() - start_time

    return {
        "iterations": iterations,
        "total_seconds": elapsed,
        "per_call_us": elapsed / iterations * 1e6,
        "calls_per_second": iterations / elapsed if elapsed else float("inf"),
        "score": score,
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark threeset similarity")
    parser.add_argument("--iterations", type=int, default=10000)
    args = parser.parse_args()

    if args.iterations < 1:
        parser.error("--iterations must be >= 1")

    metrics = run_benchmark(args.iterations)
    logger.info(
        f"{metrics['iterations']} calls in {metrics['total_seconds']:.3f}s "
        f"({metrics['per_call_us']:.1f} us/call, {metrics['calls_per_second']:.0f} calls/s), "
        f"score={metrics['score']:.7f}",
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
