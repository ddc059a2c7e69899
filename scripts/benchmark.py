#!/usr/bin/env python3
"""Benchmark script for filtermap performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

SIZE = 100_000


def benchmark_import_time() -> float:
    """Measure import time of filtermap package."""
    start = time.perf_counter()
    import filtermap  # noqa: F401

    return time.perf_counter() - start


def benchmark_helpers() -> float:
    """Measure filter_items + map_items over SIZE integers."""
    from filtermap.domain.operations import filter_items, map_items
    from filtermap.domain.predicates import is_even
    from filtermap.domain.transforms import double

    numbers = range(SIZE)
    start = time.perf_counter()
    map_items(filter_items(numbers, is_even), double)
    return time.perf_counter() - start


def benchmark_pipeline() -> float:
    """Measure the same computation through Pipeline."""
    from filtermap.application.pipeline import Pipeline
    from filtermap.domain.predicates import is_even
    from filtermap.domain.transforms import double

    pipeline = Pipeline.of(range(SIZE)).filter(is_even).map(double)
    start = time.perf_counter()
    pipeline.collect()
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run filtermap benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {
            "name": f"Helpers filter+map ({SIZE} items)",
            "unit": "seconds",
            "value": benchmark_helpers(),
        },
        {
            "name": f"Pipeline filter+map ({SIZE} items)",
            "unit": "seconds",
            "value": benchmark_pipeline(),
        },
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
