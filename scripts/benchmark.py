#!/usr/bin/env python3
"""Benchmark script for tanglestat performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import random
import time
from pathlib import Path


def generate_ledger(records: int, seed: int = 0) -> str:
    """Generate a ledger where each record approves two random earlier ones."""
    rng = random.Random(seed)
    lines = [str(records)]
    for i in range(1, records + 1):
        left = rng.randint(1, i)
        right = rng.randint(1, i)
        lines.append(f"{left} {right} {i}")
    return "\n".join(lines)


def benchmark_parse(text: str) -> float:
    """Measure parse time of a generated ledger."""
    from tanglestat.application.services import parse_text

    start = time.perf_counter()
    parse_text(text)
    return time.perf_counter() - start


def benchmark_stats(text: str) -> float:
    """Measure stats computation time of a generated ledger."""
    from tanglestat.application.services import compute_stats, parse_text

    ledger = parse_text(text)
    start = time.perf_counter()
    compute_stats(ledger)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run tanglestat benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--records",
        type=int,
        default=100_000,
        help="Number of records in the generated ledger",
    )
    args = parser.parse_args()

    text = generate_ledger(args.records)
    results = [
        {
            "name": f"Parse ({args.records} records)",
            "unit": "seconds",
            "value": benchmark_parse(text),
        },
        {
            "name": f"Compute stats ({args.records} records)",
            "unit": "seconds",
            "value": benchmark_stats(text),
        },
    ]

    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
