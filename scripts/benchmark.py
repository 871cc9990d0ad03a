#!/usr/bin/env python
"""
Benchmark polygon triangulation and display a timing breakdown per polygon size.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --shape star --sizes 16 64 256
    python scripts/benchmark.py --iterations 10 --int
    python scripts/benchmark.py --contains 1000

Examples:
    python scripts/benchmark.py --shape random --sizes 50 100 200 400
    python scripts/benchmark.py --shape convex --iterations 20 --no-warmup
"""

import argparse
import math
import random
import sys
from pathlib import Path
from typing import Dict, List

# Add project paths for development
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from gutility import (
    point_in_polygon,
    polygon_to_triangles,
    polygon_to_triangles_int,
)
from gutility.profiling import (
    _PROFILING_COMPILED_OUT,
    enable_profiling,
    get_profile_results,
    perf_marker,
    reset_profile,
)


# ANSI colors for output
RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
GRAY = "\033[90m"


def convex_polygon(n, radius=1e5):
    return [
        (radius * math.cos(2 * math.pi * i / n), radius * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ]


def random_polygon(n, radius=1e5, seed=42):
    rng = random.Random(seed + n)
    angles = sorted(rng.random() * 2 * math.pi for _ in range(n))
    points = []
    for angle in angles:
        r = radius * (0.4 + 0.6 * rng.random())
        points.append((r * math.cos(angle), r * math.sin(angle)))
    return points


def star_polygon(n, outer=1e5, inner=3e4):
    n_pairs = max(n // 2, 3)
    points = []
    for i in range(2 * n_pairs):
        angle = math.pi * i / n_pairs + 0.1
        r = outer if i % 2 == 0 else inner
        points.append((r * math.cos(angle), r * math.sin(angle)))
    return points


SHAPES = {
    "convex": convex_polygon,
    "random": random_polygon,
    "star": star_polygon,
}


def run_size(poly, iterations: int, use_int: bool, contains: int) -> None:
    """Run one polygon through triangulation (and optionally containment) `iterations` times."""
    if use_int:
        poly = [(round(x), round(y)) for x, y in poly]
        triangulate = polygon_to_triangles_int
    else:
        triangulate = polygon_to_triangles

    samples = []
    if contains:
        rng = random.Random(len(poly))
        samples = [(rng.uniform(-1e5, 1e5), rng.uniform(-1e5, 1e5)) for _ in range(contains)]

    for _ in range(iterations):
        triangulate(poly)
        if samples:
            with perf_marker("point_in_polygon_batch"):
                for p in samples:
                    point_in_polygon(p, poly)


def print_results(rows: List[Dict], shape: str, iterations: int) -> None:
    print()
    print("=" * 70)
    print(f"{BOLD}TRIANGULATION BENCHMARK: {shape}{RESET}")
    print("=" * 70)
    print()
    print(f"  Iterations:    {iterations}")
    print()
    print(f"  {'Vertices':>10} {'Triangles':>10} {'Avg':>12} {'Min':>12} {'Per vertex':>14}")
    print(f"  {'─' * 10} {'─' * 10} {'─' * 12} {'─' * 12} {'─' * 14}")

    for row in rows:
        per_vertex_us = row["avg_ms"] * 1000 / row["n"]
        if row["avg_ms"] >= 100.0:
            color = YELLOW
        elif row["avg_ms"] >= 10.0:
            color = CYAN
        else:
            color = GRAY
        print(f"  {row['n']:>10} {row['triangles']:>10} {color}{row['avg_ms']:>10.2f}ms{RESET} "
              f"{row['min_ms']:>10.2f}ms {DIM}{per_vertex_us:>11.1f}µs{RESET}")
        if row.get("contains"):
            c = row["contains"]
            print(f"  {DIM}{'':>10} {'contains':>10} {c['avg_ms']:>10.2f}ms {c['min_ms']:>10.2f}ms{RESET}")
    print()


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark polygon triangulation and display a timing breakdown per polygon size.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python scripts/benchmark.py --shape random --sizes 50 100 200 400
    python scripts/benchmark.py --shape star --int
    python scripts/benchmark.py --contains 1000
        """
    )

    parser.add_argument("-s", "--shape", choices=sorted(SHAPES), default="random", help="Polygon family (default: random)")
    parser.add_argument("--sizes", type=int, nargs="+", default=[16, 64, 256, 1024], help="Vertex counts to run")
    parser.add_argument("-i", "--iterations", type=int, default=5, help="Number of iterations per size (default: 5)")
    parser.add_argument("--int", dest="use_int", action="store_true", help="Round vertices and use the integer variant")
    parser.add_argument("--contains", type=int, default=0, help="Also run N point-in-polygon samples per iteration")
    parser.add_argument("--no-warmup", action="store_true", help="Skip warmup iteration")

    args = parser.parse_args()

    if _PROFILING_COMPILED_OUT:
        print("Error: profiling is compiled out (python -O or GUTILITY_NO_PROFILING=1)")
        return 1

    marker = "polygon_to_triangles_int" if args.use_int else "polygon_to_triangles"
    rows = []
    for n in args.sizes:
        poly = SHAPES[args.shape](n)
        if not args.no_warmup:
            run_size(poly, 1, args.use_int, 0)

        reset_profile()
        enable_profiling()
        try:
            run_size(poly, args.iterations, args.use_int, args.contains)
        finally:
            enable_profiling(False)

        results = get_profile_results()
        rows.append({
            "n": len(poly),
            "triangles": len(poly) - 2,
            "avg_ms": results[marker]["avg_ms"],
            "min_ms": results[marker]["min_ms"],
            "contains": results.get("point_in_polygon_batch"),
        })

    print_results(rows, args.shape, args.iterations)
    return 0


if __name__ == "__main__":
    sys.exit(main())
