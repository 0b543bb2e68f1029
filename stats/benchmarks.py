#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ------------------------------------------------------------------------------
#
#   Copyright 2025 Jannik Hehemann
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
# ------------------------------------------------------------------------------
"""
Benchmarks for the LLRB ordered map.

This script measures:
 1. Full map build times for ascending, descending and random insertion orders
 2. Per-operation cost of get, put, delete, delete_min and delete_max on maps of various sizes
 3. Height statistics against the 2*log2(n+1) bound
 4. A method-level breakdown collected with the PerformanceTracker

Usage:
    PYTHONPATH=src:. python stats/benchmarks.py [--sizes 1000 10000 100000] [--trials T] [--order random] [--seed S]
"""
import argparse
import gc
import math
import time
from dataclasses import asdict
from pprint import pprint
from statistics import mean, variance

import numpy as np

from llrb_map.llrb_tree import OrderedMap, tree_stats_
from llrb_map.profiling import PerformanceTracker
from tests.stats_ordered_map import key_sequence, random_map_of_size, ORDERS


def bench_build(sizes: list, order: str, seed: int) -> None:
    """Measure random_map_of_size for various sizes."""
    for n in sizes:
        t0 = time.perf_counter()
        _ = random_map_of_size(n, order, seed)
        elapsed = time.perf_counter() - t0
        print(f"[bench] build {order:<10} n={n:<8}: {elapsed:.4f}s")


def bench_height(sizes: list, seed: int) -> None:
    """Print the tree shape for every insertion order."""
    for n in sizes:
        for order in ORDERS:
            m = random_map_of_size(n, order, seed)
            stats = tree_stats_(m)
            bound = 2 * math.log2(n + 1)
            print(f"[bench] height {order:<10} n={n:<8}: {stats.height:>3} "
                  f"(black height {stats.black_height}, bound {bound:.1f})")
    print("[bench] stats for the last map:")
    pprint(asdict(stats))


def _timed(fn, args_list) -> list:
    gc.collect()
    gc.disable()
    try:
        times = []
        for args in args_list:
            t0 = time.perf_counter()
            fn(*args)
            times.append(time.perf_counter() - t0)
    finally:
        gc.enable()
    return times


def measure_operations(n: int, trials: int, order: str, seed: int) -> dict:
    """
    Measure per-call cost of each map operation on a map of exactly `n` keys.
    Returns {operation: (mean_time_s, variance_time_s)}.
    """
    rng = np.random.default_rng(seed)
    m = random_map_of_size(n, order, seed)
    probe = [int(k) for k in rng.integers(0, max(n, 1), size=trials)]
    fresh = [int(k) for k in rng.integers(n, 2 * n + trials, size=trials)]

    results = {}
    results["get"] = _timed(m.get, [(k,) for k in probe])
    results["put"] = _timed(m.put, [(k, f"val{k}") for k in fresh])
    results["delete"] = _timed(m.delete, [(k,) for k in fresh])
    count = min(trials, m.size())
    results["delete_min"] = _timed(m.delete_min, [()] * (count // 2))
    results["delete_max"] = _timed(m.delete_max, [()] * (count // 2))

    return {
        op: (mean(times), variance(times) if len(times) > 1 else 0.0)
        for op, times in results.items() if times
    }


def bench_operations(sizes: list, trials: int, order: str, seed: int) -> None:
    for n in sizes:
        for op, (avg, var) in measure_operations(n, trials, order, seed).items():
            print(f"[bench] {op:<10} size {n:<8} → avg {avg*1e6:8.2f} µs   σ²={var*1e12:8.2f} µs²")


def main():
    parser = argparse.ArgumentParser(description="LLRB ordered map benchmarks")
    parser.add_argument("--sizes", nargs='+', type=int, default=[1000, 10_000, 100_000],
                        help="Map sizes to benchmark")
    parser.add_argument("--trials", type=int, default=1000,
                        help="Number of calls per operation benchmark")
    parser.add_argument("--order", choices=ORDERS, default="random",
                        help="Insertion order used to build the maps")
    parser.add_argument("--seed", type=int, default=0,
                        help="Seed for numpy's random generator")
    args = parser.parse_args()

    print("\n=== Full Map Build ===")
    bench_build(args.sizes, args.order, args.seed)

    print("\n=== Height ===")
    bench_height(args.sizes, args.seed)

    print("\n=== Per-Operation Benchmarks ===")
    bench_operations(args.sizes, args.trials, args.order, args.seed)

    print("\n=== Method-Level Performance Breakdown ===")
    tracker = PerformanceTracker.get_instance()
    tracker.reset()
    tracker.enable()
    m = OrderedMap()
    for key in key_sequence(args.sizes[0], args.order, args.seed):
        m.put(key, key)
    for key in key_sequence(args.sizes[0], "random", args.seed + 1)[: args.sizes[0] // 2]:
        m.get(key)
        m.delete(key)
    tracker.disable()
    print(tracker.report())


if __name__ == "__main__":
    main()
