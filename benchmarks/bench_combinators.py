"""
╔════════════════════════════════════════════════════════════════════════════╗
║  fixpoint Benchmark Suite                                                  ║
║  Cost of recursion through a fixed point                                   ║
║                                                                            ║
║  Benchmarks:                                                               ║
║   1. Named recursion vs Z vs Y (thunked) on the catalog functions          ║
║   2. Memoised fixed point vs plain Z on Fibonacci                          ║
║   3. Bounded evaluation of diverging definitions                           ║
╚════════════════════════════════════════════════════════════════════════════╝

Usage:
    python -m benchmarks.bench_combinators
"""

import os
import statistics
import sys

# Ensure fixpoint is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fixpoint import catalog
from fixpoint.combinators.lazy import lazy_fixed_point, thunked, unguarded_fixed_point
from fixpoint.combinators.open_recursion import memoized
from fixpoint.combinators.strict import strict_fixed_point
from fixpoint.utils.helpers import format_ns, format_slowdown, time_function
from fixpoint.verification.termination import BoundedEvaluator


ITERATIONS = 50
WARMUP = 10


TARGETS = [
    # (name, maker, reference, args)
    ("factorial(20)", catalog.factorial_maker, catalog.factorial, (20,)),
    ("fibonacci(15)", catalog.fibonacci_maker, catalog.fibonacci, (15,)),
    ("gcd(832040, 514229)", catalog.gcd_maker, catalog.gcd, (832040, 514229)),
    ("ackermann(2, 3)", catalog.ackermann_maker, catalog.ackermann, (2, 3)),
    ("power(3, 64)", catalog.power_maker, catalog.power, (3, 64)),
]


def median_ns(func, args) -> float:
    return statistics.median(time_function(func, args, ITERATIONS, WARMUP))


def run_benchmarks():
    print("=" * 80)
    print("  fixpoint BENCHMARK SUITE")
    print("=" * 80)
    print()

    # ─────────────────────────────────────────────────────────
    #  Benchmark 1: Named recursion vs Z vs Y
    # ─────────────────────────────────────────────────────────
    print("┌──────────────────────────────────────────────────────────────┐")
    print("│  BENCHMARK 1: Named recursion vs fixed points               │")
    print("└──────────────────────────────────────────────────────────────┘")
    print(f"  {'Function':<22} {'Named':>10} {'Z':>10} {'Y':>10} {'Z cost':>14}")
    print(f"  {'─' * 22} {'─' * 10} {'─' * 10} {'─' * 10} {'─' * 14}")

    slowdowns = []
    for name, maker, reference, args in TARGETS:
        z = strict_fixed_point(maker)
        y = lazy_fixed_point(thunked(maker))
        assert z(*args) == y(*args) == reference(*args), name

        named_ns = median_ns(reference, args)
        z_ns = median_ns(z, args)
        y_ns = median_ns(y, args)
        slowdowns.append(z_ns / named_ns if named_ns else 0.0)
        print(f"  {name:<22} {format_ns(named_ns):>10} {format_ns(z_ns):>10} "
              f"{format_ns(y_ns):>10} {format_slowdown(named_ns, z_ns):>14}")
    print()

    # ─────────────────────────────────────────────────────────
    #  Benchmark 2: Memoisation through open recursion
    # ─────────────────────────────────────────────────────────
    print("┌──────────────────────────────────────────────────────────────┐")
    print("│  BENCHMARK 2: Memoised fixed point (Fibonacci)              │")
    print("└──────────────────────────────────────────────────────────────┘")
    plain = strict_fixed_point(catalog.fibonacci_maker)
    for n in (10, 15, 20):
        plain_ns = median_ns(plain, (n,))
        # Fresh table per measurement so every call recomputes
        memo_ns = median_ns(lambda k: strict_fixed_point(memoized(catalog.fibonacci_maker))(k), (n,))
        print(f"  fib({n:<2})  plain {format_ns(plain_ns):>10}   memoised {format_ns(memo_ns):>10}"
              f"   ({format_slowdown(plain_ns, memo_ns)})")
    print()

    # ─────────────────────────────────────────────────────────
    #  Benchmark 3: Bounded divergence
    # ─────────────────────────────────────────────────────────
    print("┌──────────────────────────────────────────────────────────────┐")
    print("│  BENCHMARK 3: Bounded evaluation of diverging definitions   │")
    print("└──────────────────────────────────────────────────────────────┘")
    evaluator = BoundedEvaluator(max_steps=500)
    runaway = evaluator.run(catalog.runaway_maker, 0)
    unguarded = evaluator.run_callable(unguarded_fixed_point, catalog.factorial_maker)
    print(f"  runaway maker under Z:      {runaway}")
    print(f"  unguarded Y on factorial:   {unguarded.status.name} ({format_ns(unguarded.wall_time_ns)})")
    print()

    geo_mean = statistics.geometric_mean(slowdowns) if slowdowns else 0.0
    print(f"  Geometric mean Z overhead:  {geo_mean:.2f}x")
    print("=" * 80)

    return {
        "geo_mean_z_overhead": geo_mean,
        "runaway_status": runaway.status.name,
        "unguarded_status": unguarded.status.name,
    }


if __name__ == "__main__":
    run_benchmarks()
