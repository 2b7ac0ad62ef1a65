"""
pytest-benchmark comparison of named recursion and fixed points.

Not collected by default; run explicitly:
    pytest benchmarks/bench_overhead.py
"""

import pytest

from fixpoint import catalog
from fixpoint.combinators.lazy import lazy_fixed_point, thunked
from fixpoint.combinators.strict import fix, strict_fixed_point


@pytest.mark.parametrize('variant', ['named', 'z', 'y', 'fix'])
def test_factorial(benchmark, variant):
    funcs = {
        'named': catalog.factorial,
        'z': strict_fixed_point(catalog.factorial_maker),
        'y': lazy_fixed_point(thunked(catalog.factorial_maker)),
        'fix': fix(catalog.factorial_maker),
    }
    benchmark.group = 'factorial(50)'
    assert benchmark(funcs[variant], 50) == catalog.factorial(50)


@pytest.mark.parametrize('variant', ['named', 'z'])
def test_fibonacci(benchmark, variant):
    funcs = {
        'named': catalog.fibonacci,
        'z': strict_fixed_point(catalog.fibonacci_maker),
    }
    benchmark.group = 'fibonacci(12)'
    assert benchmark(funcs[variant], 12) == 144
