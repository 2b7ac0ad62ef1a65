"""
Tests for the open-recursion transformers: memoized, traced, step_limited.
"""

import logging

import pytest

from fixpoint.catalog import factorial_maker, fibonacci_maker, power_maker, runaway_maker
from fixpoint.combinators.open_recursion import (
    StepLimitExceeded,
    memoized,
    step_limited,
    traced,
)
from fixpoint.combinators.strict import strict_fixed_point


class TestMemoized:
    def test_each_argument_computed_once(self):
        calls = []

        def counting_fib(self):
            def fib(n):
                calls.append(n)
                return n if n < 2 else self(n - 1) + self(n - 2)
            return fib

        fib = strict_fixed_point(memoized(counting_fib))
        assert fib(30) == 832040
        assert sorted(calls) == list(range(31))

    def test_cache_survives_between_calls(self):
        calls = []

        def counting_fact(self):
            def fact(n):
                calls.append(n)
                return 1 if n <= 1 else n * self(n - 1)
            return fact

        fact = strict_fixed_point(memoized(counting_fact))
        assert fact(6) == 720
        assert fact(6) == 720
        assert fact(4) == 24
        assert len(calls) == 6

    def test_shared_cache(self):
        cache = {}
        fib = strict_fixed_point(memoized(fibonacci_maker, cache=cache))
        assert fib(10) == 55
        assert cache[(10,)] == 55
        assert cache[(0,)] == 0

    def test_cache_attribute(self):
        maker = memoized(factorial_maker)
        strict_fixed_point(maker)(5)
        assert maker.cache[(5,)] == 120
        assert maker.__name__ == 'factorial_maker'

    def test_keyword_arguments(self):
        maker = memoized(power_maker)
        power = strict_fixed_point(maker)
        assert power(3, exponent=5) == 243
        assert (3, (('exponent', 5),)) in maker.cache

    def test_unhashable_arguments(self):
        length = strict_fixed_point(memoized(lambda self: lambda xs: len(xs)))
        with pytest.raises(TypeError):
            length([1, 2])


class TestTraced:
    def test_records_depth_args_results(self):
        maker = traced(factorial_maker)
        assert strict_fixed_point(maker)(3) == 6
        assert [r.depth for r in maker.trace] == [0, 1, 2]
        assert [r.args for r in maker.trace] == [(3,), (2,), (1,)]
        assert [r.result for r in maker.trace] == [6, 2, 1]
        assert all(r.completed for r in maker.trace)

    def test_logs_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger='fixpoint.combinators.open_recursion')
        strict_fixed_point(traced(factorial_maker))(2)
        assert "-> factorial_maker(2,) depth=0" in caplog.text
        assert "<- factorial_maker(2,) = 2" in caplog.text

    def test_custom_name_and_logger(self, caplog):
        log = logging.getLogger('tests.trace')
        caplog.set_level(logging.DEBUG, logger='tests.trace')
        strict_fixed_point(traced(fibonacci_maker, name='fib', log=log))(1)
        assert "-> fib(1,) depth=0" in caplog.text

    def test_exception_restores_depth(self):
        def maker(self):
            def f(n):
                if n == 0:
                    raise ValueError("bottom")
                return self(n - 1)
            return f

        traced_maker = traced(maker)
        f = strict_fixed_point(traced_maker)
        with pytest.raises(ValueError):
            f(2)
        assert not any(r.completed for r in traced_maker.trace)

        traced_maker.trace.clear()
        with pytest.raises(ValueError):
            f(0)
        assert traced_maker.trace[0].depth == 0


class TestStepLimited:
    def test_within_limit(self):
        maker = step_limited(factorial_maker, 5)
        assert strict_fixed_point(maker)(5) == 120
        assert maker.counter.history == [5]

    def test_exceeds_limit(self):
        fact = strict_fixed_point(step_limited(factorial_maker, 5))
        with pytest.raises(StepLimitExceeded) as exc_info:
            fact(6)
        assert exc_info.value.limit == 5
        assert exc_info.value.steps == 6

    def test_counter_resets_per_outer_call(self):
        maker = step_limited(factorial_maker, 5)
        fact = strict_fixed_point(maker)
        with pytest.raises(StepLimitExceeded):
            fact(10)
        assert fact(3) == 6
        assert fact(5) == 120
        assert maker.counter.history[-2:] == [3, 5]
        assert maker.counter.depth == 0

    def test_runaway(self):
        runaway = strict_fixed_point(step_limited(runaway_maker, 50))
        with pytest.raises(StepLimitExceeded):
            runaway(0)

    def test_is_recursion_error(self):
        assert issubclass(StepLimitExceeded, RecursionError)
        assert "step limit of 3" in str(StepLimitExceeded(3, 4))

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            step_limited(factorial_maker, 0)


class TestComposition:
    def test_memoized_then_step_limited(self):
        # Memoisation collapses exponential recursion under a tight step budget
        fib = strict_fixed_point(step_limited(memoized(fibonacci_maker), 200))
        assert fib(60) == 1548008755920

    def test_plain_fib_exceeds_same_budget(self):
        fib = strict_fixed_point(step_limited(fibonacci_maker, 200))
        with pytest.raises(StepLimitExceeded):
            fib(20)
