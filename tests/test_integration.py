"""
End-to-end tests through the public ``fixpoint`` API.

Covers the behaviours a fixed-point combinator must exhibit:
equivalence with named recursion, self-replication, bounded
non-termination, and the strict-vs-lazy divergence of Y and Z.
"""

import pytest

import fixpoint
from fixpoint import catalog


class TestPublicAPI:
    def test_exports(self):
        for name in (
            'self_apply', 'U', 'strict_fixed_point', 'Z', 'lazy_fixed_point',
            'Y', 'unguarded_fixed_point', 'thunked', 'mutual_fixed_point',
            'fix', 'Thunk', 'delay', 'force', 'memoized', 'traced',
            'step_limited', 'StepLimitExceeded', 'BoundedEvaluator',
            'BoundedRun', 'TerminationStatus', 'EquivalenceChecker',
            'EquivalenceReport',
        ):
            assert hasattr(fixpoint, name), name

    def test_version(self):
        assert fixpoint.__version__ == "1.0.0"

    def test_aliases(self):
        assert fixpoint.Z is fixpoint.strict_fixed_point
        assert fixpoint.Y is fixpoint.lazy_fixed_point
        assert fixpoint.U is fixpoint.self_apply


class TestFactorialScenario:
    def test_five(self):
        fact = fixpoint.strict_fixed_point(
            lambda self: lambda n: 1 if n <= 1 else n * self(n - 1))
        assert fact(5) == 120

    def test_zero(self):
        assert fixpoint.strict_fixed_point(catalog.factorial_maker)(0) == 1

    def test_lazy_agrees(self):
        lazy_fact = fixpoint.lazy_fixed_point(fixpoint.thunked(catalog.factorial_maker))
        strict_fact = fixpoint.strict_fixed_point(catalog.factorial_maker)
        assert [lazy_fact(n) for n in range(10)] == [strict_fact(n) for n in range(10)]


class TestFibonacciScenario:
    def test_ten(self):
        assert fixpoint.strict_fixed_point(catalog.fibonacci_maker)(10) == 55

    def test_memoized_large(self):
        fib = fixpoint.fix(memoize=True)(catalog.fibonacci_maker)
        a, b = 0, 1
        for _ in range(120):
            a, b = b, a + b
        assert fib(120) == a
        assert fib(90) == 2880067194370816120


class TestProperties:
    def setup_method(self):
        self.checker = fixpoint.EquivalenceChecker()

    @pytest.mark.parametrize('maker,reference,inputs,unpack', [
        (catalog.factorial_maker, catalog.factorial, range(20), False),
        (catalog.fibonacci_maker, catalog.fibonacci, range(16), False),
        (catalog.gcd_maker, catalog.gcd, [(270, 192), (13, 7), (5, 0)], True),
        (catalog.power_maker, catalog.power, range(10), False),
    ])
    def test_equivalence(self, maker, reference, inputs, unpack):
        report = self.checker.check(maker, reference, inputs, unpack=unpack)
        assert report.equivalent, report.summary()

    @pytest.mark.parametrize('maker', [catalog.factorial_maker, catalog.fibonacci_maker])
    def test_self_replication(self, maker):
        report = self.checker.check_self_replication(maker, range(10))
        assert report.equivalent, report.summary()

    def test_mutual_equivalence(self):
        even, odd = fixpoint.mutual_fixed_point(catalog.even_maker, catalog.odd_maker)
        for n in range(30):
            assert even(n) == catalog.is_even(n)
            assert odd(n) == catalog.is_odd(n)

    def test_non_termination_is_bounded(self):
        evaluator = fixpoint.BoundedEvaluator(max_steps=500)
        run = evaluator.run(catalog.runaway_maker, 0)
        assert run.status in (
            fixpoint.TerminationStatus.STEP_LIMIT,
            fixpoint.TerminationStatus.DEPTH_LIMIT,
        )
        assert not run.terminated


class TestStrictVersusLazy:
    def test_unguarded_y_exceeds_limit_while_z_completes(self):
        evaluator = fixpoint.BoundedEvaluator(max_steps=1_000)

        unguarded = evaluator.run_callable(
            lambda: fixpoint.unguarded_fixed_point(catalog.factorial_maker)(5))
        assert unguarded.status is fixpoint.TerminationStatus.DEPTH_LIMIT

        deferred = evaluator.run(catalog.factorial_maker, 5)
        assert deferred.status is fixpoint.TerminationStatus.COMPLETED
        assert deferred.value == 120

    def test_thunked_y_completes(self):
        evaluator = fixpoint.BoundedEvaluator()
        run = evaluator.run(
            catalog.factorial_maker, 5,
            combinator=lambda m: fixpoint.Y(fixpoint.thunked(m)),
        )
        assert run.value == 120
