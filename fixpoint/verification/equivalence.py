"""
Equivalence Checking
====================

Two properties characterise a correct fixed-point construction:

1. **Equivalence**: for every input on which the conventionally named
   recursive definition terminates,

       combinator(f_maker)(x) == named_f(x)

2. **Self-replication**: the stand-in for "self" that the combinator hands
   to ``f_maker`` is, extensionally, the derived function itself:

       recur(x) == combinator(f_maker)(x)

Both are checked by evaluating over a finite sample of inputs. Every call
of the derived function runs under a ``BoundedEvaluator``, so a broken
construction shows up as a mismatch rather than a hung test run.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional

from fixpoint.combinators.open_recursion import step_limited
from fixpoint.combinators.strict import strict_fixed_point
from fixpoint.verification.termination import BoundedEvaluator

logger = logging.getLogger(__name__)


@dataclass
class Mismatch:
    """One input on which the two sides disagree."""
    args: tuple
    expected: Any
    actual: Any

    def __str__(self):
        return f"f{self.args}: expected {self.expected!r}, got {self.actual!r}"


@dataclass
class EquivalenceReport:
    """Outcome of an equivalence or self-replication check."""
    name: str
    inputs_checked: int = 0
    mismatches: List[Mismatch] = field(default_factory=list)

    @property
    def equivalent(self) -> bool:
        return not self.mismatches

    def summary(self) -> str:
        if self.equivalent:
            return f"{self.name}: equivalent on {self.inputs_checked} inputs"
        lines = [
            f"{self.name}: {len(self.mismatches)} of {self.inputs_checked} inputs differ",
        ]
        lines.extend(f"  {m}" for m in self.mismatches)
        return "\n".join(lines)


class EquivalenceChecker:
    """
    Compare fixed-point-derived functions with reference implementations.

    Usage:
        checker = EquivalenceChecker()
        report = checker.check(factorial_maker, factorial, range(10))
        assert report.equivalent, report.summary()

        # Y with explicit thunks, same maker
        lazy = EquivalenceChecker(combinator=lambda m: lazy_fixed_point(thunked(m)))
        assert lazy.check(factorial_maker, factorial, range(10)).equivalent
    """

    def __init__(
        self,
        combinator: Callable[[Callable], Callable] = strict_fixed_point,
        evaluator: Optional[BoundedEvaluator] = None,
        enable_logging: bool = False,
    ):
        self.combinator = combinator
        self.evaluator = evaluator or BoundedEvaluator()

        if enable_logging:
            logging.basicConfig(level=logging.DEBUG)

    def check(
        self,
        f_maker: Callable,
        reference: Callable,
        inputs: Iterable,
        unpack: bool = False,
        name: Optional[str] = None,
    ) -> EquivalenceReport:
        """
        Check ``combinator(f_maker)`` against ``reference`` on ``inputs``.

        Args:
            f_maker: Strict maker to fix.
            reference: Named-recursive implementation of the same function.
            inputs: Sample inputs. Each is a single argument, or an argument
                tuple when ``unpack`` is set.
            name: Label for the report (default: the reference's name).
        """
        derived = self.combinator(step_limited(f_maker, self.evaluator.max_steps))
        report = EquivalenceReport(name=name or getattr(reference, '__name__', 'f'))

        for item in inputs:
            args = tuple(item) if unpack else (item,)
            expected = reference(*args)
            actual = self._call(derived, args)
            report.inputs_checked += 1
            if actual != expected:
                report.mismatches.append(Mismatch(args, expected, actual))

        logger.debug(report.summary())
        return report

    def check_self_replication(
        self,
        f_maker: Callable,
        inputs: Iterable,
        unpack: bool = False,
        name: Optional[str] = None,
    ) -> EquivalenceReport:
        """
        Check that the self-reference handed to ``f_maker`` behaves like the
        derived function on every input.
        """
        captured: List[Callable] = []

        def capturing(recur):
            if not captured:
                captured.append(recur)
            return f_maker(recur)

        derived = self.combinator(step_limited(capturing, self.evaluator.max_steps))
        if not captured:
            raise ValueError("combinator never invoked the maker")
        recur = captured[0]
        report = EquivalenceReport(
            name=name or f"self-replication of {getattr(f_maker, '__name__', 'f')}",
        )

        for item in inputs:
            args = tuple(item) if unpack else (item,)
            expected = self._call(derived, args)
            actual = self._call(recur, args)
            report.inputs_checked += 1
            if actual != expected:
                report.mismatches.append(Mismatch(args, expected, actual))

        logger.debug(report.summary())
        return report

    def _call(self, func: Callable, args: tuple) -> Any:
        run = self.evaluator.run_callable(func, *args)
        if run.terminated:
            return run.value
        return run.status
