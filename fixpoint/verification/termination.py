"""
Bounded Evaluation
==================

Fixed-point combinators have exactly one failure mode: non-termination.
It arises either because the target's own recursion never reaches a base
case, or because the unguarded (lazy-only) Y is run under strict
evaluation. Neither is caught by the combinators themselves.

This harness makes non-termination observable in a test:

    - a *step limit* bounds the number of target invocations
      (``StepLimitExceeded``), and
    - a *recursion budget* bounds the Python stack depth
      (``RecursionError``).

Whichever trips first is reported as a ``TerminationStatus`` instead of
propagating, so a diverging definition is asserted against, not crashed on.

Usage:
    >>> evaluator = BoundedEvaluator(max_steps=200)
    >>> evaluator.run(lambda self: lambda n: self(n + 1), 0).status
    <TerminationStatus.STEP_LIMIT: 2>
"""

import inspect
import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Optional

from fixpoint.combinators.open_recursion import (
    StepCounter,
    StepLimitExceeded,
    step_limited,
)
from fixpoint.combinators.strict import strict_fixed_point
from fixpoint.utils.helpers import Timer, format_ns

logger = logging.getLogger(__name__)


class TerminationStatus(Enum):
    """Outcome of a bounded evaluation."""
    COMPLETED = auto()     # Returned a value within both limits
    STEP_LIMIT = auto()    # Too many target invocations
    DEPTH_LIMIT = auto()   # Python stack exhausted (RecursionError)


@dataclass
class BoundedRun:
    """Result of one bounded evaluation."""
    status: TerminationStatus
    value: Any
    steps: Optional[int]                  # None when no step counter was attached
    error: Optional[BaseException]
    wall_time_ns: int

    @property
    def terminated(self) -> bool:
        return self.status is TerminationStatus.COMPLETED

    def __str__(self):
        steps = "?" if self.steps is None else self.steps
        if self.terminated:
            return f"completed in {steps} steps ({format_ns(self.wall_time_ns)}): {self.value!r}"
        return f"{self.status.name} after {steps} steps ({format_ns(self.wall_time_ns)}): {self.error}"


def _stack_depth() -> int:
    depth = 0
    frame = inspect.currentframe()
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


@contextmanager
def recursion_budget(frames: int):
    """
    Allow at most ``frames`` more Python frames below the caller.

    The interpreter recursion limit is process-global; the previous value
    is restored on exit.
    """
    if frames < 1:
        raise ValueError(f"frames must be at least 1, got {frames}")
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(_stack_depth() + frames)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class BoundedEvaluator:
    """
    Evaluate possibly non-terminating fixed-point constructions safely.

    Usage:
        evaluator = BoundedEvaluator(max_steps=500, recursion_budget=2_000)
        run = evaluator.run(factorial_maker, 5)
        assert run.terminated and run.value == 120

        run = evaluator.run_callable(unguarded_fixed_point, factorial_maker)
        assert run.status is TerminationStatus.DEPTH_LIMIT
    """

    DEFAULT_MAX_STEPS = 10_000
    DEFAULT_RECURSION_BUDGET = 3_000

    def __init__(
        self,
        max_steps: int = DEFAULT_MAX_STEPS,
        recursion_budget: int = DEFAULT_RECURSION_BUDGET,
        enable_logging: bool = False,
    ):
        if max_steps < 1:
            raise ValueError(f"max_steps must be at least 1, got {max_steps}")
        if recursion_budget < 1:
            raise ValueError(f"recursion_budget must be at least 1, got {recursion_budget}")
        self.max_steps = max_steps
        self.recursion_budget = recursion_budget

        if enable_logging:
            logging.basicConfig(level=logging.DEBUG)

    def run(
        self,
        f_maker: Callable,
        *args,
        combinator: Callable[[Callable], Callable] = strict_fixed_point,
        **kwargs,
    ) -> BoundedRun:
        """Fix ``f_maker`` with both limits attached and call it on ``args``."""
        limited = step_limited(f_maker, self.max_steps)
        return self._evaluate(
            lambda: combinator(limited)(*args, **kwargs),
            counter=limited.counter,
        )

    def run_callable(self, func: Callable, *args, **kwargs) -> BoundedRun:
        """Call any callable under the recursion budget (no step counting)."""
        return self._evaluate(lambda: func(*args, **kwargs))

    def diverges(self, f_maker: Callable, *args, **kwargs) -> bool:
        """True when the fixed point of ``f_maker`` hits either limit on ``args``."""
        return not self.run(f_maker, *args, **kwargs).terminated

    def _evaluate(
        self,
        thunk: Callable[[], Any],
        counter: Optional[StepCounter] = None,
    ) -> BoundedRun:
        value = None
        error = None
        status = TerminationStatus.COMPLETED

        with Timer() as timer:
            try:
                with recursion_budget(self.recursion_budget):
                    value = thunk()
            except StepLimitExceeded as e:
                status = TerminationStatus.STEP_LIMIT
                error = e
            except RecursionError as e:
                status = TerminationStatus.DEPTH_LIMIT
                error = e

        steps = None
        if counter is not None:
            steps = counter.history[-1] if counter.history else counter.steps

        run = BoundedRun(
            status=status,
            value=value,
            steps=steps,
            error=error,
            wall_time_ns=timer.elapsed_ns,
        )
        logger.debug(f"Bounded evaluation {run}")
        return run
