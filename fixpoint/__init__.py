"""
fixpoint: Fixed-Point Combinators for Python
============================================

Recursion without self-reference. A recursive function is written as a
*maker* that receives "itself" as a parameter, and a fixed-point combinator
ties the knot:

    Z  strict_fixed_point   the form that works under Python's strict evaluation
    Y  lazy_fixed_point     the lazy form, with call-by-need made explicit
    U  self_apply           self-application, the building block of both

Core Components:
    - combinators: U, Z, Y, thunks, mutual recursion, open-recursion transformers
    - verification: bounded evaluation and equivalence / self-replication checks
    - catalog: reference makers (factorial, Fibonacci, GCD, Ackermann, ...)

Usage:
    >>> import fixpoint
    >>> fact = fixpoint.Z(lambda self: lambda n: 1 if n <= 1 else n * self(n - 1))
    >>> fact(5)
    120

    >>> @fixpoint.fix(memoize=True)
    ... def fib(self):
    ...     return lambda n: n if n < 2 else self(n - 1) + self(n - 2)
    >>> fib(90)
    2880067194370816120
"""

__version__ = "1.0.0"

from fixpoint.combinators import (
    self_apply,
    U,
    Thunk,
    delay,
    force,
    strict_fixed_point,
    Z,
    mutual_fixed_point,
    fix,
    lazy_fixed_point,
    Y,
    unguarded_fixed_point,
    thunked,
    memoized,
    traced,
    step_limited,
    StepLimitExceeded,
)
from fixpoint.verification import (
    BoundedEvaluator,
    BoundedRun,
    TerminationStatus,
    EquivalenceChecker,
    EquivalenceReport,
)
