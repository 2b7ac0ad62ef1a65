"""
Fixed-Point Combinators
=======================

    U  self_apply           λx. x x
    Z  strict_fixed_point   λf. (λx. f (λv. x x v)) (λx. f (λv. x x v))
    Y  lazy_fixed_point     λf. (λx. f (x x)) (λx. f (x x)), with explicit thunks

Z is the form to use in Python. Y is provided with call-by-need made
explicit through ``Thunk``; ``unguarded_fixed_point`` is the literal Y and
only demonstrates why strict evaluation needs the deferral.

References:
    - Curry, H.B. & Feys, R. (1958). Combinatory Logic.
    - Plotkin, G. (1975). Call-by-name, call-by-value and the λ-calculus.
    - Barendregt, H. (1984). The Lambda Calculus: Its Syntax and Semantics.
"""

from fixpoint.combinators.self_apply import self_apply, U
from fixpoint.combinators.thunk import Thunk, delay, force
from fixpoint.combinators.strict import (
    strict_fixed_point,
    Z,
    mutual_fixed_point,
    fix,
)
from fixpoint.combinators.lazy import (
    lazy_fixed_point,
    Y,
    unguarded_fixed_point,
    thunked,
)
from fixpoint.combinators.open_recursion import (
    memoized,
    traced,
    step_limited,
    StepLimitExceeded,
    CallRecord,
    StepCounter,
)

__all__ = [
    'self_apply',
    'U',
    'Thunk',
    'delay',
    'force',
    'strict_fixed_point',
    'Z',
    'mutual_fixed_point',
    'fix',
    'lazy_fixed_point',
    'Y',
    'unguarded_fixed_point',
    'thunked',
    'memoized',
    'traced',
    'step_limited',
    'StepLimitExceeded',
    'CallRecord',
    'StepCounter',
]
