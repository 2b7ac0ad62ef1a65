"""
Strict Fixed-Point Combinator (Z)
=================================

Manufactures recursion without a function ever referring to its own name.

Theoretical Foundation:
    A fixed point of a higher-order function ``g`` is a value ``v`` with
    ``v = g(v)``. Write the recursive function as a *maker* that receives
    "itself" as a parameter:

        fact_maker = λself. λn. 1 if n <= 1 else n * self(n - 1)

    The factorial function is exactly the fixed point of ``fact_maker``.
    The Y combinator computes it in a lazy language:

        Y = λf. (λx. f (x x)) (λx. f (x x))

    In a strict language ``x x`` is evaluated before ``f`` is even called,
    so the expansion never bottoms out. Z eta-expands the self-application
    so it is only evaluated at the moment the recursive call happens:

        Z = λf. (λx. f (λv. x x v)) (λx. f (λv. x x v))

Self-Replication:
    Calling the derived function reaches ``self(n - 1)``, which evaluates
    ``x(x)`` and runs ``f_maker`` again, producing a structurally identical
    copy of the target. One copy per recursive call, driven by invocation.

Usage:
    >>> fact = strict_fixed_point(
    ...     lambda self: lambda n: 1 if n <= 1 else n * self(n - 1))
    >>> fact(5)
    120

    >>> @fix
    ... def fib(self):
    ...     return lambda n: n if n < 2 else self(n - 1) + self(n - 2)
    >>> fib(10)
    55
"""

import functools
from typing import Any, Callable, Optional, Tuple

from fixpoint.combinators.self_apply import self_apply
from fixpoint.combinators.open_recursion import memoized, traced, step_limited

Maker = Callable[[Callable[..., Any]], Callable[..., Any]]


def _check_callable(f_maker: Any) -> None:
    if not callable(f_maker):
        raise TypeError(f"Expected callable maker, got {type(f_maker).__name__}")


def strict_fixed_point(f_maker: Maker) -> Callable[..., Any]:
    """
    Fix ``f_maker`` under strict evaluation (the Z combinator).

    Args:
        f_maker: Function taking a stand-in for "self" and returning the
            target function, which makes its recursive calls through that
            stand-in.

    Returns:
        The target function, recursive with no name binding. Positional
        and keyword arguments are forwarded through every recursive call.
    """
    _check_callable(f_maker)

    def replicator(x):
        return f_maker(lambda *args, **kwargs: self_apply(x)(*args, **kwargs))

    return self_apply(replicator)


Z = strict_fixed_point


def _deferred_member(x: Callable, index: int) -> Callable[..., Any]:
    return lambda *args, **kwargs: self_apply(x)[index](*args, **kwargs)


def mutual_fixed_point(*makers: Callable[..., Callable]) -> Tuple[Callable, ...]:
    """
    Fix a group of mutually recursive makers.

    Each maker receives one deferred self-reference per maker, in the order
    the makers are given, and returns its own target:

        even, odd = mutual_fixed_point(
            lambda even, odd: lambda n: True if n == 0 else odd(n - 1),
            lambda even, odd: lambda n: False if n == 0 else even(n - 1),
        )
    """
    if not makers:
        raise ValueError("mutual_fixed_point needs at least one maker")
    for maker in makers:
        _check_callable(maker)

    def replicator(x):
        selves = [_deferred_member(x, i) for i in range(len(makers))]
        return tuple(maker(*selves) for maker in makers)

    return self_apply(replicator)


def fix(
    f_maker: Optional[Maker] = None,
    *,
    memoize: bool = False,
    trace: bool = False,
    max_steps: Optional[int] = None,
) -> Callable:
    """
    Decorator form of the strict fixed point.

    Usage:
        @fix
        def factorial(self):
            return lambda n: 1 if n <= 1 else n * self(n - 1)

        @fix(memoize=True)
        def fibonacci(self):
            return lambda n: n if n < 2 else self(n - 1) + self(n - 2)

    Options wrap the maker in the open-recursion transformers, innermost
    first: ``memoize`` then ``trace`` then ``max_steps``. The transformed
    maker is available as ``.maker`` (with its ``cache`` / ``trace`` /
    ``counter`` attributes). ``__wrapped__`` is not set, so
    ``inspect.signature`` reports the call signature rather than the
    maker's ``(self)``.
    """
    if f_maker is None:
        return lambda f: fix(f, memoize=memoize, trace=trace, max_steps=max_steps)
    _check_callable(f_maker)

    maker = f_maker
    if memoize:
        maker = memoized(maker)
    if trace:
        maker = traced(maker)
    if max_steps is not None:
        maker = step_limited(maker, max_steps)

    target = strict_fixed_point(maker)

    @functools.wraps(f_maker)
    def wrapper(*args, **kwargs):
        return target(*args, **kwargs)

    del wrapper.__wrapped__
    wrapper.maker = maker
    return wrapper
