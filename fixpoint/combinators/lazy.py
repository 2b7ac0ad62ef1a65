"""
Non-Strict Fixed-Point Combinator (Y)
=====================================

    Y = λf. (λx. f (x x)) (λx. f (x x))

Y relies on ``x x`` *not* being evaluated when it is passed to ``f``. In a
call-by-need language the argument is only evaluated if the body of ``f``
demands it, which happens exactly at the recursive call site.

Python is strict, so this module offers two things:

``unguarded_fixed_point``
    The literal transliteration. Evaluating ``x(x)`` as an argument calls
    ``f_maker`` again, which evaluates ``x(x)`` again, before any call can
    complete. It never returns a function; Python raises ``RecursionError``.
    Kept as an illustration of why Z exists. Do not use it.

``lazy_fixed_point``
    Y with the laziness made explicit: ``f_maker`` receives a ``Thunk``
    wrapping ``x(x)`` and forces it where the recursive call happens. This
    is faithful call-by-need (each thunk evaluates once) and terminates
    whenever the target's own recursion does.

Usage:
    >>> fact = lazy_fixed_point(
    ...     lambda self: lambda n: 1 if n <= 1 else n * self.force()(n - 1))
    >>> fact(5)
    120
"""

from typing import Any, Callable

from fixpoint.combinators.self_apply import self_apply
from fixpoint.combinators.thunk import Thunk

LazyMaker = Callable[[Thunk], Callable[..., Any]]


def lazy_fixed_point(f_maker: LazyMaker) -> Callable[..., Any]:
    """
    Fix ``f_maker`` with the Y combinator under explicit call-by-need.

    ``f_maker`` is handed a ``Thunk`` whose forced value is the target
    function itself. It must not force the thunk while *building* the
    target, only inside the target's body; forcing eagerly reintroduces the
    unbounded expansion of the unguarded form.
    """
    if not callable(f_maker):
        raise TypeError(f"Expected callable maker, got {type(f_maker).__name__}")

    def replicator(x):
        return f_maker(Thunk(lambda: self_apply(x)))

    return self_apply(replicator)


Y = lazy_fixed_point


def unguarded_fixed_point(f_maker: Callable[[Any], Any]) -> Callable[..., Any]:
    """
    Y transliterated directly into Python. Illustrative only.

    Under strict evaluation this never returns: the argument ``x(x)`` is
    evaluated before ``f_maker`` runs, recursing without bound until Python
    raises ``RecursionError``. The error is deliberately not caught here.
    """
    def replicator(x):
        return f_maker(self_apply(x))

    return self_apply(replicator)


def thunked(f_maker: Callable[[Callable[..., Any]], Callable[..., Any]]) -> LazyMaker:
    """
    Adapt a strict maker (self is a callable) to the lazy interface.

    The returned maker hands ``f_maker`` a callable that forces the thunk
    on every call, so the same maker can be fixed with Y or Z:

        lazy_fixed_point(thunked(factorial_maker))(5) == 120
    """
    def maker(thunk: Thunk):
        return f_maker(lambda *args, **kwargs: thunk.force()(*args, **kwargs))

    maker.__name__ = getattr(f_maker, '__name__', maker.__name__)
    return maker
