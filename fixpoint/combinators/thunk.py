"""
Thunks
======

Deferred computations with call-by-need semantics.

Python evaluates every argument before a function body runs. A non-strict
language instead passes the *expression* and evaluates it only when the
body demands its value, and at most once. A thunk models that directly:

    t = Thunk(lambda: expensive())   # nothing evaluated yet
    t.force()                        # evaluates, caches
    t.force()                        # cached value, no re-evaluation

This is the primitive that lets the Y combinator run in an eager host.
"""

from typing import Any, Callable, Generic, TypeVar

T = TypeVar('T')

_UNSET = object()


class Thunk(Generic[T]):
    """
    A zero-argument computation evaluated at most once.

    Usage:
        >>> t = delay(lambda: 6 * 7)
        >>> t.evaluated
        False
        >>> t.force()
        42
        >>> t()
        42
    """

    __slots__ = ('_compute', '_value')

    def __init__(self, compute: Callable[[], T]):
        if not callable(compute):
            raise TypeError(f"Expected callable, got {type(compute).__name__}")
        self._compute = compute
        self._value = _UNSET

    @property
    def evaluated(self) -> bool:
        return self._value is not _UNSET

    def force(self) -> T:
        """Evaluate the deferred computation (once) and return its value."""
        if self._value is _UNSET:
            # A failing computation leaves the thunk unevaluated.
            self._value = self._compute()
            self._compute = None
        return self._value

    __call__ = force

    def __repr__(self):
        if self.evaluated:
            return f"Thunk(value={self._value!r})"
        return "Thunk(<unevaluated>)"


def delay(compute: Callable[[], T]) -> Thunk[T]:
    """Wrap a zero-argument callable in a thunk."""
    return Thunk(compute)


def force(value: Any) -> Any:
    """Force a thunk; any other value is returned unchanged."""
    if isinstance(value, Thunk):
        return value.force()
    return value
