"""
Self-Application (U combinator)
===============================

    U = λx. x x

The smallest building block of both fixed-point combinators: hand a
function to itself. Whether ``U(x)`` terminates depends entirely on what
``x`` does with its argument; ``U(U)`` is the classic non-terminating term
(Python reports it as ``RecursionError``).
"""

from typing import Any, Callable


def self_apply(x: Callable[[Callable], Any]) -> Any:
    """Invoke ``x`` with itself as the argument."""
    return x(x)


U = self_apply
