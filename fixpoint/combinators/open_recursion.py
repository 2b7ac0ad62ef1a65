"""
Open Recursion
==============

A maker never calls itself by name: every recursive call goes through the
``recur`` parameter it is handed. That seam is where behaviour can be
layered in *between* recursive calls without touching the function body.

Each transformer here takes a strict maker and returns a strict maker, so
they compose freely and are fixed with any strict combinator:

    fib = strict_fixed_point(memoized(fibonacci_maker))
    fib(200)   # linear instead of exponential

Because the fixed-point combinator re-derives the target through the maker
at every recursive call site, state owned by a transformer (memo table,
trace, step counter) is shared by all of those re-derived copies.
"""

import functools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

Maker = Callable[[Callable[..., Any]], Callable[..., Any]]


class StepLimitExceeded(RecursionError):
    """Raised when a step-limited function makes more calls than allowed."""

    def __init__(self, limit: int, steps: int):
        super().__init__(f"step limit of {limit} exceeded ({steps} calls)")
        self.limit = limit
        self.steps = steps


def _cache_key(args: tuple, kwargs: dict) -> tuple:
    if not kwargs:
        return args
    return args + (tuple(sorted(kwargs.items())),)


def memoized(f_maker: Maker, cache: Optional[Dict[tuple, Any]] = None) -> Maker:
    """
    Memoise every recursive call of ``f_maker``'s target.

    Results are keyed by the call arguments, so they must be hashable.
    Pass ``cache`` to share (or inspect) the table; it is also exposed as
    ``.cache`` on the returned maker.
    """
    table = {} if cache is None else cache

    def maker(recur):
        target = f_maker(recur)

        def lookup(*args, **kwargs):
            key = _cache_key(args, kwargs)
            if key in table:
                return table[key]
            result = target(*args, **kwargs)
            table[key] = result
            return result

        return lookup

    functools.update_wrapper(maker, f_maker)
    maker.cache = table
    return maker


@dataclass
class CallRecord:
    """One traced invocation."""
    depth: int
    args: tuple
    kwargs: Dict[str, Any]
    result: Any = None
    completed: bool = False


def traced(
    f_maker: Maker,
    name: Optional[str] = None,
    log: Optional[logging.Logger] = None,
) -> Maker:
    """
    Record and log every recursive call with its depth.

    Records accumulate on ``.trace`` of the returned maker in call order;
    entries and exits are logged at DEBUG.
    """
    log = log or logger
    label = name or getattr(f_maker, '__name__', 'anonymous')
    records: List[CallRecord] = []
    depth = [0]

    def maker(recur):
        target = f_maker(recur)

        def call(*args, **kwargs):
            record = CallRecord(depth=depth[0], args=args, kwargs=kwargs)
            records.append(record)
            indent = "  " * record.depth
            log.debug(f"{indent}-> {label}{args} depth={record.depth}")
            depth[0] += 1
            try:
                record.result = target(*args, **kwargs)
            finally:
                depth[0] -= 1
            record.completed = True
            log.debug(f"{indent}<- {label}{args} = {record.result!r}")
            return record.result

        return call

    functools.update_wrapper(maker, f_maker)
    maker.trace = records
    return maker


@dataclass
class StepCounter:
    """Invocation count of the current outermost call."""
    limit: int
    steps: int = 0
    depth: int = 0
    history: List[int] = field(default_factory=list)


def step_limited(f_maker: Maker, max_steps: int) -> Maker:
    """
    Bound the number of target invocations per outermost call.

    Raises ``StepLimitExceeded`` on call number ``max_steps + 1``. The
    counter lives on ``.counter`` of the returned maker; it restarts at
    every new outermost call and the final count of each finished call is
    appended to ``counter.history``.
    """
    if max_steps < 1:
        raise ValueError(f"max_steps must be at least 1, got {max_steps}")
    counter = StepCounter(limit=max_steps)

    def maker(recur):
        target = f_maker(recur)

        def call(*args, **kwargs):
            if counter.depth == 0:
                counter.steps = 0
            counter.steps += 1
            if counter.steps > counter.limit:
                raise StepLimitExceeded(counter.limit, counter.steps)
            counter.depth += 1
            try:
                return target(*args, **kwargs)
            finally:
                counter.depth -= 1
                if counter.depth == 0:
                    counter.history.append(counter.steps)

        return call

    functools.update_wrapper(maker, f_maker)
    maker.counter = counter
    return maker
