"""
Verification
============

Harnesses for the two things worth asserting about a fixed point: that it
computes the same function as named recursion, and that a diverging
definition diverges boundedly instead of hanging the caller.
"""

from fixpoint.verification.termination import (
    BoundedEvaluator,
    BoundedRun,
    TerminationStatus,
    recursion_budget,
)
from fixpoint.verification.equivalence import (
    EquivalenceChecker,
    EquivalenceReport,
    Mismatch,
)

__all__ = [
    'BoundedEvaluator',
    'BoundedRun',
    'TerminationStatus',
    'recursion_budget',
    'EquivalenceChecker',
    'EquivalenceReport',
    'Mismatch',
]
