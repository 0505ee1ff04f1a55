"""
Error taxonomy for probability spaces.

All errors share the base class ProbabilitySpaceError, which derives from
ValueError so that callers catching ValueError continue to work. The concrete
subclasses separate construction failures from query failures.
"""

from __future__ import annotations

from typing import Any, Literal, Optional, Tuple

InvalidReason = Literal["negative_mass", "sum_mismatch", "non_numeric"]


class ProbabilitySpaceError(ValueError):
    """Base class for all probability space errors."""


class InvalidDistribution(ProbabilitySpaceError):
    """
    Raised at construction when the mass function is not a valid distribution.

    Attributes:
        reason: Which validation step failed.
        outcome: The offending outcome for per-entry failures, else None.
        total: The computed total mass for sum failures, else None.
    """

    def __init__(
        self,
        message: str,
        *,
        reason: InvalidReason,
        outcome: Any = None,
        total: Optional[float] = None,
    ) -> None:
        super().__init__(message)
        self.reason: InvalidReason = reason
        self.outcome = outcome
        self.total = total


class UnknownOutcome(ProbabilitySpaceError):
    """
    Raised by a strict-mode query when an event mentions an outcome outside
    the sample space.
    """

    def __init__(self, outcomes: Tuple[Any, ...]) -> None:
        self.outcomes: Tuple[Any, ...] = tuple(outcomes)
        super().__init__(
            f"Event contains outcome(s) not in sample space: {list(self.outcomes)!r}"
        )


class ConditionOnZero(ProbabilitySpaceError):
    """Raised when conditioning on an event of probability exactly zero."""

    def __init__(self, condition: Tuple[Any, ...]) -> None:
        self.condition: Tuple[Any, ...] = tuple(condition)
        super().__init__(
            "Tried to calculate conditional probability P(A|B) with B s.t. P(B)=0 "
            f"(B={list(self.condition)!r})"
        )
