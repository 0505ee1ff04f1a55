"""
Configuration objects for probability spaces.

A frozen dataclass is provided as a stable, typed surface for the few
construction-time settings a space accepts.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass

EPSILON = 1e-9

# Below this, ordinary float rounding in the total can exceed the tolerance.
ROUNDING_TOLERANCE = 1e-15


@dataclass(frozen=True)
class SpaceConfig:
    """
    Construction settings for a ProbabilitySpace.

    Attributes:
        sum_tol: Allowed absolute deviation of the total mass from 1. It can
            only tighten the default EPSILON, never loosen it.
        ignore_unknown: Initial value of the unknown-outcome mode flag.
    """

    sum_tol: float = EPSILON
    ignore_unknown: bool = False

    def validate(self) -> None:
        """
        Configuration validation is performed.
        """
        tol = float(self.sum_tol)
        if not math.isfinite(tol) or tol < 0.0:
            raise ValueError("sum_tol must be a finite non-negative number")
        if tol > EPSILON:
            raise ValueError(f"sum_tol must not exceed {EPSILON} (got {tol})")
        if not isinstance(self.ignore_unknown, bool):
            raise TypeError("ignore_unknown must be a bool")
        if tol < ROUNDING_TOLERANCE:
            warnings.warn(
                f"sum_tol={tol} is below float rounding error; distributions whose "
                "masses are written as decimal fractions may be rejected.",
                UserWarning,
                stacklevel=2,
            )
