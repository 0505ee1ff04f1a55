from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from probspace.core import ProbabilitySpace


@dataclass(frozen=True)
class SpaceDiagnostics:
    """
    Summary of a constructed probability space.

    The report describes the stored mass function only; it does not depend
    on any query that has been run.
    """

    n_outcomes: int
    sum_to_one_error: float
    min_probability: float
    max_probability: float
    n_zero_mass: int
    entropy_bits: float
    ignore_unknown: bool

    @staticmethod
    def from_space(space: "ProbabilitySpace") -> "SpaceDiagnostics":
        p = np.asarray(space.masses, dtype=float)
        sum_err = float(abs(float(np.sum(p)) - 1.0))
        min_p = float(np.min(p)) if p.size else float("nan")
        max_p = float(np.max(p)) if p.size else float("nan")

        # Zero-mass outcomes contribute 0 (limit of p*log p).
        nz = p[p > 0.0]
        entropy = float(-np.sum(nz * np.log2(nz))) if nz.size else 0.0

        return SpaceDiagnostics(
            n_outcomes=int(p.size),
            sum_to_one_error=sum_err,
            min_probability=min_p,
            max_probability=max_p,
            n_zero_mass=int(np.count_nonzero(p == 0.0)),
            entropy_bits=entropy,
            ignore_unknown=bool(space.get_mode()),
        )
