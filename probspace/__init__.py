"""
Finite discrete probability spaces.

This package provides a validated probability space over a finite set of
orderable outcomes, together with event queries (probability, complement,
union, intersection, conditional probability) and a strict/permissive mode
controlling how outcomes outside the sample space are treated.
"""

from probspace.config import EPSILON, SpaceConfig
from probspace.core import ProbabilitySpace
from probspace.diagnostics import SpaceDiagnostics
from probspace.errors import (
    ConditionOnZero,
    InvalidDistribution,
    ProbabilitySpaceError,
    UnknownOutcome,
)
from probspace.events import as_event, merge_intersection, merge_union

__all__ = [
    "EPSILON",
    "SpaceConfig",
    "ProbabilitySpace",
    "SpaceDiagnostics",
    "ProbabilitySpaceError",
    "InvalidDistribution",
    "UnknownOutcome",
    "ConditionOnZero",
    "as_event",
    "merge_union",
    "merge_intersection",
]

__version__ = "0.1.0"
