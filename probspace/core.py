"""
Finite discrete probability spaces.

This module provides ProbabilitySpace, which validates a mass function once at
construction and then answers probability queries over events: plain event
probability, complement, union, intersection and conditional probability.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

import numpy as np

from probspace.config import SpaceConfig
from probspace.diagnostics import SpaceDiagnostics
from probspace.errors import ConditionOnZero, InvalidDistribution, UnknownOutcome
from probspace.events import (
    Event,
    as_event,
    foreign_outcomes,
    merge_intersection,
    merge_union,
)


def _coerce_masses(outcomes: Tuple[Any, ...], mapping: Mapping[Any, Any]) -> np.ndarray:
    """
    Return the masses of `outcomes` as a float array, rejecting negative entries.

    Integers too large for a float become signed infinities, so a huge
    negative mass is still reported as negative and a huge positive one fails
    the sum check.

    Raises:
        InvalidDistribution: If a mass is not numeric or is negative.
    """
    masses = np.empty(len(outcomes), dtype=float)
    for pos, outcome in enumerate(outcomes):
        raw = mapping[outcome]
        try:
            masses[pos] = float(raw)
        except OverflowError:
            masses[pos] = -np.inf if raw < 0 else np.inf
        except (TypeError, ValueError):
            raise InvalidDistribution(
                f"Probability of outcome {outcome!r} is not a number: {raw!r}",
                reason="non_numeric",
                outcome=outcome,
            ) from None
        if masses[pos] < 0.0:
            raise InvalidDistribution(
                f"Probabilities must be nonnegative (outcome {outcome!r} has {masses[pos]})",
                reason="negative_mass",
                outcome=outcome,
            )
    return masses


class ProbabilitySpace:
    """
    A finite probability space built from a mass function.

    The mass function maps each outcome of the sample space to its
    probability. Outcomes must be hashable and mutually orderable. After
    construction the masses cannot change; only the unknown-outcome mode can
    be toggled.

    In strict mode (the default) every query rejects events that mention an
    outcome outside the sample space with UnknownOutcome. In permissive mode
    such outcomes are ignored and contribute zero mass.

    No locking is performed. Concurrent queries are safe as long as no other
    thread calls set_mode at the same time; callers that change the mode
    concurrently must serialise access themselves.

    Attributes:
        config: The settings the space was built with.
    """

    def __init__(
        self,
        mapping: Mapping[Any, float],
        *,
        config: Optional[SpaceConfig] = None,
    ) -> None:
        """
        Validate and store a mass function.

        Args:
            mapping: Mapping from outcome to probability. It is copied.
            config: Optional construction settings.

        Raises:
            InvalidDistribution: If a mass is negative or not numeric, or if the
                masses do not sum to 1 within config.sum_tol. An empty mapping
                sums to 0 and is therefore rejected.
            TypeError: If the outcomes cannot be ordered against each other.
        """
        self.config: SpaceConfig = config or SpaceConfig()
        self.config.validate()

        items = dict(mapping)
        outcomes = tuple(sorted(items))
        masses = _coerce_masses(outcomes, items)

        total = float(np.sum(masses))
        if not np.isfinite(total) or abs(total - 1.0) > float(self.config.sum_tol):
            raise InvalidDistribution(
                f"Probabilities must sum to 1 (got {total})",
                reason="sum_mismatch",
                total=total,
            )

        masses.setflags(write=False)
        self._outcomes: Tuple[Any, ...] = outcomes
        self._masses: np.ndarray = masses
        self._position: Dict[Any, int] = {o: i for i, o in enumerate(outcomes)}
        self._ignore_unknown: bool = bool(self.config.ignore_unknown)

    @classmethod
    def uniform(
        cls, outcomes: Iterable[Any], *, config: Optional[SpaceConfig] = None
    ) -> "ProbabilitySpace":
        """
        Build a space giving equal mass to each distinct outcome.
        """
        distinct = as_event(outcomes)
        if not distinct:
            return cls({}, config=config)
        p = 1.0 / len(distinct)
        return cls({o: p for o in distinct}, config=config)

    @classmethod
    def from_weights(
        cls, weights: Mapping[Any, float], *, config: Optional[SpaceConfig] = None
    ) -> "ProbabilitySpace":
        """
        Build a space from non-negative weights by normalising them to sum to 1.

        Weights are scaled by the largest one before summing, so very large
        but finite weights do not overflow the total.

        Raises:
            InvalidDistribution: If a weight is negative or not numeric, or if
                a weight is not finite, or if all weights are zero.
        """
        items = dict(weights)
        outcomes = tuple(sorted(items))
        w = _coerce_masses(outcomes, items)
        w_max = float(np.max(w)) if w.size else 0.0
        if not np.all(np.isfinite(w)) or w_max <= 0.0:
            total = float(np.sum(w))
            raise InvalidDistribution(
                f"Weights must have a positive finite total (got {total})",
                reason="sum_mismatch",
                total=total,
            )
        scaled = w / w_max
        p = scaled / float(np.sum(scaled))
        return cls({o: float(p[i]) for i, o in enumerate(outcomes)}, config=config)

    # ------------------------------------------------------------------
    # Validation and aggregation
    # ------------------------------------------------------------------

    def _check_subset(self, event: Event) -> None:
        if self._ignore_unknown:
            return
        unknown = foreign_outcomes(event, self._position)
        if unknown:
            raise UnknownOutcome(unknown)

    def _mass_of(self, event: Event) -> float:
        """
        Sum the masses of the outcomes in `event`.

        Outcomes outside the sample space raise UnknownOutcome in strict mode
        and are skipped in permissive mode.
        """
        idx: List[int] = []
        for outcome in event:
            pos = self._position.get(outcome)
            if pos is None:
                if not self._ignore_unknown:
                    raise UnknownOutcome((outcome,))
                continue
            idx.append(pos)
        if not idx:
            return 0.0
        return float(np.sum(self._masses[idx]))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def probability(self, event: Iterable[Any]) -> float:
        """
        Return P(event).

        Raises:
            UnknownOutcome: In strict mode, if the event is not a subset of the
                sample space.
        """
        e = as_event(event)
        self._check_subset(e)
        return self._mass_of(e)

    def complement(self, event: Iterable[Any]) -> float:
        """
        Return P(not event) = 1 - P(event), taken relative to the sample space.
        """
        return 1.0 - self.probability(event)

    def union(self, event_a: Iterable[Any], event_b: Iterable[Any]) -> float:
        """
        Return P(A or B).
        """
        a = as_event(event_a)
        b = as_event(event_b)
        self._check_subset(a)
        self._check_subset(b)
        return self._mass_of(merge_union(a, b))

    def intersection(self, event_a: Iterable[Any], event_b: Iterable[Any]) -> float:
        """
        Return P(A and B).
        """
        a = as_event(event_a)
        b = as_event(event_b)
        self._check_subset(a)
        self._check_subset(b)
        return self._mass_of(merge_intersection(a, b))

    def conditional(self, event: Iterable[Any], given: Iterable[Any]) -> float:
        """
        Return P(event | given) = P(event and given) / P(given).

        The denominator is compared against zero exactly, so a conditioning
        event with a tiny but nonzero probability is still usable.

        Raises:
            UnknownOutcome: In strict mode, if either event is not a subset of
                the sample space.
            ConditionOnZero: If P(given) is exactly 0.
        """
        a = as_event(event)
        b = as_event(given)
        self._check_subset(a)
        self._check_subset(b)
        p_b = self._mass_of(b)
        if p_b == 0.0:
            raise ConditionOnZero(b)
        return self._mass_of(merge_intersection(a, b)) / p_b

    # ------------------------------------------------------------------
    # Mode
    # ------------------------------------------------------------------

    def get_mode(self) -> bool:
        """Return True when unknown outcomes are ignored."""
        return self._ignore_unknown

    def set_mode(self, ignore_unknown: bool) -> None:
        """
        Set whether unknown outcomes are ignored. The masses are not revalidated.

        Raises:
            TypeError: If `ignore_unknown` is not a bool.
        """
        if not isinstance(ignore_unknown, (bool, np.bool_)):
            raise TypeError(
                f"ignore_unknown must be a bool (got {type(ignore_unknown).__name__})"
            )
        self._ignore_unknown = bool(ignore_unknown)

    @property
    def ignore_unknown(self) -> bool:
        return self._ignore_unknown

    @ignore_unknown.setter
    def ignore_unknown(self, value: bool) -> None:
        self.set_mode(value)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def outcomes(self) -> Tuple[Any, ...]:
        """Outcomes of the sample space in ascending order."""
        return self._outcomes

    @property
    def sample_space(self) -> frozenset:
        return frozenset(self._outcomes)

    @property
    def masses(self) -> np.ndarray:
        """Copy of the masses, aligned with `outcomes`."""
        return self._masses.copy()

    def mass(self, outcome: Any) -> float:
        """
        Return the probability of a single outcome.

        An outcome outside the sample space raises UnknownOutcome in strict
        mode and has mass 0.0 in permissive mode.
        """
        pos = self._position.get(outcome)
        if pos is None:
            if not self._ignore_unknown:
                raise UnknownOutcome((outcome,))
            return 0.0
        return float(self._masses[pos])

    def to_dict(self) -> Dict[Any, float]:
        return {o: float(self._masses[i]) for i, o in enumerate(self._outcomes)}

    def top_outcomes(self, n: int = 10) -> List[Tuple[float, Any]]:
        """
        Return (mass, outcome) pairs for the n heaviest outcomes.

        Ties keep ascending outcome order.
        """
        n = int(n)
        order = sorted(range(len(self._outcomes)), key=lambda i: -float(self._masses[i]))
        return [(float(self._masses[i]), self._outcomes[i]) for i in order[: max(0, n)]]

    def diagnostics(self) -> SpaceDiagnostics:
        return SpaceDiagnostics.from_space(self)

    def __len__(self) -> int:
        return len(self._outcomes)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._outcomes)

    def __contains__(self, outcome: object) -> bool:
        try:
            return outcome in self._position
        except TypeError:
            return False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.to_dict()!r}, "
            f"ignore_unknown={self._ignore_unknown})"
        )
