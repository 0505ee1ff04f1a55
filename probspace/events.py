"""
Event helpers.

Events are normalised to ascending tuples of distinct outcomes so that set
operations can be done by a single linear merge and masses are always summed
in the same order.
"""

from __future__ import annotations

from typing import Any, Container, Iterable, List, Tuple

Event = Tuple[Any, ...]


def as_event(outcomes: Iterable[Any]) -> Event:
    """
    Return the event as an ascending tuple of distinct outcomes.

    Raises:
        TypeError: If the outcomes cannot be ordered against each other.
    """
    if isinstance(outcomes, (str, bytes)):
        raise TypeError("An event must be a collection of outcomes, not a string")
    return tuple(sorted(set(outcomes)))


def merge_union(a: Event, b: Event) -> Event:
    """
    Union of two ascending events in O(len(a) + len(b)).
    """
    out: List[Any] = []
    i = 0
    j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            out.append(a[i])
            i += 1
        elif b[j] < a[i]:
            out.append(b[j])
            j += 1
        else:
            out.append(a[i])
            i += 1
            j += 1
    out.extend(a[i:])
    out.extend(b[j:])
    return tuple(out)


def merge_intersection(a: Event, b: Event) -> Event:
    """
    Intersection of two ascending events in O(len(a) + len(b)).
    """
    out: List[Any] = []
    i = 0
    j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            i += 1
        elif b[j] < a[i]:
            j += 1
        else:
            out.append(a[i])
            i += 1
            j += 1
    return tuple(out)


def foreign_outcomes(event: Event, known: Container[Any]) -> Event:
    # Preserves the ascending order of `event`.
    return tuple(o for o in event if o not in known)
