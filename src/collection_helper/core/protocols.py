"""Protocols (callable contracts) consumed by the query helpers.

Any plain function, lambda, or bound method with a compatible
signature satisfies these protocols structurally; no explicit
inheritance is required.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

T_contra = TypeVar("T_contra", contravariant=True)
R_co = TypeVar("R_co", covariant=True)


class Predicate(Protocol[T_contra]):
    """Contract for element tests.

    Implementations should be pure: the helpers call a predicate once
    per visited element, in collection order, and may stop early.
    """

    def __call__(self, item: T_contra, /) -> bool:
        """Return ``True`` when *item* matches."""
        ...  # pragma: no cover


class Mapper(Protocol[T_contra, R_co]):
    """Contract for element projections.

    Called exactly once per element, in collection order.
    """

    def __call__(self, item: T_contra, /) -> R_co:
        """Return the projection of *item*."""
        ...  # pragma: no cover
