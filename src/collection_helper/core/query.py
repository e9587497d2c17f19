"""Pure LINQ-style query helpers over ordered collections.

Every function in this module is a **pure**, single-pass scan — no I/O,
no side effects on the input, fully deterministic.  ``None`` is accepted
wherever a collection is expected and behaves exactly like an empty
collection.

Several helpers intentionally share their names with builtins
(``filter``, ``map``, ``any``, ``all``); import the module or the names
explicitly rather than star-importing into a namespace that relies on
the builtins.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Final, TypeVar

from collection_helper.core.protocols import Mapper, Predicate
from collection_helper.exceptions import MultipleItemsMatchError, NoItemsMatchError

T = TypeVar("T")
R = TypeVar("R")

NOT_FOUND_INDEX: Final[int] = -1
"""Index returned when no element matches."""

_MISSING: Final = object()


# ---------------------------------------------------------------------------
# Scanning primitives
# ---------------------------------------------------------------------------

def _locate_first(
    items: Collection[T] | None,
    predicate: Predicate[T],
) -> tuple[int, object]:
    """Return ``(index, item)`` of the first match or ``(-1, _MISSING)``."""
    if is_empty(items):
        return NOT_FOUND_INDEX, _MISSING
    for index, item in enumerate(items):
        if predicate(item):
            return index, item
    return NOT_FOUND_INDEX, _MISSING


def _locate_single(
    items: Collection[T] | None,
    predicate: Predicate[T],
) -> tuple[int, object]:
    """Return ``(index, item)`` of the only match or ``(-1, _MISSING)``.

    The whole collection is scanned, but the scan stops with
    :class:`MultipleItemsMatchError` as soon as a second match is seen.
    """
    found_index = NOT_FOUND_INDEX
    found: object = _MISSING
    if is_empty(items):
        return found_index, found
    for index, item in enumerate(items):
        if not predicate(item):
            continue
        if found is not _MISSING:
            raise MultipleItemsMatchError()
        found_index, found = index, item
    return found_index, found


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def is_empty(items: Collection[object] | None) -> bool:
    """Return ``True`` if *items* is ``None`` or has no elements."""
    return items is None or len(items) == 0


def filter(  # noqa: A001
    items: Collection[T] | None,
    predicate: Predicate[T],
) -> list[T]:
    """Return a new list of the elements matching *predicate*, in order."""
    if is_empty(items):
        return []
    return [item for item in items if predicate(item)]


def first_or_none(
    items: Collection[T] | None,
    predicate: Predicate[T],
    default: T | None = None,
) -> T | None:
    """Return the first matching element, or *default* if none matches."""
    _, found = _locate_first(items, predicate)
    if found is _MISSING:
        return default
    return found  # type: ignore[return-value]


def first(items: Collection[T] | None, predicate: Predicate[T]) -> T:
    """Return the first matching element.

    Raises
    ------
    NoItemsMatchError
        If no element matches (including empty or ``None`` input).
    """
    _, found = _locate_first(items, predicate)
    if found is _MISSING:
        raise NoItemsMatchError()
    return found  # type: ignore[return-value]


def first_index_of(items: Collection[T] | None, predicate: Predicate[T]) -> int:
    """Return the index of the first match, or :data:`NOT_FOUND_INDEX`."""
    index, _ = _locate_first(items, predicate)
    return index


def any(items: Collection[T] | None, predicate: Predicate[T]) -> bool:  # noqa: A001
    """Return ``True`` if at least one element matches."""
    return first_index_of(items, predicate) != NOT_FOUND_INDEX


def all(items: Collection[T] | None, predicate: Predicate[T]) -> bool:  # noqa: A001
    """Return ``True`` if every element matches.

    Unlike the builtin, an empty or ``None`` collection yields ``False``.
    """
    if is_empty(items):
        return False
    for item in items:
        if not predicate(item):
            return False
    return True


def single_or_none(
    items: Collection[T] | None,
    predicate: Predicate[T],
    default: T | None = None,
) -> T | None:
    """Return the only matching element, or *default* if none matches.

    Raises
    ------
    MultipleItemsMatchError
        If more than one element matches.
    """
    _, found = _locate_single(items, predicate)
    if found is _MISSING:
        return default
    return found  # type: ignore[return-value]


def single(items: Collection[T] | None, predicate: Predicate[T]) -> T:
    """Return the only matching element.

    Raises
    ------
    NoItemsMatchError
        If no element matches.
    MultipleItemsMatchError
        If more than one element matches.
    """
    _, found = _locate_single(items, predicate)
    if found is _MISSING:
        raise NoItemsMatchError()
    return found  # type: ignore[return-value]


def single_index_of(items: Collection[T] | None, predicate: Predicate[T]) -> int:
    """Return the index of the only match, or :data:`NOT_FOUND_INDEX`.

    Raises
    ------
    MultipleItemsMatchError
        If more than one element matches.
    """
    index, _ = _locate_single(items, predicate)
    return index


def count(items: Collection[T] | None, predicate: Predicate[T]) -> int:
    """Return the number of elements matching *predicate*."""
    total = 0
    if is_empty(items):
        return total
    for item in items:
        if predicate(item):
            total += 1
    return total


def map(  # noqa: A001
    items: Collection[T] | None,
    mapper: Mapper[T, R],
) -> list[R]:
    """Project each element through *mapper* into a new list.

    The result always has the same length as the input; ``None`` input
    yields an empty list, never ``None``.
    """
    if is_empty(items):
        return []
    return [mapper(item) for item in items]
