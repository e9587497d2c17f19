"""Custom exception hierarchy for collection-helper.

Every error raised by the library inherits from
:class:`CollectionHelperError`.  Exceptions raised by caller-supplied
predicates or mappers are never wrapped; they propagate unchanged.

Hierarchy
---------
CollectionHelperError
└── InvalidOperationError
    ├── NoItemsMatchError
    └── MultipleItemsMatchError
"""

from __future__ import annotations

NO_ITEMS_MATCH: str = "No items match!"
"""Message used when an operation required a match and found none."""

MULTIPLE_ITEMS_MATCH: str = "Multiple items match!"
"""Message used when an operation required exactly one match."""


class CollectionHelperError(Exception):
    """Base exception for all collection-helper errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance for the caller."""


# --- Query contract violations ---------------------------------------------

class InvalidOperationError(CollectionHelperError):
    """Raised when a query's match-count contract is violated.

    These are programming errors surfaced to the caller, not
    recoverable runtime conditions.  Catch this class to handle both
    the zero-match and the multiple-match case.
    """


class NoItemsMatchError(InvalidOperationError):
    """Raised by ``first`` / ``single`` when nothing matches."""

    def __init__(self, *, hint: str | None = None) -> None:
        super().__init__(NO_ITEMS_MATCH, hint=hint)


class MultipleItemsMatchError(InvalidOperationError):
    """Raised by the ``single*`` family on a second match."""

    def __init__(self, *, hint: str | None = None) -> None:
        super().__init__(MULTIPLE_ITEMS_MATCH, hint=hint)
