"""Smoke tests — verify package wiring.

These tests prove that:
* The public API is importable from the top-level package.
* The exception hierarchy is correctly structured.
* Version is accessible.
"""

from __future__ import annotations

import pytest

import collection_helper
from collection_helper import __version__
from collection_helper.core import query
from collection_helper.exceptions import (
    MULTIPLE_ITEMS_MATCH,
    NO_ITEMS_MATCH,
    CollectionHelperError,
    InvalidOperationError,
    MultipleItemsMatchError,
    NoItemsMatchError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidOperationError,
            NoItemsMatchError,
            MultipleItemsMatchError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[CollectionHelperError]
    ) -> None:
        assert issubclass(exc_class, CollectionHelperError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(CollectionHelperError, Exception)

    def test_match_errors_are_invalid_operations(self) -> None:
        assert issubclass(NoItemsMatchError, InvalidOperationError)
        assert issubclass(MultipleItemsMatchError, InvalidOperationError)

    def test_fixed_messages(self) -> None:
        assert str(NoItemsMatchError()) == NO_ITEMS_MATCH == "No items match!"
        assert (
            str(MultipleItemsMatchError())
            == MULTIPLE_ITEMS_MATCH
            == "Multiple items match!"
        )

    def test_hint_is_stored(self) -> None:
        err = CollectionHelperError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert CollectionHelperError("boom").hint is None
        assert NoItemsMatchError().hint is None

    def test_hint_on_match_errors(self) -> None:
        err = MultipleItemsMatchError(hint="use first() instead")
        assert err.hint == "use first() instead"


# ---------------------------------------------------------------------------
# Public API surface
# ---------------------------------------------------------------------------

class TestPublicAPI:
    @pytest.mark.parametrize("name", collection_helper.__all__)
    def test_exported_names_resolve(self, name: str) -> None:
        assert hasattr(collection_helper, name)

    def test_top_level_reexports_core_functions(self) -> None:
        assert collection_helper.first is query.first
        assert collection_helper.map is query.map

    def test_builtins_are_not_shadowed_for_callers(self) -> None:
        from collection_helper import filter as ch_filter

        assert ch_filter is not filter
        assert list(filter(None, [0, 1])) == [1]
