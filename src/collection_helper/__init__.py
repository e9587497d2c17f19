"""collection-helper — LINQ-style query helpers for Python collections.

A limited subset of LINQ's enumerable methods (filter, map, first,
single, any, all, count, ...) over ordered, read-only collections.
"""

from collection_helper.core.protocols import Mapper, Predicate
from collection_helper.core.query import (
    NOT_FOUND_INDEX,
    all,
    any,
    count,
    filter,
    first,
    first_index_of,
    first_or_none,
    is_empty,
    map,
    single,
    single_index_of,
    single_or_none,
)
from collection_helper.exceptions import (
    MULTIPLE_ITEMS_MATCH,
    NO_ITEMS_MATCH,
    CollectionHelperError,
    InvalidOperationError,
    MultipleItemsMatchError,
    NoItemsMatchError,
)
from collection_helper.version import __version__

__all__: list[str] = [
    "MULTIPLE_ITEMS_MATCH",
    "NOT_FOUND_INDEX",
    "NO_ITEMS_MATCH",
    "CollectionHelperError",
    "InvalidOperationError",
    "Mapper",
    "MultipleItemsMatchError",
    "NoItemsMatchError",
    "Predicate",
    "__version__",
    "all",
    "any",
    "count",
    "filter",
    "first",
    "first_index_of",
    "first_or_none",
    "is_empty",
    "map",
    "single",
    "single_index_of",
    "single_or_none",
]
