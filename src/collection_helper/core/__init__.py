"""Core layer — pure query helpers and their callable contracts.

Rules
-----
* No ``print()`` calls and no logging.
* No filesystem or network I/O.
* Inputs are never mutated; results are always freshly allocated.
"""

from collection_helper.core import query
from collection_helper.core.protocols import Mapper, Predicate
from collection_helper.core.query import NOT_FOUND_INDEX

__all__: list[str] = [
    "NOT_FOUND_INDEX",
    "Mapper",
    "Predicate",
    "query",
]
