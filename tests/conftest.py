"""Shared pytest configuration for the collection-helper test suite.

Guidelines
----------
* Core tests must be pure — no I/O, no side effects.
* Library internals are never mocked; predicates and mappers are plain
  callables defined in the tests.
* Tests must not depend on OS state.
"""

from __future__ import annotations
