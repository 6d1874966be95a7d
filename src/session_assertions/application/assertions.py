"""Assertion primitives used by the session helpers.

They raise :class:`AssertionFailure` (an ``AssertionError``), so pytest and
unittest report them like any other failed assertion.
"""
from __future__ import annotations

from typing import Any, NoReturn

from session_assertions.domain.errors import AssertionFailure


def fail(message: str) -> NoReturn:
    raise AssertionFailure(message)


def assert_equals(expected: Any, actual: Any) -> None:
    if not expected == actual:
        fail(f"Failed asserting that {actual!r} matches expected {expected!r}.")


def assert_not_equals(expected: Any, actual: Any) -> None:
    if expected == actual:
        fail(f"Failed asserting that {actual!r} is not equal to {expected!r}.")
