from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from session_assertions.application.assertions import assert_equals, assert_not_equals, fail
from session_assertions.application.ports.session_port import SessionPort
from session_assertions.domain.model import NameOnly, NameValue, SessionBinding


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class SessionAttributeAssertions:
    """Assertions over the attributes of one session."""

    def __init__(self, session: SessionPort) -> None:
        self.session = session

    def has(self, attribute: str, value: Any = MISSING) -> None:
        if value is MISSING:
            if not self.session.has(attribute):
                fail(f"No session attribute with name '{attribute}'")
            return
        assert_equals(value, self.session.get(attribute))

    def does_not_have(self, attribute: str, value: Any = MISSING) -> None:
        if value is MISSING:
            if self.session.has(attribute):
                fail(f"Session attribute with name '{attribute}' does exist")
            return
        assert_not_equals(value, self.session.get(attribute))

    def has_values(self, bindings: Iterable[SessionBinding]) -> None:
        for binding in bindings:
            if isinstance(binding, NameOnly):
                self.has(binding.attribute)
            elif isinstance(binding, NameValue):
                self.has(binding.attribute, binding.value)
            else:
                raise TypeError(
                    f"Expected NameOnly or NameValue, got {type(binding).__name__}"
                )
