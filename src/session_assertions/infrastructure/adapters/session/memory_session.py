from __future__ import annotations
import secrets
from typing import Any
from session_assertions.application.ports.session_port import SessionPort
from session_assertions.domain.model import MOCK_SESSION_NAME

class InMemorySession(SessionPort):
    """Dict-backed session for tests. save() is a no-op."""

    def __init__(self, name: str = MOCK_SESSION_NAME, session_id: str | None = None) -> None:
        self._name = name
        self._id = session_id or secrets.token_hex(16)
        self._attributes: dict[str, Any] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def id(self) -> str:
        return self._id

    def has(self, key: str) -> bool:
        return key in self._attributes

    def get(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._attributes[key] = value

    def remove(self, key: str) -> Any:
        return self._attributes.pop(key, None)

    def all(self) -> dict[str, Any]:
        return dict(self._attributes)

    def save(self) -> None:
        pass

    def invalidate(self) -> None:
        self._attributes.clear()
        self._id = secrets.token_hex(16)
