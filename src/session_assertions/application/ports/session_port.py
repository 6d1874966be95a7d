from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SessionPort(Protocol):
    """Attribute store for the session a simulated browser is attached to."""

    @property
    def name(self) -> str:
        """Cookie name the session travels under (e.g. MOCKSESSID)."""
        ...

    @property
    def id(self) -> str:
        """Opaque session identifier; changes on invalidate()."""
        ...

    def has(self, key: str) -> bool: ...
    def get(self, key: str, default: Any = None) -> Any: ...
    def set(self, key: str, value: Any) -> None: ...
    def remove(self, key: str) -> Any: ...
    def all(self) -> dict[str, Any]: ...

    def save(self) -> None:
        """Persist attributes so the application under test can read them."""
        ...

    def invalidate(self) -> None:
        """Drop every attribute and issue a new id."""
        ...
