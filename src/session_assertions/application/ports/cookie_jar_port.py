from __future__ import annotations

from typing import Protocol, runtime_checkable

from session_assertions.domain.entities.cookie import Cookie


@runtime_checkable
class CookieJarPort(Protocol):
    """Cookie store shared by the browser-emulation client across requests."""

    def set(self, cookie: Cookie) -> None: ...
    def get(self, name: str) -> Cookie | None: ...
    def all(self) -> list[Cookie]: ...

    def expire(self, name: str) -> None:
        """Mark every cookie called ``name`` as expired. Unknown names are ignored."""
        ...

    def flush_expired(self) -> None:
        """Remove expired cookies from the jar."""
        ...
