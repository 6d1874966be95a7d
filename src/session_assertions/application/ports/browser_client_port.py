from __future__ import annotations

from typing import Any, Protocol

from session_assertions.application.ports.cookie_jar_port import CookieJarPort


class BrowserClientPort(Protocol):
    """Browser-emulation client whose cookie jar the session helpers drive.

    Requests pass straight through to the wrapped library and return its own
    response object, whatever the status code.
    """

    @property
    def cookie_jar(self) -> CookieJarPort: ...

    def request(self, method: str, url: str, **kwargs: Any) -> Any: ...
    def get(self, url: str, **kwargs: Any) -> Any: ...
    def post(self, url: str, **kwargs: Any) -> Any: ...
    def close(self) -> None: ...
