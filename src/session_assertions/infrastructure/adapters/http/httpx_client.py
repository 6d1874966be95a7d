from __future__ import annotations

import logging
from typing import Any

import httpx
from tenacity.wait import wait_base

from session_assertions.application.ports.browser_client_port import BrowserClientPort
from session_assertions.infrastructure.adapters.cookies.cookiejar_adapter import CookieJarAdapter
from session_assertions.infrastructure.adapters.http.retry import DEFAULT_ATTEMPTS, DEFAULT_WAIT, transport_retrying

logger = logging.getLogger(__name__)


class HttpxBrowserClient(BrowserClientPort):
    """Browser client over an httpx.Client, including FastAPI/Starlette ``TestClient``.

    Args:
        client: Client to wrap. A plain ``httpx.Client(timeout=timeout)`` when omitted.
        timeout: Only used when ``client`` is omitted.
        attempts: Tries per request when the transport fails.
        wait: tenacity wait strategy between those tries.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        *,
        timeout: float = 45.0,
        attempts: int = DEFAULT_ATTEMPTS,
        wait: wait_base = DEFAULT_WAIT,
    ) -> None:
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._cookie_jar = CookieJarAdapter(self._client.cookies.jar)
        self._attempts = attempts
        self._wait = wait

    def _log(self, msg: str) -> None:
        logger.debug(f"[HttpxBrowserClient] {msg}")

    @property
    def cookie_jar(self) -> CookieJarAdapter:
        return self._cookie_jar

    def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        self._log(f"{method} {url} | cookies: {[c.name for c in self._client.cookies.jar]}")
        for attempt in transport_retrying(httpx.TransportError, attempts=self._attempts, wait=self._wait):
            with attempt:
                return self._client.request(method, url, **kwargs)
        raise AssertionError("unreachable")

    def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("POST", url, **kwargs)

    def close(self) -> None:
        self._client.close()
