from __future__ import annotations

import logging
from typing import Any

import requests
from tenacity.wait import wait_base

from session_assertions.application.ports.browser_client_port import BrowserClientPort
from session_assertions.infrastructure.adapters.cookies.cookiejar_adapter import CookieJarAdapter
from session_assertions.infrastructure.adapters.http.retry import DEFAULT_ATTEMPTS, DEFAULT_WAIT, transport_retrying

logger = logging.getLogger(__name__)


class RequestsBrowserClient(BrowserClientPort):
    """Browser client over a requests.Session, for apps served on a real port.

    ``base_url`` is prefixed to relative urls; ``timeout`` is applied to
    every request that does not pass its own.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        base_url: str = "",
        timeout: float = 45.0,
        attempts: int = DEFAULT_ATTEMPTS,
        wait: wait_base = DEFAULT_WAIT,
    ) -> None:
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._cookie_jar = CookieJarAdapter(self.session.cookies)
        self._attempts = attempts
        self._wait = wait

    def _log(self, msg: str) -> None:
        logger.debug(f"[RequestsBrowserClient] {msg}")

    @property
    def cookie_jar(self) -> CookieJarAdapter:
        return self._cookie_jar

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        if url.startswith("/"):
            url = self.base_url + url
        kwargs.setdefault("timeout", self.timeout)
        self._log(f"{method} {url} | cookies: {[c.name for c in self.session.cookies]}")
        for attempt in transport_retrying(requests.ConnectionError, attempts=self._attempts, wait=self._wait):
            with attempt:
                return self.session.request(method, url, **kwargs)
        raise AssertionError("unreachable")

    def get(self, url: str, **kwargs: Any) -> requests.Response:
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> requests.Response:
        return self.request("POST", url, **kwargs)

    def close(self) -> None:
        self.session.close()
