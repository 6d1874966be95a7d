from __future__ import annotations

import logging
import time
from http.cookiejar import Cookie as StdlibCookie, CookieJar

from session_assertions.application.ports.cookie_jar_port import CookieJarPort
from session_assertions.domain.entities.cookie import Cookie

logger = logging.getLogger(__name__)

# Any timestamp in the past works; clear_expired_cookies() compares with now.
_EPOCH = 0


def to_stdlib(cookie: Cookie) -> StdlibCookie:
    rest = {"HttpOnly": None} if cookie.http_only else {}
    return StdlibCookie(
        version=0,
        name=cookie.name,
        value=cookie.value,
        port=None,
        port_specified=False,
        domain=cookie.domain,
        domain_specified=bool(cookie.domain),
        domain_initial_dot=cookie.domain.startswith("."),
        path=cookie.path,
        path_specified=bool(cookie.path),
        secure=cookie.secure,
        expires=None if cookie.expires is None else int(cookie.expires),
        discard=cookie.expires is None,
        comment=None,
        comment_url=None,
        rest=rest,
        rfc2109=False,
    )


def from_stdlib(cookie: StdlibCookie) -> Cookie:
    return Cookie(
        name=cookie.name,
        value=cookie.value or "",
        domain=cookie.domain,
        path=cookie.path,
        expires=None if cookie.expires is None else float(cookie.expires),
        secure=cookie.secure,
        http_only=cookie.has_nonstandard_attr("HttpOnly"),
    )


class CookieJarAdapter(CookieJarPort):
    """CookieJarPort over a standard library CookieJar.

    httpx keeps one in ``Client.cookies.jar`` and requests' ``RequestsCookieJar``
    is one, so both browser clients share this adapter.
    """

    def __init__(self, jar: CookieJar) -> None:
        self._jar = jar

    def _log(self, msg: str) -> None:
        logger.debug(f"[CookieJarAdapter] {msg}")

    def set(self, cookie: Cookie) -> None:
        self._jar.set_cookie(to_stdlib(cookie))
        self._log(f"set {cookie.name} domain={cookie.domain or '-'} path={cookie.path}")

    def get(self, name: str) -> Cookie | None:
        for c in self._jar:
            if c.name == name:
                return from_stdlib(c)
        return None

    def all(self) -> list[Cookie]:
        return [from_stdlib(c) for c in self._jar]

    def expire(self, name: str) -> None:
        for c in self._jar:
            if c.name == name:
                c.expires = _EPOCH
                c.discard = False

    def flush_expired(self) -> None:
        before = len(self._jar)
        self._jar.clear_expired_cookies()
        self._log(f"flushed {before - len(self._jar)} expired cookie(s) at {int(time.time())}")
