from __future__ import annotations

import logging

from session_assertions.application.ports.cookie_jar_port import CookieJarPort
from session_assertions.application.ports.session_port import SessionPort
from session_assertions.application.ports.token_storage_port import TokenStoragePort
from session_assertions.domain.model import MOCK_SESSION_NAME, REMEMBER_ME_COOKIE

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """Invalidates the session and drops the cookies that would keep the browser logged in."""

    def __init__(
        self,
        session: SessionPort,
        cookie_jar: CookieJarPort,
        token_storage: TokenStoragePort | None = None,
    ) -> None:
        self.session = session
        self.cookie_jar = cookie_jar
        self.token_storage = token_storage

    def _log(self, msg: str) -> None:
        logger.debug(f"[LogoutUseCase] {msg}")

    def execute(self) -> None:
        if self.token_storage is not None:
            self.token_storage.set_token(None)

        # invalidate() may rename the session, read the name first
        session_name = self.session.name
        self.session.invalidate()

        doomed = {MOCK_SESSION_NAME, REMEMBER_ME_COOKIE, session_name}
        expired: list[str] = []
        for cookie in self.cookie_jar.all():
            if cookie.name in doomed:
                self.cookie_jar.expire(cookie.name)
                expired.append(cookie.name)
        self.cookie_jar.flush_expired()
        self._log(f"session {session_name} invalidated, expired cookies: {expired or '-'}")
