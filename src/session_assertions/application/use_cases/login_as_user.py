from __future__ import annotations

import logging

from session_assertions.application.ports.cookie_jar_port import CookieJarPort
from session_assertions.application.ports.session_port import SessionPort
from session_assertions.application.ports.token_serializer_port import TokenSerializerPort
from session_assertions.domain.entities.cookie import Cookie
from session_assertions.domain.entities.token import AuthToken, GuardToken, UsernamePasswordToken
from session_assertions.domain.model import DEFAULT_FIREWALL, User
from session_assertions.domain.value_objects.security_key import SecurityKey

logger = logging.getLogger(__name__)


class LoginAsUserUseCase:
    """Stores an authentication token in the session and hands its cookie to the browser."""

    def __init__(
        self,
        session: SessionPort,
        cookie_jar: CookieJarPort,
        serializer: TokenSerializerPort,
        *,
        guard: bool = False,
        firewall_name: str = DEFAULT_FIREWALL,
    ) -> None:
        self.session = session
        self.cookie_jar = cookie_jar
        self.serializer = serializer
        self.guard = guard
        self.firewall_name = firewall_name

    def _log(self, msg: str) -> None:
        logger.debug(f"[LoginAsUserUseCase] {msg}")

    def build_token(self, user: User, firewall_name: str) -> AuthToken:
        roles = tuple(user.roles)
        if self.guard:
            return GuardToken(user, firewall_name, roles)
        return UsernamePasswordToken(user, None, firewall_name, roles)

    def execute(
        self,
        user: User,
        firewall_name: str | None = None,
        firewall_context: str | None = None,
    ) -> AuthToken:
        firewall_name = firewall_name or self.firewall_name
        token = self.build_token(user, firewall_name)
        key = SecurityKey.for_firewall(firewall_name, firewall_context)
        self.session.set(key, self.serializer.serialize(token))
        self.session.save()
        self._log(f"{type(token).__name__} for {user.identifier!r} stored under {key}")

        # the session cookie makes the next requests arrive authenticated
        self.cookie_jar.set(Cookie(self.session.name, self.session.id))
        return token
