from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from session_assertions.application.ports.cookie_jar_port import CookieJarPort
from session_assertions.application.ports.session_port import SessionPort
from session_assertions.application.ports.token_serializer_port import TokenSerializerPort
from session_assertions.application.ports.token_storage_port import TokenStoragePort
from session_assertions.application.use_cases.assert_session import MISSING, SessionAttributeAssertions
from session_assertions.application.use_cases.login_as_user import LoginAsUserUseCase
from session_assertions.application.use_cases.logout import LogoutUseCase
from session_assertions.domain.entities.token import AuthToken
from session_assertions.domain.errors import ServiceNotFoundError
from session_assertions.domain.model import DEFAULT_FIREWALL, SessionBinding, User
from session_assertions.infrastructure.adapters.security.json_token_serializer import JsonTokenSerializer

SESSION_SERVICE = "session"
TOKEN_STORAGE_SERVICE = "security.token_storage"


class SessionAssertionHelper:
    """Log a simulated browser in and out, and assert on its session.

    Every operation works on the one ``session`` handed in at construction,
    between two requests of the browser client that owns ``cookie_jar``::

        helper = SessionAssertionHelper(session, client.cookie_jar, guard=True)
        helper.login(SimpleUser("john_doe@gmail.com", ("ROLE_ADMIN",)))
        client.get("/admin")
        helper.assert_session_has("_security_main")
        helper.logout()

    ``token_storage`` is optional; without one, logout() skips clearing it.
    ``firewall_name`` is the firewall login() uses when none is passed.
    """

    def __init__(
        self,
        session: SessionPort,
        cookie_jar: CookieJarPort,
        token_storage: TokenStoragePort | None = None,
        *,
        guard: bool = False,
        firewall_name: str = DEFAULT_FIREWALL,
        serializer: TokenSerializerPort | None = None,
    ) -> None:
        self.session = session
        self.cookie_jar = cookie_jar
        self.token_storage = token_storage
        self.serializer = serializer or JsonTokenSerializer()
        self._login = LoginAsUserUseCase(
            session, cookie_jar, self.serializer, guard=guard, firewall_name=firewall_name
        )
        self._logout = LogoutUseCase(session, cookie_jar, token_storage)
        self._assertions = SessionAttributeAssertions(session)

    @classmethod
    def from_services(
        cls,
        services: Mapping[str, Any],
        cookie_jar: CookieJarPort,
        *,
        guard: bool = False,
        firewall_name: str = DEFAULT_FIREWALL,
        serializer: TokenSerializerPort | None = None,
    ) -> "SessionAssertionHelper":
        """Build the helper from a name -> service mapping.

        ``"session"`` is required, ``"security.token_storage"`` is optional.

        Raises:
            ServiceNotFoundError: no ``"session"`` entry in ``services``.
        """
        if SESSION_SERVICE not in services:
            raise ServiceNotFoundError(SESSION_SERVICE)
        return cls(
            services[SESSION_SERVICE],
            cookie_jar,
            services.get(TOKEN_STORAGE_SERVICE),
            guard=guard,
            firewall_name=firewall_name,
            serializer=serializer,
        )

    @property
    def guard(self) -> bool:
        return self._login.guard

    @property
    def firewall_name(self) -> str:
        return self._login.firewall_name

    def login(
        self,
        user: User,
        firewall_name: str | None = None,
        firewall_context: str | None = None,
    ) -> AuthToken:
        """Authenticate ``user`` on a firewall, the helper's ``firewall_name`` by default.

        The token lands in the session under ``_security_<firewall_context>``,
        or ``_security_<firewall_name>`` when no context is given, and the
        session cookie is added to the jar.
        """
        return self._login.execute(user, firewall_name, firewall_context)

    def logout(self) -> None:
        """Invalidate the session and purge its cookies, plus MOCKSESSID and REMEMBERME."""
        self._logout.execute()

    def assert_session_has(self, attribute: str, value: Any = MISSING) -> None:
        """Fail unless ``attribute`` exists or, given ``value``, equals it."""
        self._assertions.has(attribute, value)

    def assert_session_does_not_have(self, attribute: str, value: Any = MISSING) -> None:
        """Fail if ``attribute`` exists or, given ``value``, equals it."""
        self._assertions.does_not_have(attribute, value)

    def assert_session_has_values(self, bindings: Iterable[SessionBinding]) -> None:
        self._assertions.has_values(bindings)
