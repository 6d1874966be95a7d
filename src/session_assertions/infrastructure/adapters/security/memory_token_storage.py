from __future__ import annotations
from session_assertions.application.ports.token_storage_port import TokenStoragePort
from session_assertions.domain.entities.token import AuthToken

class InMemoryTokenStorage(TokenStoragePort):
    """Holds the current token for the test process. Not persistent."""

    def __init__(self, token: AuthToken | None = None) -> None:
        self._token = token

    def get_token(self) -> AuthToken | None:
        return self._token

    def set_token(self, token: AuthToken | None = None) -> None:
        self._token = token
