from __future__ import annotations
from typing import Protocol

from session_assertions.domain.entities.token import AuthToken

class TokenStoragePort(Protocol):
    """Holds the token of the currently authenticated user, if any."""

    def get_token(self) -> AuthToken | None: ...
    def set_token(self, token: AuthToken | None = None) -> None: ...
