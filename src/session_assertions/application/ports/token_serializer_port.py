from __future__ import annotations
from typing import Protocol

from session_assertions.domain.entities.token import AuthToken

class TokenSerializerPort(Protocol):
    """Turns tokens into the bytes stored in the session, and back.

    Implementations:
    - JsonTokenSerializer
    - Fakes for testing
    """

    def serialize(self, token: AuthToken) -> bytes: ...

    def deserialize(self, payload: bytes) -> AuthToken:
        """Raises ValueError if ``payload`` is not a token this serializer wrote."""
        ...
