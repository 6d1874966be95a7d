from __future__ import annotations

import json

from session_assertions.application.ports.token_serializer_port import TokenSerializerPort
from session_assertions.domain.entities.token import AuthToken, GuardToken, UsernamePasswordToken
from session_assertions.domain.model import SimpleUser

GUARD = "guard"
USERNAME_PASSWORD = "username_password"


class JsonTokenSerializer(TokenSerializerPort):
    """UTF-8 JSON payload: ``{"type", "user", "roles", "firewall"}``.

    Only the user identifier is written; deserialize() rebuilds the user as a
    SimpleUser. Credentials are never written.
    """

    def serialize(self, token: AuthToken) -> bytes:
        if isinstance(token, GuardToken):
            kind = GUARD
        elif isinstance(token, UsernamePasswordToken):
            kind = USERNAME_PASSWORD
        else:
            raise TypeError(f"Cannot serialize {type(token).__name__}")
        payload = {
            "type": kind,
            "user": token.user.identifier,
            "roles": list(token.roles),
            "firewall": token.firewall_name,
        }
        return json.dumps(payload, sort_keys=True).encode("utf-8")

    def deserialize(self, payload: bytes) -> AuthToken:
        try:
            data = json.loads(payload.decode("utf-8"))
            kind = data["type"]
            roles = tuple(data["roles"])
            user = SimpleUser(data["user"], roles)
            firewall = data["firewall"]
        except (UnicodeDecodeError, json.JSONDecodeError, KeyError, TypeError) as e:
            raise ValueError(f"Invalid token payload: {e}") from e
        if kind == GUARD:
            return GuardToken(user, firewall, roles)
        if kind == USERNAME_PASSWORD:
            return UsernamePasswordToken(user, None, firewall, roles)
        raise ValueError(f"Unknown token type: {kind!r}")
