from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence, Union, runtime_checkable

# =========================
# Constants
# =========================
MOCK_SESSION_NAME = "MOCKSESSID"
REMEMBER_ME_COOKIE = "REMEMBERME"
DEFAULT_FIREWALL = "main"

# =========================
# Users
# =========================
@runtime_checkable
class User(Protocol):
    @property
    def identifier(self) -> str: ...
    @property
    def roles(self) -> Sequence[str]: ...


@dataclass(frozen=True)
class SimpleUser:
    identifier: str
    roles: tuple[str, ...] = field(default=("ROLE_USER",))

# =========================
# Session bindings
# =========================
@dataclass(frozen=True)
class NameOnly:
    """The attribute must be present, whatever its value."""
    attribute: str


@dataclass(frozen=True)
class NameValue:
    """The attribute must hold a value equal to ``value``."""
    attribute: str
    value: Any


SessionBinding = Union[NameOnly, NameValue]
