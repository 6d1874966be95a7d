from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from session_assertions.domain.model import User


@dataclass(frozen=True)
class GuardToken:
    user: User
    firewall_name: str
    roles: tuple[str, ...]


@dataclass(frozen=True)
class UsernamePasswordToken:
    user: User
    credentials: Any
    firewall_name: str
    roles: tuple[str, ...]


AuthToken = Union[GuardToken, UsernamePasswordToken]
