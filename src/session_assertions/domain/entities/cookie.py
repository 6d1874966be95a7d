from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(frozen=True)
class Cookie:
    name: str
    value: str
    domain: str = ""
    path: str = "/"
    expires: float | None = None  # unix timestamp, None for a session cookie
    secure: bool = False
    http_only: bool = False

    def is_expired(self, now: float | None = None) -> bool:
        if self.expires is None:
            return False
        return self.expires <= (time.time() if now is None else now)
