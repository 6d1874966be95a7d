from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env if present
load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    guard: bool = _flag("SESSION_ASSERTIONS_GUARD")
    firewall_name: str = os.getenv("SESSION_ASSERTIONS_FIREWALL", "main")
    session_name: str = os.getenv("SESSION_ASSERTIONS_SESSION_NAME", "MOCKSESSID")
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "45"))
    log_level: str = os.getenv("SESSION_ASSERTIONS_LOG_LEVEL", "WARNING")

    def apply_log_level(self) -> None:
        logging.getLogger("session_assertions").setLevel(self.log_level.upper())


settings = Settings()
