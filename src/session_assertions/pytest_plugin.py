"""pytest fixtures wiring a SessionAssertionHelper for each test.

Enable them from the project's root ``conftest.py``::

    pytest_plugins = ["session_assertions.pytest_plugin"]

Override ``browser_client`` to point the helper at the application under
test, e.g. ``HttpxBrowserClient(TestClient(app))``, and ``session_handle``
to share a session store with it.
"""
from __future__ import annotations

from collections.abc import Iterator

import pytest

from session_assertions.application.session_assertions import SessionAssertionHelper
from session_assertions.config import Settings, settings
from session_assertions.infrastructure.adapters.http.httpx_client import HttpxBrowserClient
from session_assertions.infrastructure.adapters.security.memory_token_storage import InMemoryTokenStorage
from session_assertions.infrastructure.adapters.session.memory_session import InMemorySession


@pytest.fixture
def session_settings() -> Settings:
    settings.apply_log_level()
    return settings


@pytest.fixture
def session_handle(session_settings: Settings) -> InMemorySession:
    return InMemorySession(name=session_settings.session_name)


@pytest.fixture
def token_storage() -> InMemoryTokenStorage:
    return InMemoryTokenStorage()


@pytest.fixture
def browser_client(session_settings: Settings) -> Iterator[HttpxBrowserClient]:
    client = HttpxBrowserClient(timeout=session_settings.http_timeout)
    yield client
    client.close()


@pytest.fixture
def session_assertions(
    session_settings: Settings,
    session_handle,
    browser_client,
    token_storage,
) -> SessionAssertionHelper:
    return SessionAssertionHelper(
        session_handle,
        browser_client.cookie_jar,
        token_storage,
        guard=session_settings.guard,
        firewall_name=session_settings.firewall_name,
    )
