"""Drives a small FastAPI app through TestClient, sharing an SQLite session with it."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from session_assertions import AssertionFailure, NameOnly, NameValue, SessionAssertionHelper, SimpleUser
from session_assertions.infrastructure.adapters.http.httpx_client import HttpxBrowserClient
from session_assertions.infrastructure.adapters.security.json_token_serializer import JsonTokenSerializer
from session_assertions.infrastructure.adapters.security.memory_token_storage import InMemoryTokenStorage
from session_assertions.infrastructure.adapters.session.sqlite_session import SQLiteSession


def build_app(db_path: Path) -> FastAPI:
    app = FastAPI()
    serializer = JsonTokenSerializer()

    @app.get("/whoami")
    def whoami(request: Request) -> dict[str, Any]:
        sid = request.cookies.get("MOCKSESSID")
        if not sid:
            raise HTTPException(status_code=401, detail="no session")
        session = SQLiteSession(db_path, session_id=sid)
        try:
            payload = session.get("_security_main")
            if payload is None:
                raise HTTPException(status_code=401, detail="not authenticated")
            token = serializer.deserialize(payload)
            session.set("last_seen", "/whoami")
            session.save()
            return {"user": token.user.identifier, "roles": list(token.roles)}
        finally:
            session.close()

    @app.get("/boom")
    def boom() -> JSONResponse:
        app.state.boom_hits += 1
        return JSONResponse({"detail": "boom"}, status_code=500)

    app.state.boom_hits = 0
    return app


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "sessions.sqlite"


@pytest.fixture
def app(db_path):
    return build_app(db_path)


@pytest.fixture
def browser(app):
    with TestClient(app) as test_client:
        yield HttpxBrowserClient(test_client)


def test_login_request_logout_cycle(db_path, browser):
    session = SQLiteSession(db_path)
    helper = SessionAssertionHelper(session, browser.cookie_jar, InMemoryTokenStorage())

    assert browser.get("/whoami").status_code == 401

    helper.login(SimpleUser("john", ("ROLE_ADMIN",)))
    resp = browser.get("/whoami")
    assert resp.status_code == 200
    assert resp.json() == {"user": "john", "roles": ["ROLE_ADMIN"]}

    # the app wrote to the shared row; reopen to see it
    reloaded = SQLiteSession(db_path, session_id=session.id)
    SessionAssertionHelper(reloaded, browser.cookie_jar).assert_session_has_values(
        [NameOnly("_security_main"), NameValue("last_seen", "/whoami")]
    )
    reloaded.close()

    helper.logout()
    assert browser.cookie_jar.all() == []
    assert browser.get("/whoami").status_code == 401
    with pytest.raises(AssertionFailure):
        helper.assert_session_has("_security_main")
    session.close()


def test_server_error_page_reaches_the_test(app, browser):
    resp = browser.get("/boom")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "boom"}
    assert app.state.boom_hits == 1
