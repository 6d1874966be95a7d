from __future__ import annotations

import time

import httpx
import pytest

from session_assertions.domain.entities.cookie import Cookie
from session_assertions.infrastructure.adapters.cookies.cookiejar_adapter import CookieJarAdapter
from session_assertions.infrastructure.adapters.http.httpx_client import HttpxBrowserClient
from session_assertions.infrastructure.adapters.http.requests_client import RequestsBrowserClient


@pytest.fixture(params=[HttpxBrowserClient, RequestsBrowserClient])
def client(request):
    c = request.param()
    yield c
    c.close()


@pytest.fixture
def jar(client):
    return client.cookie_jar


def test_set_and_get(jar):
    jar.set(Cookie("MOCKSESSID", "abc", http_only=True))
    cookie = jar.get("MOCKSESSID")
    assert cookie == Cookie("MOCKSESSID", "abc", http_only=True)
    assert jar.get("nope") is None


def test_expire_then_flush_removes_only_that_cookie(jar):
    jar.set(Cookie("MOCKSESSID", "abc"))
    jar.set(Cookie("theme", "dark", expires=time.time() + 3600))

    jar.expire("MOCKSESSID")
    assert jar.get("MOCKSESSID").is_expired()
    jar.flush_expired()

    assert [c.name for c in jar.all()] == ["theme"]


def test_expire_unknown_cookie_is_ignored(jar):
    jar.set(Cookie("theme", "dark"))
    jar.expire("MOCKSESSID")
    jar.flush_expired()
    jar.flush_expired()
    assert [c.name for c in jar.all()] == ["theme"]


def test_expire_hits_every_domain(jar):
    jar.set(Cookie("REMEMBERME", "1", domain="a.example"))
    jar.set(Cookie("REMEMBERME", "2", domain="b.example"))
    jar.expire("REMEMBERME")
    jar.flush_expired()
    assert jar.all() == []


def test_httpx_client_sends_injected_cookie():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["cookie"] = request.headers.get("cookie")
        return httpx.Response(200, text="ok")

    client = httpx.Client(transport=httpx.MockTransport(handler), base_url="http://testserver")
    CookieJarAdapter(client.cookies.jar).set(Cookie("MOCKSESSID", "abc"))
    client.get("/")
    assert seen["cookie"] == "MOCKSESSID=abc"
