from __future__ import annotations

import pytest

from session_assertions import (
    AssertionFailure,
    Cookie,
    GuardToken,
    NameOnly,
    NameValue,
    ServiceNotFoundError,
    SessionAssertionHelper,
    SimpleUser,
)
from session_assertions.infrastructure.adapters.security.json_token_serializer import JsonTokenSerializer
from tests.unit._fakes_session import FakeSession, FakeCookieJar, FakeTokenStorage


def make_helper(**kwargs):
    session, jar = FakeSession(), FakeCookieJar()
    return SessionAssertionHelper(session, jar, **kwargs), session, jar


def test_login_then_assert_security_attribute():
    helper, session, jar = make_helper()
    helper.login(SimpleUser("john", ("ROLE_ADMIN",)), "admin")

    helper.assert_session_has("_security_admin")
    helper.assert_session_does_not_have("_security_main")
    cookie = jar.get(session.name)
    assert cookie is not None and cookie.value == session.id


def test_login_uses_json_serializer_by_default():
    helper, session, _ = make_helper(guard=True)
    helper.login(SimpleUser("john", ("ROLE_ADMIN",)))

    token = JsonTokenSerializer().deserialize(session.get("_security_main"))
    assert token == GuardToken(SimpleUser("john", ("ROLE_ADMIN",)), "main", ("ROLE_ADMIN",))
    assert helper.guard is True


def test_logout_clears_everything_set_before():
    helper, session, jar = make_helper()
    helper.login(SimpleUser("john"))
    session.set("cart", [1])
    jar.set(Cookie("REMEMBERME", "r"))
    old_name = session.name

    helper.logout()

    for attribute in ("_security_main", "cart"):
        with pytest.raises(AssertionFailure):
            helper.assert_session_has(attribute)
    assert {c.name for c in jar.all()} & {"MOCKSESSID", "REMEMBERME", old_name} == set()
    helper.logout()


def test_assert_session_has_values_mirrors_single_assertions():
    helper, session, _ = make_helper()
    session.set("a", 1)
    session.set("b", "x")
    helper.assert_session_has_values([NameOnly("a"), NameValue("b", "x")])
    with pytest.raises(AssertionFailure):
        helper.assert_session_has_values([NameOnly("a"), NameValue("b", "y")])


def test_from_services_wires_optional_token_storage():
    session, jar, storage = FakeSession(), FakeCookieJar(), FakeTokenStorage()
    helper = SessionAssertionHelper.from_services(
        {"session": session, "security.token_storage": storage}, jar
    )
    helper.logout()
    assert storage.token is None
    assert helper.token_storage is storage


def test_from_services_without_token_storage():
    helper = SessionAssertionHelper.from_services({"session": FakeSession()}, FakeCookieJar())
    assert helper.token_storage is None
    helper.logout()


def test_from_services_requires_session():
    with pytest.raises(ServiceNotFoundError, match="Service 'session' is not registered"):
        SessionAssertionHelper.from_services({}, FakeCookieJar())
