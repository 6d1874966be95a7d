from session_assertions.application.session_assertions import SessionAssertionHelper
from session_assertions.application.use_cases.assert_session import MISSING
from session_assertions.domain.entities.cookie import Cookie
from session_assertions.domain.entities.token import GuardToken, UsernamePasswordToken
from session_assertions.domain.errors import AssertionFailure, ServiceNotFoundError
from session_assertions.domain.model import NameOnly, NameValue, SimpleUser, User

__all__ = [
    "MISSING",
    "AssertionFailure",
    "Cookie",
    "GuardToken",
    "NameOnly",
    "NameValue",
    "ServiceNotFoundError",
    "SessionAssertionHelper",
    "SimpleUser",
    "User",
    "UsernamePasswordToken",
]
