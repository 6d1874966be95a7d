from __future__ import annotations

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential_jitter
from tenacity.wait import wait_base

DEFAULT_ATTEMPTS = 3
DEFAULT_WAIT = wait_exponential_jitter(initial=1, max=8)


def transport_retrying(
    errors: type[BaseException] | tuple[type[BaseException], ...],
    *,
    attempts: int = DEFAULT_ATTEMPTS,
    wait: wait_base = DEFAULT_WAIT,
) -> Retrying:
    """Retry policy for requests that never reached the server.

    Only ``errors`` (connection refused, timeouts...) are retried; any HTTP
    response, 5xx included, is handed back to the test untouched.
    """
    return Retrying(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait,
        retry=retry_if_exception_type(errors),
    )
