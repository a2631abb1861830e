import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

import requests


class TokenProvider(Protocol):
    def get_token(self) -> str: ...


class StaticTokenProvider:
    def __init__(self, token: str) -> None:
        self.token = token

    def get_token(self) -> str:
        return self.token


def is_transient(exc: BaseException) -> bool:
    """The employee service answers 4xx/5xx at random to simulate rate limiting,
    so any error status is worth another attempt on a read."""
    if isinstance(exc, requests.ConnectionError | requests.Timeout):
        return True

    if isinstance(exc, requests.HTTPError) and exc.response is not None:
        return 400 <= exc.response.status_code < 600  # noqa: PLR2004

    return False


def is_rate_limited(exc: BaseException) -> bool:
    return (
        isinstance(exc, requests.HTTPError)
        and exc.response is not None
        and exc.response.status_code == requests.codes.too_many_requests
    )


@dataclass
class RetryPolicy:
    attempts: int = 5
    initial_delay: float = 30
    multiplier: float = 2
    max_delay: float = 180
    # Unset: writes retry on 429 only.
    retry_writes_on_any_error: bool = False
    sleep: Callable[[float], None] = time.sleep

    def should_retry(self, *, write: bool) -> Callable[[BaseException], bool]:
        if write and not self.retry_writes_on_any_error:
            return is_rate_limited

        return is_transient
