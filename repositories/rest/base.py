import logging
import threading
from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

import requests
from tenacity import RetryError, Retrying, before_sleep_log, retry_if_exception, stop_after_attempt, wait_exponential

from repositories import UpstreamError, UpstreamUnavailableError

from .util import RetryPolicy, TokenProvider

logger = logging.getLogger(__name__)

R = TypeVar('R')


class RestBaseRepository:
    def __init__(
        self,
        base_url: str,
        token_provider: TokenProvider | None,
        retry_policy: RetryPolicy | None = None,
        timeout: float = 10,
    ) -> None:
        self.base_url = base_url.rstrip('/')
        self.token_provider = token_provider
        self.retry_policy = retry_policy or RetryPolicy()
        self.timeout = timeout
        self.local = threading.local()

    @property
    def session(self) -> requests.Session:
        # One session, and so one connection pool, per worker thread.
        session: requests.Session | None = getattr(self.local, 'session', None)
        if session is None:
            session = requests.Session()
            self.local.session = session
        return session

    def auth_headers(self) -> dict[str, str]:
        if self.token_provider is None:
            return {}

        return {'Authorization': f'Bearer {self.token_provider.get_token()}'}

    def authenticated_get(self, url: str) -> requests.Response:
        return self.session.get(url, headers=self.auth_headers(), timeout=self.timeout)

    def authenticated_post(self, url: str, body: dict[str, Any]) -> requests.Response:
        return self.session.post(url, json=body, headers=self.auth_headers(), timeout=self.timeout)

    def authenticated_delete(self, url: str, body: dict[str, Any]) -> requests.Response:
        return self.session.delete(url, json=body, headers=self.auth_headers(), timeout=self.timeout)

    def unexpected_error(self, resp: requests.Response) -> NoReturn:
        resp.raise_for_status()
        raise requests.HTTPError(f'Unexpected status code: {resp.status_code}', response=resp)

    def with_retry(self, func: Callable[[], R], *, write: bool = False) -> R:
        policy = self.retry_policy
        retryer = Retrying(
            stop=stop_after_attempt(policy.attempts),
            wait=wait_exponential(multiplier=policy.initial_delay, exp_base=policy.multiplier, max=policy.max_delay),
            retry=retry_if_exception(policy.should_retry(write=write)),
            sleep=policy.sleep,
            before_sleep=before_sleep_log(logger, logging.WARNING),
        )

        try:
            return retryer(func)
        except RetryError as err:
            last_exc = err.last_attempt.exception()
            logger.error('Employee service still failing after %d attempts: %s', policy.attempts, last_exc)
            raise UpstreamUnavailableError(f'Employee service unavailable after {policy.attempts} attempts') from last_exc
        except requests.RequestException as err:
            raise UpstreamError(str(err)) from err
