"""Retry policy for upstream calls."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

SERVICE_UNAVAILABLE = 503


def is_transient(exc: BaseException) -> bool:
    """Tell whether a failed upstream call is worth retrying.

    Only failures where no response was received and explicit 503
    answers are transient. Rate limiting (429) and every other status
    are final.

    Args:
        exc: The exception raised by the upstream call.

    Returns:
        True if the call should be retried.
    """
    if isinstance(exc, httpx.TransportError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code == SERVICE_UNAVAILABLE
    return False


@dataclass(frozen=True)
class RetryPolicy:
    """Explicit retry policy shared by the upstream fetchers.

    Attributes:
        max_attempts: Total attempts, including the first one.
        backoff_multiplier: Base of the exponential backoff, in seconds.
        backoff_max: Upper bound for a single wait, in seconds.
        is_retryable: Predicate classifying retryable failures.
    """

    max_attempts: int = 3
    backoff_multiplier: float = 0.1
    backoff_max: float = 10.0
    is_retryable: Callable[[BaseException], bool] = field(default=is_transient)

    def backoff(self, attempt: int) -> float:
        """Return the wait after the given failed attempt (1-based).

        Doubles from ``backoff_multiplier`` and never exceeds ``backoff_max``.
        """
        return min(self.backoff_multiplier * 2 ** (attempt - 1), self.backoff_max)

    def _wait(self, retry_state: RetryCallState) -> float:
        return self.backoff(retry_state.attempt_number)

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=self._wait,
            retry=retry_if_exception(self.is_retryable),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

    async def call(
        self,
        fn: Callable[..., Awaitable[T]],
        *args: Any,
        **kwargs: Any,
    ) -> T:
        """Run ``fn`` under this policy.

        Args:
            fn: Coroutine function performing one attempt.
            *args: Positional arguments for ``fn``.
            **kwargs: Keyword arguments for ``fn``.

        Returns:
            The result of the first successful attempt.

        Raises:
            Exception: The last attempt's exception when it is not
                retryable or attempts are exhausted.
        """
        return await self._retrying()(fn, *args, **kwargs)
