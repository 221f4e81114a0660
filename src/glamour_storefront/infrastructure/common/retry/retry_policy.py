from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

_T = TypeVar("_T")


def is_retryable(exc: BaseException) -> bool:
    return bool(getattr(exc, "retryable", False))


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 1  # Default: Fail fast (1 attempt, 0 retries)
    initial_wait_s: float = 0.25
    max_wait_s: float = 5.0
    retry_on: Callable[[BaseException], bool] = field(default=is_retryable)

    async def run(self, fn: Callable[[], Awaitable[_T]]) -> _T:
        try:
            return await self._retrying()(fn)
        except RetryError as err:
            raise err.last_attempt.result()  # type: ignore[misc]

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception(self.retry_on),
            stop=stop_after_attempt(max(1, self.max_attempts)),
            wait=wait_exponential_jitter(initial=self.initial_wait_s, max=self.max_wait_s),
            reraise=True,
        )
