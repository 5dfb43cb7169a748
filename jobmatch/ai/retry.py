from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[None]]


def exponential_backoff(base_ms: int) -> Callable[[int], float]:
    """Delay in seconds before the retry that follows failed attempt ``attempt`` (0-based)."""

    def schedule(attempt: int) -> float:
        return (base_ms * (2**attempt)) / 1000.0

    return schedule


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    *,
    is_retryable: Callable[[BaseException], bool],
    attempts: int,
    backoff: Callable[[int], float],
    on_exhausted: Callable[[int, BaseException], BaseException],
    sleep: Sleep = asyncio.sleep,
    label: str = "operation",
) -> T:
    """Run ``operation`` up to ``attempts`` times.

    Non-retryable errors propagate immediately. Retryable ones are recorded and,
    unless this was the final attempt, followed by ``backoff(attempt)`` seconds
    of sleep. When the budget is spent, ``on_exhausted(attempts, last_error)``
    is raised with the last error chained.
    """
    if attempts < 1:
        raise ValueError(f"attempts must be at least 1, got {attempts}")

    last_error: BaseException | None = None

    for attempt in range(attempts):
        try:
            return await operation()
        except Exception as exc:
            if not is_retryable(exc):
                raise
            last_error = exc
            logger.warning("%s_failed attempt=%s/%s: %s", label, attempt + 1, attempts, exc)

        if attempt < attempts - 1:
            delay = backoff(attempt)
            logger.info(
                "%s_retry attempt=%s/%s delay_ms=%s",
                label,
                attempt + 1,
                attempts,
                int(delay * 1000),
            )
            await sleep(delay)

    raise on_exhausted(attempts, last_error) from last_error
