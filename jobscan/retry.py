"""Bounded retry with exponential backoff (stdlib only)."""
from __future__ import annotations

import random
import time
from typing import Any, Callable, Tuple, Type

from jobscan.log import get_logger

logger = get_logger(__name__)


def exponential_backoff(attempt: int) -> float:
    """Delay in seconds before 0-indexed ``attempt``: 2, 4, 8, ..."""
    return 2.0 ** attempt


def call_with_retry(
    fn: Callable[[], Any],
    *,
    max_attempts: int = 5,
    backoff: Callable[[int], float] = exponential_backoff,
    retryable: Tuple[Type[BaseException], ...] = (Exception,),
    is_terminal: Callable[[BaseException], bool] | None = None,
    jitter: bool = False,
    sleep: Callable[[float], Any] = time.sleep,
    label: str = "call",
) -> Any:
    """Run ``fn`` up to ``max_attempts`` times.

    Exceptions outside ``retryable``, or for which ``is_terminal`` returns
    True, propagate immediately. Otherwise the last error is re-raised once
    the attempt budget is spent. ``backoff(k)`` is waited before attempt k;
    the first attempt never waits.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")

    for attempt in range(max_attempts):
        if attempt > 0:
            delay = backoff(attempt)
            if jitter:
                delay *= 0.5 + random.random()
            logger.warning(
                "%s attempt %d/%d in %.1fs",
                label,
                attempt + 1,
                max_attempts,
                delay,
            )
            sleep(delay)
        try:
            return fn()
        except retryable as exc:
            if is_terminal is not None and is_terminal(exc):
                logger.error("%s failed with terminal error: %s", label, exc)
                raise
            if attempt == max_attempts - 1:
                logger.error(
                    "%s failed after %d attempts: %s",
                    label,
                    max_attempts,
                    exc,
                )
                raise
            logger.warning(
                "%s attempt %d/%d failed (%s)",
                label,
                attempt + 1,
                max_attempts,
                exc,
            )
    raise AssertionError("unreachable")
