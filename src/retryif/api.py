"""Convenience entry points over the retry executors."""

import functools
from typing import Any, Callable, Optional

from retryif.core.config import RetryPolicy, always_retry
from retryif.core.interfaces.retry import Operation, RetryPort
from retryif.core.managers.retry_executor import RetryExecutor
from retryif.core.models.outcome import RetryOutcome
from retryif.core.settings import app_settings

_default_executor = RetryExecutor()


def retry(
    operation: Operation,
    policy: RetryPolicy,
    executor: Optional[RetryPort] = None,
) -> RetryOutcome:
    """Run ``operation`` under ``policy`` with the given (or default) executor."""
    return (executor or _default_executor).execute(operation, policy)


def retry_if(
    should_retry: Optional[Callable[[Any], bool]] = None,
    max_attempts: Optional[int] = None,
    executor: Optional[RetryPort] = None,
):
    """Decorator turning a ``() -> (value, failure)`` function into a retried one.

    The decorated function takes no arguments and returns a RetryOutcome.
    ``max_attempts`` defaults to ``RETRYIF_MAX_ATTEMPTS`` at decoration time;
    an invalid count surfaces as ConfigurationError on the first call.

    Example::

        @retry_if(lambda failure: isinstance(failure, TimeoutError), max_attempts=5)
        def fetch():
            ...
            return payload, None

        payload, failure = fetch()
    """
    policy = RetryPolicy(
        max_attempts=app_settings.RETRYIF_MAX_ATTEMPTS if max_attempts is None else max_attempts,
        should_retry=should_retry or always_retry,
    )

    def decorator(fn: Operation) -> Callable[[], RetryOutcome]:
        @functools.wraps(fn)
        def wrapper() -> RetryOutcome:
            return retry(fn, policy, executor)

        wrapper.policy = policy
        return wrapper

    return decorator
