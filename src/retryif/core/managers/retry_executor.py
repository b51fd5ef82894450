"""RetryExecutor: re-invokes an operation until success, veto or exhaustion.

Session states: not started -> attempting -> succeeded | aborted | exhausted.
Only the failure of the most recent attempt is kept.
"""

from __future__ import annotations

from typing import Any, Optional

from retryif.core.config import RetryPolicy
from retryif.core.interfaces.logging import LoggingPort
from retryif.core.interfaces.retry import Operation
from retryif.core.logging_config import retry_session
from retryif.core.models.outcome import RetryOutcome
from retryif.core.settings import logger as default_logger
from retryif.core.validation import (
    check_result,
    operation_name,
    validate_operation,
    validate_policy,
)


class RetryExecutor:
    """Sequential retry loop implementing RetryPort.

    The executor keeps no per-call state, so one instance can serve any number
    of sessions. Exceptions raised by the operation or by ``should_retry`` are
    not failures in the retry sense; they propagate and end the session.
    """

    def __init__(self, logger: Optional[LoggingPort] = None) -> None:
        self._log = logger or default_logger

    def execute(self, operation: Operation, policy: RetryPolicy) -> RetryOutcome:
        validate_policy(policy)
        validate_operation(operation)

        with retry_session():
            return self._run(operation, policy)

    def _run(self, operation: Operation, policy: RetryPolicy) -> RetryOutcome:
        name = operation_name(operation)
        last_result: Any = None
        last_failure: Any = None

        for attempt in range(1, policy.max_attempts + 1):
            last_failure = None
            self._log.debug("[retry:attempt] %s attempt=%s/%s", name, attempt, policy.max_attempts)
            last_result, last_failure = check_result(operation(), operation)

            if last_failure is None:
                if attempt > 1:
                    self._log.info("[retry:success] %s succeeded after attempts=%s", name, attempt)
                break

            if not policy.should_retry(last_failure):
                self._log.warning(
                    "[retry:abort] %s failure not retryable attempt=%s: %r", name, attempt, last_failure
                )
                break
        else:
            self._log.warning(
                "[retry:exhausted] %s failed after attempts=%s: %r", name, policy.max_attempts, last_failure
            )

        return RetryOutcome(last_result, last_failure)
