from typing import Optional

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_result,
    stop_after_attempt,
    wait_none,
)

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


class TenacityRetryAdapter:
    """Tenacity-based retry adapter implementing RetryPort.

    Same observable behaviour as RetryExecutor: no waiting between attempts,
    ``should_retry`` consulted after every failed attempt, and the last
    attempt's outcome returned (instead of tenacity's RetryError) when the
    attempt budget runs out.
    """

    def __init__(self, logger: Optional[LoggingPort] = None) -> None:
        self._log = logger or default_logger

    def execute(self, operation: Operation, policy: RetryPolicy) -> RetryOutcome:
        validate_policy(policy)
        validate_operation(operation)

        name = operation_name(operation)
        attempts = 0

        def attempt() -> RetryOutcome:
            nonlocal attempts
            attempts += 1
            return RetryOutcome(*check_result(operation(), operation))

        def wants_retry(outcome: RetryOutcome) -> bool:
            if outcome.succeeded:
                return False
            if policy.should_retry(outcome.failure):
                return True
            self._log.warning(
                "[retry:abort] %s failure not retryable attempt=%s: %r", name, attempts, outcome.failure
            )
            return False

        def before_attempt(retry_state: RetryCallState) -> None:
            self._log.debug(
                "[retry:attempt] %s attempt=%s/%s", name, retry_state.attempt_number, policy.max_attempts
            )

        def exhausted(retry_state: RetryCallState) -> RetryOutcome:
            outcome = retry_state.outcome.result()
            self._log.warning(
                "[retry:exhausted] %s failed after attempts=%s: %r",
                name,
                retry_state.attempt_number,
                outcome.failure,
            )
            return outcome

        retrying = Retrying(
            stop=stop_after_attempt(policy.max_attempts),
            wait=wait_none(),
            retry=retry_if_result(wants_retry),
            before=before_attempt,
            retry_error_callback=exhausted,
        )
        with retry_session():
            outcome = retrying(attempt)
            if outcome.succeeded and attempts > 1:
                self._log.info("[retry:success] %s succeeded after attempts=%s", name, attempts)
        return outcome
