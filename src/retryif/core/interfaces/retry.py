from typing import Any, Callable, Protocol, Tuple

from retryif.core.config import RetryPolicy
from retryif.core.models.outcome import RetryOutcome

Operation = Callable[[], Tuple[Any, Any]]


class RetryPort(Protocol):
    """Abstract retry interface for synchronous operations.

    Implementations re-invoke an operation until it succeeds, the policy's
    predicate declines a failure, or the attempt budget is spent. The contract
    keeps callers decoupled from a specific loop (hand-written or tenacity).
    """
    def execute(self, operation: Operation, policy: RetryPolicy) -> RetryOutcome:  # pragma: no cover - protocol
        """Execute a zero-argument operation with retry semantics.

        Args:
            operation: Callable returning ``(value, failure)``; failure None means success.
            policy: Attempt budget and retry predicate.
        Returns:
            RetryOutcome of the last attempt made.
        Raises:
            ConfigurationError: policy.max_attempts < 1 (operation never invoked).
            InvalidOperationError: operation does not fit the required shape.
        """
        ...
