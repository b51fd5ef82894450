from retryif.adapters.retry_tenacity import TenacityRetryAdapter
from retryif.api import retry, retry_if
from retryif.core.config import RetryPolicy
from retryif.core.exceptions import (
    ConfigurationError,
    InvalidOperationError,
    RetryIfError,
)
from retryif.core.interfaces.retry import RetryPort
from retryif.core.logging_config import configure_logging
from retryif.core.managers.retry_executor import RetryExecutor
from retryif.core.models.outcome import RetryOutcome

__all__ = [
    "ConfigurationError",
    "InvalidOperationError",
    "RetryExecutor",
    "RetryIfError",
    "RetryOutcome",
    "RetryPolicy",
    "RetryPort",
    "TenacityRetryAdapter",
    "configure_logging",
    "retry",
    "retry_if",
]
