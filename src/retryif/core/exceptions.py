from typing import Any, Optional


class RetryIfError(Exception):
    """Base exception for errors raised by the retry machinery itself.

    Failures produced by a wrapped operation are never raised as (or wrapped
    in) one of these; they are returned to the caller verbatim.
    """


class ConfigurationError(RetryIfError):
    """Raised when a retry policy cannot be executed.

    Attributes:
        max_attempts: The rejected attempt count
    """
    def __init__(self, max_attempts: int, message: Optional[str] = None):
        self.max_attempts = max_attempts
        self.message = message or "number of retries must be greater than 0"
        super().__init__(self.message)


class InvalidOperationError(RetryIfError):
    """Raised when an operation does not fit the ``() -> (value, failure)`` shape.

    Attributes:
        message: Human-readable error description
        operation: The offending object
        diagnostic: Technical detail (signature, returned object, ...)
    """
    def __init__(
        self,
        message: str,
        operation: Any = None,
        diagnostic: Optional[str] = None,
    ):
        self.message = message
        self.operation = operation
        self.diagnostic = diagnostic
        super().__init__(message)
