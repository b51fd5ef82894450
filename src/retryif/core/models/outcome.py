from typing import Any, NamedTuple, Optional


class RetryOutcome(NamedTuple):
    """Final result of a retry session.

    Unpacks like the operation's own result: ``value, failure = outcome``.
    ``failure`` is None if and only if the most recent attempt succeeded.
    """

    value: Any = None
    failure: Optional[Any] = None

    @property
    def succeeded(self) -> bool:
        return self.failure is None
