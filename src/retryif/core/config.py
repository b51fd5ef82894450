"""Configuration models for the retry executors.

Policies are Pydantic models so they can be built from settings, validated
and passed around as immutable values for the duration of a retry session.
"""

from typing import Any, Callable, Optional
from pydantic import BaseModel, Field


def always_retry(failure: Any) -> bool:
    """Default predicate: every failure is worth another attempt."""
    return True


class RetryPolicy(BaseModel):
    """Configuration for a single retry session.

    Attributes:
        max_attempts: Upper bound on invocations of the operation (including the first)
        should_retry: Predicate consulted after each failed attempt
    """

    # No lower bound here: an invalid count is reported by the executor as
    # ConfigurationError, before the operation is touched.
    max_attempts: int = Field(
        default=3,
        description="Maximum number of times the operation is invoked"
    )

    should_retry: Callable[[Any], bool] = Field(
        default=always_retry,
        description="Called with the failure of an attempt; False stops the session"
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "arbitrary_types_allowed": True,
    }

    @classmethod
    def from_settings(
        cls,
        settings,
        should_retry: Optional[Callable[[Any], bool]] = None,
    ) -> "RetryPolicy":
        """Factory method to construct a policy from a RetrySettings instance.

        Args:
            settings: RetrySettings instance from core.settings
            should_retry: Optional predicate, defaults to retrying every failure

        Returns:
            RetryPolicy with max_attempts taken from settings
        """
        if should_retry is None:
            return cls(max_attempts=settings.RETRYIF_MAX_ATTEMPTS)
        return cls(
            max_attempts=settings.RETRYIF_MAX_ATTEMPTS,
            should_retry=should_retry,
        )
