from pydantic import field_validator
from pydantic_settings import BaseSettings
from rich import print

from retryif.adapters.logging_adapter import LoggingAdapter
from retryif.core.interfaces.logging import LoggingPort


# using pydantic_settings to manage environment variables
# and do automatic type casting in a central place
class RetrySettings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }
    RETRYIF_LOG_LEVEL: str = "INFO"
    # attempts used by RetryPolicy.from_settings and the retry_if decorator
    RETRYIF_MAX_ATTEMPTS: int = 3

    def print_settings(self, logger: LoggingPort):
        """Prints the settings for debugging purposes"""
        logger.info("retryif settings:")
        print(self)

    @field_validator("RETRYIF_MAX_ATTEMPTS")
    @classmethod
    def ensure_positive_attempts(cls, value: int) -> int:
        if value < 1:
            raise ValueError("RETRYIF_MAX_ATTEMPTS must be greater than 0")
        return value


app_settings = RetrySettings()

logger = LoggingAdapter("retryif", app_settings.RETRYIF_LOG_LEVEL)
