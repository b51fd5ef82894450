"""Tests for RetryPolicy and RetrySettings."""

import pytest
from unittest.mock import Mock
from pydantic import ValidationError

from retryif.core.config import RetryPolicy, always_retry
from retryif.core.settings import RetrySettings


class TestRetryPolicy:

    def test_defaults(self):
        policy = RetryPolicy()

        assert policy.max_attempts == 3
        assert policy.should_retry is always_retry
        assert policy.should_retry("anything") is True

    def test_is_immutable(self):
        policy = RetryPolicy(max_attempts=2)

        with pytest.raises(ValidationError):
            policy.max_attempts = 5

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            RetryPolicy(max_attempts=2, backoff=1.5)

    def test_accepts_non_positive_attempts_for_executor_to_reject(self):
        assert RetryPolicy(max_attempts=0).max_attempts == 0

    def test_rejects_non_callable_predicate(self):
        with pytest.raises(ValidationError):
            RetryPolicy(should_retry="yes")

    def test_from_settings(self):
        settings = RetrySettings(_env_file=None, RETRYIF_MAX_ATTEMPTS=6)

        def only_timeouts(failure):
            return isinstance(failure, TimeoutError)

        policy = RetryPolicy.from_settings(settings, should_retry=only_timeouts)

        assert policy.max_attempts == 6
        assert policy.should_retry is only_timeouts

    def test_from_settings_default_predicate(self):
        settings = RetrySettings(_env_file=None, RETRYIF_MAX_ATTEMPTS=2)

        assert RetryPolicy.from_settings(settings).should_retry is always_retry


class TestRetrySettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RETRYIF_MAX_ATTEMPTS", raising=False)
        monkeypatch.delenv("RETRYIF_LOG_LEVEL", raising=False)

        settings = RetrySettings(_env_file=None)

        assert settings.RETRYIF_MAX_ATTEMPTS == 3
        assert settings.RETRYIF_LOG_LEVEL == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("RETRYIF_MAX_ATTEMPTS", "7")
        monkeypatch.setenv("RETRYIF_LOG_LEVEL", "DEBUG")

        settings = RetrySettings(_env_file=None)

        assert settings.RETRYIF_MAX_ATTEMPTS == 7
        assert settings.RETRYIF_LOG_LEVEL == "DEBUG"

    def test_reads_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("RETRYIF_MAX_ATTEMPTS", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("RETRYIF_MAX_ATTEMPTS=9\n")

        settings = RetrySettings(_env_file=env_file)

        assert settings.RETRYIF_MAX_ATTEMPTS == 9

    @pytest.mark.parametrize("value", ["0", "-2"])
    def test_rejects_non_positive_attempts(self, monkeypatch, value):
        monkeypatch.setenv("RETRYIF_MAX_ATTEMPTS", value)

        with pytest.raises(ValidationError):
            RetrySettings(_env_file=None)

    def test_print_settings(self, capsys):
        logger = Mock()
        settings = RetrySettings(_env_file=None, RETRYIF_MAX_ATTEMPTS=4)

        settings.print_settings(logger)

        logger.info.assert_called_once()
        assert "RETRYIF_MAX_ATTEMPTS" in capsys.readouterr().out
