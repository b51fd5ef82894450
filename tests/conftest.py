import pytest
from typing import Any, List, Tuple

from retryif.adapters.retry_tenacity import TenacityRetryAdapter
from retryif.core.managers.retry_executor import RetryExecutor


class ScriptedOperation:
    """Zero-argument operation replaying a fixed list of (value, failure) results.

    The last result repeats once the script runs out. ``calls`` counts invocations.
    """

    def __init__(self, *results: Tuple[Any, Any]):
        self.results: List[Tuple[Any, Any]] = list(results)
        self.calls = 0

    def __call__(self) -> Tuple[Any, Any]:
        index = min(self.calls, len(self.results) - 1)
        self.calls += 1
        return self.results[index]


class RecordingPredicate:
    """should_retry stand-in that records every failure it is shown."""

    def __init__(self, answer=True):
        self.answer = answer
        self.seen: List[Any] = []

    def __call__(self, failure: Any) -> bool:
        self.seen.append(failure)
        if callable(self.answer):
            return self.answer(failure)
        return self.answer


@pytest.fixture(params=[RetryExecutor, TenacityRetryAdapter], ids=["loop", "tenacity"])
def executor(request):
    """Every RetryPort implementation must pass the same contract tests."""
    return request.param()


@pytest.fixture
def scripted():
    return ScriptedOperation


@pytest.fixture
def recording_predicate():
    return RecordingPredicate
