"""Shape checks shared by all retry executors.

An operation must be callable with zero arguments and return a 2-tuple
``(value, failure)``. Everything that can be decided without calling the
operation (callability, arity, return annotation) is checked up front; the
returned shape of an un-annotated callable can only be checked per call.
"""

import inspect
import typing
from typing import Any, Tuple

from retryif.core.config import RetryPolicy
from retryif.core.exceptions import ConfigurationError, InvalidOperationError

TWO_VALUES_MESSAGE = "operation must return exactly two values: (result, failure)"


def operation_name(operation: Any) -> str:
    return getattr(operation, "__qualname__", None) or repr(operation)


def validate_policy(policy: RetryPolicy) -> None:
    if policy.max_attempts < 1:
        raise ConfigurationError(policy.max_attempts)


def validate_operation(operation: Any) -> None:
    """Reject operations that can never satisfy the call contract.

    Raises:
        InvalidOperationError: not callable, needs arguments, or is annotated
            to return something other than a 2-tuple.
    """
    if not callable(operation):
        raise InvalidOperationError(
            "operation must be callable",
            operation=operation,
            diagnostic=f"got object of type {type(operation).__name__}",
        )

    try:
        signature = inspect.signature(operation)
    except (TypeError, ValueError):
        # some builtins expose no signature; nothing more to check up front
        return

    try:
        signature.bind()
    except TypeError as exc:
        raise InvalidOperationError(
            "operation must be callable with zero arguments",
            operation=operation,
            diagnostic=f"signature {signature}: {exc}",
        ) from exc

    annotation = _resolve_return_annotation(operation, signature)
    if not _may_return_pair(annotation):
        raise InvalidOperationError(
            TWO_VALUES_MESSAGE,
            operation=operation,
            diagnostic=f"annotated return type {annotation!r}",
        )


def check_result(result: Any, operation: Any) -> Tuple[Any, Any]:
    """Return ``result`` unchanged if it is a ``(value, failure)`` pair."""
    if not isinstance(result, tuple) or len(result) != 2:
        raise InvalidOperationError(
            TWO_VALUES_MESSAGE,
            operation=operation,
            diagnostic=f"{operation_name(operation)} returned {result!r}",
        )
    return result


def _resolve_return_annotation(operation: Any, signature: inspect.Signature) -> Any:
    annotation = signature.return_annotation
    if isinstance(annotation, str):
        # postponed annotations; unresolvable names are treated as unknown
        try:
            hints = typing.get_type_hints(operation)
        except (NameError, TypeError, AttributeError):
            return inspect.Signature.empty
        return hints.get("return", inspect.Signature.empty)
    return annotation


def _may_return_pair(annotation: Any) -> bool:
    if annotation is inspect.Signature.empty or annotation is typing.Any:
        return True
    if annotation is None or annotation is type(None):
        return False

    if typing.get_origin(annotation) is tuple:
        # tuple[A, B], tuple[A, ...] or a bare typing.Tuple
        args = typing.get_args(annotation)
        return len(args) == 2 or args == ()

    if isinstance(annotation, type):
        return issubclass(annotation, tuple)

    # unions, type variables, protocols... cannot be decided statically
    return True
