"""Callback and argument checks shared by the collection helpers."""

import inspect
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Optional

from collkit.errors import InvalidCallbackError, InvalidCollectionError


def ensure_sequence(collection: Any, operation: str) -> Sequence:
    """Raise InvalidCollectionError unless ``collection`` is a Sequence."""
    if not isinstance(collection, Sequence):
        raise InvalidCollectionError(
            f"{operation} expects a sequence, got {type(collection).__name__}",
            expected="Sequence",
            actual_type=type(collection).__name__,
            context={"operation": operation},
        )
    return collection


def ensure_record(record: Any, operation: str) -> Mapping:
    """Raise InvalidCollectionError unless ``record`` is a Mapping."""
    if not isinstance(record, Mapping):
        raise InvalidCollectionError(
            f"{operation} expects a mapping, got {type(record).__name__}",
            expected="Mapping",
            actual_type=type(record).__name__,
            context={"operation": operation},
        )
    return record


def ensure_keys(properties: Any, operation: str) -> Sequence:
    """Property lists must be real sequences; a bare string is refused."""
    if isinstance(properties, (str, bytes)) or not isinstance(properties, Sequence):
        raise InvalidCollectionError(
            f"{operation} expects a sequence of keys, got {type(properties).__name__}",
            expected="Sequence[str]",
            actual_type=type(properties).__name__,
            context={"operation": operation},
        )
    return properties


def positional_capacity(callback: Callable[..., Any]) -> Optional[int]:
    """
    Count how many positional arguments ``callback`` accepts.

    Returns:
        The count, or None when the callable takes ``*args`` (no limit).

    Raises:
        ValueError/TypeError: signature cannot be inspected
    """
    count = 0
    for param in inspect.signature(callback).parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY,
                          inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def adapt_callback(
    callback: Any,
    operation: str,
    max_args: int,
    fallback_args: int = 1
) -> Callable[..., Any]:
    """
    Validate ``callback`` and wrap it so it receives only as many positional
    arguments as it declares, up to ``max_args``.

    Helpers always pass the full argument list (for example ``item, index,
    collection``); ``lambda item: ...`` gets just the item.

    Args:
        callback: Callable supplied by the caller
        operation: Helper name, used in error messages
        max_args: Length of the full argument list the helper passes
        fallback_args: Arguments passed when the signature is not introspectable

    Raises:
        InvalidCallbackError: If ``callback`` is not callable
    """
    if not callable(callback):
        raise InvalidCallbackError(
            f"{operation} expects a callable, got {type(callback).__name__}",
            callback_repr=repr(callback),
            context={"operation": operation},
        )

    try:
        capacity = positional_capacity(callback)
    except (TypeError, ValueError):
        capacity = fallback_args

    if capacity is None or capacity >= max_args:
        return callback

    def trimmed(*args: Any) -> Any:
        return callback(*args[:capacity])

    return trimmed
