"""
Precondition error classifications for the collection helpers.

These exceptions replace the opaque runtime faults a bad argument would
otherwise produce deep inside an iteration with a descriptive error raised
before any element is visited.
"""

from typing import Any, Dict, Optional


class CollectionError(Exception):
    """Base class for all collkit errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class InvalidCollectionError(CollectionError, TypeError):
    """Argument is not the kind of collection or record the helper expects."""

    def __init__(self, message: str, expected: Optional[str] = None,
                 actual_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected = expected
        self.actual_type = actual_type


class InvalidCallbackError(CollectionError, TypeError):
    """Callback argument is not callable."""

    def __init__(self, message: str, callback_repr: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.callback_repr = callback_repr


class EmptyCollectionError(CollectionError, ValueError):
    """Operation needs at least one element and got none."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation


class MissingPropertyError(CollectionError, KeyError):
    """Strict pluck asked for keys the record does not have."""

    def __init__(self, message: str, missing_keys: Optional[list] = None,
                 available_keys: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.missing_keys = missing_keys or []
        self.available_keys = available_keys or []

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""
