"""
Errors raised by the demo runner around the helpers: dataset loading,
configuration and pipeline lookup.
"""

from typing import Any, Optional

from .contract import CollectionError


class DatasetError(CollectionError):
    """Dataset file missing, unreadable or not a list of records."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source


class ConfigurationError(CollectionError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class UnknownPipelineError(CollectionError, KeyError):
    """No demo pipeline is registered under the requested name."""

    def __init__(self, message: str, pipeline: Optional[str] = None,
                 available: Optional[list[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.pipeline = pipeline
        self.available = available or []

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
