"""
Error classification for the collection helpers and the demo runner.

Contract errors are raised before iteration when an argument violates a
helper's preconditions. Runtime errors cover dataset and configuration
problems in the demo layer.
"""

from .contract import (
    CollectionError,
    InvalidCollectionError,
    InvalidCallbackError,
    EmptyCollectionError,
    MissingPropertyError,
)
from .runtime import (
    DatasetError,
    ConfigurationError,
    UnknownPipelineError,
)

__all__ = [
    # Contract errors
    "CollectionError",
    "InvalidCollectionError",
    "InvalidCallbackError",
    "EmptyCollectionError",
    "MissingPropertyError",
    # Runtime errors
    "DatasetError",
    "ConfigurationError",
    "UnknownPipelineError",
]
