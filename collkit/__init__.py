"""
collkit - Generic collection-processing helpers

Small, pure helpers (for_each, filter_items, map_items, pluck, reduce_items)
over in-memory sequences of records, plus worked example pipelines that run
them against a sample dataset of package manifests.
"""

from .ops import (
    MISSING,
    filter_items,
    for_each,
    map_items,
    pluck,
    pluck_many,
    pluck_one,
    pluck_properties,
    reduce_items,
)

__version__ = "0.1.0"
__author__ = "collkit Team"

__all__ = [
    "for_each",
    "filter_items",
    "map_items",
    "pluck_properties",
    "pluck_one",
    "pluck_many",
    "pluck",
    "reduce_items",
    "MISSING",
]
