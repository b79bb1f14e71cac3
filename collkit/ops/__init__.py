"""Generic collection-processing helpers over in-memory sequences."""

from .iteration import filter_items, for_each, map_items
from .pluck import MISSING, pluck, pluck_many, pluck_one, pluck_properties
from .reduce import reduce_items

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
