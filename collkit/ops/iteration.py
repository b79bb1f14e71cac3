"""Element-wise helpers: for_each, filter_items and map_items."""

from collections.abc import Sequence
from typing import Any, Callable, TypeVar

from .callbacks import adapt_callback, ensure_sequence

T = TypeVar("T")
U = TypeVar("U")
S = TypeVar("S", bound=Sequence)


def for_each(collection: S, callback: Callable[..., Any]) -> S:
    """
    Call ``callback(item, index, collection)`` for every element, in order.

    The callback runs for its side effects only; its return value is ignored
    and there is no early exit.

    Returns:
        The very collection that was passed in, so in-place changes made by
        the callback are visible through the return value.
    """
    ensure_sequence(collection, "for_each")
    call = adapt_callback(callback, "for_each", max_args=3)

    for index in range(len(collection)):
        call(collection[index], index, collection)

    return collection


def filter_items(collection: Sequence[T], callback: Callable[..., Any]) -> list[T]:
    """
    Keep the elements for which ``callback(item, index, collection)`` is truthy.

    Returns:
        New list holding the kept elements in their original order
    """
    ensure_sequence(collection, "filter_items")
    call = adapt_callback(callback, "filter_items", max_args=3)

    result = []
    for index in range(len(collection)):
        item = collection[index]
        if call(item, index, collection):
            result.append(item)
    return result


def map_items(collection: Sequence[T], callback: Callable[..., U]) -> list[U]:
    """
    Collect ``callback(item)`` for every element into a new list.

    Only the item is passed, so callables with optional parameters such as
    ``round`` or ``str.split`` behave as they would when called directly.
    The result always has the input's length and order.
    """
    ensure_sequence(collection, "map_items")
    call = adapt_callback(callback, "map_items", max_args=1)

    return [call(item) for item in collection]
