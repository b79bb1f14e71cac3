"""Left fold over a collection."""

from collections.abc import Sequence
from typing import Any, Callable

import structlog

from collkit.errors import EmptyCollectionError

from .callbacks import adapt_callback, ensure_sequence

logger = structlog.get_logger(__name__)

_UNSET: Any = object()


def reduce_items(
    collection: Sequence[Any],
    callback: Callable[..., Any],
    accumulator: Any = _UNSET,
    *,
    reprocess_first: bool = True,
) -> Any:
    """
    Fold ``collection`` left to right through
    ``callback(accumulator, item, index, collection)``.

    The callback must return the accumulator for the next step; whatever it
    returns replaces the running value, None included.

    Without an ``accumulator`` the first element is used as the starting
    value. With ``reprocess_first`` (the default) the fold still starts at
    index 0, so the first element is combined with itself:
    ``reduce_items([x], f)`` is ``f(x, x, 0, [x])``. Pass
    ``reprocess_first=False`` for the usual behaviour of starting at index 1.
    ``reprocess_first`` has no effect when an accumulator is given.

    Args:
        collection: Sequence to fold
        callback: Reducer, called with up to four positional arguments
        accumulator: Starting value; None is a valid starting value
        reprocess_first: Visit index 0 again when the accumulator defaulted

    Returns:
        The final accumulator

    Raises:
        EmptyCollectionError: If the collection is empty and no accumulator
            was given
    """
    ensure_sequence(collection, "reduce_items")
    call = adapt_callback(callback, "reduce_items", max_args=4, fallback_args=2)

    start = 0
    if accumulator is _UNSET:
        if len(collection) == 0:
            raise EmptyCollectionError(
                "reduce_items of an empty collection needs an accumulator",
                operation="reduce_items",
            )
        accumulator = collection[0]
        if reprocess_first:
            logger.debug("reduce.default_accumulator", reprocess_first=True,
                         length=len(collection))
        else:
            start = 1

    for index in range(start, len(collection)):
        accumulator = call(accumulator, collection[index], index, collection)

    return accumulator
