"""
Key extraction from records.

``pluck_properties`` works on one record. ``pluck_one`` and ``pluck_many``
are the explicit single-record and collection entry points; ``pluck`` picks
between them from the shape of its target.
"""

import copy
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Union

import structlog

from collkit.errors import InvalidCollectionError, MissingPropertyError

from .callbacks import ensure_keys, ensure_record, ensure_sequence
from .iteration import map_items

logger = structlog.get_logger(__name__)


class _Missing(Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


# Pass as ``default`` to tell absent keys apart from keys holding None
MISSING = _Missing.MISSING


def pluck_properties(
    record: Mapping[str, Any],
    properties: Sequence[str],
    default: Any = None,
    strict: bool = False,
) -> dict[str, Any]:
    """
    Build a new dict holding only ``properties`` taken from ``record``.

    Keys appear in the order requested. The source record is not modified.

    Args:
        record: Source mapping
        properties: Keys to extract
        default: Value bound to keys the record does not have, copied per key
        strict: Raise instead of using ``default`` for absent keys

    Raises:
        MissingPropertyError: If ``strict`` and any key is absent
    """
    ensure_record(record, "pluck_properties")
    ensure_keys(properties, "pluck_properties")

    result: dict[str, Any] = {}
    missing = []

    for key in properties:
        if key in record:
            result[key] = record[key]
        else:
            missing.append(key)
            # each absent key gets its own copy of a mutable default
            result[key] = copy.deepcopy(default)

    if missing:
        if strict:
            raise MissingPropertyError(
                f"Record has no {', '.join(map(repr, missing))}",
                missing_keys=missing,
                available_keys=list(record.keys()),
            )
        logger.debug("pluck.missing_keys", missing_keys=missing)

    return result


def pluck_one(record: Mapping[str, Any], properties: Sequence[str], **options: Any) -> dict[str, Any]:
    """Pluck ``properties`` from a single record."""
    return pluck_properties(record, properties, **options)


def pluck_many(
    records: Sequence[Mapping[str, Any]],
    properties: Sequence[str],
    **options: Any
) -> list[dict[str, Any]]:
    """Pluck ``properties`` from every record, preserving order."""
    ensure_sequence(records, "pluck_many")
    ensure_keys(properties, "pluck_many")

    return map_items(records, lambda item: pluck_properties(item, properties, **options))


def pluck(
    target: Union[Mapping[str, Any], Sequence[Mapping[str, Any]]],
    properties: Sequence[str],
    **options: Any
) -> Union[dict[str, Any], list[dict[str, Any]]]:
    """
    Pluck from a single record or from a collection of records.

    A mapping yields one dict; a sequence yields a list of dicts in the same
    order. Keyword options are forwarded to ``pluck_properties``.

    Raises:
        InvalidCollectionError: If ``target`` is neither (strings included)
    """
    if isinstance(target, Mapping):
        return pluck_one(target, properties, **options)

    if isinstance(target, Sequence) and not isinstance(target, (str, bytes)):
        return pluck_many(target, properties, **options)

    raise InvalidCollectionError(
        f"pluck expects a mapping or a sequence of mappings, got {type(target).__name__}",
        expected="Mapping | Sequence[Mapping]",
        actual_type=type(target).__name__,
        context={"operation": "pluck"},
    )
