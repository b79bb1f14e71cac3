"""Loading record datasets from YAML or JSON files."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

import structlog
import yaml

from collkit.errors import DatasetError

logger = structlog.get_logger(__name__)


def load_records(path: Union[str, Path]) -> list[dict[str, Any]]:
    """
    Load a list of records from ``path``.

    The file may hold a top-level list of mappings or a mapping with a
    ``records`` list. JSON files are read by the YAML parser.

    Raises:
        DatasetError: If the file is missing, unparsable, or has another shape
    """
    source = Path(path)

    if not source.is_file():
        raise DatasetError(f"Dataset file not found: {source}", source=str(source))

    try:
        with open(source, encoding="utf-8") as f:
            payload = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DatasetError(f"Cannot parse dataset {source}: {e}", source=str(source)) from e

    if isinstance(payload, Mapping) and "records" in payload:
        payload = payload["records"]

    if not isinstance(payload, list):
        raise DatasetError(
            f"Dataset {source} must be a list of records",
            source=str(source),
            context={"actual_type": type(payload).__name__},
        )

    for index, record in enumerate(payload):
        if not isinstance(record, Mapping):
            raise DatasetError(
                f"Dataset {source} entry {index} is not a mapping",
                source=str(source),
                context={"index": index, "actual_type": type(record).__name__},
            )

    logger.info("Dataset loaded", source=str(source), records=len(payload))
    return [dict(record) for record in payload]
