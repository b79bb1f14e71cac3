"""
Worked examples for the collection helpers.

Every pipeline is an independent function that receives its own copy of the
records and the merged configuration, and returns a result. ``DemoRunner``
wires configuration, logging, dataset loading and output formatting around
them.
"""

import copy
import json
import pprint
from pathlib import Path
from typing import Any, Callable, Optional

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.loader import load_records
from .data.sample import get_sample_data
from .errors import ConfigurationError, DatasetError, UnknownPipelineError
from .logging.config import configure_logging, get_pipeline_logger, log_pipeline_result
from .ops import filter_items, for_each, map_items, pluck, pluck_properties, reduce_items

Records = list[dict[str, Any]]
Pipeline = Callable[[Records, dict[str, Any]], Any]

DEFAULT_PIPELINE = "project-summary"


def _require_first(records: Records, pipeline: str) -> dict[str, Any]:
    if not records:
        raise DatasetError(
            f"Pipeline {pipeline!r} needs at least one record",
            context={"pipeline": pipeline},
        )
    return records[0]


def _require_names(records: Records, pipeline: str) -> None:
    """Every record must carry a string ``name``."""
    for index, item in enumerate(records):
        if not isinstance(item.get("name"), str):
            raise DatasetError(
                f"Pipeline {pipeline!r} needs a string 'name' on every record; "
                f"record {index} has {item.get('name')!r}",
                context={"pipeline": pipeline, "index": index},
            )


def _upper_name(item: dict[str, Any]) -> None:
    item["name"] = item["name"].upper()


def uppercase_names(records: Records, config: dict[str, Any]) -> Records:
    """Upper-case every record's name in place."""
    _require_names(records, "uppercase-names")
    return for_each(records, _upper_name)


def mit_licensed(records: Records, config: dict[str, Any]) -> Records:
    """Records released under the MIT license."""
    return filter_items(records, lambda item, index, collection: item.get("license") == "MIT")


def authors(records: Records, config: dict[str, Any]) -> list[Any]:
    """Author entry of every record."""
    return map_items(records, lambda item: item.get("author"))


def times_ten(records: Records, config: dict[str, Any]) -> list[int]:
    """Multiply 1..4 by ten with map_items."""
    return map_items([1, 2, 3, 4], lambda item: item * 10)


def pluck_first(records: Records, config: dict[str, Any]) -> dict[str, Any]:
    """Name and description of the first record."""
    first = _require_first(records, "pluck-first")
    return pluck_properties(first, ["name", "description"], **config["pluck"])


def pluck_all(records: Records, config: dict[str, Any]) -> list[dict[str, Any]]:
    """Name and description of every record, via map_items."""
    options = config["pluck"]
    return map_items(records, lambda item: pluck_properties(item, ["name", "description"], **options))


def pluck_record(records: Records, config: dict[str, Any]) -> Any:
    """pluck on a single record."""
    first = _require_first(records, "pluck-record")
    return pluck(first, ["name", "author"], **config["pluck"])


def pluck_collection(records: Records, config: dict[str, Any]) -> Any:
    """pluck on the whole collection."""
    return pluck(records, ["name", "author"], **config["pluck"])


def reduce_times_ten(records: Records, config: dict[str, Any]) -> list[int]:
    """Build a new list of 1..4 times ten with reduce_items."""
    def collect(acc: list[int], item: int) -> list[int]:
        acc.append(item * 10)
        # the accumulator must be handed back for the next step
        return acc

    return reduce_items([1, 2, 3, 4], collect, [], **config["reduce"])


def project_summary(records: Records, config: dict[str, Any]) -> dict[str, Any]:
    """
    Upper-cased project names plus, for projects that declare keywords,
    how many they declare.
    """
    _require_names(records, "project-summary")
    for_each(records, _upper_name)

    def summarize(acc: dict[str, Any], item: dict[str, Any]) -> dict[str, Any]:
        acc["names"].append(item["name"])
        if item.get("keywords") is not None:
            acc["keywordCount"][item["name"]] = len(item["keywords"])
        return acc

    return reduce_items(records, summarize, {"names": [], "keywordCount": {}}, **config["reduce"])


PIPELINES: dict[str, Pipeline] = {
    "uppercase-names": uppercase_names,
    "mit-licensed": mit_licensed,
    "authors": authors,
    "times-ten": times_ten,
    "pluck-first": pluck_first,
    "pluck-all": pluck_all,
    "pluck-record": pluck_record,
    "pluck-collection": pluck_collection,
    "reduce-times-ten": reduce_times_ten,
    "project-summary": project_summary,
}


def format_result(result: Any, output: dict[str, Any]) -> str:
    """Render a pipeline result as pprint text or JSON."""
    if output.get("format", "pretty") == "json":
        return json.dumps(
            result,
            indent=output.get("indent", 2) or None,
            sort_keys=output.get("sort_keys", False),
            default=repr,
        )
    return pprint.pformat(result, sort_dicts=output.get("sort_keys", False))


class DemoRunner:
    """Runs named pipelines against a dataset using the merged configuration."""

    def __init__(self, config: dict[str, Any], records: Optional[Records] = None) -> None:
        self.config = config
        self._records = records

    @classmethod
    def create(
        cls,
        config_dir: Optional[Path] = None,
        overrides: Optional[dict[str, Any]] = None,
        records: Optional[Records] = None,
        setup_logging: bool = True,
    ) -> "DemoRunner":
        """
        Build a runner from the config directory plus explicit overrides.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        loader = ConfigLoader.create(config_dir)
        config = loader.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            raise ConfigurationError(
                "; ".join(f"{e.field}: {e.message} (got {e.value!r})" for e in errors),
                errors=errors,
            )

        if setup_logging:
            configure_logging(
                level=config["logging"]["level"],
                format_json=config["logging"]["format_json"],
            )

        return cls(config, records)

    def dataset(self) -> Records:
        """Fresh records for one pipeline run."""
        if self._records is not None:
            return copy.deepcopy(self._records)

        path = self.config["dataset"].get("path")
        if path:
            return load_records(path)
        return get_sample_data()

    def run(self, name: str) -> Any:
        """
        Run one pipeline on a fresh copy of the dataset.

        Raises:
            UnknownPipelineError: If no pipeline has that name
        """
        if name not in PIPELINES:
            raise UnknownPipelineError(
                f"Unknown pipeline {name!r}; choose from {', '.join(PIPELINES)}",
                pipeline=name,
                available=list(PIPELINES),
            )

        result = PIPELINES[name](self.dataset(), self.config)
        log_pipeline_result(get_pipeline_logger(__name__), name, result)
        return result

    def render(self, name: str) -> str:
        """Run a pipeline and format its result for output."""
        return format_result(self.run(name), self.config["output"])


def run_pipeline(name: str = DEFAULT_PIPELINE, records: Optional[Records] = None) -> Any:
    """Run a pipeline with the configuration found in the working directory."""
    runner = DemoRunner.create(records=records)
    return runner.run(name)
