"""Default configuration parameters for the demo runner."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class OutputParams:
    """Rendering of pipeline results on stdout."""
    format: str = "pretty"             # "pretty" (pprint) or "json"
    indent: int = 2                    # JSON indent; 0 prints on one line
    sort_keys: bool = False            # Sort mapping keys in output


@dataclass(frozen=True)
class LoggingParams:
    """structlog setup."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class DatasetParams:
    """Where demo records come from."""
    path: Optional[str] = None         # None means the bundled sample data


@dataclass(frozen=True)
class PluckParams:
    """Options forwarded to pluck in the demo pipelines."""
    default: Any = None                # Value for keys a record lacks
    strict: bool = False               # Raise on absent keys instead


@dataclass(frozen=True)
class ReduceParams:
    """Options forwarded to reduce_items in the demo pipelines."""
    reprocess_first: bool = True       # Fold index 0 again when accumulator defaults


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    output: OutputParams
    logging: LoggingParams
    dataset: DatasetParams
    pluck: PluckParams
    reduce: ReduceParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        output=OutputParams(),
        logging=LoggingParams(),
        dataset=DatasetParams(),
        pluck=PluckParams(),
        reduce=ReduceParams(),
    )
