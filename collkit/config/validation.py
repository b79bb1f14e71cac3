"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import DatasetParams, LoggingParams, OutputParams, PluckParams, ReduceParams

OUTPUT_FORMATS = ("pretty", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Section name -> dataclass declaring its keys
SECTION_PARAMS = {
    "output": OutputParams,
    "logging": LoggingParams,
    "dataset": DatasetParams,
    "pluck": PluckParams,
    "reduce": ReduceParams,
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_output_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate output parameters."""
        errors = []

        # Validate format
        if "format" in params:
            value = params["format"]
            if value not in OUTPUT_FORMATS:
                errors.append(ValidationError(
                    field="output.format",
                    message=f"Must be one of {', '.join(OUTPUT_FORMATS)}",
                    value=value
                ))

        # Validate indent
        if "indent" in params:
            value = params["indent"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="output.indent",
                    message="Must be a non-negative integer",
                    value=value
                ))

        # Validate sort_keys
        if "sort_keys" in params:
            value = params["sort_keys"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="output.sort_keys",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        # Validate level
        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        # Validate format_json
        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="logging.format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_dataset_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate dataset parameters."""
        errors = []

        # Validate path
        if "path" in params:
            value = params["path"]
            if value is not None and (not isinstance(value, str) or not value):
                errors.append(ValidationError(
                    field="dataset.path",
                    message="Must be a non-empty path string or null",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_flag(section: str, name: str, params: dict[str, Any]) -> list[ValidationError]:
        """Validate a single boolean flag within a section."""
        if name in params and not isinstance(params[name], bool):
            return [ValidationError(
                field=f"{section}.{name}",
                message="Must be a boolean",
                value=params[name]
            )]
        return []

    @staticmethod
    def validate_section_keys(section: str, params: Any) -> list[ValidationError]:
        """
        Check that a section is a mapping holding only known keys.

        An empty YAML section (``output:``) loads as None and is reported as
        such, as is any key the section's dataclass does not declare.
        """
        if not isinstance(params, dict):
            return [ValidationError(
                field=section,
                message="Must be a mapping",
                value=params
            )]

        known = [f.name for f in fields(SECTION_PARAMS[section])]
        return [
            ValidationError(
                field=f"{section}.{key}",
                message=f"Unknown key; expected one of {', '.join(known)}",
                value=params[key]
            )
            for key in params
            if key not in known
        ]

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        # Reject sections nothing reads
        for section in config:
            if section not in SECTION_PARAMS:
                errors.append(ValidationError(
                    field=section,
                    message=f"Unknown section; expected one of {', '.join(SECTION_PARAMS)}",
                    value=config[section]
                ))

        # Check shape first; value checks only run on well-formed sections
        valid = {}
        for section in SECTION_PARAMS:
            if section in config:
                errors.extend(ConfigValidator.validate_section_keys(section, config[section]))
                if isinstance(config[section], dict):
                    valid[section] = config[section]

        if "output" in valid:
            errors.extend(ConfigValidator.validate_output_params(valid["output"]))

        if "logging" in valid:
            errors.extend(ConfigValidator.validate_logging_params(valid["logging"]))

        if "dataset" in valid:
            errors.extend(ConfigValidator.validate_dataset_params(valid["dataset"]))

        if "pluck" in valid:
            errors.extend(ConfigValidator.validate_flag("pluck", "strict", valid["pluck"]))

        if "reduce" in valid:
            errors.extend(ConfigValidator.validate_flag("reduce", "reprocess_first", valid["reduce"]))

        return errors
