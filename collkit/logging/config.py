"""
Centralized logging configuration for collkit.

All modules log through structlog so that events carry structured fields
instead of formatted strings. Output goes to stderr, leaving stdout for the
results printed by the demo runner.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the whole package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON lines; otherwise human-readable
        include_timestamp: Include an ISO timestamp in each event
        include_caller: Include caller filename and line number
        extra_processors: Additional structlog processors to include
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper())

    # Route stdlib logging to stderr
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",
        force=True,
    )

    # Build processor chain
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # Add timestamp if requested
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    # Add caller information if requested
    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    # Add any extra processors
    if extra_processors:
        processors.extend(extra_processors)

    # Add final formatting processor
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    # Loggers are not cached so reconfiguring takes effect on module-level loggers
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def get_pipeline_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the demo pipeline subsystem."""
    return get_logger(name).bind(subsystem="demo")


def log_pipeline_result(
    logger: FilteringBoundLogger,
    pipeline: str,
    result: Any,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a demo pipeline with a standardized shape.

    Args:
        logger: Structlog logger instance
        pipeline: Name of the pipeline that ran
        result: Value the pipeline returned
        context: Additional context data
    """
    size = len(result) if hasattr(result, "__len__") else None

    bound_logger = logger.bind(
        pipeline=pipeline,
        result_type=type(result).__name__,
        result_size=size,
    )

    # Add caller-supplied context
    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Pipeline finished")
