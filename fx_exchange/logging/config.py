"""
Centralized logging configuration for the exchange application.

This module provides standardized logging configuration using structlog
for all components. Log records go to stderr so they never interleave with
the conversion output written to stdout.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    stream: Optional[TextIO] = None,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        stream: Destination stream, stderr by default
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())
    log_stream = stream if stream is not None else sys.stderr

    logging.basicConfig(
        level=log_level,
        stream=log_stream,
        format="%(message)s"  # structlog will handle formatting
    )
    logging.getLogger().setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=log_stream.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_command_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for command processing.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for command outcomes
    """
    logger = get_logger(name)

    return logger.bind(subsystem="command_processor")


def log_command_outcome(
    logger: FilteringBoundLogger,
    command: str,
    outcome: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a processed command with standardized format.

    Args:
        logger: Structlog logger instance
        command: Raw command text as entered
        outcome: Name of the result variant produced
        context: Additional context data
    """
    bound_logger = logger.bind(command=command, outcome=outcome)

    if context:
        bound_logger = bound_logger.bind(**context)

    if outcome == "Success":
        bound_logger.debug("Command converted")
    else:
        bound_logger.info("Command rejected")
