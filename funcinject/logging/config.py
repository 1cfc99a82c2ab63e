"""
Centralized logging configuration for the function injector.

This module provides standardized logging configuration using structlog.
Binding decisions are logged through a dedicated binding logger so they can
be filtered apart from application events.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

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
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

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


def get_binding_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for binding decisions made while building injectors.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger bound to the binding subsystem
    """
    # initial values keep the proxy lazy until first use
    return structlog.get_logger(name, subsystem="binding")


def log_binding_decision(
    logger: FilteringBoundLogger,
    fn_name: str,
    sequence: int,
    source: str,
    bind_type: str,
    bound_type: str,
    input_index: int,
    param_type: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a single recorded binding with standardized fields.

    Args:
        logger: Structlog logger instance
        fn_name: Qualified name of the function being injected
        sequence: 1-based order in which the binding was recorded
        source: Where the bind object came from ("override" or "pool")
        bind_type: Bind object kind ("Static" or "Dynamic")
        bound_type: Name of the type the bind object produces
        input_index: Target parameter position
        param_type: Declared type of the target parameter
        context: Additional context data
    """
    bound_logger = logger.bind(
        fn=fn_name,
        sequence=sequence,
        source=source,
        bind_type=bind_type,
        bound_type=bound_type,
        input_index=input_index,
        param_type=param_type,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Input bound")
