"""Structured logging configuration using structlog."""

import logging
import sys
import time
from pathlib import Path
from typing import Any, Optional

import structlog
from structlog.processors import CallsiteParameter

from stlimport.core.config import LoggingConfig


def _shared_processors(config: LoggingConfig) -> list:
    """Processors run for both structlog and foreign stdlib records."""
    processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt=config.timestamp_format),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if config.add_caller_info:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    CallsiteParameter.FILENAME,
                    CallsiteParameter.LINENO,
                    CallsiteParameter.FUNC_NAME,
                ],
            ),
        )
    return processors


def _renderer(config: LoggingConfig) -> Any:
    if config.format == "json":
        return structlog.processors.JSONRenderer()
    if config.format == "console":
        return structlog.dev.ConsoleRenderer(
            colors=config.colorize and sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )
    return structlog.processors.KeyValueRenderer(
        key_order=["timestamp", "level", "logger", "event"],
        drop_missing=True,
    )


def _attach(
    handler: logging.Handler, shared_processors: list, renderer: Any
) -> logging.Handler:
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def setup_logging(
    config: Optional[LoggingConfig] = None,
    log_file: Optional[Path] = None,
) -> structlog.stdlib.BoundLogger:
    """Route structlog events through stdlib logging.

    Console records go to stderr in the configured format, so CLI tables on
    stdout stay clean. A log file, when given, always receives JSON.

    Args:
        config: Logging configuration
        log_file: Optional log file path, overrides ``config.log_file``

    Returns:
        The package logger
    """
    config = config or LoggingConfig()
    log_file = log_file or config.log_file
    shared_processors = _shared_processors(config)

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers = [
        _attach(logging.StreamHandler(sys.stderr), shared_processors, _renderer(config))
    ]
    if log_file:
        handlers.append(
            _attach(
                logging.FileHandler(log_file),
                shared_processors,
                structlog.processors.JSONRenderer(),
            )
        )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(config.level)

    for lib in ("trimesh", "numpy"):
        logging.getLogger(lib).setLevel(logging.WARNING)

    return structlog.get_logger("stlimport")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return structlog.get_logger(name)


def log_performance(
    logger: structlog.stdlib.BoundLogger,
    operation: str,
    duration: float,
    **kwargs: Any,
) -> None:
    """Log performance metrics.

    Args:
        logger: Logger instance
        operation: Operation name
        duration: Duration in seconds
        **kwargs: Additional metrics
    """
    logger.info(
        "performance",
        operation=operation,
        duration_ms=round(duration * 1000, 2),
        **kwargs,
    )


def log_import_result(
    logger: structlog.stdlib.BoundLogger,
    result: Any,  # ImportResult
) -> None:
    """Log the outcome of a sniff-then-decode import.

    Args:
        logger: Logger instance
        result: Import result object
    """
    if result.success:
        logger.info(
            "import_success",
            input_file=str(result.path),
            probability=result.probability,
            **result.metrics,
        )
    else:
        logger.error(
            "import_failed",
            input_file=str(result.path),
            probability=result.probability,
            error=result.error,
            **result.metrics,
        )


class StructuredLogger:
    """Context manager for structured logging of operations."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger,
        operation: str,
        **context: Any,
    ):
        """Initialize structured logger context.

        Args:
            logger: Logger instance
            operation: Operation name
            **context: Additional context
        """
        self.logger = logger
        self.operation = operation
        self.context = context
        self._start_time: Optional[float] = None

    def __enter__(self) -> "StructuredLogger":
        self._start_time = time.perf_counter()
        self.logger.debug(f"{self.operation}_started", **self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        duration = time.perf_counter() - self._start_time

        if exc_type is None:
            self.logger.debug(
                f"{self.operation}_completed",
                duration_ms=round(duration * 1000, 2),
                **self.context,
            )
        else:
            self.logger.error(
                f"{self.operation}_failed",
                duration_ms=round(duration * 1000, 2),
                error=str(exc_val),
                error_type=exc_type.__name__,
                **self.context,
            )

    def update_context(self, **kwargs: Any) -> None:
        """Update logging context."""
        self.context.update(kwargs)
