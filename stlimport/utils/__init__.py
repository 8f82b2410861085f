"""Utility functions for stlimport."""

from stlimport.utils.logging import (
    setup_logging,
    get_logger,
    log_performance,
    log_import_result,
    StructuredLogger,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_performance",
    "log_import_result",
    "StructuredLogger",
]
