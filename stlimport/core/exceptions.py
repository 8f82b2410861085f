"""Custom exceptions for stlimport."""

from pathlib import Path
from typing import Any, Optional


class StlImportError(Exception):
    """Base exception for stlimport."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(StlImportError):
    """Raised when configuration is invalid."""

    pass


class FormatError(StlImportError):
    """Raised when a file cannot be imported as the requested format."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Failed to import '{path}': {reason}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class FileUnreadableError(FormatError):
    """Raised when a file does not exist or cannot be opened."""

    pass
