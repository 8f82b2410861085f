"""Core functionality for stlimport."""

from stlimport.core.config import (
    Config,
    ImportConfig,
    LoggingConfig,
    get_default_config,
    load_config,
)
from stlimport.core.exceptions import (
    ConfigurationError,
    FileUnreadableError,
    FormatError,
    StlImportError,
)
from stlimport.core.model import Face, Mesh, Model, Point3

__all__ = [
    # Config classes
    "Config",
    "ImportConfig",
    "LoggingConfig",
    # Config functions
    "get_default_config",
    "load_config",
    # Data model
    "Model",
    "Mesh",
    "Face",
    "Point3",
    # Exceptions
    "StlImportError",
    "ConfigurationError",
    "FormatError",
    "FileUnreadableError",
]
