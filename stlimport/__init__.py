"""stlimport - Sniff and decode binary STL files into a generic model."""

from stlimport.core import (
    Config,
    Face,
    FileUnreadableError,
    FormatError,
    Mesh,
    Model,
    Point3,
    StlImportError,
)
from stlimport.core.importer import ImportResult, Importer
from stlimport.processing import BinaryStlDecoder, classify, decode

__version__ = "0.1.0"

__all__ = [
    "Config",
    "Model",
    "Mesh",
    "Face",
    "Point3",
    "StlImportError",
    "FormatError",
    "FileUnreadableError",
    "Importer",
    "ImportResult",
    "BinaryStlDecoder",
    "classify",
    "decode",
]
