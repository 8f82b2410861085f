"""Binary STL sniffing and decoding for stlimport."""

from stlimport.processing.decoder import BinaryStlDecoder, decode
from stlimport.processing.sniffer import classify

__all__ = [
    "BinaryStlDecoder",
    "decode",
    "classify",
]
