"""Binary STL layout constants and little-endian field decoders.

A binary STL file is an 80 byte free-form header, a little-endian uint32
triangle count, then one 50 byte record per triangle::

    offset      size  field
    0           80    header (ignored)
    80          4     triangle_count, uint32 LE, untrusted
    84+50i      12    normal, 3 x float32 LE (ignored)
    84+50i+12   36    vertices, 3 x (x, y, z) float32 LE
    84+50i+48   2     attribute byte count (ignored)

All fields are decoded with explicit little-endian ``struct`` formats, so the
result does not depend on the byte order of the host.
"""

import struct
from typing import BinaryIO, Tuple

HEADER_SIZE = 80
COUNT_SIZE = 4
MIN_FILE_SIZE = HEADER_SIZE + COUNT_SIZE
TRIANGLE_RECORD_SIZE = 50
NORMAL_SIZE = 12
VERTICES_SIZE = 36

_UINT32_LE = struct.Struct("<I")
_FLOAT32_LE = struct.Struct("<f")
_VERTICES_LE = struct.Struct("<9f")


def read_uint32_le(data: bytes, offset: int = 0) -> int:
    """Decode an unsigned 32-bit little-endian integer."""
    return _UINT32_LE.unpack_from(data, offset)[0]


def read_float32_le(data: bytes, offset: int = 0) -> float:
    """Decode an IEEE-754 single precision little-endian float."""
    return _FLOAT32_LE.unpack_from(data, offset)[0]


def read_vertices_le(data: bytes) -> Tuple[float, ...]:
    """Decode the 9 vertex coordinates of one triangle record.

    Args:
        data: The 36 vertex bytes of a record (normal already skipped)

    Returns:
        (v1.x, v1.y, v1.z, v2.x, v2.y, v2.z, v3.x, v3.y, v3.z)
    """
    return _VERTICES_LE.unpack(data)


def file_size(handle: BinaryIO) -> int:
    """Total byte length of an open binary file, leaving it at offset 0."""
    handle.seek(0, 2)
    size = handle.tell()
    handle.seek(0)
    return size


def read_declared_count(handle: BinaryIO) -> int:
    """Read the triangle count at offset 80.

    The caller must have checked that the file holds at least
    ``MIN_FILE_SIZE`` bytes.
    """
    handle.seek(HEADER_SIZE)
    return read_uint32_le(handle.read(COUNT_SIZE))


def expected_file_size(triangle_count: int) -> int:
    """Byte length of a well-formed file holding ``triangle_count`` triangles."""
    return MIN_FILE_SIZE + TRIANGLE_RECORD_SIZE * triangle_count


def available_triangles(size: int) -> int:
    """Number of complete triangle records that fit in ``size`` bytes."""
    return max(0, size - MIN_FILE_SIZE) // TRIANGLE_RECORD_SIZE
