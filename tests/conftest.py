"""Shared test fixtures and configuration."""

import logging
import shutil
import struct
import tempfile
from pathlib import Path
from typing import Callable, Generator, Optional, Sequence, Tuple

import pytest
import structlog
import trimesh

from stlimport.core import Config

Vertex = Tuple[float, float, float]
Triangle = Tuple[Vertex, Vertex, Vertex]


def build_binary_stl(
    triangles: Sequence[Triangle],
    declared_count: Optional[int] = None,
    header: bytes = b"binary stl test fixture",
) -> bytes:
    """Serialize triangles into binary STL bytes."""
    if declared_count is None:
        declared_count = len(triangles)

    data = bytearray()
    data.extend(header.ljust(80, b"\0")[:80])
    data.extend(struct.pack("<I", declared_count))
    for tri in triangles:
        data.extend(struct.pack("<fff", 0.0, 0.0, 1.0))
        for v in tri:
            data.extend(struct.pack("<fff", *v))
        data.extend(struct.pack("<H", 0))
    return bytes(data)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo any logging setup a test performed."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def test_config() -> Config:
    """Create a test configuration."""
    return Config(
        importer={"min_probability": 0.5, "show_progress": False},
        logging={"level": "DEBUG", "format": "plain", "colorize": False},
    )


@pytest.fixture
def sample_triangles() -> list[Triangle]:
    """Three triangles with coordinates exactly representable as float32."""
    return [
        ((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
        ((1.5, -2.25, 3.0), (4.0, 5.5, -6.0), (0.125, 0.25, 0.5)),
        ((-1.0, -1.0, -1.0), (10.0, 20.0, 30.0), (7.75, 8.0, 9.5)),
    ]


@pytest.fixture
def write_stl(temp_dir: Path) -> Callable[..., Path]:
    """Factory writing a binary STL file into the temp directory."""

    def _write(
        name: str,
        triangles: Sequence[Triangle] = (),
        declared_count: Optional[int] = None,
    ) -> Path:
        path = temp_dir / name
        path.write_bytes(build_binary_stl(triangles, declared_count=declared_count))
        return path

    return _write


@pytest.fixture
def sample_stl_path(write_stl, sample_triangles) -> Path:
    """A well-formed binary STL file with the sample triangles."""
    return write_stl("sample.stl", sample_triangles)


@pytest.fixture
def simple_box_mesh() -> trimesh.Trimesh:
    """Create a simple box mesh for testing."""
    return trimesh.creation.box(extents=[1, 1, 1])


# Markers for different test categories
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that test multiple components"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take more than 1 second"
    )
