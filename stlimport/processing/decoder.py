"""Binary STL decoding into the generic model."""

from pathlib import Path
from typing import List, Tuple, Union

from tqdm import tqdm

from stlimport.core.exceptions import FileUnreadableError
from stlimport.core.model import Face, Mesh, Model, Point3
from stlimport.processing.stl_format import (
    MIN_FILE_SIZE,
    NORMAL_SIZE,
    TRIANGLE_RECORD_SIZE,
    VERTICES_SIZE,
    available_triangles,
    file_size,
    read_declared_count,
    read_vertices_le,
)
from stlimport.utils.logging import StructuredLogger, get_logger

logger = get_logger(__name__)

RawTriangle = Tuple[Point3, Point3, Point3]


class BinaryStlDecoder:
    """Reads the triangle soup of a binary STL file.

    Normals and attribute bytes are skipped. The triangle count stored in the
    file is never trusted beyond what the file size can hold.
    """

    def __init__(self, show_progress: bool = False):
        """Initialize decoder.

        Args:
            show_progress: Whether to show a progress bar per triangle
        """
        self.show_progress = show_progress
        self.triangles: List[RawTriangle] = []

    def load(self, filename: Union[str, Path]) -> None:
        """Read all triangles of a file into ``self.triangles``.

        Args:
            filename: Path to the binary STL file

        Raises:
            FileUnreadableError: If the file cannot be opened
        """
        self.triangles = []
        try:
            with open(filename, "rb") as f:
                size = file_size(f)
                if size < MIN_FILE_SIZE:
                    logger.warning("short_header", path=str(filename), file_size=size)
                    return

                declared_count = read_declared_count(f)
                count = available_triangles(size)
                if declared_count < count:
                    count = declared_count
                elif declared_count > count:
                    logger.warning(
                        "triangle_count_clamped",
                        path=str(filename),
                        declared_count=declared_count,
                        effective_count=count,
                    )

                for index in tqdm(
                    range(count),
                    desc="Loading STL",
                    disable=not self.show_progress,
                    unit="triangles",
                ):
                    f.seek(MIN_FILE_SIZE + index * TRIANGLE_RECORD_SIZE + NORMAL_SIZE)
                    self.triangles.append(self._read_triangle(f.read(VERTICES_SIZE)))
        except (OSError, ValueError) as e:
            # ValueError: paths open() rejects outright, e.g. embedded NUL bytes
            self.triangles = []
            raise FileUnreadableError(Path(filename), str(e)) from e

    @staticmethod
    def _read_triangle(data: bytes) -> RawTriangle:
        v1_x, v1_y, v1_z, v2_x, v2_y, v2_z, v3_x, v3_y, v3_z = read_vertices_le(data)
        return (
            Point3(v1_x, v1_y, v1_z),
            Point3(v2_x, v2_y, v2_z),
            Point3(v3_x, v3_y, v3_z),
        )

    def to_model(self) -> Model:
        """Convert the loaded triangles into a model.

        Binary STL files hold a single object, so the model always has exactly
        one mesh, with one face per triangle in file order.
        """
        mesh = Mesh()
        for triangle in self.triangles:
            mesh.faces.append(Face(vertices=list(triangle)))
        return Model(meshes=[mesh])

    def decode(self, filename: Union[str, Path]) -> Model:
        """Load a binary STL file and convert it into a model.

        Args:
            filename: Path to the binary STL file

        Returns:
            Model with one mesh

        Raises:
            FileUnreadableError: If the file cannot be opened
        """
        logger.info("importing_binary_stl", path=str(filename))
        with StructuredLogger(logger, "decode", path=str(filename)) as ctx:
            self.load(filename)
            ctx.update_context(triangles=len(self.triangles))
        model = self.to_model()
        self.triangles = []
        return model


def decode(filename: Union[str, Path], show_progress: bool = False) -> Model:
    """Convenience function to decode a binary STL file.

    Args:
        filename: Path to the binary STL file
        show_progress: Whether to show a progress bar

    Returns:
        Model with one mesh and one face per triangle

    Raises:
        FileUnreadableError: If the file cannot be opened
    """
    return BinaryStlDecoder(show_progress=show_progress).decode(filename)
