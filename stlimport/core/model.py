"""Generic in-memory model produced by the importers."""

from dataclasses import dataclass, field
from typing import List, NamedTuple

import numpy as np
import trimesh


class Point3(NamedTuple):
    """A point in 3D space."""

    x: float
    y: float
    z: float


@dataclass
class Face:
    """A polygon, as an ordered list of vertices."""

    vertices: List[Point3] = field(default_factory=list)


@dataclass
class Mesh:
    """A group of faces belonging to one object."""

    faces: List[Face] = field(default_factory=list)

    def to_array(self) -> np.ndarray:
        """Return the triangles of this mesh as an array.

        Returns:
            Array of shape (n_faces, 3, 3) with float32 coordinates

        Raises:
            ValueError: If a face is not a triangle
        """
        for index, face in enumerate(self.faces):
            if len(face.vertices) != 3:
                raise ValueError(
                    f"Face {index} has {len(face.vertices)} vertices, expected 3"
                )
        if not self.faces:
            return np.zeros((0, 3, 3), dtype=np.float32)
        return np.array([face.vertices for face in self.faces], dtype=np.float32)


@dataclass
class Model:
    """A complete scene of meshes, as handed to format writers."""

    meshes: List[Mesh] = field(default_factory=list)

    @property
    def face_count(self) -> int:
        return sum(len(mesh.faces) for mesh in self.meshes)

    def to_trimesh(self) -> trimesh.Trimesh:
        """Convert all meshes into a single unprocessed trimesh object.

        Vertices are not merged, so every face keeps its own three vertices
        in the original order.
        """
        triangles = [mesh.to_array() for mesh in self.meshes]
        if triangles:
            stacked = np.concatenate(triangles)
        else:
            stacked = np.zeros((0, 3, 3), dtype=np.float32)

        vertices = stacked.reshape((-1, 3))
        faces = np.arange(len(vertices), dtype=np.int64).reshape((-1, 3))
        return trimesh.Trimesh(vertices=vertices, faces=faces, process=False)
