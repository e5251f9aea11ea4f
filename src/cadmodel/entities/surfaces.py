"""Filled and faceted entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np
from numpy.typing import NDArray

from .base import EntityObject, EntityType, as_points, zeros


@dataclass(eq=False)
class Solid(EntityObject):
    """Filled 2D quadrilateral (or triangle when the last two vertices match)."""

    type: ClassVar[EntityType] = EntityType.SOLID

    vertices: NDArray[np.float64] = field(default_factory=zeros(4, 2))
    elevation: float = 0.0
    thickness: float = 0.0

    def __post_init__(self) -> None:
        self.vertices = as_points(self.vertices, 2)


@dataclass(eq=False)
class Trace(EntityObject):
    type: ClassVar[EntityType] = EntityType.TRACE

    vertices: NDArray[np.float64] = field(default_factory=zeros(4, 2))
    elevation: float = 0.0
    thickness: float = 0.0

    def __post_init__(self) -> None:
        self.vertices = as_points(self.vertices, 2)


@dataclass(eq=False)
class Face3d(EntityObject):
    """Three or four sided face in space."""

    type: ClassVar[EntityType] = EntityType.FACE3D

    vertices: NDArray[np.float64] = field(default_factory=zeros(4, 3))

    def __post_init__(self) -> None:
        self.vertices = as_points(self.vertices, 3)


@dataclass(eq=False)
class Hatch(EntityObject):
    """Area filled with a pattern.

    Attributes:
        pattern: Hatch pattern name
        boundary_paths: Closed boundary loops, each an (N, 2) array
        elevation: Z coordinate of the hatch plane
        is_associative: Whether boundaries follow their source entities
    """

    type: ClassVar[EntityType] = EntityType.HATCH

    pattern: str = "SOLID"
    boundary_paths: list[NDArray[np.float64]] = field(default_factory=list)
    elevation: float = 0.0
    is_associative: bool = False

    def __post_init__(self) -> None:
        self.boundary_paths = [as_points(path, 2) for path in self.boundary_paths]


@dataclass(eq=False)
class Mesh(EntityObject):
    """Subdivision mesh.

    Attributes:
        vertices: (N, 3) vertex array
        faces: Vertex indices of each face
        subdivision_level: Smoothing level
    """

    type: ClassVar[EntityType] = EntityType.MESH

    vertices: NDArray[np.float64] = field(default_factory=zeros(0, 3))
    faces: list[list[int]] = field(default_factory=list)
    subdivision_level: int = 0

    def __post_init__(self) -> None:
        self.vertices = as_points(self.vertices, 3)


@dataclass(eq=False)
class PolyfaceMesh(EntityObject):
    type: ClassVar[EntityType] = EntityType.POLYFACE_MESH

    vertices: NDArray[np.float64] = field(default_factory=zeros(0, 3))
    faces: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.vertices = as_points(self.vertices, 3)


@dataclass(eq=False)
class Wipeout(EntityObject):
    """Area that masks the entities behind it."""

    type: ClassVar[EntityType] = EntityType.WIPEOUT

    clipping_boundary: NDArray[np.float64] = field(default_factory=zeros(0, 2))
    elevation: float = 0.0

    def __post_init__(self) -> None:
        self.clipping_boundary = as_points(self.clipping_boundary, 2)
