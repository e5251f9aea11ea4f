"""Linear and curved entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np
from numpy.typing import NDArray

from .base import EntityObject, EntityType, as_points, zeros


@dataclass(eq=False)
class Line(EntityObject):
    """Straight segment between two points."""

    type: ClassVar[EntityType] = EntityType.LINE

    start: NDArray[np.float64] = field(default_factory=zeros(3))
    end: NDArray[np.float64] = field(default_factory=zeros(3))
    thickness: float = 0.0

    def __post_init__(self) -> None:
        self.start = np.asarray(self.start, dtype=np.float64)
        self.end = np.asarray(self.end, dtype=np.float64)


@dataclass(eq=False)
class Arc(EntityObject):
    """Circular arc. Angles in degrees, counter-clockwise."""

    type: ClassVar[EntityType] = EntityType.ARC

    center: NDArray[np.float64] = field(default_factory=zeros(3))
    radius: float = 1.0
    start_angle: float = 0.0
    end_angle: float = 180.0
    thickness: float = 0.0

    def __post_init__(self) -> None:
        self.center = np.asarray(self.center, dtype=np.float64)


@dataclass(eq=False)
class Circle(EntityObject):
    type: ClassVar[EntityType] = EntityType.CIRCLE

    center: NDArray[np.float64] = field(default_factory=zeros(3))
    radius: float = 1.0
    thickness: float = 0.0

    def __post_init__(self) -> None:
        self.center = np.asarray(self.center, dtype=np.float64)


@dataclass(eq=False)
class Ellipse(EntityObject):
    """Ellipse or elliptical arc.

    Attributes:
        center: Center point
        major_axis: Length of the major axis
        minor_axis: Length of the minor axis
        rotation: Rotation of the major axis in degrees
        start_angle: Start parameter angle in degrees
        end_angle: End parameter angle in degrees (360 for a full ellipse)
    """

    type: ClassVar[EntityType] = EntityType.ELLIPSE

    center: NDArray[np.float64] = field(default_factory=zeros(3))
    major_axis: float = 2.0
    minor_axis: float = 1.0
    rotation: float = 0.0
    start_angle: float = 0.0
    end_angle: float = 360.0

    def __post_init__(self) -> None:
        self.center = np.asarray(self.center, dtype=np.float64)


@dataclass(eq=False)
class Ray(EntityObject):
    """Half-infinite line from an origin."""

    type: ClassVar[EntityType] = EntityType.RAY

    origin: NDArray[np.float64] = field(default_factory=zeros(3))
    direction: NDArray[np.float64] = field(default_factory=lambda: np.array([1.0, 0.0, 0.0]))

    def __post_init__(self) -> None:
        self.origin = np.asarray(self.origin, dtype=np.float64)
        self.direction = np.asarray(self.direction, dtype=np.float64)


@dataclass(eq=False)
class XLine(EntityObject):
    """Infinite construction line."""

    type: ClassVar[EntityType] = EntityType.XLINE

    origin: NDArray[np.float64] = field(default_factory=zeros(3))
    direction: NDArray[np.float64] = field(default_factory=lambda: np.array([1.0, 0.0, 0.0]))

    def __post_init__(self) -> None:
        self.origin = np.asarray(self.origin, dtype=np.float64)
        self.direction = np.asarray(self.direction, dtype=np.float64)


@dataclass(eq=False)
class Spline(EntityObject):
    """NURBS curve given by its control points and knot vector."""

    type: ClassVar[EntityType] = EntityType.SPLINE

    control_points: NDArray[np.float64] = field(default_factory=zeros(0, 3))
    knots: list[float] = field(default_factory=list)
    degree: int = 3
    is_closed: bool = False

    def __post_init__(self) -> None:
        self.control_points = as_points(self.control_points, 3)


@dataclass(eq=False)
class Polyline(EntityObject):
    """3D polyline."""

    type: ClassVar[EntityType] = EntityType.POLYLINE

    vertices: NDArray[np.float64] = field(default_factory=zeros(0, 3))
    is_closed: bool = False

    def __post_init__(self) -> None:
        self.vertices = as_points(self.vertices, 3)


@dataclass(eq=False)
class LwPolyline(EntityObject):
    """Light weight 2D polyline at a fixed elevation.

    Attributes:
        vertices: (N, 2) vertex array
        bulges: Bulge per vertex (0 = straight segment)
        elevation: Z coordinate of the polyline plane
        is_closed: Whether the last vertex connects to the first
    """

    type: ClassVar[EntityType] = EntityType.LW_POLYLINE

    vertices: NDArray[np.float64] = field(default_factory=zeros(0, 2))
    bulges: list[float] = field(default_factory=list)
    elevation: float = 0.0
    is_closed: bool = False

    def __post_init__(self) -> None:
        self.vertices = as_points(self.vertices, 2)
        if not self.bulges:
            self.bulges = [0.0] * len(self.vertices)


@dataclass(eq=False)
class MLine(EntityObject):
    """Multiline drawn with a named multiline style."""

    type: ClassVar[EntityType] = EntityType.MLINE

    vertices: NDArray[np.float64] = field(default_factory=zeros(0, 2))
    style: str = "Standard"
    scale: float = 1.0
    elevation: float = 0.0
    is_closed: bool = False

    def __post_init__(self) -> None:
        self.vertices = as_points(self.vertices, 2)
