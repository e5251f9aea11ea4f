"""Base class and kind enumeration for drawing entities."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import ClassVar, Self

import numpy as np
from numpy.typing import NDArray


class EntityType(Enum):
    """Closed set of entity kinds a drawing can hold."""

    ARC = "arc"
    CIRCLE = "circle"
    DIMENSION = "dimension"
    ELLIPSE = "ellipse"
    FACE3D = "face3d"
    HATCH = "hatch"
    IMAGE = "image"
    INSERT = "insert"
    LEADER = "leader"
    LINE = "line"
    LW_POLYLINE = "lwpolyline"
    MESH = "mesh"
    MLINE = "mline"
    MTEXT = "mtext"
    POINT = "point"
    POLYFACE_MESH = "polyfacemesh"
    POLYLINE = "polyline"
    RAY = "ray"
    SHAPE = "shape"
    SOLID = "solid"
    SPLINE = "spline"
    TEXT = "text"
    TOLERANCE = "tolerance"
    TRACE = "trace"
    UNDERLAY = "underlay"
    VIEWPORT = "viewport"
    WIPEOUT = "wipeout"
    XLINE = "xline"


def vector(*values: float) -> NDArray[np.float64]:
    """Build a float64 coordinate array."""
    return np.array(values, dtype=np.float64)


def zeros(*shape: int):
    """Default factory for a zero-filled coordinate array of the given shape."""
    return lambda: np.zeros(shape, dtype=np.float64)


def as_points(value, width: int) -> NDArray[np.float64]:
    """Coerce a sequence of points into an (N, width) float64 array."""
    arr = np.asarray(value, dtype=np.float64)
    if arr.size == 0:
        return np.zeros((0, width), dtype=np.float64)
    return arr.reshape(-1, width)


@dataclass(eq=False)
class EntityObject:
    """A graphical object that can be attached to a drawing.

    An entity is unattached until added to a block of a document. While
    attached it has an owner (the name of its block) and a handle (its
    identifier in the document); both are None otherwise.

    Reactors are the handles of other objects that depend on this entity.
    An entity with reactors cannot be removed from its layout.

    Entities compare by identity. Use clone() to reuse an attached entity
    somewhere else.

    Attributes:
        layer: Layer name
        color: ACI color index (256 = by layer)
        linetype: Line type name
        lineweight: Line weight in hundredths of mm (-1 = by layer)
        is_visible: Whether the entity is drawn
    """

    type: ClassVar[EntityType]

    layer: str = "0"
    color: int = 256
    linetype: str = "ByLayer"
    lineweight: int = -1
    is_visible: bool = True

    owner: str | None = field(default=None, init=False, repr=False)
    handle: str | None = field(default=None, init=False, repr=False)
    reactors: list[str] = field(default_factory=list, init=False, repr=False)

    @property
    def is_attached(self) -> bool:
        """Whether the entity currently belongs to a document."""
        return self.owner is not None

    def add_reactor(self, handle: str) -> None:
        """Record that the object with the given handle depends on this entity."""
        if handle not in self.reactors:
            self.reactors.append(handle)

    def remove_reactor(self, handle: str) -> bool:
        """Drop a dependent object.

        Returns:
            True if the handle was a reactor of this entity
        """
        if handle in self.reactors:
            self.reactors.remove(handle)
            return True
        return False

    def clone(self) -> Self:
        """Create an unattached copy of this entity.

        Coordinates and nested data are copied; referenced definitions
        (images, underlays) are shared.

        Returns:
            New entity with no owner, handle or reactors
        """
        values = {}
        for f in fields(self):
            if not f.init:
                continue
            value = getattr(self, f.name)
            if isinstance(value, np.ndarray):
                value = value.copy()
            elif isinstance(value, (list, dict)):
                value = copy.deepcopy(value)
            values[f.name] = value
        return type(self)(**values)

    def __repr__(self) -> str:
        handle_str = f", handle={self.handle}" if self.handle else ""
        return f"{type(self).__name__}(layer={self.layer!r}{handle_str})"
