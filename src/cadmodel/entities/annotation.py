"""Points, text and annotation entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

import numpy as np
from numpy.typing import NDArray

from ..errors import InvalidArgumentError
from .base import EntityObject, EntityType, as_points, zeros


@dataclass(eq=False)
class Point(EntityObject):
    type: ClassVar[EntityType] = EntityType.POINT

    position: NDArray[np.float64] = field(default_factory=zeros(3))
    thickness: float = 0.0

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=np.float64)


@dataclass(eq=False)
class Text(EntityObject):
    """Single line of text."""

    type: ClassVar[EntityType] = EntityType.TEXT

    value: str = ""
    position: NDArray[np.float64] = field(default_factory=zeros(3))
    height: float = 1.0
    rotation: float = 0.0
    style: str = "Standard"

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=np.float64)


@dataclass(eq=False)
class MText(EntityObject):
    """Multiline formatted text.

    Attributes:
        value: Text content, including inline formatting codes
        position: Insertion point
        height: Character height
        rectangle_width: Width the text wraps at (0 = no wrapping)
        style: Text style name
    """

    type: ClassVar[EntityType] = EntityType.MTEXT

    value: str = ""
    position: NDArray[np.float64] = field(default_factory=zeros(3))
    height: float = 1.0
    rectangle_width: float = 0.0
    rotation: float = 0.0
    style: str = "Standard"

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=np.float64)


class DimensionType(Enum):
    LINEAR = "linear"
    ALIGNED = "aligned"
    ANGULAR = "angular"
    DIAMETER = "diameter"
    RADIUS = "radius"
    ORDINATE = "ordinate"


@dataclass(eq=False)
class Dimension(EntityObject):
    """Dimension annotation.

    The measurement itself is left to whatever renders the drawing; this
    record only keeps the definition points and presentation settings.

    Attributes:
        dimension_type: Kind of dimension
        definition_points: Points that define what is measured
        text_position: Where the dimension text sits
        style: Dimension style name
        text_override: User text shown instead of the measurement
    """

    type: ClassVar[EntityType] = EntityType.DIMENSION

    dimension_type: DimensionType = DimensionType.LINEAR
    definition_points: NDArray[np.float64] = field(default_factory=zeros(0, 3))
    text_position: NDArray[np.float64] = field(default_factory=zeros(3))
    style: str = "Standard"
    text_override: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.dimension_type, str):
            try:
                self.dimension_type = DimensionType(self.dimension_type)
            except ValueError:
                raise InvalidArgumentError(
                    f"Unknown dimension type: {self.dimension_type}"
                ) from None
        self.definition_points = as_points(self.definition_points, 3)
        self.text_position = np.asarray(self.text_position, dtype=np.float64)


@dataclass(eq=False)
class Leader(EntityObject):
    """Arrowed line pointing at a feature, with optional annotation text."""

    type: ClassVar[EntityType] = EntityType.LEADER

    vertices: NDArray[np.float64] = field(default_factory=zeros(0, 3))
    annotation: str | None = None
    style: str = "Standard"
    has_arrowhead: bool = True

    def __post_init__(self) -> None:
        self.vertices = as_points(self.vertices, 3)


@dataclass(eq=False)
class Tolerance(EntityObject):
    """Geometric tolerance frame."""

    type: ClassVar[EntityType] = EntityType.TOLERANCE

    value: str = ""
    position: NDArray[np.float64] = field(default_factory=zeros(3))
    style: str = "Standard"

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=np.float64)


@dataclass(eq=False)
class Shape(EntityObject):
    """Symbol taken from a shape file."""

    type: ClassVar[EntityType] = EntityType.SHAPE

    name: str = ""
    style: str = ""
    position: NDArray[np.float64] = field(default_factory=zeros(3))
    size: float = 1.0
    rotation: float = 0.0

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=np.float64)


@dataclass(eq=False)
class AttributeDefinition:
    """Template for an attribute attached to a block's inserts.

    Attribute definitions live in a block's attribute definition map, keyed
    by tag, not in its entity sequence.

    Attributes:
        tag: Unique tag within the block
        prompt: Prompt shown when the attribute value is requested
        value: Default value
        position: Insertion point
        height: Text height
        is_constant: Whether the value is fixed for every insert
    """

    tag: str
    prompt: str = ""
    value: str = ""
    position: NDArray[np.float64] = field(default_factory=zeros(3))
    height: float = 1.0
    is_constant: bool = False

    def __post_init__(self) -> None:
        if not self.tag or " " in self.tag:
            raise InvalidArgumentError(f"Invalid attribute definition tag: {self.tag!r}")
        self.position = np.asarray(self.position, dtype=np.float64)
