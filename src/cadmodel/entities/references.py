"""Entities that place blocks, images or external files into a drawing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np
from numpy.typing import NDArray

from ..errors import InvalidArgumentError
from ..objects.image import ImageDefinition
from ..objects.underlay import UnderlayDefinition
from .base import EntityObject, EntityType, zeros


@dataclass(eq=False)
class Insert(EntityObject):
    """Reference to a block definition placed at a position.

    Attributes:
        block_name: Name of the inserted block
        position: Insertion point
        scale: Scale factors along x, y and z
        rotation: Rotation in degrees
    """

    type: ClassVar[EntityType] = EntityType.INSERT

    block_name: str = ""
    position: NDArray[np.float64] = field(default_factory=zeros(3))
    scale: NDArray[np.float64] = field(default_factory=lambda: np.ones(3, dtype=np.float64))
    rotation: float = 0.0

    def __post_init__(self) -> None:
        if not self.block_name:
            raise InvalidArgumentError("An insert needs the name of the block it references.")
        self.position = np.asarray(self.position, dtype=np.float64)
        self.scale = np.asarray(self.scale, dtype=np.float64)


@dataclass(eq=False)
class Image(EntityObject):
    """Raster image placed in the drawing.

    Attributes:
        definition: Image file definition, shared between images
        position: Lower left corner
        width: Width in drawing units
        height: Height in drawing units
        rotation: Rotation in degrees
    """

    type: ClassVar[EntityType] = EntityType.IMAGE

    definition: ImageDefinition | None = None
    position: NDArray[np.float64] = field(default_factory=zeros(3))
    width: float = 1.0
    height: float = 1.0
    rotation: float = 0.0

    def __post_init__(self) -> None:
        if self.definition is None:
            raise InvalidArgumentError("An image needs an image definition.")
        self.position = np.asarray(self.position, dtype=np.float64)


@dataclass(eq=False)
class Underlay(EntityObject):
    """DGN, DWF or PDF file shown underneath the drawing.

    Attributes:
        definition: Underlay file definition, shared between underlays
        position: Insertion point
        scale: Scale factors along x, y and z
        rotation: Rotation in degrees
        contrast: Display contrast (20-100)
        fade: Display fade (0-80)
    """

    type: ClassVar[EntityType] = EntityType.UNDERLAY

    definition: UnderlayDefinition | None = None
    position: NDArray[np.float64] = field(default_factory=zeros(3))
    scale: NDArray[np.float64] = field(default_factory=lambda: np.ones(3, dtype=np.float64))
    rotation: float = 0.0
    contrast: int = 100
    fade: int = 0

    def __post_init__(self) -> None:
        if self.definition is None:
            raise InvalidArgumentError("An underlay needs an underlay definition.")
        if not 20 <= self.contrast <= 100:
            raise InvalidArgumentError(f"Underlay contrast must be within 20 and 100, got {self.contrast}")
        if not 0 <= self.fade <= 80:
            raise InvalidArgumentError(f"Underlay fade must be within 0 and 80, got {self.fade}")
        self.position = np.asarray(self.position, dtype=np.float64)
        self.scale = np.asarray(self.scale, dtype=np.float64)


@dataclass(eq=False)
class Viewport(EntityObject):
    """Window in a paper space layout showing part of model space."""

    type: ClassVar[EntityType] = EntityType.VIEWPORT

    center: NDArray[np.float64] = field(default_factory=zeros(3))
    width: float = 297.0
    height: float = 210.0
    view_center: NDArray[np.float64] = field(default_factory=zeros(2))
    view_height: float = 1.0

    def __post_init__(self) -> None:
        self.center = np.asarray(self.center, dtype=np.float64)
        self.view_center = np.asarray(self.view_center, dtype=np.float64)
