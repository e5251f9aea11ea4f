"""Non-graphical objects referenced by entities."""

from .image import ImageDefinition
from .underlay import (
    ObjectCode,
    UnderlayDefinition,
    UnderlayDgnDefinition,
    UnderlayDwfDefinition,
    UnderlayPdfDefinition,
    UnderlayType,
)

__all__ = [
    "ImageDefinition",
    "ObjectCode",
    "UnderlayDefinition",
    "UnderlayDgnDefinition",
    "UnderlayDwfDefinition",
    "UnderlayPdfDefinition",
    "UnderlayType",
]
