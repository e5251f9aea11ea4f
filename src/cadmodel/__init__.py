"""cadmodel - drawing document model with layout-scoped entity ownership."""

from .collections import DrawingEntities, EntityView
from .core import Block, Document, Layout
from .errors import (
    AlreadyOwnedError,
    CadModelError,
    InvalidArgumentError,
    LayoutNotFoundError,
    TableObjectNotFoundError,
)
from .objects import (
    ImageDefinition,
    UnderlayDefinition,
    UnderlayDgnDefinition,
    UnderlayDwfDefinition,
    UnderlayPdfDefinition,
    UnderlayType,
)

__all__ = [
    "AlreadyOwnedError",
    "Block",
    "CadModelError",
    "Document",
    "DrawingEntities",
    "EntityView",
    "ImageDefinition",
    "InvalidArgumentError",
    "Layout",
    "LayoutNotFoundError",
    "TableObjectNotFoundError",
    "UnderlayDefinition",
    "UnderlayDgnDefinition",
    "UnderlayDwfDefinition",
    "UnderlayPdfDefinition",
    "UnderlayType",
]
