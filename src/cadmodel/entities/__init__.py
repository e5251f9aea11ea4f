"""Drawing entity types."""

from .annotation import (
    AttributeDefinition,
    Dimension,
    DimensionType,
    Leader,
    MText,
    Point,
    Shape,
    Text,
    Tolerance,
)
from .base import EntityObject, EntityType
from .curves import Arc, Circle, Ellipse, Line, LwPolyline, MLine, Polyline, Ray, Spline, XLine
from .references import Image, Insert, Underlay, Viewport
from .surfaces import Face3d, Hatch, Mesh, PolyfaceMesh, Solid, Trace, Wipeout

# Registry of concrete entity classes by kind
ENTITY_CLASSES: dict[EntityType, type[EntityObject]] = {
    cls.type: cls
    for cls in (
        Arc, Circle, Dimension, Ellipse, Face3d, Hatch, Image, Insert, Leader,
        Line, LwPolyline, Mesh, MLine, MText, Point, PolyfaceMesh, Polyline,
        Ray, Shape, Solid, Spline, Text, Tolerance, Trace, Underlay, Viewport,
        Wipeout, XLine,
    )
}

__all__ = [
    "ENTITY_CLASSES",
    "Arc",
    "AttributeDefinition",
    "Circle",
    "Dimension",
    "DimensionType",
    "Ellipse",
    "EntityObject",
    "EntityType",
    "Face3d",
    "Hatch",
    "Image",
    "Insert",
    "Leader",
    "Line",
    "LwPolyline",
    "Mesh",
    "MLine",
    "MText",
    "Point",
    "PolyfaceMesh",
    "Polyline",
    "Ray",
    "Shape",
    "Solid",
    "Spline",
    "Text",
    "Tolerance",
    "Trace",
    "Underlay",
    "Viewport",
    "Wipeout",
    "XLine",
]
