"""Entity collections exposed by a document."""

from .drawing_entities import DrawingEntities, EntityView

__all__ = ["DrawingEntities", "EntityView"]
