"""Entity access for the active layout of a document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Iterable, Iterator, TypeVar

from ..entities import (
    Arc, AttributeDefinition, Circle, Dimension, Ellipse, EntityObject, EntityType, Face3d, Hatch,
    Image, Insert, Leader, Line, LwPolyline, Mesh, MLine, MText, Point, PolyfaceMesh, Polyline, Ray,
    Shape, Solid, Spline, Text, Tolerance, Trace, Underlay, Viewport, Wipeout, XLine,
)
from ..errors import InvalidArgumentError

if TYPE_CHECKING:
    from ..core.block import Block
    from ..core.document import Document

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=EntityObject)


class EntityView(Generic[E]):
    """Live, restartable view of one kind of entity in a block.

    Every iteration walks the block's current contents in insertion order,
    so entities added or removed after the view was created are reflected.
    Mutating the block while an iteration is in progress is not supported.
    """

    def __init__(self, block: Block, entity_type: EntityType | None = None) -> None:
        self._block = block
        self._entity_type = entity_type

    def __iter__(self) -> Iterator[E]:
        for entity in self._block.entities:
            if self._entity_type is None or entity.type is self._entity_type:
                yield entity

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def __repr__(self) -> str:
        kind = self._entity_type.name if self._entity_type else "ALL"
        return f"EntityView({self._block.name!r}, {kind})"


class DrawingEntities:
    """Shortcuts to the entities of a document's active layout.

    Entities are stored in the block associated with each layout; this class
    resolves the active layout to that block and works there. The document
    creates its facade with model space active.

    Typed views (lines, arcs, ...) are lazy and live. Adding and removing
    entities never cleans up layers, styles, groups or blocks that become
    unused as a result.

    Example:
        entities = document.entities
        entities.add(Line(start=[0, 0, 0], end=[1, 1, 0]))
        for line in entities.lines:
            print(line.handle)
    """

    def __init__(self, document: Document, active_layout: str) -> None:
        self._document = document
        self._active_layout = active_layout

    @property
    def document(self) -> Document:
        return self._document

    @property
    def active_layout(self) -> str:
        """Get or set the name of the active layout.

        Raises:
            LayoutNotFoundError: When set to a layout the document does not have
        """
        return self._active_layout

    @active_layout.setter
    def active_layout(self, value: str) -> None:
        # Resolving first raises before anything changes
        self._document.layouts[value]
        self._active_layout = value

    @property
    def active_block(self) -> Block:
        """The block storing the entities of the active layout."""
        return self._document.layout_block(self._active_layout)

    def of_type(self, entity_type: EntityType) -> EntityView[EntityObject]:
        """View of the entities of one kind in the active layout."""
        return EntityView(self.active_block, entity_type)

    @property
    def all(self) -> EntityView[EntityObject]:
        """View of every entity in the active layout."""
        return EntityView(self.active_block)

    @property
    def arcs(self) -> EntityView[Arc]:
        return EntityView(self.active_block, EntityType.ARC)

    @property
    def attribute_definitions(self) -> Iterable[AttributeDefinition]:
        """Attribute definitions of the active layout's block."""
        return self.active_block.attribute_definitions.values()

    @property
    def circles(self) -> EntityView[Circle]:
        return EntityView(self.active_block, EntityType.CIRCLE)

    @property
    def dimensions(self) -> EntityView[Dimension]:
        return EntityView(self.active_block, EntityType.DIMENSION)

    @property
    def ellipses(self) -> EntityView[Ellipse]:
        return EntityView(self.active_block, EntityType.ELLIPSE)

    @property
    def faces3d(self) -> EntityView[Face3d]:
        return EntityView(self.active_block, EntityType.FACE3D)

    @property
    def hatches(self) -> EntityView[Hatch]:
        return EntityView(self.active_block, EntityType.HATCH)

    @property
    def images(self) -> EntityView[Image]:
        return EntityView(self.active_block, EntityType.IMAGE)

    @property
    def inserts(self) -> EntityView[Insert]:
        return EntityView(self.active_block, EntityType.INSERT)

    @property
    def leaders(self) -> EntityView[Leader]:
        return EntityView(self.active_block, EntityType.LEADER)

    @property
    def lines(self) -> EntityView[Line]:
        return EntityView(self.active_block, EntityType.LINE)

    @property
    def lw_polylines(self) -> EntityView[LwPolyline]:
        """Light weight polylines in the active layout."""
        return EntityView(self.active_block, EntityType.LW_POLYLINE)

    @property
    def meshes(self) -> EntityView[Mesh]:
        return EntityView(self.active_block, EntityType.MESH)

    @property
    def mlines(self) -> EntityView[MLine]:
        """Multilines in the active layout."""
        return EntityView(self.active_block, EntityType.MLINE)

    @property
    def mtexts(self) -> EntityView[MText]:
        """Multiline texts in the active layout."""
        return EntityView(self.active_block, EntityType.MTEXT)

    @property
    def points(self) -> EntityView[Point]:
        return EntityView(self.active_block, EntityType.POINT)

    @property
    def polyface_meshes(self) -> EntityView[PolyfaceMesh]:
        return EntityView(self.active_block, EntityType.POLYFACE_MESH)

    @property
    def polylines(self) -> EntityView[Polyline]:
        return EntityView(self.active_block, EntityType.POLYLINE)

    @property
    def rays(self) -> EntityView[Ray]:
        return EntityView(self.active_block, EntityType.RAY)

    @property
    def shapes(self) -> EntityView[Shape]:
        return EntityView(self.active_block, EntityType.SHAPE)

    @property
    def solids(self) -> EntityView[Solid]:
        return EntityView(self.active_block, EntityType.SOLID)

    @property
    def splines(self) -> EntityView[Spline]:
        return EntityView(self.active_block, EntityType.SPLINE)

    @property
    def texts(self) -> EntityView[Text]:
        return EntityView(self.active_block, EntityType.TEXT)

    @property
    def tolerances(self) -> EntityView[Tolerance]:
        return EntityView(self.active_block, EntityType.TOLERANCE)

    @property
    def traces(self) -> EntityView[Trace]:
        return EntityView(self.active_block, EntityType.TRACE)

    @property
    def underlays(self) -> EntityView[Underlay]:
        return EntityView(self.active_block, EntityType.UNDERLAY)

    @property
    def viewports(self) -> EntityView[Viewport]:
        return EntityView(self.active_block, EntityType.VIEWPORT)

    @property
    def wipeouts(self) -> EntityView[Wipeout]:
        return EntityView(self.active_block, EntityType.WIPEOUT)

    @property
    def xlines(self) -> EntityView[XLine]:
        """Construction lines in the active layout."""
        return EntityView(self.active_block, EntityType.XLINE)

    def add(self, entity: EntityObject) -> EntityObject:
        """Add an entity to the active layout.

        Args:
            entity: Entity that does not belong to any document yet

        Returns:
            The added entity (for chaining)

        Raises:
            InvalidArgumentError: If entity is None
            AlreadyOwnedError: If the entity already belongs to a document;
                clone it instead. Nothing is changed in that case.
        """
        if entity is None:
            raise InvalidArgumentError("The entity to add cannot be None.")
        return self.active_block.add_entity(self._document, entity)

    def add_many(self, entities: Iterable[EntityObject]) -> None:
        """Add entities to the active layout in order.

        Stops at the first entity that cannot be added and raises its
        error. Entities added before it stay in the document.

        Raises:
            InvalidArgumentError: If entities is None
            AlreadyOwnedError: If one of the entities already belongs to a document
        """
        if entities is None:
            raise InvalidArgumentError("The entities to add cannot be None.")
        for entity in entities:
            self.add(entity)

    def remove(self, entity: EntityObject | None) -> bool:
        """Remove an entity from the document.

        Only entities of a layout can be removed; entities that are part of a
        block definition are left alone, as are entities other objects depend
        on (entities with reactors).

        Args:
            entity: Entity to remove

        Returns:
            True if the entity was removed; False if it was not attached,
            has reactors, belongs to a block definition or is unknown to
            this document
        """
        if entity is None:
            return False

        if entity.handle is None:
            logger.debug("Not removing %s: it has no handle", type(entity).__name__)
            return False

        if entity.owner is None:
            logger.debug("Not removing %s %s: it has no owner", entity.type.name, entity.handle)
            return False

        if entity.reactors:
            logger.debug(
                "Not removing %s %s: referenced by %s", entity.type.name, entity.handle, entity.reactors
            )
            return False

        block = self._document.blocks.get(entity.owner)
        if block is None or not block.is_layout_block:
            logger.debug(
                "Not removing %s %s: block %s is not a layout block", entity.type.name, entity.handle, entity.owner
            )
            return False

        if entity.handle not in self._document.added_objects:
            logger.debug("Not removing %s %s: unknown handle", entity.type.name, entity.handle)
            return False

        return block.remove_entity(self._document, entity)

    def remove_many(self, entities: Iterable[EntityObject]) -> None:
        """Remove entities from the document, skipping those that cannot be removed.

        Call remove() per entity to learn which ones were removed.

        Raises:
            InvalidArgumentError: If entities is None
        """
        if entities is None:
            raise InvalidArgumentError("The entities to remove cannot be None.")
        for entity in list(entities):
            self.remove(entity)
