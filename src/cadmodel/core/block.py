"""Blocks: ordered entity containers backing layouts and block definitions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from ..entities.annotation import AttributeDefinition
from ..entities.base import EntityObject
from ..errors import AlreadyOwnedError, InvalidArgumentError

if TYPE_CHECKING:
    from .document import Document

logger = logging.getLogger(__name__)


class EntityCollection:
    """Insertion-ordered sequence of entities.

    Membership and removal go by identity, never by value.
    """

    def __init__(self) -> None:
        self._entities: list[EntityObject] = []

    def append(self, entity: EntityObject) -> None:
        self._entities.append(entity)

    def remove(self, entity: EntityObject) -> bool:
        """Remove an entity by reference.

        Returns:
            True if the entity was in the collection
        """
        for i, item in enumerate(self._entities):
            if item is entity:
                del self._entities[i]
                return True
        return False

    def __contains__(self, entity: object) -> bool:
        return any(item is entity for item in self._entities)

    def __iter__(self) -> Iterator[EntityObject]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __getitem__(self, index: int) -> EntityObject:
        return self._entities[index]


class Block:
    """Named container of entities and attribute definitions.

    A block either backs a layout (``layout`` holds the layout name) or is a
    reusable block definition placed through inserts (``layout`` is None).

    Entities are attached and detached through add_entity() and
    remove_entity(), which take the owning document so that handles and the
    document's object registry stay in step with the block contents.

    Attributes:
        name: Unique block name
        entities: Entities in insertion order
        attribute_definitions: Attribute definitions keyed by tag
        layout: Name of the layout this block backs, if any
        handle: Identifier assigned when added to a document
    """

    def __init__(self, name: str, layout: str | None = None) -> None:
        if not name:
            raise InvalidArgumentError("The block name cannot be empty.")
        self.name = name
        self.layout = layout
        self.entities = EntityCollection()
        self.attribute_definitions: dict[str, AttributeDefinition] = {}
        self.handle: str | None = None

    @property
    def is_layout_block(self) -> bool:
        """Whether this block stores the entities of a layout."""
        return self.layout is not None

    def add_entity(self, document: Document, entity: EntityObject) -> EntityObject:
        """Attach an entity to this block.

        The entity is appended to the block, given a handle from the
        document, owned by this block and registered in the document's
        object registry. Either all of that happens or nothing does.

        Args:
            document: Document the block belongs to
            entity: Unattached entity

        Returns:
            The added entity (for chaining)

        Raises:
            AlreadyOwnedError: If the entity already belongs to a document
            InvalidArgumentError: If this block is not part of the document,
                or the entity's definition clashes with a registered one
        """
        if entity.owner is not None:
            raise AlreadyOwnedError(
                f"{type(entity).__name__} {entity.handle} already belongs to a document. Clone it instead."
            )
        if document.blocks.get(self.name) is not self:
            raise InvalidArgumentError(f"Block '{self.name}' is not part of document '{document.name}'.")
        document.check_entity_references(entity)

        self.entities.append(entity)
        entity.owner = self.name
        document.register_entity(entity)
        logger.debug("Attached %s %s to block %s", entity.type.name, entity.handle, self.name)
        return entity

    def remove_entity(self, document: Document, entity: EntityObject) -> bool:
        """Detach an entity from this block.

        Clears the entity's owner and handle and drops it from the
        document's object registry.

        Returns:
            True if the entity was found in this block and removed
        """
        if not self.entities.remove(entity):
            return False

        handle = entity.handle
        document.unregister_entity(entity)
        entity.owner = None
        entity.handle = None
        logger.debug("Detached %s %s from block %s", entity.type.name, handle, self.name)
        return True

    def add_attribute_definition(self, definition: AttributeDefinition) -> AttributeDefinition:
        """Add an attribute definition.

        Raises:
            InvalidArgumentError: If the tag is already defined in this block
        """
        if definition.tag in self.attribute_definitions:
            raise InvalidArgumentError(
                f"Block '{self.name}' already has an attribute definition tagged '{definition.tag}'."
            )
        self.attribute_definitions[definition.tag] = definition
        return definition

    def remove_attribute_definition(self, tag: str) -> bool:
        return self.attribute_definitions.pop(tag, None) is not None

    def __repr__(self) -> str:
        layout_str = f", layout={self.layout!r}" if self.layout else ""
        return f"Block({self.name!r}{layout_str}, entities={len(self.entities)})"
