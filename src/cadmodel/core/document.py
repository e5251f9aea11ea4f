"""Drawing document: table registries, handles and the object registry."""

from __future__ import annotations

import logging
from typing import Any

from ..collections.drawing_entities import DrawingEntities
from ..entities.base import EntityObject
from ..entities.references import Image, Underlay
from ..errors import InvalidArgumentError
from ..objects.base import DefinitionObject
from ..objects.image import ImageDefinition
from ..objects.underlay import UnderlayDefinition
from .block import Block
from .layout import MODEL_SPACE_BLOCK, MODEL_SPACE_NAME, PAPER_SPACE_BLOCK, Layout, LayoutTable
from .registry import TableRegistry

logger = logging.getLogger(__name__)


class Document:
    """A drawing.

    The document owns the layout and block tables, the underlay and image
    definition tables, the handle allocator and the registry of every
    attached object keyed by handle (``added_objects``).

    A new document has the model space layout ("Model") and one paper space
    layout ("Layout1"). Entities are usually added through ``entities``, the
    facade bound to the active layout.

    Example:
        doc = Document("site")
        doc.entities.add(Line(start=[0, 0, 0], end=[10, 0, 0]))
        doc.entities.active_layout = "Layout1"
        doc.entities.add(Text(value="Sheet 1"))
    """

    def __init__(self, name: str = "drawing") -> None:
        self.name = name
        self.added_objects: dict[str, Any] = {}
        self._handle_seed = 0

        self.layouts = LayoutTable()
        self.blocks: TableRegistry[Block] = TableRegistry("block")
        self.underlay_definitions: TableRegistry[UnderlayDefinition] = TableRegistry("underlay definition")
        self.image_definitions: TableRegistry[ImageDefinition] = TableRegistry("image definition")

        self.add_layout(MODEL_SPACE_NAME, block_name=MODEL_SPACE_BLOCK, tab_order=0)
        self.add_layout("Layout1", block_name=PAPER_SPACE_BLOCK, tab_order=1)

        self.entities = DrawingEntities(self, MODEL_SPACE_NAME)

    def allocate_handle(self) -> str:
        """Issue a new unique handle (upper case hexadecimal)."""
        self._handle_seed += 1
        return f"{self._handle_seed:X}"

    def get_object(self, handle: str) -> Any | None:
        """Look up an attached object by handle."""
        return self.added_objects.get(handle)

    def add_block(self, name: str) -> Block:
        """Create and register a block definition.

        Raises:
            InvalidArgumentError: If a block with that name exists
        """
        block = Block(name)
        self.blocks.add(block)
        self._register_object(block)
        return block

    def add_layout(self, name: str, block_name: str | None = None, tab_order: int | None = None) -> Layout:
        """Create and register a layout together with its backing block.

        Args:
            name: Layout name
            block_name: Name of the backing block. Defaults to the next free
                paper space block name (*Paper_Space0, *Paper_Space1, ...).
            tab_order: Tab position. Defaults to after the last layout.

        Returns:
            The new layout

        Raises:
            InvalidArgumentError: If the layout or block name is taken
        """
        if name in self.layouts:
            raise InvalidArgumentError(f"The layout '{name}' already exists.")
        if block_name is None:
            block_name = self._next_paper_space_block_name()
        if block_name in self.blocks:
            raise InvalidArgumentError(f"The block '{block_name}' already exists.")
        if tab_order is None:
            tab_order = max((layout.tab_order for layout in self.layouts), default=0) + 1

        block = Block(block_name, layout=name)
        layout = Layout(name, block_name, tab_order)
        self.blocks.add(block)
        self.layouts.add(layout)
        self._register_object(block)
        self._register_object(layout)
        logger.debug("Added layout %s backed by block %s", name, block_name)
        return layout

    def layout_block(self, layout_name: str) -> Block:
        """Get the block that stores the entities of a layout.

        Raises:
            LayoutNotFoundError: If the layout does not exist
        """
        return self.blocks[self.layouts[layout_name].block_name]

    def add_underlay_definition(self, definition: UnderlayDefinition) -> UnderlayDefinition:
        """Register an underlay definition.

        Registering the same definition again is a no-op.

        Raises:
            InvalidArgumentError: If a different definition has the same name,
                or the definition is registered in another document
        """
        return self._add_definition(self.underlay_definitions, definition)

    def add_image_definition(self, definition: ImageDefinition) -> ImageDefinition:
        """Register an image definition.

        Raises:
            InvalidArgumentError: If a different definition has the same name,
                or the definition is registered in another document
        """
        return self._add_definition(self.image_definitions, definition)

    def check_entity_references(self, entity: EntityObject) -> None:
        """Verify an entity can be attached without clashing with the tables.

        Raises:
            InvalidArgumentError: If the entity's definition belongs to another
                document, or is a different object than the registered
                definition of the same name
        """
        table = self._definition_table(entity)
        if table is None:
            return
        self._check_definition_document(table, entity.definition)
        registered = table.get(entity.definition.name)
        if registered is not None and registered is not entity.definition:
            raise InvalidArgumentError(
                f"A different {table.table} named '{entity.definition.name}' already exists."
            )

    def register_entity(self, entity: EntityObject) -> None:
        """Give a newly attached entity a handle and record it."""
        self._register_object(entity)
        table = self._definition_table(entity)
        if table is not None:
            self._add_definition(table, entity.definition)
            entity.definition.references.add(entity.handle)

    def unregister_entity(self, entity: EntityObject) -> None:
        """Forget a detached entity.

        Definitions stay in their tables even when nothing references them.
        """
        self.added_objects.pop(entity.handle, None)
        if isinstance(entity, (Image, Underlay)):
            entity.definition.references.discard(entity.handle)

    def _definition_table(self, entity: EntityObject) -> TableRegistry | None:
        if isinstance(entity, Underlay):
            return self.underlay_definitions
        if isinstance(entity, Image):
            return self.image_definitions
        return None

    def _check_definition_document(self, table: TableRegistry, definition: DefinitionObject) -> None:
        if definition.handle is not None and self.added_objects.get(definition.handle) is not definition:
            raise InvalidArgumentError(
                f"The {table.table} '{definition.name}' belongs to another document. "
                "Create a separate definition for this one."
            )

    def _add_definition(self, table: TableRegistry, definition: DefinitionObject) -> Any:
        registered = table.get(definition.name)
        if registered is definition:
            return definition
        self._check_definition_document(table, definition)
        table.add(definition)
        self._register_object(definition)
        return definition

    def _register_object(self, obj: Any) -> None:
        obj.handle = self.allocate_handle()
        self.added_objects[obj.handle] = obj

    def _next_paper_space_block_name(self) -> str:
        index = 0
        while f"{PAPER_SPACE_BLOCK}{index}" in self.blocks:
            index += 1
        return f"{PAPER_SPACE_BLOCK}{index}"

    def __repr__(self) -> str:
        return (
            f"Document({self.name!r}, layouts={self.layouts.names()}, "
            f"objects={len(self.added_objects)})"
        )
