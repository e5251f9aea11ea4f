"""Document model: layouts, blocks, handles and the object registry."""

from .block import Block, EntityCollection
from .document import Document
from .layout import MODEL_SPACE_NAME, Layout
from .registry import TableRegistry

__all__ = ["Block", "Document", "EntityCollection", "Layout", "MODEL_SPACE_NAME", "TableRegistry"]
