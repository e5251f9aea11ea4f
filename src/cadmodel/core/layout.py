"""Layouts: named views onto the block that stores their entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import LayoutNotFoundError
from .registry import TableRegistry

MODEL_SPACE_NAME = "Model"
MODEL_SPACE_BLOCK = "*Model_Space"
PAPER_SPACE_BLOCK = "*Paper_Space"


@dataclass(eq=False)
class Layout:
    """A model space or paper space sheet.

    A layout never holds entities itself; they live in the block it names.

    Attributes:
        name: Unique layout name
        block_name: Name of the associated block
        tab_order: Position of the layout tab (0 for model space)
        handle: Identifier assigned when added to a document
    """

    name: str
    block_name: str
    tab_order: int = 0
    handle: str | None = field(default=None, repr=False)

    @property
    def is_model_space(self) -> bool:
        return self.name == MODEL_SPACE_NAME


class LayoutTable(TableRegistry[Layout]):
    """Layout table; unknown names raise LayoutNotFoundError."""

    def __init__(self) -> None:
        super().__init__("layout")

    def _not_found(self, name: str) -> LayoutNotFoundError:
        return LayoutNotFoundError(name)
