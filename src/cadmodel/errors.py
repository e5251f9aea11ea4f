"""Exceptions raised by the drawing model."""


class CadModelError(Exception):
    """Base class for drawing model errors."""


class InvalidArgumentError(CadModelError, ValueError):
    """A caller supplied malformed or precondition-violating input."""


class AlreadyOwnedError(InvalidArgumentError):
    """An entity that already belongs to a document was added again.

    Entities cannot be shared between layouts or documents; clone them first.
    """


class TableObjectNotFoundError(CadModelError, LookupError):
    """A named table object is not registered in the document."""

    def __init__(self, table: str, name: str) -> None:
        super().__init__(f"The {table} '{name}' does not exist.")
        self.table = table
        self.name = name


class LayoutNotFoundError(TableObjectNotFoundError):
    """A layout name is not registered in the document."""

    def __init__(self, name: str) -> None:
        super().__init__("layout", name)
