"""Name-keyed tables of document objects."""

from __future__ import annotations

from typing import Generic, Iterator, Protocol, TypeVar

from ..errors import InvalidArgumentError, TableObjectNotFoundError


class Named(Protocol):
    name: str


T = TypeVar("T", bound=Named)


class TableRegistry(Generic[T]):
    """Ordered table of named objects, e.g. the layouts or blocks of a document.

    Names are case-sensitive and unique within a table.
    """

    def __init__(self, table: str) -> None:
        self.table = table
        self._items: dict[str, T] = {}

    def add(self, item: T) -> T:
        """Register an item.

        Raises:
            InvalidArgumentError: If an item with the same name exists
        """
        if item.name in self._items:
            raise InvalidArgumentError(f"The {self.table} '{item.name}' already exists.")
        self._items[item.name] = item
        return item

    def get(self, name: str) -> T | None:
        return self._items.get(name)

    def names(self) -> list[str]:
        return list(self._items.keys())

    def _not_found(self, name: str) -> TableObjectNotFoundError:
        return TableObjectNotFoundError(self.table, name)

    def __getitem__(self, name: str) -> T:
        item = self._items.get(name)
        if item is None:
            raise self._not_found(name)
        return item

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"TableRegistry({self.table!r}, {self.names()})"
