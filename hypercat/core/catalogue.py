"""The HyperCat catalogue: root document holding an ordered list of items.

ITEM OWNERSHIP:
- A catalogue owns its items exclusively. add_item and replace_item store a
  deep copy of the Item passed in, so later changes to the caller's object
  never reach the catalogue.
- Items are unique by href at all times. A failed add or replace leaves the
  item sequence untouched.

THREAD SAFETY:
- Not internally synchronized. The href scan and the subsequent append or
  overwrite are not atomic, so callers sharing a Catalogue across threads
  must hold one lock per catalogue around mutations.
"""

import copy
from typing import Iterator

from ..exceptions import DuplicateHref, ItemNotFound
from ..logs import get_logger
from .entity import Entity
from .item import Item
from .relation import RelationStore

logger = get_logger(__name__)


class Catalogue(Entity):
    """HyperCat catalogue: description, relations and an ordered item list."""

    def __init__(self, description: str, relations: RelationStore | None = None):
        """Initialize an empty catalogue.

        Args:
            description: Human-readable description (must be non-empty)
            relations: Initial relation store. A new empty store if None.

        Raises:
            ValidationError: If description is empty
        """
        super().__init__(description, relations)
        self._items: list[Item] = []

    @property
    def items(self) -> tuple[Item, ...]:
        """Items in catalogue order (read-only view)."""
        return tuple(self._items)

    def _index_of(self, href: str) -> int | None:
        for index, item in enumerate(self._items):
            if item.href == href:
                return index
        return None

    def add_item(self, item: Item) -> None:
        """Append an item to the catalogue.

        Args:
            item: Item to add; a copy is stored

        Raises:
            DuplicateHref: If an item with the same href is already present
        """
        if self._index_of(item.href) is not None:
            raise DuplicateHref(item.href)

        self._items.append(copy.deepcopy(item))
        logger.debug("Added item %s (%d items)", item.href, len(self._items))

    def replace_item(self, item: Item) -> None:
        """Replace the item sharing ``item.href``, keeping its position.

        Args:
            item: Replacement item; a copy is stored

        Raises:
            ItemNotFound: If no item has that href
        """
        index = self._index_of(item.href)
        if index is None:
            raise ItemNotFound(item.href)

        self._items[index] = copy.deepcopy(item)
        logger.debug("Replaced item %s at index %d", item.href, index)

    def get_item(self, href: str) -> Item:
        """Return the catalogue's own item for ``href``.

        Raises:
            ItemNotFound: If no item has that href
        """
        index = self._index_of(href)
        if index is None:
            raise ItemNotFound(href)
        return self._items[index]

    def hrefs(self) -> list[str]:
        """Return item hrefs in catalogue order."""
        return [item.href for item in self._items]

    def __contains__(self, href: object) -> bool:
        return isinstance(href, str) and self._index_of(href) is not None

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Catalogue):
            return NotImplemented
        return (
            self.description == other.description
            and self.relations == other.relations
            and self._items == other._items
        )

    def __repr__(self) -> str:
        return (
            f"Catalogue(description={self.description!r}, "
            f"relations={list(self.relations)!r}, items={self._items!r})"
        )
