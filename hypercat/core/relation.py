"""Relation pairs and the ordered store shared by catalogues and items.

HyperCat permits the same relation key to appear more than once on one
entity (e.g. several isContentType declarations), so the store is an
ordered list of pairs rather than a mapping. Lookups are linear scans.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Relation:
    """A single (rel, val) metadata pair."""
    rel: str  # Relation key, usually a URN (see hypercat.rels)
    val: str


class RelationStore:
    """Ordered, duplicate-permitting collection of Relation pairs.

    Insertion order is preserved and is the order used on the wire.
    """

    def __init__(self, relations: Iterable[Relation] | None = None):
        self._relations: list[Relation] = list(relations) if relations else []

    def add(self, rel: str, val: str) -> None:
        """Append a relation. Never fails; may duplicate an existing key."""
        self._relations.append(Relation(rel, val))

    def replace(self, rel: str, val: str) -> None:
        """Overwrite the value of every relation whose key is ``rel``.

        Has no effect if the key is not present.
        """
        for index, relation in enumerate(self._relations):
            if relation.rel == rel:
                self._relations[index] = Relation(rel, val)

    def values_for(self, rel: str) -> list[str]:
        """Return the values of all relations keyed ``rel``, in store order."""
        return [relation.val for relation in self._relations if relation.rel == rel]

    def all_keys(self) -> list[str]:
        """Return every relation key in store order, duplicates included."""
        return [relation.rel for relation in self._relations]

    def __iter__(self) -> Iterator[Relation]:
        return iter(self._relations)

    def __len__(self) -> int:
        return len(self._relations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RelationStore):
            return NotImplemented
        return self._relations == other._relations

    def __repr__(self) -> str:
        return f"RelationStore({self._relations!r})"
