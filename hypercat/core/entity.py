"""Shared base for catalogue entities (the catalogue itself and its items).

Both entity kinds carry one description plus an ordered relation store.
The description lives in its own field; on the wire it travels as an
ordinary relation keyed DESCRIPTION_REL (see hypercat.codec), so the store
held here never contains that key. The constructor, add_rel and
replace_rel reject it; use the description property instead.
"""

from ..exceptions import ValidationError
from ..rels import DESCRIPTION_REL
from .relation import RelationStore


def validate_description(description: str) -> str:
    """Check that a description is a non-empty string.

    Args:
        description: Candidate description

    Returns:
        The description unchanged

    Raises:
        ValidationError: If description is not a string or is empty
    """
    if not isinstance(description, str):
        raise ValidationError(
            f"Description must be a string, got {type(description).__name__}",
            details={"description": description},
        )
    if not description:
        raise ValidationError("Description must not be empty")
    return description


def _reject_description_rel(rel: str) -> None:
    if rel == DESCRIPTION_REL:
        raise ValidationError(
            f'"{DESCRIPTION_REL}" is held in the description field, not as a relation',
            details={"rel": rel},
        )


class Entity:
    """Description plus relation store, with delegating relation operations.

    Subclasses add their own identity (Item.href) or children
    (Catalogue.items).
    """

    def __init__(self, description: str, relations: RelationStore | None = None):
        """Initialize entity.

        Args:
            description: Human-readable description (must be non-empty)
            relations: Initial relation store. A new empty store if None.

        Raises:
            ValidationError: If description is empty, or relations holds
                the description relation
        """
        self._description = validate_description(description)
        if relations is None:
            relations = RelationStore()
        for rel in relations.all_keys():
            _reject_description_rel(rel)
        self._relations = relations

    @property
    def relations(self) -> RelationStore:
        return self._relations

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = validate_description(value)

    def add_rel(self, rel: str, val: str) -> None:
        """Append a relation; duplicate keys are permitted.

        Raises:
            ValidationError: If rel is DESCRIPTION_REL
        """
        _reject_description_rel(rel)
        self._relations.add(rel, val)

    def replace_rel(self, rel: str, val: str) -> None:
        """Overwrite the value of every relation keyed ``rel`` (no-op if absent).

        Raises:
            ValidationError: If rel is DESCRIPTION_REL
        """
        _reject_description_rel(rel)
        self._relations.replace(rel, val)

    def values_for(self, rel: str) -> list[str]:
        return self._relations.values_for(rel)

    def all_keys(self) -> list[str]:
        return self._relations.all_keys()

    # Short names used by the HyperCat reference libraries
    vals = values_for
    rels = all_keys
