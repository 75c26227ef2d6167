"""Catalogue items."""

from ..exceptions import ValidationError
from .entity import Entity
from .relation import RelationStore


class Item(Entity):
    """A catalogue member: a resource href plus its description and relations.

    The href is the item's identity within a catalogue (exact,
    case-sensitive match). It must be a string but is not validated for
    format, and cannot be changed after construction; to swap an item use
    Catalogue.replace_item with a new Item of the same href.
    """

    def __init__(self, href: str, description: str, relations: RelationStore | None = None):
        """Initialize item.

        Args:
            href: Resource identifier, unique within the owning catalogue
            description: Human-readable description (must be non-empty)
            relations: Initial relation store. A new empty store if None.

        Raises:
            ValidationError: If href is not a string, description is empty,
                or relations holds the description relation
        """
        if not isinstance(href, str):
            raise ValidationError(
                f"Href must be a string, got {type(href).__name__}",
                details={"href": href},
            )
        super().__init__(description, relations)
        self._href = href

    @property
    def href(self) -> str:
        return self._href

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return (
            self.href == other.href
            and self.description == other.description
            and self.relations == other.relations
        )

    def __repr__(self) -> str:
        return (
            f"Item(href={self.href!r}, description={self.description!r}, "
            f"relations={list(self.relations)!r})"
        )
