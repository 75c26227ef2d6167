"""HyperCat data model.

ARCHITECTURE:
- RelationStore is the one place relation add/replace/query logic lives
- Entity embeds a RelationStore and a description; Item and Catalogue
  extend it with an href and an item list respectively
- The model performs no I/O; hypercat.codec converts to and from JSON
"""

from .relation import Relation, RelationStore
from .entity import Entity, validate_description
from .item import Item
from .catalogue import Catalogue

__all__ = [
    "Relation",
    "RelationStore",
    "Entity",
    "validate_description",
    "Item",
    "Catalogue",
]
