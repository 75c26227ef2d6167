"""
HyperCat

Data model and JSON codec for HyperCat catalogue documents.
"""

__version__ = "0.1.0"

# Model exports
from hypercat.core import Catalogue, Item, Relation, RelationStore

# Codec exports
from hypercat.codec import dump, dumps, load, loads, parse

# Relation constant exports
from hypercat.rels import (
    HYPERCAT_VERSION,
    HYPERCAT_MEDIA_TYPE,
    DESCRIPTION_REL,
    CONTENT_TYPE_REL,
    HOMEPAGE_REL,
    CONTAINS_CONTENT_TYPE_REL,
    SUPPORTS_SEARCH_REL,
    SIMPLE_SEARCH_VAL,
    GEOBOUND_SEARCH_VAL,
    LEXICOGRAPHIC_SEARCH_VAL,
    MULTI_SEARCH_VAL,
    SUBSTRING_SEARCH_VAL,
    SEARCH_VALUES,
)

# Exception exports
from hypercat import exceptions
from hypercat.exceptions import (
    HyperCatError,
    DuplicateHref,
    ItemNotFound,
    ValidationError,
    MissingDescription,
    MalformedInput,
)

__all__ = [
    # Model
    "Catalogue",
    "Item",
    "Relation",
    "RelationStore",
    # Codec
    "dump",
    "dumps",
    "load",
    "loads",
    "parse",
    # Constants
    "HYPERCAT_VERSION",
    "HYPERCAT_MEDIA_TYPE",
    "DESCRIPTION_REL",
    "CONTENT_TYPE_REL",
    "HOMEPAGE_REL",
    "CONTAINS_CONTENT_TYPE_REL",
    "SUPPORTS_SEARCH_REL",
    "SIMPLE_SEARCH_VAL",
    "GEOBOUND_SEARCH_VAL",
    "LEXICOGRAPHIC_SEARCH_VAL",
    "MULTI_SEARCH_VAL",
    "SUBSTRING_SEARCH_VAL",
    "SEARCH_VALUES",
    # Exceptions
    "exceptions",
    "HyperCatError",
    "DuplicateHref",
    "ItemNotFound",
    "ValidationError",
    "MissingDescription",
    "MalformedInput",
]
