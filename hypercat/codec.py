"""JSON codec for HyperCat catalogues.

WIRE SHAPE (applies to the catalogue and, recursively, to each item):

    {
      "items": [{"href": "...", "item-metadata": [{"rel": "...", "val": "..."}]}],
      "item-metadata": [{"rel": "...", "val": "..."}]
    }

DESCRIPTION HANDLING:
In memory the description is a dedicated field; on the wire it is an
ordinary relation keyed DESCRIPTION_REL inside item-metadata. Two pure
functions do the conversion at this boundary:
- split_description(): on decode, lift the description out of the relation
  list (last one wins) and keep the remaining relations in order
- inject_description(): on encode, append the description as the final
  relation

Decoding is all-or-nothing: any error aborts the whole document.

USAGE:
    >>> from hypercat import Catalogue, dumps, loads
    >>> cat = Catalogue("Catalog Name")
    >>> loads(dumps(cat)) == cat
    True
"""

import json
from typing import IO, Any, Iterable, Optional

from .config import Settings, get_settings
from .core import Catalogue, Item, Relation, RelationStore
from .exceptions import MalformedInput, MissingDescription
from .logs import get_logger
from .rels import DESCRIPTION_REL

logger = get_logger(__name__)

# Wire field names
ITEMS_FIELD = "items"
METADATA_FIELD = "item-metadata"
HREF_FIELD = "href"
REL_FIELD = "rel"
VAL_FIELD = "val"


# ============================================================================
# DESCRIPTION SPLIT / INJECT
# ============================================================================

def split_description(relations: Iterable[Relation]) -> tuple[str, list[Relation]]:
    """Separate the description relation from the other relations.

    Args:
        relations: Relations as read from the wire, in wire order

    Returns:
        (description, remaining relations). The description is "" if no
        DESCRIPTION_REL entry is present; with several, the last one wins.
    """
    description = ""
    remaining: list[Relation] = []
    for relation in relations:
        if relation.rel == DESCRIPTION_REL:
            description = relation.val
        else:
            remaining.append(relation)
    return description, remaining


def inject_description(relations: Iterable[Relation], description: str) -> list[Relation]:
    """Return the relations with the description appended as the last entry.

    An empty description is omitted.
    """
    outgoing = list(relations)
    if description:
        outgoing.append(Relation(DESCRIPTION_REL, description))
    return outgoing


# ============================================================================
# ENCODE
# ============================================================================

def _relation_to_dict(relation: Relation) -> dict[str, str]:
    return {REL_FIELD: relation.rel, VAL_FIELD: relation.val}


def _metadata_to_list(relations: RelationStore, description: str) -> list[dict[str, str]]:
    return [_relation_to_dict(r) for r in inject_description(relations, description)]


def item_to_dict(item: Item) -> dict[str, Any]:
    """Convert an Item to its wire dict."""
    return {
        HREF_FIELD: item.href,
        METADATA_FIELD: _metadata_to_list(item.relations, item.description),
    }


def catalogue_to_dict(catalogue: Catalogue) -> dict[str, Any]:
    """Convert a Catalogue to its wire dict."""
    return {
        ITEMS_FIELD: [item_to_dict(item) for item in catalogue],
        METADATA_FIELD: _metadata_to_list(catalogue.relations, catalogue.description),
    }


def dumps(
    catalogue: Catalogue,
    indent: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Encode a catalogue as JSON text.

    Args:
        catalogue: Catalogue to encode
        indent: Override the configured indent for this call
        settings: Settings to use instead of get_settings()

    Returns:
        JSON document
    """
    settings = settings or get_settings()
    if indent is None:
        indent = settings.indent
        separators = settings.separators
    else:
        separators = (",", ": ")

    text = json.dumps(
        catalogue_to_dict(catalogue),
        indent=indent,
        separators=separators,
        ensure_ascii=settings.ensure_ascii,
    )
    logger.debug(
        "Encoded catalogue: %d items, %d relations, %d chars",
        len(catalogue), len(catalogue.relations), len(text),
    )
    return text


def dump(catalogue: Catalogue, fp: IO[str], **kwargs: Any) -> None:
    """Encode a catalogue as JSON and write it to a text file object."""
    fp.write(dumps(catalogue, **kwargs))


# ============================================================================
# DECODE
# ============================================================================

def _require(condition: bool, message: str, **details: Any) -> None:
    if not condition:
        raise MalformedInput(message, details=details or None)


def _relation_from_dict(data: Any, where: str) -> Relation:
    _require(isinstance(data, dict), f"Relation in {where} must be an object", value=data)
    rel = data.get(REL_FIELD)
    val = data.get(VAL_FIELD)
    _require(
        isinstance(rel, str) and isinstance(val, str),
        f'Relation in {where} needs string "{REL_FIELD}" and "{VAL_FIELD}" fields',
        value=data,
    )
    return Relation(rel, val)


def _metadata_from_dict(data: dict, where: str) -> list[Relation]:
    raw = data.get(METADATA_FIELD)
    if raw is None:
        raw = []
    _require(isinstance(raw, list), f'"{METADATA_FIELD}" of {where} must be an array')
    return [_relation_from_dict(entry, where) for entry in raw]


def item_from_dict(data: Any) -> Item:
    """Build an Item from its wire dict.

    Raises:
        MalformedInput: If data does not have the item shape
        MissingDescription: If the item has no description relation
    """
    _require(isinstance(data, dict), "Item must be an object", value=data)
    href = data.get(HREF_FIELD)
    _require(isinstance(href, str), f'Item needs a string "{HREF_FIELD}" field', value=data)

    description, relations = split_description(_metadata_from_dict(data, f'item "{href}"'))
    if not description:
        raise MissingDescription(DESCRIPTION_REL, href=href)

    return Item(href, description, RelationStore(relations))


def catalogue_from_dict(data: Any) -> Catalogue:
    """Build a Catalogue (and its items) from the wire dict.

    Items are added through Catalogue.add_item, so a document repeating an
    href is rejected with DuplicateHref.

    Raises:
        MalformedInput: If data does not have the catalogue shape
        MissingDescription: If the catalogue or any item lacks a description
        DuplicateHref: If two items share an href
    """
    _require(isinstance(data, dict), "Catalogue must be a JSON object")
    raw_items = data.get(ITEMS_FIELD)
    if raw_items is None:
        raw_items = []
    _require(isinstance(raw_items, list), f'"{ITEMS_FIELD}" must be an array')

    description, relations = split_description(_metadata_from_dict(data, "catalogue"))
    if not description:
        raise MissingDescription(DESCRIPTION_REL)

    catalogue = Catalogue(description, RelationStore(relations))
    for raw_item in raw_items:
        catalogue.add_item(item_from_dict(raw_item))
    return catalogue


def loads(text: str | bytes) -> Catalogue:
    """Decode a JSON document into a Catalogue.

    Raises:
        MalformedInput: If text is not valid JSON or has the wrong shape
        MissingDescription: If the catalogue or any item lacks a description
        DuplicateHref: If two items share an href
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedInput(f"Invalid JSON: {e}") from e

    catalogue = catalogue_from_dict(data)
    logger.debug(
        "Decoded catalogue: %d items, %d relations",
        len(catalogue), len(catalogue.relations),
    )
    return catalogue


def load(fp: IO[str]) -> Catalogue:
    """Read a JSON document from a text file object and decode it."""
    return loads(fp.read())


# Name used by the HyperCat reference libraries
parse = loads
