"""Tests for Catalogue.

Coverage:
- construction and description validation
- relation operations on the catalogue itself
- add_item / replace_item href uniqueness and failure atomicity
- item ownership (stored items are copies)
"""

import pytest

from hypercat import (
    Catalogue,
    DuplicateHref,
    Item,
    ItemNotFound,
    ValidationError,
    dumps,
    loads,
)
from hypercat.core import Relation, RelationStore
from hypercat.rels import (
    DESCRIPTION_REL,
    SIMPLE_SEARCH_VAL,
    SUPPORTS_SEARCH_REL,
    SUBSTRING_SEARCH_VAL,
)


class TestCatalogueConstruction:
    """Tests for Catalogue construction."""

    def test_new_catalogue_is_empty(self):
        cat = Catalogue("Catalog Name")

        assert cat.description == "Catalog Name"
        assert cat.items == ()
        assert len(cat) == 0
        assert cat.rels() == []

    def test_empty_description_rejected(self):
        with pytest.raises(ValidationError):
            Catalogue("")


class TestCatalogueRelations:
    """Tests for relation operations on the catalogue."""

    def test_duplicate_rel_keys_kept_in_order(self):
        cat = Catalogue("C")
        cat.add_rel(SUPPORTS_SEARCH_REL, SIMPLE_SEARCH_VAL)
        cat.add_rel(SUPPORTS_SEARCH_REL, SUBSTRING_SEARCH_VAL)

        assert cat.vals(SUPPORTS_SEARCH_REL) == [SIMPLE_SEARCH_VAL, SUBSTRING_SEARCH_VAL]
        assert cat.rels() == [SUPPORTS_SEARCH_REL, SUPPORTS_SEARCH_REL]

    def test_replace_rel_overwrites_all(self):
        cat = Catalogue("C")
        cat.add_rel("k", "v1")
        cat.add_rel("k", "v2")
        cat.replace_rel("k", "v3")

        assert cat.values_for("k") == ["v3", "v3"]

    def test_replace_rel_missing_is_noop(self):
        cat = Catalogue("C")
        cat.replace_rel("k", "v")

        assert cat.all_keys() == []


class TestAddItem:
    """Tests for Catalogue.add_item."""

    def test_add_items_preserves_order(self):
        cat = Catalogue("C")
        cat.add_item(Item("/b", "B"))
        cat.add_item(Item("/a", "A"))
        cat.add_item(Item("/c", "C"))

        assert cat.hrefs() == ["/b", "/a", "/c"]

    def test_duplicate_href_rejected(self):
        """Adding a second item with the same href fails and changes nothing."""
        cat = Catalogue("C")
        cat.add_item(Item("/a", "First"))

        with pytest.raises(DuplicateHref) as exc_info:
            cat.add_item(Item("/a", "Second"))

        assert exc_info.value.href == "/a"
        assert exc_info.value.details == {"href": "/a"}
        assert len(cat) == 1
        assert cat.get_item("/a").description == "First"

    def test_hrefs_differing_in_case_are_distinct(self):
        cat = Catalogue("C")
        cat.add_item(Item("/a", "lower"))
        cat.add_item(Item("/A", "upper"))

        assert cat.hrefs() == ["/a", "/A"]

    def test_added_item_is_a_copy(self):
        """Changing the caller's item after adding does not touch the catalogue."""
        cat = Catalogue("C")
        item = Item("/a", "A")
        cat.add_item(item)

        item.add_rel("k", "v")
        item.description = "Changed"

        stored = cat.get_item("/a")
        assert stored.description == "A"
        assert stored.rels() == []


class TestReplaceItem:
    """Tests for Catalogue.replace_item."""

    def test_replace_keeps_index(self):
        cat = Catalogue("C")
        cat.add_item(Item("/a", "A"))
        cat.add_item(Item("/b", "B"))
        cat.add_item(Item("/c", "C"))

        replacement = Item("/b", "B v2")
        replacement.add_rel("k", "v")
        cat.replace_item(replacement)

        assert cat.hrefs() == ["/a", "/b", "/c"]
        assert cat.items[1] == replacement

    def test_replace_missing_href_rejected(self):
        """Replacing an unknown href fails and leaves items unchanged."""
        cat = Catalogue("C")
        cat.add_item(Item("/a", "A"))
        before = list(cat.items)

        with pytest.raises(ItemNotFound) as exc_info:
            cat.replace_item(Item("/z", "Z"))

        assert exc_info.value.href == "/z"
        assert list(cat.items) == before

    def test_replaced_item_is_a_copy(self):
        cat = Catalogue("C")
        cat.add_item(Item("/a", "A"))
        replacement = Item("/a", "A v2")
        cat.replace_item(replacement)

        replacement.add_rel("k", "v")

        assert cat.get_item("/a").rels() == []


class TestItemQueries:
    """Tests for item lookup helpers."""

    def test_get_item_missing_raises(self):
        with pytest.raises(ItemNotFound):
            Catalogue("C").get_item("/nope")

    def test_contains_and_iteration(self, sample_catalogue):
        assert "/resource1" in sample_catalogue
        assert "/resource2" not in sample_catalogue
        assert [item.href for item in sample_catalogue] == ["/resource1"]

    def test_items_view_is_read_only(self, sample_catalogue):
        assert isinstance(sample_catalogue.items, tuple)


class TestCatalogueEquality:
    """Tests for Catalogue equality."""

    def test_equal_catalogues(self, sample_catalogue):
        other = Catalogue("Catalog Name")
        other.add_rel(SUPPORTS_SEARCH_REL, SIMPLE_SEARCH_VAL)
        item = Item("/resource1", "Resource 1")
        item.add_rel("urn:X-hypercat:rels:isContentType", "application/json")
        other.add_item(item)

        assert other == sample_catalogue

    def test_item_order_matters(self):
        first = Catalogue("C")
        first.add_item(Item("/a", "A"))
        first.add_item(Item("/b", "B"))
        second = Catalogue("C")
        second.add_item(Item("/b", "B"))
        second.add_item(Item("/a", "A"))

        assert first != second


class TestCatalogueDescriptionRelation:
    """The description relation never enters the catalogue's relation store."""

    def test_add_rel_rejects_description_key(self):
        cat = Catalogue("Catalog Name")

        with pytest.raises(ValidationError, match="description field"):
            cat.add_rel(DESCRIPTION_REL, "Other")

        assert cat.description == "Catalog Name"
        assert cat.rels() == []

    def test_replace_rel_rejects_description_key(self):
        cat = Catalogue("Catalog Name")

        with pytest.raises(ValidationError):
            cat.replace_rel(DESCRIPTION_REL, "Other")

        assert cat.description == "Catalog Name"

    def test_constructor_rejects_store_with_description_key(self):
        with pytest.raises(ValidationError):
            Catalogue("C", RelationStore([Relation(DESCRIPTION_REL, "Other")]))

    def test_description_change_round_trips(self):
        """Changing the description goes through the field and survives encoding."""
        cat = Catalogue("Catalog Name")
        cat.add_rel(SUPPORTS_SEARCH_REL, SIMPLE_SEARCH_VAL)
        cat.description = "Other"

        decoded = loads(dumps(cat))

        assert decoded == cat
        assert decoded.description == "Other"
        assert decoded.rels() == [SUPPORTS_SEARCH_REL]


class TestAddItemHref:
    """Tests for items with non-string hrefs."""

    def test_non_string_href_never_reaches_catalogue(self):
        cat = Catalogue("C")

        with pytest.raises(ValidationError):
            cat.add_item(Item(None, "A"))

        assert len(cat) == 0
        assert loads(dumps(cat)) == cat
