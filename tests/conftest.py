"""Pytest fixtures for hypercat tests."""

import pytest

from hypercat import Catalogue, Item
from hypercat.config import reset_settings
from hypercat.rels import (
    CONTENT_TYPE_REL,
    DESCRIPTION_REL,
    SIMPLE_SEARCH_VAL,
    SUPPORTS_SEARCH_REL,
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep tests independent of the user's config file and environment.

    Points HYPERCAT_CONFIG at a file that does not exist, clears every
    other HYPERCAT_* override, and drops cached settings before and after
    each test.
    """
    for name in (
        "HYPERCAT_OUTPUT_PROFILE",
        "HYPERCAT_JSON_INDENT",
        "HYPERCAT_ENSURE_ASCII",
        "HYPERCAT_LOG_LEVEL",
        "HYPERCAT_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HYPERCAT_CONFIG", str(tmp_path / "absent.toml"))
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_catalogue():
    """Catalogue with one search relation and one JSON resource."""
    cat = Catalogue("Catalog Name")
    cat.add_rel(SUPPORTS_SEARCH_REL, SIMPLE_SEARCH_VAL)

    item = Item("/resource1", "Resource 1")
    item.add_rel(CONTENT_TYPE_REL, "application/json")
    cat.add_item(item)
    return cat


@pytest.fixture
def sample_document():
    """Wire form of sample_catalogue."""
    return {
        "items": [
            {
                "href": "/resource1",
                "item-metadata": [
                    {"rel": CONTENT_TYPE_REL, "val": "application/json"},
                    {"rel": DESCRIPTION_REL, "val": "Resource 1"},
                ],
            }
        ],
        "item-metadata": [
            {"rel": SUPPORTS_SEARCH_REL, "val": SIMPLE_SEARCH_VAL},
            {"rel": DESCRIPTION_REL, "val": "Catalog Name"},
        ],
    }
