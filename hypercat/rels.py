"""Well-known HyperCat relation keys and values.

Only DESCRIPTION_REL is handled specially (see hypercat.codec). Everything
else here is an opaque string to the model: it is stored and serialized
like any other relation.
"""

# Version of HyperCat this package supports
HYPERCAT_VERSION = "2.0"

# Default mime type of HyperCat resources
HYPERCAT_MEDIA_TYPE = "application/vnd.hypercat.catalogue+json"

# ============================================================================
# RELATION KEYS
# ============================================================================

DESCRIPTION_REL = "urn:X-hypercat:rels:hasDescription:en"
CONTENT_TYPE_REL = "urn:X-hypercat:rels:isContentType"
HOMEPAGE_REL = "urn:X-hypercat:rels:hasHomepage"
CONTAINS_CONTENT_TYPE_REL = "urn:X-hypercat:rels:containsContentType"
SUPPORTS_SEARCH_REL = "urn:X-hypercat:rels:supportsSearch"

# ============================================================================
# SEARCH CAPABILITY VALUES (used with SUPPORTS_SEARCH_REL)
# ============================================================================

SIMPLE_SEARCH_VAL = "urn:X-hypercat:search:simple"
GEOBOUND_SEARCH_VAL = "urn:X-hypercat:search:geobound"
LEXICOGRAPHIC_SEARCH_VAL = "urn:X-hypercat:search:lexrange"
MULTI_SEARCH_VAL = "urn:X-hypercat:search:multi"
SUBSTRING_SEARCH_VAL = "urn:X-hypercat:search:substring"

SEARCH_VALUES = {
    SIMPLE_SEARCH_VAL,
    GEOBOUND_SEARCH_VAL,
    LEXICOGRAPHIC_SEARCH_VAL,
    MULTI_SEARCH_VAL,
    SUBSTRING_SEARCH_VAL,
}
