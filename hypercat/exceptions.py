"""Custom exceptions for the HyperCat catalogue model.

This module provides exception classes used throughout the package.
"""


class HyperCatError(Exception):
    """Base exception for all HyperCat errors."""

    def __init__(self, message: str, details: dict | None = None):
        """Initialize exception with message and optional details.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details


class DuplicateHref(HyperCatError):
    """Exception raised when adding an item whose href is already catalogued.

    Attributes:
        href: The href that is already present in the catalogue
    """

    href: str

    def __init__(self, href: str):
        super().__init__(
            f'An item with href: "{href}" is already defined within the catalogue',
            details={"href": href},
        )
        self.href = href


class ItemNotFound(HyperCatError):
    """Exception raised when no item with the requested href exists.

    Attributes:
        href: The href that was looked up
    """

    href: str

    def __init__(self, href: str):
        super().__init__(
            f'An item with href: "{href}" was not found within the catalogue',
            details={"href": href},
        )
        self.href = href


class ValidationError(HyperCatError):
    """Exception raised when an entity or document fails validation."""

    pass


class MissingDescription(ValidationError):
    """Exception raised when a decoded entity has no description relation.

    Attributes:
        href: Href of the offending item, or None for the catalogue itself
    """

    href: str | None

    def __init__(self, rel: str, href: str | None = None):
        """Initialize missing description error.

        Args:
            rel: The reserved description relation key that was expected
            href: Href of the item lacking a description (None for the catalogue)
        """
        where = "catalogue" if href is None else f'item "{href}"'
        super().__init__(
            f'"{rel}" is a mandatory metadata element ({where})',
            details={"rel": rel, "href": href},
        )
        self.href = href


class MalformedInput(ValidationError):
    """Exception raised when wire input is not JSON or has the wrong shape."""

    pass
