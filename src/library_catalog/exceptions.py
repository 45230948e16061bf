"""
Exception hierarchy for the Library Catalog engine.

Two families of failures exist and both are recoverable:

1. **CatalogError**: raised by catalog-level operations (capacity exhausted,
   unknown title). The caller decides how to report them.
2. **ItemError**: raised by an item's own checkout/return logic. The catalog
   catches these and turns them into a failed ``CirculationResult``.

Malformed field values are not part of this hierarchy: they surface as
``pydantic.ValidationError`` from model construction or assignment.
"""

import enum


class ItemErrorCode(str, enum.Enum):
    """Machine-readable reason for an item-level failure."""

    NO_COPIES_AVAILABLE = "no_copies_available"
    ALREADY_CHECKED_OUT = "already_checked_out"
    NOT_CHECKED_OUT = "not_checked_out"


class CatalogException(Exception):
    """Base exception for catalog operations."""


class CatalogError(CatalogException):
    """Base exception for catalog-level failures."""


class CatalogFullError(CatalogError):
    """Raised when every slot in the catalog is occupied."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Catalog is full ({capacity} items). Cannot add more items")


class DuplicateItemError(CatalogError):
    """Raised when adding an item instance the catalog already holds."""

    def __init__(self, title: str, slot_id: int):
        self.title = title
        self.slot_id = slot_id
        super().__init__(f"Item '{title}' is already held in slot {slot_id}")


class ItemNotFoundError(CatalogError):
    """Raised when no live item has the requested title."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Item '{title}' not found")


class ItemError(CatalogException):
    """Base exception for checkout/return failures on a single item."""

    code: ItemErrorCode

    def __init__(self, title: str, message: str):
        self.title = title
        super().__init__(message)


class NoCopiesAvailableError(ItemError):
    """Raised when a book has no copies left to lend."""

    code = ItemErrorCode.NO_COPIES_AVAILABLE

    def __init__(self, title: str):
        super().__init__(title, f"No copies available to check out for '{title}'")


class AlreadyCheckedOutError(ItemError):
    """Raised when a single-hold item already has an outstanding checkout."""

    code = ItemErrorCode.ALREADY_CHECKED_OUT

    def __init__(self, title: str, due_date: str):
        self.due_date = due_date
        super().__init__(title, f"'{title}' is already checked out. Due: {due_date}")


class NotCheckedOutError(ItemError):
    """Raised when returning an item that is not checked out."""

    code = ItemErrorCode.NOT_CHECKED_OUT

    def __init__(self, title: str):
        super().__init__(title, f"'{title}' is not currently checked out")
