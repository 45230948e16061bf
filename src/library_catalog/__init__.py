"""
Library Catalog engine.

An in-memory catalog of circulating items (books, physical media and
periodicals) sharing one checkout/return lifecycle.

Key Components:
- models: Pydantic models for items, identifiers and operation outcomes
- catalog: Slot-based catalog owning the items
- exceptions: Catalog-level and item-level error hierarchy
- config: Settings and logging setup with pydantic-settings
"""

__version__ = "0.1.0"

from .catalog import Catalog, CatalogView, SlotId
from .exceptions import (
    AlreadyCheckedOutError,
    CatalogError,
    CatalogException,
    CatalogFullError,
    DuplicateItemError,
    ItemError,
    ItemErrorCode,
    ItemNotFoundError,
    NoCopiesAvailableError,
    NotCheckedOutError,
)

__all__ = [
    "AlreadyCheckedOutError",
    "Catalog",
    "CatalogError",
    "CatalogException",
    "CatalogFullError",
    "CatalogView",
    "DuplicateItemError",
    "ItemError",
    "ItemErrorCode",
    "ItemNotFoundError",
    "NoCopiesAvailableError",
    "NotCheckedOutError",
    "SlotId",
    "__version__",
]
