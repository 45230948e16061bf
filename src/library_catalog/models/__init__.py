"""
Library Catalog models.

Pydantic v2 models for every value the catalog engine handles:
- Book, PhysicalMedia, Periodical: the circulating item kinds
- ItemSnapshot: read-only projection of an item for display
- CheckoutOutcome, ReturnOutcome, CirculationResult: operation results
- CatalogSummary: aggregate counts over a catalog
"""

from .identifiers import Isbn, is_valid_isbn
from .items import (
    ITEM_KINDS,
    UNSPECIFIED_DUE_DATE,
    Book,
    CatalogItem,
    CatalogItemBase,
    ItemCreationResult,
    Periodical,
    PhysicalMedia,
    create_book,
    create_item,
    create_periodical,
    create_physical_media,
)
from .outcomes import (
    CatalogSummary,
    CheckoutOutcome,
    CirculationResult,
    ItemSnapshot,
    ReturnOutcome,
)

__all__ = [
    "ITEM_KINDS",
    "UNSPECIFIED_DUE_DATE",
    "Book",
    "CatalogItem",
    "CatalogItemBase",
    "CatalogSummary",
    "CheckoutOutcome",
    "CirculationResult",
    "Isbn",
    "ItemCreationResult",
    "ItemSnapshot",
    "Periodical",
    "PhysicalMedia",
    "ReturnOutcome",
    "create_book",
    "create_item",
    "create_periodical",
    "create_physical_media",
    "is_valid_isbn",
]
