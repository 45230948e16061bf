"""
Result models returned by item and catalog operations.

All of these are frozen Pydantic models: they are projections taken at the
moment an operation completed, and changing them never touches the catalog.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import ItemErrorCode


class ItemSnapshot(BaseModel):
    """
    Read-only projection of an item's fields for display.

    Fields that do not apply to an item's kind are left as None.
    """

    model_config = ConfigDict(frozen=True)

    kind: str = Field(..., description="Item kind discriminator")
    title: str = Field(..., description="Title of the item")
    author: str = Field(..., description="Author, director or editor")
    checked_out: bool = Field(..., description="Checkout flag at snapshot time")
    due_date: str | None = Field(None, description="Due date of the latest checkout")

    # Book
    isbn: str | None = Field(None, description="ISBN if the item is a book")
    copies: int | None = Field(None, description="Copies available if the item is a book")

    # Physical media
    duration_minutes: int | None = Field(None, description="Running time in minutes")
    region: str | None = Field(None, description="Region code")

    # Periodical
    issue_number: int | None = Field(None, description="Issue number")
    period: str | None = Field(None, description="Issue period, e.g. a month")


class CheckoutOutcome(BaseModel):
    """Successful checkout of one item (or one copy of a book)."""

    model_config = ConfigDict(frozen=True)

    kind: str
    title: str
    due_date: str
    copies_remaining: int | None = Field(
        None, description="Copies left after the checkout, books only"
    )
    additional_copy: bool = Field(
        default=False,
        description="True when a book was already checked out and another copy was lent",
    )


class ReturnOutcome(BaseModel):
    """Successful return of one item (or one copy of a book)."""

    model_config = ConfigDict(frozen=True)

    kind: str
    title: str
    copies_available: int | None = Field(
        None, description="Copies available after the return, books only"
    )


class CirculationResult(BaseModel):
    """
    Reported outcome of a catalog-level checkout or return.

    Item-level failures never escape the catalog as exceptions. They are
    folded into a result with ``success=False`` and an error code.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    title: str
    message: str
    checkout: CheckoutOutcome | None = None
    returned: ReturnOutcome | None = None
    error: ItemErrorCode | None = None


class CatalogSummary(BaseModel):
    """Aggregate counts over the current catalog contents."""

    model_config = ConfigDict(frozen=True)

    catalog: dict[str, str | int] = Field(default_factory=dict)
    total_items: int = Field(..., ge=0)
    capacity: int = Field(..., ge=1)
    free_slots: int = Field(..., ge=0)
    items_by_kind: dict[str, int] = Field(default_factory=dict)
    checked_out_items: int = Field(..., ge=0)
    available_book_copies: int = Field(..., ge=0)
