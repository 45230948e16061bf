"""
Circulating item models for the Library Catalog engine.

Three kinds of item share one checkout/return lifecycle:
- Book: lent copy by copy, tracked through an available-copies counter
- PhysicalMedia: discs and similar media, single-hold
- Periodical: magazine issues, single-hold

The kinds form a closed tagged union (``CatalogItem``) discriminated on the
``kind`` field. Every model validates on construction and on assignment, so a
negative count or a malformed ISBN can never be stored.
"""

import logging
from abc import ABC, abstractmethod
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

from ..exceptions import AlreadyCheckedOutError, NoCopiesAvailableError, NotCheckedOutError
from .identifiers import Isbn
from .outcomes import CheckoutOutcome, ItemSnapshot, ReturnOutcome

logger = logging.getLogger(__name__)

# Stored when a checkout is made without a due date
UNSPECIFIED_DUE_DATE = "N/A"


def _resolve_due_date(due_date: str | None) -> str:
    return due_date if due_date else UNSPECIFIED_DUE_DATE


class CatalogItemBase(BaseModel, ABC):
    """
    Fields and behaviour shared by every circulating item.

    Subclasses supply the kind-specific checkout and return rules. Due dates
    are opaque strings; they are never parsed or compared.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        # Misspelled fields are reported, not silently dropped
        extra="forbid",
    )

    title: str = Field(default="", description="Title of the item")
    author: str = Field(default="", description="Author, director or editor")
    due_date: str | None = Field(
        default=None,
        description="Due date of the latest checkout, cleared on return",
        examples=["2025-09-20", UNSPECIFIED_DUE_DATE],
    )
    checked_out: bool = Field(default=False, description="Checkout flag")

    @abstractmethod
    def check_out(self, due_date: str | None = None) -> CheckoutOutcome:
        """
        Lend the item.

        Args:
            due_date: Opaque due date string; empty or None stores "N/A"

        Raises:
            ItemError: If the item cannot be lent in its current state
        """

    @abstractmethod
    def return_item(self) -> ReturnOutcome:
        """
        Take the item back.

        Raises:
            ItemError: If the item is not in a returnable state
        """

    def _kind_fields(self) -> dict[str, Any]:
        return {}

    def describe(self) -> ItemSnapshot:
        """Take a read-only snapshot of every field."""
        return ItemSnapshot(
            kind=self.kind,
            title=self.title,
            author=self.author,
            checked_out=self.checked_out,
            due_date=self.due_date,
            **self._kind_fields(),
        )


def _check_non_negative(value: int, label: str) -> int:
    if value < 0:
        raise ValueError(f"{label} cannot be negative")
    return value


class Book(CatalogItemBase):
    """
    A book with an optional ISBN and a count of copies on the shelf.

    ``checked_out`` has two meanings here. It turns True on the first
    checkout and stays True while further copies are lent, and it only turns
    False again when a copy comes back. It therefore tracks "a loan happened
    since the last return", not "every copy is out".
    """

    kind: Literal["book"] = Field(default="book", frozen=True)

    isbn: Isbn = Field(
        default=None,
        description="ISBN-10 or ISBN-13, hyphens allowed",
        examples=["0441013597", "978-0-441-01359-3"],
    )
    copies: int = Field(
        default=1,
        description="Number of copies available for checkout",
        examples=[0, 1, 5],
    )

    @field_validator("copies")
    @classmethod
    def validate_copies(cls, v: int) -> int:
        return _check_non_negative(v, "Copies")

    def check_out(self, due_date: str | None = None) -> CheckoutOutcome:
        if self.copies <= 0:
            raise NoCopiesAvailableError(self.title)

        additional_copy = self.checked_out
        self.due_date = _resolve_due_date(due_date)
        self.checked_out = True
        self.copies -= 1

        logger.debug("Book '%s' lent, %d copies remaining", self.title, self.copies)
        return CheckoutOutcome(
            kind=self.kind,
            title=self.title,
            due_date=self.due_date,
            copies_remaining=self.copies,
            additional_copy=additional_copy,
        )

    def return_item(self) -> ReturnOutcome:
        # Never lent and nothing on the shelf: nothing to take back
        if not self.due_date and not self.checked_out and self.copies == 0:
            raise NotCheckedOutError(self.title)

        self.copies += 1
        self.due_date = None
        self.checked_out = self.copies == 0

        logger.debug("Book '%s' returned, %d copies available", self.title, self.copies)
        return ReturnOutcome(kind=self.kind, title=self.title, copies_available=self.copies)

    def _kind_fields(self) -> dict[str, Any]:
        return {"isbn": self.isbn, "copies": self.copies}


def _check_hold_pairing(item: CatalogItemBase) -> None:
    if item.checked_out != (item.due_date is not None):
        raise ValueError("A due date must be set exactly when the item is checked out")


def _set_hold(item: CatalogItemBase, due_date: str | None) -> None:
    # due_date and checked_out only validate as a pair, so write the date
    # first and let the checked_out assignment run the model checks once
    item.__dict__["due_date"] = due_date
    item.checked_out = due_date is not None


def _single_hold_check_out(item: CatalogItemBase, due_date: str | None) -> CheckoutOutcome:
    if item.checked_out:
        raise AlreadyCheckedOutError(item.title, _resolve_due_date(item.due_date))

    _set_hold(item, _resolve_due_date(due_date))
    return CheckoutOutcome(kind=item.kind, title=item.title, due_date=item.due_date)


def _single_hold_return(item: CatalogItemBase) -> ReturnOutcome:
    if not item.checked_out:
        raise NotCheckedOutError(item.title)

    _set_hold(item, None)
    return ReturnOutcome(kind=item.kind, title=item.title)


class PhysicalMedia(CatalogItemBase):
    """A disc or other physical medium. Only one checkout may be outstanding."""

    kind: Literal["physical_media"] = Field(default="physical_media", frozen=True)

    duration_minutes: int = Field(default=0, description="Running time in minutes")
    region: str = Field(default="", description="Region code, empty if unknown")

    @field_validator("duration_minutes")
    @classmethod
    def validate_duration(cls, v: int) -> int:
        return _check_non_negative(v, "Duration")

    @model_validator(mode="after")
    def validate_hold(self) -> "PhysicalMedia":
        _check_hold_pairing(self)
        return self

    def check_out(self, due_date: str | None = None) -> CheckoutOutcome:
        return _single_hold_check_out(self, due_date)

    def return_item(self) -> ReturnOutcome:
        return _single_hold_return(self)

    def _kind_fields(self) -> dict[str, Any]:
        return {"duration_minutes": self.duration_minutes, "region": self.region}


class Periodical(CatalogItemBase):
    """A single issue of a periodical. Only one checkout may be outstanding."""

    kind: Literal["periodical"] = Field(default="periodical", frozen=True)

    issue_number: int = Field(default=0, description="Issue number")
    period: str = Field(default="", description="Issue period, e.g. 'September'")

    @field_validator("issue_number")
    @classmethod
    def validate_issue_number(cls, v: int) -> int:
        return _check_non_negative(v, "Issue number")

    @model_validator(mode="after")
    def validate_hold(self) -> "Periodical":
        _check_hold_pairing(self)
        return self

    def check_out(self, due_date: str | None = None) -> CheckoutOutcome:
        return _single_hold_check_out(self, due_date)

    def return_item(self) -> ReturnOutcome:
        return _single_hold_return(self)

    def _kind_fields(self) -> dict[str, Any]:
        return {"issue_number": self.issue_number, "period": self.period}


CatalogItem = Annotated[Book | PhysicalMedia | Periodical, Field(discriminator="kind")]

ITEM_KINDS: tuple[str, ...] = ("book", "physical_media", "periodical")

_item_adapter: TypeAdapter[CatalogItem] = TypeAdapter(CatalogItem)


# =============================================================================
# RESULT-RETURNING CONSTRUCTION
# =============================================================================


class ItemCreationResult(BaseModel):
    """Either a constructed item or the reasons construction failed."""

    item: CatalogItem | None = None
    errors: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.item is not None


def _describe_validation_errors(exc: ValidationError) -> list[str]:
    """Flatten Pydantic errors into 'field: reason' strings."""
    reasons = []
    for error in exc.errors():
        # Drop the union tag so 'book.copies' reads as 'copies'
        loc = [str(part) for part in error["loc"] if part not in ITEM_KINDS]
        ctx_error = error.get("ctx", {}).get("error")
        message = str(ctx_error) if ctx_error is not None else error["msg"]
        reasons.append(f"{'.'.join(loc)}: {message}" if loc else message)
    return reasons


def create_item(kind: str, **fields: Any) -> ItemCreationResult:
    """
    Build an item of the given kind without raising on bad input.

    Args:
        kind: One of "book", "physical_media" or "periodical"
        **fields: Raw field values for that kind

    Returns:
        ItemCreationResult holding the item, or the validation failures
    """
    if kind not in ITEM_KINDS:
        return ItemCreationResult(errors=[f"kind: Unknown item kind '{kind}'"])

    try:
        item = _item_adapter.validate_python({**fields, "kind": kind})
    except ValidationError as e:
        reasons = _describe_validation_errors(e)
        logger.info("Rejected %s: %s", kind, "; ".join(reasons))
        return ItemCreationResult(errors=reasons)

    return ItemCreationResult(item=item)


def create_book(
    title: str = "", author: str = "", isbn: str | None = None, copies: int = 1
) -> ItemCreationResult:
    return create_item("book", title=title, author=author, isbn=isbn, copies=copies)


def create_physical_media(
    title: str = "", author: str = "", duration_minutes: int = 0, region: str = ""
) -> ItemCreationResult:
    return create_item(
        "physical_media",
        title=title,
        author=author,
        duration_minutes=duration_minutes,
        region=region,
    )


def create_periodical(
    title: str = "", author: str = "", issue_number: int = 0, period: str = ""
) -> ItemCreationResult:
    return create_item(
        "periodical", title=title, author=author, issue_number=issue_number, period=period
    )
