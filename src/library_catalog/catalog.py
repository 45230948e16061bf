"""
In-memory catalog of circulating items.

The catalog owns a fixed arena of slots. Each slot is either free (None) or
holds exactly one item, and a slot's index is the item's ``SlotId`` for as
long as the item lives. New items go into the first free slot, so storage
order is not insertion order once items have been removed.

Lookups are by exact, case-sensitive title. Titles are not unique: every
title-based operation resolves to the first matching slot in storage order.

The catalog is a single-owner structure. None of its operations lock, and a
caller sharing one catalog between threads must guard the whole object.
"""

import logging
from collections import Counter
from collections.abc import Iterator

from .config import get_config
from .exceptions import CatalogFullError, DuplicateItemError, ItemError, ItemNotFoundError
from .models.items import CatalogItem
from .models.outcomes import CatalogSummary, CirculationResult, ItemSnapshot

logger = logging.getLogger(__name__)

SlotId = int


class CatalogView:
    """
    Lazy, restartable view over the live items of a catalog.

    Each iteration walks the slots afresh and yields a snapshot per item, so
    the view reflects the catalog as it is when iteration starts.
    """

    def __init__(self, catalog: "Catalog"):
        self._catalog = catalog

    def __iter__(self) -> Iterator[ItemSnapshot]:
        for _, item in self._catalog.iter_slots():
            yield item.describe()

    def __len__(self) -> int:
        return len(self._catalog)


class Catalog:
    """
    Catalog of books, physical media and periodicals.

    Catalog-level failures (full catalog, unknown title) raise CatalogError
    subclasses. Item-level checkout/return failures are caught and reported
    through CirculationResult instead.
    """

    def __init__(self, capacity: int | None = None, name: str | None = None):
        """
        Create an empty catalog.

        Args:
            capacity: Number of slots. If None, uses the configured max_items.
            name: Catalog name for logs and summaries. If None, uses the configured name.
        """
        if capacity is None or name is None:
            config = get_config()
            capacity = config.max_items if capacity is None else capacity
            name = config.catalog_name if name is None else name

        if capacity < 1:
            raise ValueError("Catalog capacity must be at least 1")

        self.name = name
        self._slots: list[CatalogItem | None] = [None] * capacity
        self._count = 0

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def count(self) -> int:
        """Number of occupied slots."""
        return self._count

    @property
    def free_slots(self) -> int:
        return self.capacity - self._count

    @property
    def is_empty(self) -> bool:
        return self._count == 0

    def __len__(self) -> int:
        return self._count

    def iter_slots(self) -> Iterator[tuple[SlotId, CatalogItem]]:
        """Yield (slot id, item) for every occupied slot in storage order."""
        for slot_id, item in enumerate(self._slots):
            if item is not None:
                yield slot_id, item

    def get(self, slot_id: SlotId) -> CatalogItem | None:
        """Return the item in a slot, or None if the slot is free or out of range."""
        if 0 <= slot_id < self.capacity:
            return self._slots[slot_id]
        return None

    def _find_slot(self, title: str) -> SlotId | None:
        for slot_id, item in self.iter_slots():
            if item.title == title:
                return slot_id
        return None

    # =========================================================================
    # Catalog management
    # =========================================================================

    def add(self, item: CatalogItem) -> SlotId:
        """
        Take ownership of an item and store it in the first free slot.

        Args:
            item: A validated Book, PhysicalMedia or Periodical

        Returns:
            The slot id now holding the item

        Raises:
            CatalogFullError: If every slot is occupied
            DuplicateItemError: If this very instance is already in a slot
        """
        for held_slot, held in self.iter_slots():
            if held is item:
                logger.info("Add failed - '%s' already in slot %d", item.title, held_slot)
                raise DuplicateItemError(item.title, held_slot)

        if self._count >= self.capacity:
            logger.warning("Catalog '%s' is full, rejected '%s'", self.name, item.title)
            raise CatalogFullError(self.capacity)

        slot_id = self._slots.index(None)
        self._slots[slot_id] = item
        self._count += 1

        logger.info("Added %s '%s' to slot %d", item.kind, item.title, slot_id)
        return slot_id

    def remove_by_title(self, title: str) -> None:
        """
        Remove the first item with exactly this title and free its slot.

        Raises:
            ItemNotFoundError: If no live item has the title
        """
        slot_id = self._find_slot(title)
        if slot_id is None:
            logger.info("Remove failed - '%s' not found", title)
            raise ItemNotFoundError(title)

        self._slots[slot_id] = None
        self._count -= 1
        logger.info("Removed '%s' from slot %d", title, slot_id)

    def clear(self) -> None:
        """Drop every item the catalog holds."""
        self._slots = [None] * self.capacity
        self._count = 0
        logger.info("Cleared catalog '%s'", self.name)

    def search_by_title(self, title: str) -> CatalogItem | None:
        """Return the first item with exactly this title, or None."""
        slot_id = self._find_slot(title)
        return None if slot_id is None else self._slots[slot_id]

    def list_all(self) -> CatalogView:
        """Snapshots of every live item in storage order."""
        return CatalogView(self)

    # =========================================================================
    # Circulation
    # =========================================================================

    def _require(self, title: str) -> CatalogItem:
        item = self.search_by_title(title)
        if item is None:
            logger.info("Circulation failed - '%s' not found", title)
            raise ItemNotFoundError(title)
        return item

    def check_out_by_title(self, title: str, due_date: str | None = None) -> CirculationResult:
        """
        Check out the first item with this title.

        Args:
            title: Exact title to look up
            due_date: Opaque due date string; empty or None stores "N/A"

        Returns:
            CirculationResult, with success=False if the item refused the checkout

        Raises:
            ItemNotFoundError: If no live item has the title
        """
        item = self._require(title)

        try:
            outcome = item.check_out(due_date)
        except ItemError as e:
            logger.info("Checkout failed - business rule: %s", e)
            return CirculationResult(success=False, title=title, message=str(e), error=e.code)

        if outcome.copies_remaining is not None:
            message = (
                f"Checked out {'another copy of ' if outcome.additional_copy else ''}"
                f"'{title}'. Due date: {outcome.due_date}. "
                f"Remaining copies: {outcome.copies_remaining}"
            )
        else:
            message = f"Checked out '{title}'. Due date: {outcome.due_date}"

        logger.info("Checkout succeeded: %s", message)
        return CirculationResult(success=True, title=title, message=message, checkout=outcome)

    def return_by_title(self, title: str) -> CirculationResult:
        """
        Return the first item with this title.

        Returns:
            CirculationResult, with success=False if the item refused the return

        Raises:
            ItemNotFoundError: If no live item has the title
        """
        item = self._require(title)

        try:
            outcome = item.return_item()
        except ItemError as e:
            logger.info("Return failed - business rule: %s", e)
            return CirculationResult(success=False, title=title, message=str(e), error=e.code)

        message = f"'{title}' returned"
        if outcome.copies_available is not None:
            message += f". Copies available: {outcome.copies_available}"

        logger.info("Return succeeded: %s", message)
        return CirculationResult(success=True, title=title, message=message, returned=outcome)

    # =========================================================================
    # Statistics
    # =========================================================================

    def summary(self) -> CatalogSummary:
        """Aggregate counts over the current contents."""
        by_kind: Counter[str] = Counter()
        checked_out = 0
        book_copies = 0

        for _, item in self.iter_slots():
            by_kind[item.kind] += 1
            if item.checked_out:
                checked_out += 1
            if item.kind == "book":
                book_copies += item.copies

        return CatalogSummary(
            catalog={"name": self.name, "max_items": self.capacity},
            total_items=self._count,
            capacity=self.capacity,
            free_slots=self.free_slots,
            items_by_kind=dict(by_kind),
            checked_out_items=checked_out,
            available_book_copies=book_copies,
        )
