"""Test configuration and fixtures for the Library Catalog engine.

Every test starts from a clean configuration: the global config instance is
reset and any LIBRARY_CATALOG_* variables from the surrounding environment
are removed, so defaults are predictable.
"""

import os
from collections.abc import Generator

import pytest

from library_catalog import Catalog
from library_catalog.config import reset_config
from library_catalog.models import Book, Periodical, PhysicalMedia

# === Configuration Fixtures ===


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate each test from ambient catalog configuration."""
    for key in list(os.environ):
        if key.upper().startswith("LIBRARY_CATALOG_"):
            monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


# === Item Fixtures ===


@pytest.fixture
def dune() -> Book:
    """A book with two copies on the shelf."""
    return Book(title="Dune", author="Herbert", isbn="0441013597", copies=2)


@pytest.fixture
def single_copy_book() -> Book:
    return Book(title="Neuromancer", author="Gibson", isbn="978-0-441-56959-5", copies=1)


@pytest.fixture
def dvd() -> PhysicalMedia:
    return PhysicalMedia(
        title="Blade Runner", author="Ridley Scott", duration_minutes=117, region="2"
    )


@pytest.fixture
def magazine() -> Periodical:
    return Periodical(title="Analog", author="Trevor Quachri", issue_number=9, period="September")


# === Catalog Fixtures ===


@pytest.fixture
def catalog() -> Catalog:
    """An empty catalog with a small fixed capacity."""
    return Catalog(capacity=5, name="test-catalog")


@pytest.fixture
def stocked_catalog(
    catalog: Catalog, dune: Book, dvd: PhysicalMedia, magazine: Periodical
) -> Catalog:
    """A catalog holding one item of each kind, in that order."""
    catalog.add(dune)
    catalog.add(dvd)
    catalog.add(magazine)
    return catalog
