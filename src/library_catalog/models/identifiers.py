"""
Identifier validation for catalog items.

Only a format check is performed: hyphens are accepted as separators and
the remaining characters must be 10 or 13 digits. No checksum is computed.
"""

from typing import Annotated

from pydantic import AfterValidator

ISBN_SEPARATOR = "-"
VALID_ISBN_LENGTHS = (10, 13)


def is_valid_isbn(candidate: str) -> bool:
    """
    Check whether a string looks like an ISBN-10 or ISBN-13.

    Args:
        candidate: Raw identifier as entered, hyphens allowed

    Returns:
        True if only digits and hyphens are present and the digit count is 10 or 13
    """
    if not isinstance(candidate, str):
        return False

    digits = 0
    for char in candidate:
        if char == ISBN_SEPARATOR:
            continue
        # str.isdigit() also accepts superscripts and other unicode digits
        if not ("0" <= char <= "9"):
            return False
        digits += 1
    return digits in VALID_ISBN_LENGTHS


def _check_optional_isbn(v: str | None) -> str | None:
    """Accept a missing or empty ISBN; otherwise require a valid format."""
    if v and not is_valid_isbn(v):
        raise ValueError("Invalid ISBN format")
    return v


Isbn = Annotated[str | None, AfterValidator(_check_optional_isbn)]
