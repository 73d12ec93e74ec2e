"""
Field validators for albums.

Each validator returns an error message, or an empty string when the
value is acceptable.  ``required`` switches between creation rules
(the field must be present) and partial‑update rules (only values that
are present are checked).  ``None`` counts as the zero value.
"""

from typing import Optional

MIN_TEXT_LENGTH = 2
MAX_TEXT_LENGTH = 100


def _validate_text(label: str, value: Optional[str], required: bool) -> str:
    value = value or ""
    if required and not value:
        return f"{label} is required"
    if value and not MIN_TEXT_LENGTH <= len(value) <= MAX_TEXT_LENGTH:
        return f"{label} must be between {MIN_TEXT_LENGTH} and {MAX_TEXT_LENGTH} characters"
    return ""


def validate_title(title: Optional[str], required: bool) -> str:
    """Validate an album title."""
    return _validate_text("Title", title, required)


def validate_artist(artist: Optional[str], required: bool) -> str:
    """Validate an album artist."""
    return _validate_text("Artist", artist, required)


def validate_price(price: Optional[float], required: bool) -> str:
    """Validate an album price.

    A required price must be greater than zero; otherwise only
    negative prices are rejected.
    """
    price = price or 0.0
    if required and price <= 0:
        return "Price is required and must be greater than 0"
    if price < 0:
        return "Price must be greater than or equal to 0"
    return ""
