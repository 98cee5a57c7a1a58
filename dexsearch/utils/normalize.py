"""ABOUTME: Text normalization utilities for consistent dex lookups.
ABOUTME: Provides to_id for turning free-text names into lookup keys."""

import re
import unicodedata


def to_id(text: str) -> str:
    """Convert a free-text name to the id used as a dex lookup key.

    Handles:
    - Unicode normalization (accents, special chars)
    - Lowercase conversion
    - Removal of everything that isn't a letter or digit

    Args:
        text: Input text, e.g. a move or species name typed by a user.

    Returns:
        Normalized id string.

    Examples:
        >>> to_id("Pikachu")
        'pikachu'
        >>> to_id("Mr. Mime")
        'mrmime'
        >>> to_id("  Farfetch'd  ")
        'farfetchd'
        >>> to_id("Flabébé")
        'flabebe'
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")

    return re.sub(r"[^a-z0-9]", "", text.lower())
