"""
Text utilities for restaurant slugs.

Slugs are lowercase ASCII with words joined by single hyphens,
e.g. "Joe's Diner" -> "joe-s-diner".
"""

import re
import unicodedata

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def generate_slug(name: str) -> str:
    """
    Build a URL slug from a restaurant name.

    Accented letters are folded to ASCII first, so "Café Olé" becomes
    "cafe-ole" rather than "caf-ol".

    Args:
        name: Display name

    Returns:
        Slug, or "" when the name contains no letters or digits
    """
    if not name:
        return ""

    # 1. Fold accents (é -> e) and drop anything non-ASCII
    folded = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")

    # 2. Collapse every run of non-alphanumerics into one hyphen
    slug = _NON_SLUG_CHARS.sub("-", folded.lower())

    # 3. No leading/trailing hyphens
    return slug.strip("-")


def suffixed_slug(base: str, suffix: int) -> str:
    """Collision candidate for `base`: suffix 2 gives "base-2"."""
    return f"{base}-{suffix}"
