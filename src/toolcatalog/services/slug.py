"""
URL slugs for tool detail pages.

``normalize`` maps any text to the slug alphabet and ``is_valid`` checks the
shape the store accepts; writes are rejected rather than corrected beyond
normalization.
"""
import re
import unicodedata

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
MIN_SLUG_LENGTH = 3

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")


def normalize(text: str | None) -> str:
    """Lowercase, strip accents and collapse everything else into single hyphens.

    >>> normalize("Café COM Leite!!")
    'cafe-com-leite'
    """
    decomposed = unicodedata.normalize("NFD", str(text or "").lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_SLUG_RUN.sub("-", stripped).strip("-")


def is_valid(slug: str | None) -> bool:
    if not slug:
        return False
    return len(slug) >= MIN_SLUG_LENGTH and SLUG_PATTERN.fullmatch(slug) is not None
