"""
Country Name Normalization Functions
------------------------------------

Canonicalizes country names and free text for comparison. Both the table
names and the query go through the same pipeline, so case, diacritics and
punctuation never decide a match.

Pipeline:
  1. Curly quotes -> ASCII, "&" -> "and"
  2. Periods and apostrophes deleted ("U.S." -> "us", "d'Ivoire" -> "divoire")
  3. NFKD + ASCII transliteration, lowercase, other punctuation -> space
  4. "st" followed by another word -> "saint"
  5. Commas dropped, whitespace collapsed

Comma-reversed names ("Korea, Republic of") also yield the swapped form
("republic of korea") through country_name_variants().

Examples:
  >>> normalize_country_name("Côte d'Ivoire")
  'cote divoire'

  >>> normalize_country_name("St. Kitts & Nevis")
  'saint kitts and nevis'

  >>> country_name_variants("Tanzania, United Republic of")
  ('tanzania united republic of', 'united republic of tanzania')
"""

import re
from typing import Tuple

from countryemoji.utils.normalize import (
    normalize_name as _normalize_name,
    normalize_quotes,
)

_DELETED_PUNCTUATION_RE = re.compile(r"[.']")
# Only "st" followed by a word; a lone "st" stays a code
_SAINT_RE = re.compile(r"\bst\b(?=[\s,]+[a-z0-9])")


def _collapse(s: str) -> str:
    return " ".join(s.replace(",", " ").split())


def _fold(s: str) -> str:
    """Steps 1-4 of the pipeline. Commas survive for the reversal check."""
    if not s:
        return ""

    s = normalize_quotes(s)
    s = s.replace("&", " and ")
    s = _DELETED_PUNCTUATION_RE.sub("", s)

    # Letters, digits, whitespace and the comma marker survive
    s = _normalize_name(s, allowed_chars=r"a-z0-9\s,")

    return _SAINT_RE.sub("saint", s)


def normalize_country_name(s: str) -> str:
    """
    Normalize a country name or free text for matching.

    Idempotent: normalize_country_name(normalize_country_name(s)) equals
    normalize_country_name(s).

    Args:
        s: Raw country name, code or sentence

    Returns:
        Lowercase ASCII string of space-separated tokens

    Examples:
        >>> normalize_country_name("  Holy See (Vatican City State) ")
        'holy see vatican city state'

        >>> normalize_country_name("Guinea-Bissau")
        'guinea bissau'

        >>> normalize_country_name("U.S. Virgin Islands")
        'us virgin islands'
    """
    return _collapse(_fold(s))


def country_name_variants(s: str) -> Tuple[str, ...]:
    """
    Return the normalized forms a name can match under.

    The first element is always normalize_country_name(s). When the text
    contains a comma, it is split on the first comma and the swapped
    "<suffix> <prefix>" form is added.

    Args:
        s: Raw country name or query

    Returns:
        Tuple of one or two distinct normalized strings, or () for empty input

    Examples:
        >>> country_name_variants("Korea, Republic of")
        ('korea republic of', 'republic of korea')

        >>> country_name_variants("Japan")
        ('japan',)

        >>> country_name_variants(" , ")
        ()
    """
    folded = _fold(s)
    primary = _collapse(folded)
    if not primary:
        return ()

    if "," not in folded:
        return (primary,)

    prefix, suffix = folded.split(",", 1)
    swapped = _collapse(f"{suffix} {prefix}")
    if swapped == primary:
        return (primary,)
    return (primary, swapped)


__all__ = [
    "normalize_country_name",
    "country_name_variants",
]
