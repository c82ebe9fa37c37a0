"""Shared text normalization utilities.

This module provides the generic normalization pipeline that the
country name normalizer builds on.
"""

import re
import unicodedata


def normalize_name(
    s: str,
    *,
    allowed_chars: str = r"a-z0-9\s\-",
) -> str:
    r"""Generic normalization for matching.

    Transformations:
      1. Unicode normalization (NFKD) and ASCII transliteration
      2. Lowercase
      3. Replace every character outside allowed_chars with a space
      4. Collapse whitespace

    Args:
        s: Raw text to normalize
        allowed_chars: Regex character class for allowed characters (default: alphanumeric, space, hyphen)

    Returns:
        Normalized string for matching

    Examples:
        >>> normalize_name("Côte d'Ivoire")
        'cote d ivoire'

        >>> normalize_name("Korea, Republic of", allowed_chars=r"a-z0-9\s,")
        'korea, republic of'

        >>> normalize_name("  Guinea-Bissau  ")
        'guinea-bissau'
    """
    if not s:
        return ""

    # Unicode normalization and ASCII conversion
    s = unicodedata.normalize("NFKD", s)
    s = s.encode("ascii", "ignore").decode("ascii")

    s = s.lower()

    # Remove punctuation except allowed characters
    s = re.sub(rf"[^{allowed_chars}]", " ", s)

    # Collapse whitespace
    s = re.sub(r"\s+", " ", s).strip()

    return s


def normalize_quotes(s: str) -> str:
    """Normalize various quote types to standard ASCII quotes.

    Args:
        s: Text with Unicode quotes

    Returns:
        Text with normalized quotes

    Examples:
        >>> normalize_quotes("Côte d’Ivoire")
        "Côte d'Ivoire"

        >>> normalize_quotes("“UK”")
        '"UK"'
    """
    s = s.replace("‘", "'").replace("’", "'").replace("ʼ", "'")
    s = s.replace("“", '"').replace("”", '"')
    return s


__all__ = [
    "normalize_name",
    "normalize_quotes",
]
