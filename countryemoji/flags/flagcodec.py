"""
Flag Emoji Codec
----------------

A country flag emoji is a pair of Unicode regional indicator symbols,
one per letter of the alpha-2 code: A is U+1F1E6, Z is U+1F1FF.

The codec is purely syntactic. It encodes any two ASCII letters and decodes
any pair of indicator symbols, whether or not the code is assigned; table
membership is checked separately by the country API.

Examples:
  >>> code_to_flag("JP")
  '🇯🇵'

  >>> flag_to_code("🇨🇱")
  'CL'

  >>> flag_to_code("🎌") is None
  True
"""

from typing import Optional

REGIONAL_INDICATOR_A = 0x1F1E6
REGIONAL_INDICATOR_Z = 0x1F1FF


def _is_ascii_letter_pair(code: str) -> bool:
    return len(code) == 2 and all("A" <= c <= "Z" for c in code)


def code_to_flag(code: str) -> Optional[str]:
    """
    Encode a two-letter code as a flag emoji.

    Leading/trailing whitespace is ignored and the letters are case-insensitive.

    Args:
        code: Two ASCII letters (e.g., "US", "gb")

    Returns:
        Two-codepoint flag string, or None if the input is not two ASCII letters

    Examples:
        >>> code_to_flag("us")
        '🇺🇸'

        >>> code_to_flag("U1") is None
        True
    """
    if not isinstance(code, str):
        return None

    code = code.strip().upper()
    if not _is_ascii_letter_pair(code):
        return None

    return "".join(chr(REGIONAL_INDICATOR_A + ord(c) - ord("A")) for c in code)


def flag_to_code(flag: str) -> Optional[str]:
    """
    Decode a flag emoji back to its two-letter code.

    Args:
        flag: Flag emoji string

    Returns:
        Uppercase two-letter code, or None unless the input is exactly two
        regional indicator symbols

    Examples:
        >>> flag_to_code("🇬🇧")
        'GB'

        >>> flag_to_code("🇬🇧🇺🇸") is None
        True
    """
    if not isinstance(flag, str):
        return None

    flag = flag.strip()
    if len(flag) != 2:
        return None

    letters = []
    for ch in flag:
        cp = ord(ch)
        if not REGIONAL_INDICATOR_A <= cp <= REGIONAL_INDICATOR_Z:
            return None
        letters.append(chr(cp - REGIONAL_INDICATOR_A + ord("A")))

    return "".join(letters)


def is_flag_shape(text: str) -> bool:
    """True when text is exactly two regional indicator symbols."""
    return flag_to_code(text) is not None


__all__ = [
    "REGIONAL_INDICATOR_A",
    "REGIONAL_INDICATOR_Z",
    "code_to_flag",
    "flag_to_code",
    "is_flag_shape",
]
