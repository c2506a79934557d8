"""
Pure helpers the rule pipeline is built from.

Why this file exists
--------------------
Every rule in the pipeline looks at the same *cleaned* IBAN from a different
angle (which characters it contains, which country it claims, what its
MOD 97-10 remainder is). The helpers here compute those facts and nothing else:
they never decide whether an IBAN is valid and never raise.

Design principles
-----------------
- **Pure functions**: input string in, plain value out.
- **Total**: every function accepts any string, including the empty one, and
  returns None where the answer is undefined instead of failing.
"""

from __future__ import annotations

import string
from typing import Dict, Optional

ALLOWED_CHARACTERS = frozenset(string.ascii_uppercase + string.digits)

# ISO 7064 MOD 97-10 character values: 0..9 stay as-is, A..Z -> 10..35.
_CHARACTER_VALUES: Dict[str, str] = {
    **{d: d for d in string.digits},
    **{ch: str(ord(ch) - 55) for ch in string.ascii_uppercase},  # ord('A') == 65 -> 10
}

MOD97_CHUNK = 9


def clean(raw: str) -> str:
    """
    Remove every whitespace character and upper-case the rest.

    Example:
      'fr27 3000\\t3000' -> 'FR2730003000'
    """
    return "".join(raw.split()).upper()


def forbidden_characters(cleaned: str) -> str:
    """
    Return the characters of `cleaned` outside A-Z / 0-9, in their original order.

    Non-ASCII characters are reported verbatim, one per code point
    (e.g. 'FR27🐷' -> '🐷').
    """
    return "".join(ch for ch in cleaned if ch not in ALLOWED_CHARACTERS)


def country_code_of(cleaned: str) -> Optional[str]:
    """The first two characters, or None for anything shorter."""
    if len(cleaned) < 2:
        return None
    return cleaned[:2]


def check_digits_of(cleaned: str) -> Optional[str]:
    """Characters 3-4 (the two check digits), or None below four characters."""
    if len(cleaned) < 4:
        return None
    return cleaned[2:4]


def rearrange(cleaned: str) -> Optional[str]:
    """Move the country code and check digits to the end."""
    if len(cleaned) < 4:
        return None
    return cleaned[4:] + cleaned[:4]


def to_numeric(rearranged: str) -> Optional[str]:
    """
    Expand letters into their two-digit values and return the decimal string.

    Returns None as soon as a character has no MOD 97-10 value.
    """
    chunks = []
    for ch in rearranged:
        value = _CHARACTER_VALUES.get(ch)
        if value is None:
            return None
        chunks.append(value)
    return "".join(chunks)


def mod97(digits: str) -> int:
    """
    Remainder of the (arbitrarily long) decimal string `digits` modulo 97.

    The number is folded in 9-digit chunks, carrying the remainder forward,
    so intermediate values stay small no matter how long the input is.
    """
    rem = 0
    for i in range(0, len(digits), MOD97_CHUNK):
        rem = int(str(rem) + digits[i : i + MOD97_CHUNK]) % 97
    return rem


def checksum_remainder(cleaned: str) -> Optional[int]:
    """
    Compute the ISO 7064 MOD 97-10 remainder of a cleaned IBAN.

    Steps:
      1) Move the first 4 chars to the end.
      2) Replace letters A..Z with 10..35.
      3) Interpret the result as a big integer and compute mod 97.

    A valid IBAN yields remainder 1.

    Returns:
        The remainder, or None if the input is shorter than 4 characters or
        contains a character that has no numeric value.
    """
    rearranged = rearrange(cleaned)
    if rearranged is None:
        return None
    digits = to_numeric(rearranged)
    if digits is None:
        return None
    return mod97(digits)
