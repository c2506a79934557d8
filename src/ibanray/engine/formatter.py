"""
Display formatting: apply a country's mask to an IBAN.
"""

from __future__ import annotations

from typing import List, Optional

from ..checks.validators import clean, country_code_of
from ..countries import MASK_SEPARATOR, lookup_country


def apply_mask(iban: str, mask: str) -> str:
    """
    Emit the characters of `iban`, inserting a space wherever `mask` has one.

    The mask position is the character index plus the separators emitted so
    far. Characters beyond the end of the mask are appended without further
    separators; a shorter input simply stops early.

    Example:
      apply_mask('SC00111122', '**** **** ** ** ...') -> 'SC00 1111 22'
    """
    out: List[str] = []
    passed = 0
    for index, ch in enumerate(iban):
        offset = index + passed
        if offset < len(mask) and mask[offset] == MASK_SEPARATOR:
            passed += 1
            out.append(MASK_SEPARATOR)
        out.append(ch)
    return "".join(out)


def format_iban(iban: str) -> Optional[str]:
    """Format `iban` for display, or None when its country is not supported."""
    cleaned = clean(iban)
    country = lookup_country(country_code_of(cleaned))
    if country is None:
        return None
    return apply_mask(cleaned, country.expected_format)
