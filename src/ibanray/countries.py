"""
Country registry: supported IBAN countries, their lengths and display masks.

The set of countries is closed. Every member of `SupportedCountry` has an entry
in `_LENGTHS`; masks are derived from the length unless the country has a
conventional grouping of its own (see `_FORMAT_OVERRIDES`).
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

MASK_CHARACTER = "*"
MASK_SEPARATOR = " "
GROUP_SIZE = 4


class SupportedCountry(str, Enum):
    AL = "AL"
    AD = "AD"
    AT = "AT"
    AZ = "AZ"
    BH = "BH"
    BY = "BY"
    BE = "BE"
    BA = "BA"
    BR = "BR"
    BG = "BG"
    CR = "CR"
    HR = "HR"
    CY = "CY"
    CZ = "CZ"
    DK = "DK"
    DO = "DO"
    TL = "TL"
    EE = "EE"
    FO = "FO"
    FI = "FI"
    FR = "FR"
    GE = "GE"
    DE = "DE"
    GI = "GI"
    GR = "GR"
    GL = "GL"
    GT = "GT"
    HU = "HU"
    IS = "IS"
    IE = "IE"
    IL = "IL"
    IT = "IT"
    JO = "JO"
    KZ = "KZ"
    XK = "XK"
    KW = "KW"
    LV = "LV"
    LB = "LB"
    LI = "LI"
    LT = "LT"
    LU = "LU"
    MK = "MK"
    MT = "MT"
    MR = "MR"
    MU = "MU"
    MC = "MC"
    MD = "MD"
    ME = "ME"
    NL = "NL"
    NO = "NO"
    PK = "PK"
    PS = "PS"
    PL = "PL"
    PT = "PT"
    QA = "QA"
    RO = "RO"
    SM = "SM"
    SA = "SA"
    RS = "RS"
    SK = "SK"
    SI = "SI"
    SC = "SC"
    ES = "ES"
    SE = "SE"
    CH = "CH"
    TN = "TN"
    TR = "TR"
    AE = "AE"
    GB = "GB"
    VG = "VG"

    @property
    def expected_length(self) -> int:
        """Total number of characters of a well-formed IBAN for this country."""
        return _LENGTHS[self.value]

    @property
    def expected_format(self) -> str:
        """Display mask: `*` marks a character slot, a space marks a separator."""
        override = _FORMAT_OVERRIDES.get(self.value)
        if override is not None:
            return override
        return grouped_mask(self.expected_length)


# ---- Static tables ------------------------------------------------------------------------

_LENGTHS: Dict[str, int] = {
    "AL": 28, "AD": 24, "AT": 20, "AZ": 28, "BH": 22,
    "BY": 28, "BE": 16, "BA": 20, "BR": 29, "BG": 22,
    "CR": 22, "HR": 21, "CY": 28, "CZ": 24, "DK": 18,
    "DO": 28, "TL": 23, "EE": 20, "FO": 18, "FI": 18,
    "FR": 27, "GE": 22, "DE": 22, "GI": 23, "GR": 27,
    "GL": 18, "GT": 28, "HU": 28, "IS": 26, "IE": 22,
    "IL": 23, "IT": 27, "JO": 30, "KZ": 20, "XK": 20,
    "KW": 30, "LV": 21, "LB": 28, "LI": 21, "LT": 20,
    "LU": 20, "MK": 19, "MT": 31, "MR": 27, "MU": 30,
    "MC": 27, "MD": 24, "ME": 22, "NL": 18, "NO": 15,
    "PK": 24, "PS": 29, "PL": 28, "PT": 25, "QA": 29,
    "RO": 24, "SM": 27, "SA": 24, "RS": 22, "SK": 24,
    "SI": 19, "ES": 24, "SE": 24, "SC": 31, "CH": 21,
    "TN": 24, "TR": 26, "AE": 23, "GB": 22, "VG": 24,
}

# Countries whose printed IBAN is not grouped by four.
_FORMAT_OVERRIDES: Dict[str, str] = {
    "SC": "**** **** ** ** **** **** **** **** ***",
}


# ---- Lookups ------------------------------------------------------------------------------

def grouped_mask(length: int, every: int = GROUP_SIZE) -> str:
    """
    Build the default mask for `length` characters, one separator after every
    `every` slots, read left to right.

    Example:
      grouped_mask(10) -> '**** **** **'
    """
    slots = MASK_CHARACTER * length
    return MASK_SEPARATOR.join(slots[i : i + every] for i in range(0, length, every))


def lookup_country(code: Optional[str]) -> Optional[SupportedCountry]:
    """Resolve a two-letter code to a `SupportedCountry`, or None if unknown."""
    if not code or len(code) < 2:
        return None
    try:
        return SupportedCountry(code)
    except ValueError:
        return None


def expected_length(code: Optional[str]) -> Optional[int]:
    country = lookup_country(code)
    return country.expected_length if country else None


def countries() -> List[SupportedCountry]:
    """All supported countries, in registry order."""
    return list(SupportedCountry)
