"""Character, country and checksum helpers used by the rule pipeline."""

from .validators import (
    ALLOWED_CHARACTERS,
    checksum_remainder,
    check_digits_of,
    clean,
    country_code_of,
    forbidden_characters,
)

__all__ = [
    "ALLOWED_CHARACTERS",
    "checksum_remainder",
    "check_digits_of",
    "clean",
    "country_code_of",
    "forbidden_characters",
]
