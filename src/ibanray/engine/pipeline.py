"""
Runs the validation rules against a cleaned IBAN and collects every violation.

Rules
-----
Each rule is a plain function `(cleaned) -> Optional[IbanViolation]`. They are
kept in `RULES` and always run in that order, all of them: a caller gets the
complete list of problems, not just the first one.

  1) allowed characters   -> ContainsForbiddenCharacters
  2) known country code   -> UnknownCountryCode            (no-op below 2 chars)
  3) country length       -> ExceedsCountryLengthSpecification (any mismatch)
  4) maximum length (34)  -> ExceedsMaximumLength
  5) MOD 97-10 checksum   -> InvalidChecksum

Empty and very short input
--------------------------
Rule 2 ignores input shorter than two characters, so `""` never yields
`UnknownCountryCode`. The checksum rule reports `InvalidChecksum` for input
shorter than four characters (there are no check digits to verify), which keeps
`is_valid("")` False. This applies to two- and three-character input too:
`validate("ZZ")` is `[UnknownCountryCode("ZZ"), InvalidChecksum()]`. The
checksum rule stays silent while forbidden characters are present; rule 1
already reports those.

Lengths are counted in code points (`len`), not grapheme clusters: a flag
emoji made of two regional indicators counts as two characters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable, Iterable, List, Optional

from ..checks.validators import (
    check_digits_of,
    checksum_remainder,
    clean,
    country_code_of,
    forbidden_characters,
)
from ..countries import SupportedCountry, lookup_country
from .formatter import format_iban
from .violations import (
    MAX_IBAN_LENGTH,
    ContainsForbiddenCharacters,
    ExceedsCountryLengthSpecification,
    ExceedsMaximumLength,
    IbanValidatorError,
    IbanViolation,
    InvalidChecksum,
    UnknownCountryCode,
)

logger = logging.getLogger(__name__)

IbanRule = Callable[[str], Optional[IbanViolation]]


# ---- Rules --------------------------------------------------------------------------------

def has_allowed_characters_only(cleaned: str) -> Optional[IbanViolation]:
    forbidden = forbidden_characters(cleaned)
    if forbidden:
        return ContainsForbiddenCharacters(saw=forbidden)
    return None


def has_known_country_code(cleaned: str) -> Optional[IbanViolation]:
    code = country_code_of(cleaned)
    if code is None:
        return None
    if lookup_country(code) is None:
        return UnknownCountryCode(was=code)
    return None


def matches_country_length(cleaned: str) -> Optional[IbanViolation]:
    country = lookup_country(country_code_of(cleaned))
    if country is None:
        return None
    if len(cleaned) != country.expected_length:
        return ExceedsCountryLengthSpecification(expected=country.expected_length, got=len(cleaned))
    return None


def within_maximum_length(cleaned: str) -> Optional[IbanViolation]:
    if len(cleaned) > MAX_IBAN_LENGTH:
        return ExceedsMaximumLength(was=len(cleaned))
    return None


def has_valid_checksum(cleaned: str) -> Optional[IbanViolation]:
    if forbidden_characters(cleaned):
        return None
    remainder = checksum_remainder(cleaned)
    if remainder is None:
        # Fewer than four characters: no check digits at all.
        return InvalidChecksum()
    return None if remainder == 1 else InvalidChecksum()


RULES: List[IbanRule] = [
    has_allowed_characters_only,
    has_known_country_code,
    matches_country_length,
    within_maximum_length,
    has_valid_checksum,
]


# ---- Public API ---------------------------------------------------------------------------

def validate(iban: str) -> List[IbanViolation]:
    """Return every violation of `iban`, in rule order. Empty means valid."""
    cleaned = clean(iban)
    violations = [v for v in (rule(cleaned) for rule in RULES) if v is not None]
    logger.debug("validated iban of length %d: %d violation(s)", len(cleaned), len(violations))
    return violations


def validate_or_raise(iban: str) -> None:
    """Raise `IbanValidatorError` carrying all violations if `iban` is invalid."""
    violations = validate(iban)
    if violations:
        raise IbanValidatorError(violations)


def is_valid(iban: str) -> bool:
    return not validate(iban)


def country_code(iban: str) -> Optional[SupportedCountry]:
    """The supported country `iban` starts with, if any."""
    return lookup_country(country_code_of(clean(iban)))


def check_digits(iban: str) -> Optional[str]:
    return check_digits_of(clean(iban))


# ---- Batch results ------------------------------------------------------------------------

@dataclass
class CheckResult:
    """Outcome of checking one input, as shown by the CLI and reports."""
    raw: str
    cleaned: str
    country: Optional[SupportedCountry]
    violations: List[IbanViolation] = field(default_factory=list)
    formatted: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return not self.violations


def check(iban: str) -> CheckResult:
    violations = validate(iban)
    return CheckResult(
        raw=iban,
        cleaned=clean(iban),
        country=country_code(iban),
        violations=violations,
        formatted=None if violations else format_iban(iban),
    )


def check_many(ibans: Iterable[str]) -> List[CheckResult]:
    results = [check(iban) for iban in ibans]
    invalid = sum(1 for r in results if not r.is_valid)
    logger.info("checked %d iban(s), %d invalid", len(results), invalid)
    return results


# ---- Value object -------------------------------------------------------------------------

@dataclass(frozen=True)
class Iban:
    """
    An IBAN as provided by the caller. Nothing is checked on construction;
    every property is recomputed from `underlying`.
    """
    underlying: str

    def clean(self) -> str:
        return clean(self.underlying)

    @property
    def is_valid(self) -> bool:
        return is_valid(self.underlying)

    @property
    def invalidity_reasons(self) -> List[IbanViolation]:
        return validate(self.underlying)

    @property
    def country(self) -> Optional[SupportedCountry]:
        return country_code(self.underlying)

    @property
    def check_digits(self) -> Optional[str]:
        return check_digits(self.underlying)

    def formatted(self) -> Optional[str]:
        return format_iban(self.underlying)

    def validate_or_raise(self) -> None:
        validate_or_raise(self.underlying)

    def __str__(self) -> str:
        return self.underlying
