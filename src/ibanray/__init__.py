"""IBAN validation (ISO 13616 / ISO 7064 MOD 97-10) and display formatting."""

from .checks.validators import clean
from .countries import SupportedCountry, countries, expected_length
from .engine.formatter import format_iban
from .engine.pipeline import (
    CheckResult,
    Iban,
    check,
    check_digits,
    check_many,
    country_code,
    is_valid,
    validate,
    validate_or_raise,
)
from .engine.violations import (
    MAX_IBAN_LENGTH,
    ContainsForbiddenCharacters,
    ExceedsCountryLengthSpecification,
    ExceedsMaximumLength,
    IbanValidatorError,
    IbanViolation,
    InvalidChecksum,
    UnknownCountryCode,
)

__version__ = "0.1.0"

__all__ = [
    "MAX_IBAN_LENGTH",
    "CheckResult",
    "ContainsForbiddenCharacters",
    "ExceedsCountryLengthSpecification",
    "ExceedsMaximumLength",
    "Iban",
    "IbanValidatorError",
    "IbanViolation",
    "InvalidChecksum",
    "SupportedCountry",
    "UnknownCountryCode",
    "check",
    "check_digits",
    "check_many",
    "clean",
    "countries",
    "country_code",
    "expected_length",
    "format_iban",
    "is_valid",
    "validate",
    "validate_or_raise",
]
