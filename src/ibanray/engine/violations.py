"""
Violation records produced by the rule pipeline.

Violations are plain, comparable data. The pipeline collects them; only
`IbanValidatorError` is ever raised, and only on request.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, Iterable, List

MAX_IBAN_LENGTH = 34


@dataclass(frozen=True)
class IbanViolation:
    """Base class of every violation; `kind` is a stable tag for serialization."""
    kind: ClassVar[str] = "violation"

    @property
    def message(self) -> str:
        return self.kind

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class InvalidChecksum(IbanViolation):
    kind: ClassVar[str] = "invalid_checksum"

    @property
    def message(self) -> str:
        return "checksum does not match (MOD 97-10 remainder is not 1)"


@dataclass(frozen=True)
class UnknownCountryCode(IbanViolation):
    was: str
    kind: ClassVar[str] = "unknown_country_code"

    @property
    def message(self) -> str:
        return f"unknown country code {self.was!r}"


@dataclass(frozen=True)
class ExceedsMaximumLength(IbanViolation):
    was: int
    kind: ClassVar[str] = "exceeds_maximum_length"

    @property
    def message(self) -> str:
        return f"{self.was} characters exceed the maximum IBAN length of {MAX_IBAN_LENGTH}"


@dataclass(frozen=True)
class ExceedsCountryLengthSpecification(IbanViolation):
    """The length differs from the country's, in either direction."""
    expected: int
    got: int
    kind: ClassVar[str] = "exceeds_country_length_specification"

    @property
    def message(self) -> str:
        return f"expected {self.expected} characters for this country, got {self.got}"


@dataclass(frozen=True)
class ContainsForbiddenCharacters(IbanViolation):
    saw: str
    kind: ClassVar[str] = "contains_forbidden_characters"

    @property
    def message(self) -> str:
        return f"contains forbidden characters {self.saw!r}"


class IbanValidatorError(ValueError):
    """Raised by `validate_or_raise` with every violation found, in rule order."""

    def __init__(self, violations: Iterable[IbanViolation]) -> None:
        self.violations: List[IbanViolation] = list(violations)
        super().__init__("; ".join(v.message for v in self.violations))
