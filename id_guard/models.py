from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum


class CountryKey(str, Enum):
    CL_RUT = "CL_RUT"
    MX_CURP = "MX_CURP"
    CN_RIC = "CN_RIC"
    ES_DNI = "ES_DNI"
    ES_NIE = "ES_NIE"
    NL_BSN = "NL_BSN"
    JP_MY_NUMBER = "JP_MY_NUMBER"
    BR_CPF = "BR_CPF"
    IT_CODICE_FISCALE = "IT_CODICE_FISCALE"
    SG_NRIC = "SG_NRIC"
    TW_NATIONAL_ID = "TW_NATIONAL_ID"
    KR_RRN = "KR_RRN"
    EC_CI = "EC_CI"


class Algorithm(str, Enum):
    """Checksum shapes; each value names exactly one family module."""

    MOD11_CYCLIC = "MOD11_CYCLIC"
    MOD10_POSITIONAL = "MOD10_POSITIONAL"
    MOD11_WEIGHTED_CHAR = "MOD11_WEIGHTED_CHAR"
    MOD23_LETTER = "MOD23_LETTER"
    MOD23_LETTER_PREFIXED = "MOD23_LETTER_PREFIXED"
    MOD11_PROOF = "MOD11_PROOF"
    MOD10_FOLDED = "MOD10_FOLDED"
    MOD11_DUAL = "MOD11_DUAL"
    MOD26_ODD_EVEN = "MOD26_ODD_EVEN"
    MOD11_LETTER = "MOD11_LETTER"
    MOD10_LETTER_PREFIXED = "MOD10_LETTER_PREFIXED"
    MOD11_MOD10 = "MOD11_MOD10"
    MOD10_ALTERNATING = "MOD10_ALTERNATING"


class FailureReason(str, Enum):
    NO_MATCHING_FORMAT = "NoMatchingFormat"
    SHAPE_MISMATCH = "ShapeMismatch"
    CHECKSUM_MISMATCH = "ChecksumMismatch"
    SUBFIELD_INVALID = "SubfieldInvalid"


# Near misses look like an ID but fail arithmetic or a sub-field
_NEAR_MISS = frozenset({FailureReason.CHECKSUM_MISMATCH, FailureReason.SUBFIELD_INVALID})


@dataclass(frozen=True)
class CountryProfile:
    key: CountryKey
    country: str  # ISO 3166-1 alpha-2
    document_name: str
    pattern: re.Pattern[str]
    algorithm: Algorithm
    expected_length: int  # compact length, separators removed
    example: str


@dataclass(frozen=True)
class CountrySummary:
    key: CountryKey
    country: str
    document_name: str
    expected_length: int


@dataclass(frozen=True)
class ValidationVerdict:
    candidate: str
    country_key: CountryKey | None
    shape_matched: bool
    checksum_valid: bool
    failure_reason: FailureReason | None

    @property
    def is_valid(self) -> bool:
        return self.checksum_valid

    @property
    def confidence(self) -> float:
        """1.0 for a valid ID, 0.6 for a near miss, 0.0 when the shape is unknown."""
        if self.checksum_valid:
            return 1.0
        if self.failure_reason in _NEAR_MISS:
            return 0.6
        return 0.0
