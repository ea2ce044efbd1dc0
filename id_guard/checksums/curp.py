"""Mexican Clave Única de Registro de Población (CURP).

Layout (18 chars)::

    HEGG 560427 M VZ RRL 0 4
    |    |      | |  |   | +-- check digit
    |    |      | |  |   +---- homoclave: digit for births before 2000, letter after
    |    |      | |  +-------- first internal consonants of surname(s) and name
    |    |      | +----------- state of birth (NE = born abroad)
    |    |      +------------- sex (H/M)
    |    +-------------------- birth date YYMMDD
    +------------------------- initials

The check digit weighs each of the first 17 chars by its position in the
37-char alphabet (Ñ sits between N and O) times 18 - i. A check digit that
agrees does not make the embedded date, state or consonants plausible, so
those are checked separately and reported as sub-field failures.
"""

from __future__ import annotations
from datetime import date
from ..models import FailureReason

ALPHABET = "0123456789ABCDEFGHIJKLMNÑOPQRSTUVWXYZ"
# (10 - sum mod 10) mod 10, indexed by sum mod 10
CHECK_DIGITS = "0987654321"
MODULUS = 10

STATES = frozenset({
    "AS", "BC", "BS", "CC", "CL", "CM", "CS", "CH", "DF", "DG",
    "GT", "GR", "HG", "JC", "MC", "MN", "MS", "NT", "NL", "OC",
    "PL", "QT", "QR", "SP", "SL", "SR", "TC", "TS", "TL", "VZ",
    "YN", "ZS", "NE",
})
_VOWELS = frozenset("AEIOU")


def check_character(body: str) -> str:
    """Return the check digit for the first 17 CURP chars."""
    total = sum(ALPHABET.index(ch) * (18 - i) for i, ch in enumerate(body))
    return CHECK_DIGITS[total % MODULUS]


def birth_date(curp: str) -> date | None:
    """Decode the embedded birth date, or None if it is not a calendar date."""
    century = 1900 if curp[16].isdigit() else 2000
    try:
        return date(century + int(curp[4:6]), int(curp[6:8]), int(curp[8:10]))
    except ValueError:
        return None


def _subfields_valid(curp: str) -> bool:
    if birth_date(curp) is None:
        return False
    if curp[11:13] not in STATES:
        return False
    return not any(ch in _VOWELS for ch in curp[13:16])


def validate(candidate: str) -> FailureReason | None:
    if check_character(candidate[:17]) != candidate[17]:
        return FailureReason.CHECKSUM_MISMATCH
    if not _subfields_valid(candidate):
        return FailureReason.SUBFIELD_INVALID
    return None
