from __future__ import annotations
from datetime import date
from .base import compact, weighted_sum
from ..models import FailureReason

# Korean Resident Registration Number (주민등록번호): YYMMDD-SBBBBBC.
# S encodes century and sex (9/0 1800s, 1/2/5/6 1900s, 3/4/7/8 2000s).
# The first 12 digits are weighted 2..9, 2..5; the check digit is
# (11 - sum mod 11) mod 10, so remainders 0 and 10 both give 1.
WEIGHTS = (2, 3, 4, 5, 6, 7, 8, 9, 2, 3, 4, 5)
MODULUS = 11
CHECK_DIGITS = "10987654321"

_CENTURIES = {
    "9": 1800, "0": 1800,
    "1": 1900, "2": 1900, "5": 1900, "6": 1900,
    "3": 2000, "4": 2000, "7": 2000, "8": 2000,
}


def check_character(body: str) -> str:
    return CHECK_DIGITS[weighted_sum(body, WEIGHTS) % MODULUS]


def birth_date(rrn: str) -> date | None:
    digits = compact(rrn)
    try:
        return date(_CENTURIES[digits[6]] + int(digits[:2]), int(digits[2:4]), int(digits[4:6]))
    except ValueError:
        return None


def validate(candidate: str) -> FailureReason | None:
    digits = compact(candidate)
    if check_character(digits[:12]) != digits[12]:
        return FailureReason.CHECKSUM_MISMATCH
    if birth_date(digits) is None:
        return FailureReason.SUBFIELD_INVALID
    return None
