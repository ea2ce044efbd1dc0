from __future__ import annotations
from datetime import date
from .base import weighted_sum
from ..models import FailureReason

# Chinese Resident Identity Card number (居民身份证), GB 11643-1999.
# Format: RRRRRR YYYYMMDD SSS C = 6-digit region, birth date, sequence, check char.
# Check char: ISO 7064 MOD 11-2 over the first 17 digits, written as a digit or "X".
WEIGHTS = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)
CHECK_CHARS = "10X98765432"
MODULUS = 11

# First two digits of the region code: provinces, municipalities, SARs
PROVINCES = frozenset({
    "11", "12", "13", "14", "15",
    "21", "22", "23",
    "31", "32", "33", "34", "35", "36", "37",
    "41", "42", "43", "44", "45", "46",
    "50", "51", "52", "53", "54",
    "61", "62", "63", "64", "65",
    "71", "81", "82", "83", "91",
})
_MIN_BIRTH_YEAR = 1900


def check_character(body: str) -> str:
    return CHECK_CHARS[weighted_sum(body, WEIGHTS) % MODULUS]


def birth_date(ric: str) -> date | None:
    try:
        born = date(int(ric[6:10]), int(ric[10:12]), int(ric[12:14]))
    except ValueError:
        return None
    return born if born.year >= _MIN_BIRTH_YEAR else None


def validate(candidate: str) -> FailureReason | None:
    if check_character(candidate[:17]) != candidate[17]:
        return FailureReason.CHECKSUM_MISMATCH
    if candidate[:2] not in PROVINCES or birth_date(candidate) is None:
        return FailureReason.SUBFIELD_INVALID
    return None
