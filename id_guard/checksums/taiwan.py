from __future__ import annotations
from .base import weighted_sum
from ..models import FailureReason

# Taiwan (ROC) National Identification Card number (中華民國國民身分證).
# Format: area letter + sex digit (1 male, 2 female) + 7 digits + check digit.
# The letter expands to its two-digit area value; the 10 leading digits are
# weighted 1, 9, 8, ..., 1 and the full sum including the check digit must
# be a multiple of 10.
AREA_CODES: dict[str, int] = {
    "A": 10, "B": 11, "C": 12, "D": 13, "E": 14, "F": 15, "G": 16, "H": 17,
    "I": 34, "J": 18, "K": 19, "L": 20, "M": 21, "N": 22, "O": 35, "P": 23,
    "Q": 24, "R": 25, "S": 26, "T": 27, "U": 28, "V": 29, "W": 32, "X": 30,
    "Y": 31, "Z": 33,
}
WEIGHTS = (1, 9, 8, 7, 6, 5, 4, 3, 2, 1)
CHECK_DIGITS = "0987654321"
MODULUS = 10


def _expand(body: str) -> str:
    return f"{AREA_CODES[body[0]]:02d}{body[1:]}"


def check_character(body: str) -> str:
    """Return the check digit for a 9-char body such as "A12345678"."""
    return CHECK_DIGITS[weighted_sum(_expand(body), WEIGHTS) % MODULUS]


def validate(candidate: str) -> FailureReason | None:
    if check_character(candidate[:9]) != candidate[9]:
        return FailureReason.CHECKSUM_MISMATCH
    return None
