from __future__ import annotations
from itertools import cycle
from .base import compact
from ..models import FailureReason

# Japanese Individual Number (マイナンバー): 11 base digits + 1 check digit.
# Written as XXXX-XXXX-XXXX, XXXX XXXX XXXX or 12 plain digits.
# Base digits are weighted 1, 2, 1, 2, ...; two-digit products are folded
# into the sum of their digits (the Luhn step) before accumulating.
CHECK_DIGITS = "0987654321"
MODULUS = 10
_WEIGHTS = (1, 2)


def _folded_sum(digits: str) -> int:
    total = 0
    for ch, w in zip(digits, cycle(_WEIGHTS)):
        product = int(ch) * w
        total += product // 10 + product % 10
    return total


def check_character(body: str) -> str:
    return CHECK_DIGITS[_folded_sum(body) % MODULUS]


def validate(candidate: str) -> FailureReason | None:
    digits = compact(candidate)
    if check_character(digits[:11]) != digits[11]:
        return FailureReason.CHECKSUM_MISMATCH
    return None
