from __future__ import annotations
from .base import compact, weighted_sum
from ..models import FailureReason

# Brazilian Cadastro de Pessoas Físicas (CPF): 9 digits + 2 check digits.
# Format: XXX.XXX.XXX-XX or 11 plain digits.
# Each check digit is 11 - (sum mod 11), where 10 and 11 both become 0; the
# first weighs 9 digits with 10..2, the second 10 digits with 11..2.
CHECK_DIGITS = "00987654321"
MODULUS = 11


def _check_digit(digits: str) -> str:
    weights = range(len(digits) + 1, 1, -1)
    return CHECK_DIGITS[weighted_sum(digits, weights) % MODULUS]


def check_character(body: str) -> str:
    """Return both check digits for a 9-digit CPF body."""
    first = _check_digit(body)
    return first + _check_digit(body + first)


def validate(candidate: str) -> FailureReason | None:
    digits = compact(candidate)
    if check_character(digits[:9]) != digits[9:]:
        return FailureReason.CHECKSUM_MISMATCH
    # 000.000.000-00, 111.111.111-11, ... pass the arithmetic but are never issued
    if len(set(digits)) == 1:
        return FailureReason.SUBFIELD_INVALID
    return None
