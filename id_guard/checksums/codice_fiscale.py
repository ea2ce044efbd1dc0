from __future__ import annotations
import calendar
import string
from ..models import FailureReason

# Italian Codice Fiscale (persone fisiche): 16 chars.
# Format: SSS NNN YY M DD LLLL C = surname, name, birth year, month letter,
# birth day (+40 for women), municipality code, check letter.
# Chars in odd (1-based) positions go through the odd table, even positions
# through the even table; the check letter is A..Z[sum mod 26].
CHECK_LETTERS = string.ascii_uppercase
MODULUS = 26
MONTH_LETTERS = "ABCDEHLMPRST"

_CHARS = string.digits + string.ascii_uppercase
_ODD_VALUES = dict(zip(_CHARS, (
    1, 0, 5, 7, 9, 13, 15, 17, 19, 21,
    1, 0, 5, 7, 9, 13, 15, 17, 19, 21, 2, 4, 18, 20, 11, 3,
    6, 8, 12, 14, 16, 10, 22, 25, 24, 23,
)))
_EVEN_VALUES = dict(zip(_CHARS, (*range(10), *range(26))))
_FEMALE_DAY_OFFSET = 40


def check_character(body: str) -> str:
    total = sum(
        (_ODD_VALUES if i % 2 == 0 else _EVEN_VALUES)[ch] for i, ch in enumerate(body)
    )
    return CHECK_LETTERS[total % MODULUS]


def _birth_day_valid(code: str) -> bool:
    month_letter = code[8]
    if month_letter not in MONTH_LETTERS:
        return False
    month = MONTH_LETTERS.index(month_letter) + 1
    day = int(code[9:11])
    if day > _FEMALE_DAY_OFFSET:
        day -= _FEMALE_DAY_OFFSET
    # The two-digit year is ambiguous; a leap year allows 29 February
    return 1 <= day <= calendar.monthrange(2000, month)[1]


def validate(candidate: str) -> FailureReason | None:
    if check_character(candidate[:15]) != candidate[15]:
        return FailureReason.CHECKSUM_MISMATCH
    if not _birth_day_valid(candidate):
        return FailureReason.SUBFIELD_INVALID
    return None
