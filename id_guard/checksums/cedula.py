from __future__ import annotations
from itertools import cycle
from ..models import FailureReason

# Ecuadorian Cédula de Identidad: 10 digits, PP T NNNNNN C.
# PP is the issuing province (01-24) and T is below 6 for natural persons.
# The first 9 digits are weighted 2, 1, 2, ...; products of 10 or more lose 9.
CHECK_DIGITS = "0987654321"
MODULUS = 10
PROVINCES = range(1, 25)
_WEIGHTS = (2, 1)
_NATURAL_PERSON_LIMIT = 6


def check_character(body: str) -> str:
    total = 0
    for ch, w in zip(body, cycle(_WEIGHTS)):
        product = int(ch) * w
        total += product - 9 if product >= 10 else product
    return CHECK_DIGITS[total % MODULUS]


def validate(candidate: str) -> FailureReason | None:
    if check_character(candidate[:9]) != candidate[9]:
        return FailureReason.CHECKSUM_MISMATCH
    if int(candidate[:2]) not in PROVINCES or int(candidate[2]) >= _NATURAL_PERSON_LIMIT:
        return FailureReason.SUBFIELD_INVALID
    return None
