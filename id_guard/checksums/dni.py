from __future__ import annotations
from ..models import FailureReason

# Spanish Documento Nacional de Identidad (DNI): 8 digits + check letter.
# Spanish Número de Identidad de Extranjero (NIE): X/Y/Z + 7 digits + check letter.
# Both take the letter at (number mod 23) in the table below; for the NIE the
# prefix letter stands for a leading digit (X=0, Y=1, Z=2).
LETTERS = "TRWAGMYFPDXBNJZSQVHLCKE"
MODULUS = 23
NIE_PREFIXES = {"X": "0", "Y": "1", "Z": "2"}


def check_letter(number: str) -> str:
    return LETTERS[int(number) % MODULUS]


def dni_check_character(body: str) -> str:
    return check_letter(body)


def nie_check_character(body: str) -> str:
    """Return the check letter for a NIE body such as "Y7654321"."""
    return check_letter(NIE_PREFIXES[body[0]] + body[1:])


def validate_dni(candidate: str) -> FailureReason | None:
    if dni_check_character(candidate[:8]) != candidate[8]:
        return FailureReason.CHECKSUM_MISMATCH
    return None


def validate_nie(candidate: str) -> FailureReason | None:
    if nie_check_character(candidate[:8]) != candidate[8]:
        return FailureReason.CHECKSUM_MISMATCH
    return None
