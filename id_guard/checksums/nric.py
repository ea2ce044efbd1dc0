from __future__ import annotations
from .base import weighted_sum
from ..models import FailureReason

# Singapore NRIC (citizens/PRs: S, T) and FIN (foreigners: F, G).
# Format: prefix letter + 7 digits + check letter.
# T and G (born/issued from 2000) add 4 to the weighted sum; the check letter
# is looked up by (sum mod 11) in the prefix's own table.
WEIGHTS = (2, 7, 6, 5, 4, 3, 2)
MODULUS = 11
ST_LETTERS = "JZIHGFEDCBA"
FG_LETTERS = "XWUTRQPNMLK"

_PREFIXES: dict[str, tuple[int, str]] = {
    "S": (0, ST_LETTERS),
    "T": (4, ST_LETTERS),
    "F": (0, FG_LETTERS),
    "G": (4, FG_LETTERS),
}


def check_character(body: str) -> str:
    """Return the check letter for a body such as "S1234567"."""
    offset, letters = _PREFIXES[body[0]]
    return letters[(weighted_sum(body[1:8], WEIGHTS) + offset) % MODULUS]


def validate(candidate: str) -> FailureReason | None:
    if check_character(candidate[:8]) != candidate[8]:
        return FailureReason.CHECKSUM_MISMATCH
    return None
