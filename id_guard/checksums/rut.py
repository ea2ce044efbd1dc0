from __future__ import annotations
from itertools import cycle
from .base import compact, weighted_sum
from ..models import FailureReason

# Chilean Rol Único Tributario / Nacional (RUT/RUN).
# Format: 7-8 body digits (thousands dots optional) + "-" + check char (0-9 or K).
# Weights 2..7 are applied right to left and repeat. The check char is
# 11 - (sum mod 11), with 11 written as "0" and 10 as "K"; indexing by the
# remainder gives the table below.
CHECK_CHARS = "0K987654321"
MODULUS = 11
_WEIGHTS = (2, 3, 4, 5, 6, 7)


def check_character(body: str) -> str:
    """Return the check char for the RUT body digits."""
    total = weighted_sum(body[::-1], cycle(_WEIGHTS))
    return CHECK_CHARS[total % MODULUS]


def validate(candidate: str) -> FailureReason | None:
    clean = compact(candidate).upper()
    if check_character(clean[:-1]) != clean[-1]:
        return FailureReason.CHECKSUM_MISMATCH
    return None
