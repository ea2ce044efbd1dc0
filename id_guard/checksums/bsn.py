from __future__ import annotations
from .base import weighted_sum
from ..models import FailureReason

# Dutch Burgerservicenummer (BSN): 9 digits, older numbers written with 8.
# 11-proof (elfproef): left-pad to 9 digits, weigh positions 9..2 and the
# last digit with -1; the number is valid iff the sum is a multiple of 11.
WEIGHTS = (9, 8, 7, 6, 5, 4, 3, 2, -1)
MODULUS = 11
LENGTH = 9


def proof_sum(digits: str) -> int:
    return weighted_sum(digits.zfill(LENGTH), WEIGHTS)


def check_character(body: str) -> str:
    """Return the last digit that completes the 11-proof for a 7-8 digit body.

    Raises ValueError when the body's weighted sum is 10 mod 11, for which no
    single check digit exists.
    """
    remainder = weighted_sum(body.zfill(LENGTH - 1), WEIGHTS) % MODULUS
    if remainder == 10:
        raise ValueError(f"no BSN check digit completes {body!r}")
    return str(remainder)


def validate(candidate: str) -> FailureReason | None:
    if proof_sum(candidate) % MODULUS != 0:
        return FailureReason.CHECKSUM_MISMATCH
    # All zeros passes the proof but is only ever a placeholder
    if not candidate.strip("0"):
        return FailureReason.SUBFIELD_INVALID
    return None
