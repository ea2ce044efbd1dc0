from __future__ import annotations
from collections.abc import Iterable

# Separators a shape may allow between digit groups
_SEPARATORS = str.maketrans("", "", " .-")


def compact(candidate: str) -> str:
    """Strip group separators (spaces, dots, hyphens) from a shape-matched candidate."""
    return candidate.translate(_SEPARATORS)


def weighted_sum(digits: str, weights: Iterable[int]) -> int:
    return sum(int(d) * w for d, w in zip(digits, weights))
