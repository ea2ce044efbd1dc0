from __future__ import annotations
import re
from .models import CountryProfile

# Flags every registry pattern is compiled with: \d and friends stay ASCII-only
PATTERN_FLAGS = re.ASCII


def compile_shape(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, PATTERN_FLAGS)


def match_shape(candidate: str, profile: CountryProfile) -> bool:
    """Return True if the whole candidate has the profile's shape.

    ``fullmatch`` anchors at both ends and keeps no position between calls,
    so a profile's compiled pattern can be shared by any number of callers.
    """
    return profile.pattern.fullmatch(candidate) is not None
