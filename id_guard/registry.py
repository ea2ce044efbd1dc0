"""Country registry: the immutable table binding a country key to its shape and checksum.

Profiles are loaded from id_guard/data/country_profiles.toml in file order.
Every row is checked while loading; a broken table raises RegistryError
before any candidate is validated.
"""

from __future__ import annotations

import logging
import re
import tomllib
from collections.abc import Iterable, Iterator
from pathlib import Path
from types import MappingProxyType

from . import checksums
from .exceptions import RegistryError, UnknownCountryError
from .models import Algorithm, CountryKey, CountryProfile
from .shape import compile_shape, match_shape

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
PROFILES_PATH = _DATA_DIR / "country_profiles.toml"

_REQUIRED_FIELDS = (
    "key",
    "country",
    "document_name",
    "algorithm",
    "expected_length",
    "pattern",
    "example",
)


def _parse_profile(row: dict) -> CountryProfile:
    missing = [f for f in _REQUIRED_FIELDS if f not in row]
    if missing:
        raise RegistryError("profile {!r} lacks field(s): {}", row.get("key"), ", ".join(missing))
    try:
        key = CountryKey(row["key"])
    except ValueError:
        raise RegistryError("unknown country key {!r}", row["key"]) from None
    try:
        algorithm = Algorithm(row["algorithm"])
    except ValueError:
        raise RegistryError("{}: unknown algorithm {!r}", key.value, row["algorithm"]) from None
    try:
        pattern = compile_shape(row["pattern"])
    except re.error as e:
        raise RegistryError("{}: pattern does not compile: {}", key.value, e) from e
    expected_length = row["expected_length"]
    if not isinstance(expected_length, int) or expected_length <= 0:
        raise RegistryError("{}: expected_length must be a positive integer", key.value)

    profile = CountryProfile(
        key=key,
        country=row["country"],
        document_name=row["document_name"],
        pattern=pattern,
        algorithm=algorithm,
        expected_length=expected_length,
        example=row["example"],
    )
    if not match_shape(profile.example, profile):
        raise RegistryError("{}: example does not match its own pattern", key.value)
    failure = checksums.evaluate(algorithm, profile.example)
    if failure is not None:
        raise RegistryError("{}: example fails validation ({})", key.value, failure.value)
    return profile


def _warn_shadowed(profiles: tuple[CountryProfile, ...]) -> None:
    for i, later in enumerate(profiles):
        for earlier in profiles[:i]:
            if match_shape(later.example, earlier):
                logger.warning(
                    "%s shape accepts the %s example; %s is unreachable without a hint "
                    "for such candidates",
                    earlier.key.value,
                    later.key.value,
                    later.key.value,
                )


class CountryRegistry:
    """Read-only, ordered collection of country profiles."""

    def __init__(self, profiles: Iterable[CountryProfile]) -> None:
        checksums.verify_tables()
        self._profiles: tuple[CountryProfile, ...] = tuple(profiles)
        by_key: dict[CountryKey, CountryProfile] = {}
        for profile in self._profiles:
            if profile.key in by_key:
                raise RegistryError("duplicate country key {}", profile.key.value)
            by_key[profile.key] = profile
        self._by_key = MappingProxyType(by_key)
        _warn_shadowed(self._profiles)

    @classmethod
    def from_toml(cls, path: Path = PROFILES_PATH) -> CountryRegistry:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
        registry = cls(_parse_profile(row) for row in data.get("profiles", []))
        logger.info("Loaded %d country profiles from %s", len(registry), path.name)
        return registry

    def lookup(self, key: CountryKey | str) -> CountryProfile:
        try:
            return self._by_key[CountryKey(key)]
        except (ValueError, KeyError):
            raise UnknownCountryError("unknown country key {!r}", getattr(key, "value", key)) from None

    def all_profiles(self) -> tuple[CountryProfile, ...]:
        return self._profiles

    def subset(self, keys: Iterable[CountryKey | str]) -> CountryRegistry:
        """Return a registry restricted to ``keys``, keeping registration order."""
        wanted = {self.lookup(k).key for k in keys}
        return CountryRegistry(p for p in self._profiles if p.key in wanted)

    def __iter__(self) -> Iterator[CountryProfile]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, key: object) -> bool:
        try:
            return CountryKey(key) in self._by_key
        except ValueError:
            return False


DEFAULT_REGISTRY: CountryRegistry = CountryRegistry.from_toml()
