"""id-guard: shape and checksum validation of national identity numbers."""
from .exceptions import IdGuardException, RegistryError, UnknownCountryError
from .models import (
    Algorithm,
    CountryKey,
    CountryProfile,
    CountrySummary,
    FailureReason,
    ValidationVerdict,
)
from .registry import DEFAULT_REGISTRY, CountryRegistry
from .shape import match_shape
from .validator import IdValidator, list_supported_countries, validate, validate_all

__all__ = [
    "Algorithm",
    "CountryKey",
    "CountryProfile",
    "CountrySummary",
    "FailureReason",
    "ValidationVerdict",
    "CountryRegistry",
    "DEFAULT_REGISTRY",
    "IdValidator",
    "IdGuardException",
    "RegistryError",
    "UnknownCountryError",
    "match_shape",
    "validate",
    "validate_all",
    "list_supported_countries",
]
