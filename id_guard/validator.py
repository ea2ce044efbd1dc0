from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from . import checksums
from .models import (
    CountryKey,
    CountryProfile,
    CountrySummary,
    FailureReason,
    ValidationVerdict,
)
from .registry import DEFAULT_REGISTRY, CountryRegistry
from .shape import match_shape

logger = logging.getLogger(__name__)


def _no_match(candidate: str) -> ValidationVerdict:
    return ValidationVerdict(
        candidate=candidate,
        country_key=None,
        shape_matched=False,
        checksum_valid=False,
        failure_reason=FailureReason.NO_MATCHING_FORMAT,
    )


def _shape_mismatch(candidate: str, profile: CountryProfile) -> ValidationVerdict:
    return ValidationVerdict(
        candidate=candidate,
        country_key=profile.key,
        shape_matched=False,
        checksum_valid=False,
        failure_reason=FailureReason.SHAPE_MISMATCH,
    )


def _run_checksum(candidate: str, profile: CountryProfile) -> ValidationVerdict:
    failure = checksums.evaluate(profile.algorithm, candidate)
    return ValidationVerdict(
        candidate=candidate,
        country_key=profile.key,
        shape_matched=True,
        checksum_valid=failure is None,
        failure_reason=failure,
    )


class IdValidator:
    """Validate candidate tokens against the registered national ID formats.

    Holds no state besides the (immutable) registry, so one instance can be
    shared across threads.
    """

    def __init__(
        self,
        registry: CountryRegistry | None = None,
        countries: Iterable[CountryKey | str] | None = None,
    ) -> None:
        if registry is None:
            registry = DEFAULT_REGISTRY
        if countries is not None:
            registry = registry.subset(countries)
        self._registry = registry

    @property
    def registry(self) -> CountryRegistry:
        return self._registry

    def validate(
        self, candidate: str, hint: CountryKey | str | None = None
    ) -> ValidationVerdict:
        if hint is not None:
            profile = self._registry.lookup(hint)
            if not match_shape(candidate, profile):
                verdict = _shape_mismatch(candidate, profile)
            else:
                verdict = _run_checksum(candidate, profile)
        else:
            # First shape match wins; later profiles are not consulted
            for profile in self._registry:
                if match_shape(candidate, profile):
                    verdict = _run_checksum(candidate, profile)
                    break
            else:
                verdict = _no_match(candidate)

        logger.debug(
            "verdict country=%s shape=%s checksum=%s reason=%s",
            verdict.country_key.value if verdict.country_key else None,
            verdict.shape_matched,
            verdict.checksum_valid,
            verdict.failure_reason.value if verdict.failure_reason else None,
        )
        return verdict

    def validate_all(
        self,
        candidates: Sequence[str],
        hint: CountryKey | str | None = None,
        max_workers: int | None = None,
    ) -> list[ValidationVerdict]:
        """Validate each candidate independently; results keep input order."""
        if max_workers is None or max_workers <= 1 or len(candidates) <= 1:
            return [self.validate(c, hint) for c in candidates]
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(lambda c: self.validate(c, hint), candidates))

    def supported_countries(self) -> list[CountrySummary]:
        return [
            CountrySummary(
                key=p.key,
                country=p.country,
                document_name=p.document_name,
                expected_length=p.expected_length,
            )
            for p in self._registry
        ]


_DEFAULT_VALIDATOR = IdValidator()


def validate(candidate: str, hint: CountryKey | str | None = None) -> ValidationVerdict:
    return _DEFAULT_VALIDATOR.validate(candidate, hint)


def validate_all(
    candidates: Sequence[str],
    hint: CountryKey | str | None = None,
    max_workers: int | None = None,
) -> list[ValidationVerdict]:
    return _DEFAULT_VALIDATOR.validate_all(candidates, hint, max_workers)


def list_supported_countries() -> list[CountrySummary]:
    return _DEFAULT_VALIDATOR.supported_countries()
