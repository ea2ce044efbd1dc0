from __future__ import annotations
import pytest
from id_guard import CountryKey, FailureReason, IdValidator
from id_guard.checksums import nric


@pytest.fixture(scope="module")
def validator() -> IdValidator:
    return IdValidator()


def test_check_character_per_prefix() -> None:
    # 1234567 weighs to 106; 106 % 11 = 7, T/G add 4 -> 110 % 11 = 0
    assert nric.check_character("S1234567") == "D"
    assert nric.check_character("T1234567") == "J"
    assert nric.check_character("F1234567") == "N"
    assert nric.check_character("G1234567") == "X"


def test_valid(validator: IdValidator) -> None:
    for value in ("S1234567D", "T1234567J", "F1234567N", "G1234567X"):
        assert validator.validate(value, CountryKey.SG_NRIC).checksum_valid, value


def test_wrong_letter(validator: IdValidator) -> None:
    verdict = validator.validate("S1234567A", CountryKey.SG_NRIC)
    assert verdict.failure_reason == FailureReason.CHECKSUM_MISMATCH


def test_unknown_prefix(validator: IdValidator) -> None:
    verdict = validator.validate("A1234567D", CountryKey.SG_NRIC)
    assert verdict.failure_reason == FailureReason.SHAPE_MISMATCH


def test_detected_without_hint(validator: IdValidator) -> None:
    verdict = validator.validate("T1234567J")
    assert verdict.country_key == CountryKey.SG_NRIC
    assert verdict.checksum_valid
