from __future__ import annotations
import pytest
from id_guard import CountryKey, FailureReason, IdValidator
from id_guard.checksums import dni


@pytest.fixture(scope="module")
def validator() -> IdValidator:
    return IdValidator()


# ── DNI ───────────────────────────────────────────────────────────────────────

def test_dni_letter_87654321() -> None:
    # 87654321 % 23 = 10 -> "TRWAGMYFPDXBNJZSQVHLCKE"[10] = "X"
    assert 87654321 % 23 == 10
    assert dni.dni_check_character("87654321") == "X"


def test_dni_letter_12345678() -> None:
    assert dni.dni_check_character("12345678") == "Z"


def test_valid_dni(validator: IdValidator) -> None:
    for value in ("12345678Z", "87654321X"):
        verdict = validator.validate(value, CountryKey.ES_DNI)
        assert verdict.checksum_valid, value


def test_dni_wrong_letter(validator: IdValidator) -> None:
    verdict = validator.validate("12345678A", CountryKey.ES_DNI)
    assert verdict.shape_matched
    assert verdict.failure_reason == FailureReason.CHECKSUM_MISMATCH


def test_dni_letter_outside_table(validator: IdValidator) -> None:
    # I, O, U and Ñ never appear in the table; the shape accepts them as letters
    verdict = validator.validate("12345678I", CountryKey.ES_DNI)
    assert verdict.failure_reason == FailureReason.CHECKSUM_MISMATCH


def test_dni_wrong_length(validator: IdValidator) -> None:
    assert validator.validate("1234567Z", CountryKey.ES_DNI).failure_reason == (
        FailureReason.SHAPE_MISMATCH
    )
    assert validator.validate("123456789Z", CountryKey.ES_DNI).failure_reason == (
        FailureReason.SHAPE_MISMATCH
    )


# ── NIE ───────────────────────────────────────────────────────────────────────

def test_nie_prefix_remap_y() -> None:
    # Y -> 1: 17654321 % 23 = 4 -> "G"
    assert 17654321 % 23 == 4
    assert dni.nie_check_character("Y7654321") == "G"


def test_nie_letters() -> None:
    assert dni.nie_check_character("X1234567") == "L"
    assert dni.nie_check_character("Z1234567") == "R"


def test_valid_nie(validator: IdValidator) -> None:
    for value in ("X1234567L", "Y7654321G", "Z1234567R"):
        verdict = validator.validate(value, CountryKey.ES_NIE)
        assert verdict.checksum_valid, value


def test_nie_wrong_letter(validator: IdValidator) -> None:
    verdict = validator.validate("X1234567M", CountryKey.ES_NIE)
    assert verdict.failure_reason == FailureReason.CHECKSUM_MISMATCH


def test_nie_invalid_prefix(validator: IdValidator) -> None:
    verdict = validator.validate("A1234567L", CountryKey.ES_NIE)
    assert verdict.failure_reason == FailureReason.SHAPE_MISMATCH


def test_nie_too_short(validator: IdValidator) -> None:
    verdict = validator.validate("X123456L", CountryKey.ES_NIE)
    assert verdict.failure_reason == FailureReason.SHAPE_MISMATCH


def test_detected_without_hint(validator: IdValidator) -> None:
    assert validator.validate("87654321X").country_key == CountryKey.ES_DNI
    assert validator.validate("Y7654321G").country_key == CountryKey.ES_NIE
