from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import api.main
from api.main import app


@pytest.fixture(scope="module")
def client() -> TestClient:
    with TestClient(app) as c:
        yield c


# ---------------------------------------------------------------------------
# /health, /countries
# ---------------------------------------------------------------------------


def test_health(client: TestClient) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_countries(client: TestClient) -> None:
    r = client.get("/countries")
    assert r.status_code == 200
    data = r.json()
    assert data[0] == {
        "key": "CL_RUT",
        "country": "CL",
        "document_name": "Rol Único Tributario (RUT)",
        "expected_length": 9,
    }
    assert {c["key"] for c in data} >= {"ES_DNI", "NL_BSN", "JP_MY_NUMBER"}


# ---------------------------------------------------------------------------
# /validate
# ---------------------------------------------------------------------------


def test_validate_detects_country(client: TestClient) -> None:
    r = client.post("/validate", json={"candidate": "12345678Z"})
    assert r.status_code == 200
    assert r.json() == {
        "candidate": "12345678Z",
        "country_key": "ES_DNI",
        "shape_matched": True,
        "checksum_valid": True,
        "failure_reason": None,
        "confidence": 1.0,
    }


def test_validate_with_hint(client: TestClient) -> None:
    r = client.post("/validate", json={"candidate": "12345678Z", "country": "ES_NIE"})
    data = r.json()
    assert data["country_key"] == "ES_NIE"
    assert data["failure_reason"] == "ShapeMismatch"
    assert data["confidence"] == 0.0


def test_validate_checksum_mismatch(client: TestClient) -> None:
    r = client.post("/validate", json={"candidate": "10000000-K"})
    data = r.json()
    assert data["country_key"] == "CL_RUT"
    assert data["failure_reason"] == "ChecksumMismatch"
    assert data["confidence"] == 0.6


def test_validate_no_matching_format(client: TestClient) -> None:
    r = client.post("/validate", json={"candidate": "hello"})
    data = r.json()
    assert data["country_key"] is None
    assert data["failure_reason"] == "NoMatchingFormat"


def test_validate_country_filter(client: TestClient) -> None:
    r = client.post("/validate", json={"candidate": "111222333", "countries": ["ES_DNI"]})
    assert r.json()["failure_reason"] == "NoMatchingFormat"


def test_hint_outside_filter_is_404(client: TestClient) -> None:
    r = client.post(
        "/validate",
        json={"candidate": "111222333", "country": "NL_BSN", "countries": ["ES_DNI"]},
    )
    assert r.status_code == 404


def test_unknown_country_value_is_422(client: TestClient) -> None:
    r = client.post("/validate", json={"candidate": "12345678Z", "country": "XX_NOPE"})
    assert r.status_code == 422


# ---------------------------------------------------------------------------
# /validate/batch
# ---------------------------------------------------------------------------


def test_batch_keeps_order(client: TestClient) -> None:
    candidates = ["S1234567D", "nope", "111.444.777-35", "S1234567A"]
    r = client.post("/validate/batch", json={"candidates": candidates})
    assert r.status_code == 200
    data = r.json()
    assert [d["candidate"] for d in data] == candidates
    assert [d["country_key"] for d in data] == ["SG_NRIC", None, "BR_CPF", "SG_NRIC"]
    assert [d["checksum_valid"] for d in data] == [True, False, True, False]


def test_batch_empty(client: TestClient) -> None:
    r = client.post("/validate/batch", json={"candidates": []})
    assert r.status_code == 200
    assert r.json() == []


def test_batch_with_hint(client: TestClient) -> None:
    r = client.post(
        "/validate/batch",
        json={"candidates": ["A123456789", "A123456788"], "country": "TW_NATIONAL_ID"},
    )
    assert [d["failure_reason"] for d in r.json()] == [None, "ChecksumMismatch"]


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------


def test_api_key_required_when_configured(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(api.main, "_API_KEY", "secret")
    assert client.post("/validate", json={"candidate": "12345678Z"}).status_code == 401
    r = client.post(
        "/validate", json={"candidate": "12345678Z"}, headers={"X-API-Key": "secret"}
    )
    assert r.status_code == 200
    # /health stays open
    assert client.get("/health").status_code == 200
