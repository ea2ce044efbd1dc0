from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastapi import Depends, FastAPI, HTTPException, Request, Security, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from pydantic import BaseModel, Field

from id_guard import CountryKey, IdValidator, UnknownCountryError, ValidationVerdict

logger = logging.getLogger(__name__)

# ── Auth / API key ───────────────────────────────────────────────────────────

_API_KEY = os.getenv("API_KEY")
_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(key: Annotated[str | None, Security(_api_key_header)]) -> None:
    if not _API_KEY:
        return  # no API_KEY configured, auth disabled
    if key == _API_KEY:
        return
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key",
    )


# ── Pydantic models (JSON API) ───────────────────────────────────────────────


class ValidateRequest(BaseModel):
    candidate: str
    country: CountryKey | None = None
    countries: list[CountryKey] | None = None


class BatchValidateRequest(BaseModel):
    candidates: list[str] = Field(max_length=10_000)
    country: CountryKey | None = None
    countries: list[CountryKey] | None = None


class VerdictOut(BaseModel):
    candidate: str
    country_key: str | None
    shape_matched: bool
    checksum_valid: bool
    failure_reason: str | None
    confidence: float


class CountryOut(BaseModel):
    key: str
    country: str
    document_name: str
    expected_length: int


def _verdict_out(verdict: ValidationVerdict) -> VerdictOut:
    return VerdictOut(
        candidate=verdict.candidate,
        country_key=verdict.country_key.value if verdict.country_key else None,
        shape_matched=verdict.shape_matched,
        checksum_valid=verdict.checksum_valid,
        failure_reason=verdict.failure_reason.value if verdict.failure_reason else None,
        confidence=verdict.confidence,
    )


# ── Validator singleton ──────────────────────────────────────────────────────

_validator: IdValidator | None = None


@asynccontextmanager
async def lifespan(_: FastAPI):
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    global _validator
    _validator = IdValidator()
    logger.info("id-guard API ready, %d country profiles", len(_validator.registry))
    yield
    _validator = None


def _get_validator(countries: list[CountryKey] | None) -> IdValidator:
    if countries is None:
        assert _validator is not None
        return _validator
    return IdValidator(countries=countries)


# ── FastAPI app ──────────────────────────────────────────────────────────────

app = FastAPI(title="id-guard", lifespan=lifespan)

_CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UnknownCountryError)
async def unknown_country_handler(_: Request, exc: UnknownCountryError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.get("/health")
async def health() -> dict[str, Any]:
    return {"status": "ok"}


@app.get("/countries", response_model=list[CountryOut], dependencies=[Depends(verify_api_key)])
async def countries() -> list[CountryOut]:
    assert _validator is not None
    return [
        CountryOut(
            key=c.key.value,
            country=c.country,
            document_name=c.document_name,
            expected_length=c.expected_length,
        )
        for c in _validator.supported_countries()
    ]


@app.post("/validate", response_model=VerdictOut, dependencies=[Depends(verify_api_key)])
async def validate(request: ValidateRequest) -> VerdictOut:
    verdict = _get_validator(request.countries).validate(request.candidate, request.country)
    return _verdict_out(verdict)


@app.post(
    "/validate/batch",
    response_model=list[VerdictOut],
    dependencies=[Depends(verify_api_key)],
)
async def validate_batch(request: BatchValidateRequest) -> list[VerdictOut]:
    verdicts = _get_validator(request.countries).validate_all(
        request.candidates, request.country
    )
    return [_verdict_out(v) for v in verdicts]
