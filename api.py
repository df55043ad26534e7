"""
Italian Numbers — FastAPI Server
================================

RESTful API for converting numbers to Italian words and back.

Endpoints:
    POST /cardinal          Number → cardinal word ("ventitré")
    POST /ordinal           Integer → ordinal word ("ventitreesima")
    POST /decode            Cardinal or ordinal word → integer
    GET  /roman/{number}    Integer → Roman numeral
    GET  /arabic/{roman}    Roman numeral → integer
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from italian_numbers import (
    ItalianNumberError,
    OrdinalOptions,
    __version__,
    arabic_to_roman,
    cardinal,
    ordinal,
    roman_to_arabic,
    words_to_number,
)

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

logging.basicConfig(level=os.getenv("ITALIAN_NUMBERS_LOG_LEVEL", "WARNING").upper())
logger = logging.getLogger(__name__)


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Italian Numbers API",
    description=(
        "Spell numbers out in Italian (cardinal and ordinal, any gender and "
        "number) and read Italian number words back into integers."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class CardinalRequest(BaseModel):
    """Request body for the /cardinal endpoint."""

    value: float | int = Field(
        ...,
        description="Number within ±999,999,999,999.99.",
        json_schema_extra={"example": 1000.05},
    )
    include_decimals: bool = Field(
        default=False,
        description='Append "/" and the two truncated decimal digits.',
    )


class CardinalResponse(BaseModel):
    value: float | int
    word: str


class OrdinalRequest(BaseModel):
    """Request body for the /ordinal endpoint."""

    number: int = Field(..., ge=0, json_schema_extra={"example": 63})
    female: bool = False
    plural: bool = False


class OrdinalResponse(BaseModel):
    number: int
    word: str


class DecodeRequest(BaseModel):
    """Request body for the /decode endpoint."""

    word: str = Field(
        ...,
        min_length=1,
        json_schema_extra={"example": "un milione tredicimila"},
    )


class DecodeResponse(BaseModel):
    word: str
    value: int


class RomanResponse(BaseModel):
    number: int
    roman: str


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict = Field(default_factory=dict)


class HealthResponse(BaseModel):
    status: str
    version: str


# ─── Error Translation ───────────────────────────────────────────────


@app.exception_handler(ItalianNumberError)
async def conversion_error_handler(request: Request, exc: ItalianNumberError) -> JSONResponse:
    """Map every domain error to a 422 with its machine-readable code."""
    logger.info("%s %s rejected: [%s] %s", request.method, request.url.path, exc.code, exc)
    body = ErrorResponse(code=exc.code, message=str(exc), details=exc.details)
    return JSONResponse(status_code=422, content=body.model_dump())


_ERROR_RESPONSES = {422: {"model": ErrorResponse, "description": "Conversion failed"}}


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/cardinal",
    summary="Spell a number as an Italian cardinal",
    tags=["Encoding"],
    responses=_ERROR_RESPONSES,
)
def cardinal_word(request: CardinalRequest) -> CardinalResponse:
    word = cardinal(request.value, request.include_decimals)
    return CardinalResponse(value=request.value, word=word)


@app.post(
    "/ordinal",
    summary="Spell an integer as an Italian ordinal",
    tags=["Encoding"],
    responses=_ERROR_RESPONSES,
)
def ordinal_word(request: OrdinalRequest) -> OrdinalResponse:
    options = OrdinalOptions(female=request.female, plural=request.plural)
    return OrdinalResponse(number=request.number, word=ordinal(request.number, options))


@app.post(
    "/decode",
    summary="Read Italian number words back into an integer",
    tags=["Decoding"],
    responses=_ERROR_RESPONSES,
)
def decode_word(request: DecodeRequest) -> DecodeResponse:
    """Accepts cardinal ("tre milioni e trentatré") and ordinal ("ventitreesime") words."""
    return DecodeResponse(word=request.word, value=words_to_number(request.word))


@app.get(
    "/roman/{number}",
    summary="Convert an integer to a Roman numeral",
    tags=["Roman"],
    responses=_ERROR_RESPONSES,
)
def roman_numeral(number: int) -> RomanResponse:
    return RomanResponse(number=number, roman=arabic_to_roman(number))


@app.get(
    "/arabic/{roman}",
    summary="Convert a Roman numeral to an integer",
    tags=["Roman"],
    responses=_ERROR_RESPONSES,
)
def arabic_number(roman: str) -> RomanResponse:
    return RomanResponse(number=roman_to_arabic(roman), roman=roman)


@app.get("/health", summary="Health check", tags=["System"])
def health_check() -> HealthResponse:
    """Returns service status and version."""
    return HealthResponse(status="healthy", version=__version__)
