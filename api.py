"""
Amount in Words — FastAPI Server
=================================

Spells invoice totals for the garage app's print views.

Endpoints:
    POST /amount-in-words     Spell a single amount
    POST /invoices/sale       Totals + words for a parts sale
    POST /invoices/service    Totals + words for a service job
    GET  /health              Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from decimal import Decimal

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from amount_in_words import __version__
from amount_in_words.config import currency_words_from_env
from amount_in_words.converter import to_words
from amount_in_words.exceptions import AmountConversionError
from amount_in_words.invoice import sale_totals, service_totals
from amount_in_words.models import (
    CurrencyWords,
    InvoiceTotals,
    SaleInvoice,
    ServiceInvoice,
)

logger = logging.getLogger(__name__)


# ─── Application Lifespan (resolve unit words once) ─────────────────

_currency: CurrencyWords | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Read the unit words from the environment on startup."""
    global _currency  # noqa: PLW0603
    _currency = currency_words_from_env()
    yield
    _currency = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Amount in Words API",
    description=(
        "Spells invoice amounts in English words using the Indian numbering "
        "system (crore, lakh, thousand), with a paise clause."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class WordsRequest(BaseModel):
    """Request body for the /amount-in-words endpoint."""

    amount: Decimal = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Non-negative amount in rupees, at most paise precision.",
        json_schema_extra={"example": 1500.50},
    )


class WordsResponse(BaseModel):
    amount: Decimal
    words: str

    model_config = {"json_schema_extra": {"example": {
        "amount": "1500.50",
        "words": "One Thousand Five Hundred Rupees and Fifty Paise Only",
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str
    major_unit: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_currency() -> CurrencyWords:
    if _currency is None:
        raise HTTPException(status_code=503, detail="Service not initialised")
    return _currency


@app.exception_handler(AmountConversionError)
async def _conversion_error_handler(
    request: Request, exc: AmountConversionError
) -> JSONResponse:
    logger.warning("Rejected amount on %s: %s", request.url.path, exc.message)
    return JSONResponse(
        status_code=400,
        content={"code": exc.code, "message": exc.message, "details": exc.details},
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/amount-in-words",
    summary="Spell an amount in words",
    tags=["Words"],
    responses={
        400: {"description": "Amount outside the convertible range"},
        503: {"description": "Service not yet initialised"},
    },
)
def spell_amount(request: WordsRequest) -> WordsResponse:
    """Return the "Amount in Words" text for a single amount."""
    currency = _get_currency()
    return WordsResponse(
        amount=request.amount,
        words=to_words(request.amount, currency),
    )


@app.post(
    "/invoices/sale",
    summary="Totals for a spare-parts sale",
    tags=["Invoices"],
    responses={
        400: {"description": "Amount outside the convertible range"},
        503: {"description": "Service not yet initialised"},
    },
)
def sale_invoice(invoice: SaleInvoice) -> InvoiceTotals:
    """Sum the line subtotals and spell the grand total."""
    return sale_totals(invoice, _get_currency())


@app.post(
    "/invoices/service",
    summary="Totals for a service job",
    tags=["Invoices"],
    responses={
        400: {"description": "Amount outside the convertible range"},
        503: {"description": "Service not yet initialised"},
    },
)
def service_invoice(invoice: ServiceInvoice) -> InvoiceTotals:
    """Add labor charges to the parts total and spell the grand total."""
    return service_totals(invoice, _get_currency())


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Service not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    currency = _get_currency()
    return HealthResponse(
        status="healthy",
        version=__version__,
        major_unit=currency.major_unit,
    )
