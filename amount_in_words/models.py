"""
Pydantic models for invoices and their totals.

Money is always Decimal. Floats are accepted at the boundary and converted
by pydantic, never summed as floats.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ─── Currency Words ─────────────────────────────────────────────────


class CurrencyWords(BaseModel):
    """Unit words spliced around the spelled-out number.

    Only the words are configurable. The grouping rule (crore/lakh/thousand)
    and the number tables are fixed.
    """

    major_unit: str = "Rupees"
    minor_unit: str = "Paise"
    qualifier: str = "Only"
    zero_word: str = "Zero"

    model_config = {"frozen": True}


# ─── Invoice Inputs ─────────────────────────────────────────────────


class LineItem(BaseModel):
    """A spare part (or any billable line) on an invoice."""

    description: str
    quantity: int = Field(default=1, ge=1)
    unit_price: Decimal = Field(ge=0)
    subtotal: Optional[Decimal] = Field(default=None, ge=0)  # Derived when omitted


class SaleInvoice(BaseModel):
    """Over-the-counter sale of spare parts."""

    invoice_number: str
    customer_name: Optional[str] = None
    items: list[LineItem] = Field(default_factory=list)


class ServiceInvoice(BaseModel):
    """Vehicle service: labor plus the parts fitted during the job."""

    invoice_number: str
    customer_name: Optional[str] = None
    vehicle_number: Optional[str] = None
    labor_charges: Decimal = Field(default=Decimal("0"), ge=0)
    parts: list[LineItem] = Field(default_factory=list)


# ─── Invoice Output ─────────────────────────────────────────────────


class InvoiceKind(str, Enum):
    SALE = "sale"
    SERVICE = "service"


class InvoiceTotals(BaseModel):
    """Totals block printed at the foot of an invoice."""

    invoice_number: str
    kind: InvoiceKind
    parts_total: Decimal
    labor_charges: Decimal = Decimal("0.00")
    grand_total: Decimal
    display_total: str  # e.g. "₹1500.50"
    amount_in_words: str
