"""
Invoice totals: the caller side of the converter.

Flow:
  ┌──────────────┐
  │ Line items   │   ← explicit subtotal, or quantity × unit price
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │ Parts total  │   (+ labor charges for service jobs)
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │ Grand total  │   ← rounded to paise before anything reads it
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │ ₹ + words    │   ← symbol added here, words from the converter
  └──────────────┘
"""

from __future__ import annotations

import logging
from decimal import Decimal

from .converter import round_paise, to_words
from .models import (
    CurrencyWords,
    InvoiceKind,
    InvoiceTotals,
    LineItem,
    SaleInvoice,
    ServiceInvoice,
)

logger = logging.getLogger(__name__)

RUPEE_SYMBOL = "₹"


def format_rupees(amount: Decimal) -> str:
    """Render an amount the way the invoice prints it: "₹1500.50"."""
    return f"{RUPEE_SYMBOL}{round_paise(amount):.2f}"


def line_subtotal(item: LineItem) -> Decimal:
    """Stored subtotal wins; otherwise quantity × unit price."""
    if item.subtotal is not None:
        return round_paise(item.subtotal)
    return round_paise(item.unit_price * item.quantity)


def _sum_lines(items: list[LineItem]) -> Decimal:
    return round_paise(sum((line_subtotal(i) for i in items), Decimal("0")))


def sale_totals(
    invoice: SaleInvoice, currency: CurrencyWords | None = None
) -> InvoiceTotals:
    """Grand total of a parts sale is the sum of its line subtotals."""
    parts_total = _sum_lines(invoice.items)

    logger.info(
        "Sale %s: %d line(s), total %s",
        invoice.invoice_number,
        len(invoice.items),
        parts_total,
    )

    return InvoiceTotals(
        invoice_number=invoice.invoice_number,
        kind=InvoiceKind.SALE,
        parts_total=parts_total,
        grand_total=parts_total,
        display_total=format_rupees(parts_total),
        amount_in_words=to_words(parts_total, currency),
    )


def service_totals(
    invoice: ServiceInvoice, currency: CurrencyWords | None = None
) -> InvoiceTotals:
    """Grand total of a service job is labor charges plus fitted parts."""
    parts_total = _sum_lines(invoice.parts)
    labor = round_paise(invoice.labor_charges)
    grand_total = round_paise(labor + parts_total)

    logger.info(
        "Service %s: labor %s + parts %s = %s",
        invoice.invoice_number,
        labor,
        parts_total,
        grand_total,
    )

    return InvoiceTotals(
        invoice_number=invoice.invoice_number,
        kind=InvoiceKind.SERVICE,
        parts_total=parts_total,
        labor_charges=labor,
        grand_total=grand_total,
        display_total=format_rupees(grand_total),
        amount_in_words=to_words(grand_total, currency),
    )
