"""Domain models for invoice rows read from the invoice tables."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class SupplierInvoiceRow:
    """Unpaid supplier invoice used to seed scheduled payments."""

    id: str
    invoice_number: str
    amount: Decimal | None
    due_date: date | None
    supplier_name: str | None
    status: str | None = None


@dataclass(frozen=True)
class CustomerInvoiceRow:
    """Unpaid customer invoice used to seed expected collections."""

    id: str
    invoice_number: str
    amount: Decimal | None
    client_name: str | None
    status: str | None = None


__all__ = ["SupplierInvoiceRow", "CustomerInvoiceRow"]
