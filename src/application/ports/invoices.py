"""Ports for the invoice tables feeding and following the liquidity plan."""

from collections.abc import Iterable
from typing import Protocol

from src.domain.models import CustomerInvoiceRow, SupplierInvoiceRow


class InvoiceSourcePort(Protocol):
    """Port exposing read access to unpaid invoices."""

    def fetch_supplier_invoices(
        self,
        statuses: Iterable[str],
    ) -> list[SupplierInvoiceRow]:
        """Return supplier invoices whose status is in ``statuses``."""

    def fetch_customer_invoices(
        self,
        statuses: Iterable[str],
    ) -> list[CustomerInvoiceRow]:
        """Return customer invoices whose status is in ``statuses``."""


class InvoiceStatusPort(Protocol):
    """Port exposing status writes on the invoice tables."""

    def update_supplier_invoice_status(
        self,
        invoice_id: str,
        status: str,
    ) -> None:
        """Set the status of a supplier invoice."""

    def update_customer_invoice_status(
        self,
        invoice_id: str,
        status: str,
    ) -> None:
        """Set the status of a customer invoice."""


__all__ = ["InvoiceSourcePort", "InvoiceStatusPort"]
