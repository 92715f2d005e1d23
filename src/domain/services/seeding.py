"""Build seed line items from outstanding invoices."""

from collections.abc import Iterable

from src.domain.constants import (
    ITEM_TYPE_COLLECTION,
    ITEM_TYPE_PAYMENT,
    LINKED_CUSTOMER,
    LINKED_SUPPLIER,
    STATUS_PENDING,
)
from src.domain.models import (
    CustomerInvoiceRow,
    NewLineItem,
    SupplierInvoiceRow,
)
from src.domain.services.normalization import normalize_counterparty_name
from src.utils.decimal_utils import coerce_decimal


def build_supplier_line_items(
    week_id: str,
    invoices: Iterable[SupplierInvoiceRow],
) -> list[NewLineItem]:
    """Turn unpaid supplier invoices into scheduled payments.

    Args:
        week_id: Week receiving the seeded items.
        invoices: Supplier invoices awaiting payment.

    Returns:
        list[NewLineItem]: One pending payment per invoice.
    """
    return [
        NewLineItem(
            liquidity_week_id=week_id,
            item_type=ITEM_TYPE_PAYMENT,
            description=(
                f"Supplier: {normalize_counterparty_name(invoice.supplier_name)}"
                f" — Inv#{invoice.invoice_number}"
            ),
            expected_amount=coerce_decimal(invoice.amount),
            due_date=invoice.due_date,
            status=STATUS_PENDING,
            linked_invoice_id=invoice.id,
            linked_invoice_type=LINKED_SUPPLIER,
        )
        for invoice in invoices
    ]


def build_customer_line_items(
    week_id: str,
    invoices: Iterable[CustomerInvoiceRow],
) -> list[NewLineItem]:
    """Turn unpaid customer invoices into expected collections.

    Customer invoices carry no due date, so the items have none either.

    Args:
        week_id: Week receiving the seeded items.
        invoices: Customer invoices awaiting collection.

    Returns:
        list[NewLineItem]: One pending collection per invoice.
    """
    return [
        NewLineItem(
            liquidity_week_id=week_id,
            item_type=ITEM_TYPE_COLLECTION,
            description=(
                f"Customer: {normalize_counterparty_name(invoice.client_name)}"
                f" — Inv#{invoice.invoice_number}"
            ),
            expected_amount=coerce_decimal(invoice.amount),
            status=STATUS_PENDING,
            linked_invoice_id=invoice.id,
            linked_invoice_type=LINKED_CUSTOMER,
        )
        for invoice in invoices
    ]


__all__ = ["build_supplier_line_items", "build_customer_line_items"]
