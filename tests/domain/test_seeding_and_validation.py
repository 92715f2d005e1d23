"""Tests for invoice seeding, normalization and validation helpers."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.errors import ValidationError
from src.domain.models import CustomerInvoiceRow, SupplierInvoiceRow
from src.domain.policies import is_seedable_invoice_status
from src.domain.services.normalization import (
    normalize_code,
    normalize_counterparty_name,
)
from src.domain.services.seeding import (
    build_customer_line_items,
    build_supplier_line_items,
)
from src.domain.services.validation import (
    validate_choice,
    warn_line_item_anomalies,
)


def test_supplier_invoices_become_pending_payments() -> None:
    invoices = [
        SupplierInvoiceRow(
            id="inv-1",
            invoice_number="A-100",
            amount=Decimal("1500.50"),
            due_date=date(2024, 6, 14),
            supplier_name="Acme Metals",
        ),
        SupplierInvoiceRow(
            id="inv-2",
            invoice_number="A-101",
            amount=None,
            due_date=None,
            supplier_name=None,
        ),
    ]

    items = build_supplier_line_items("w1", invoices)

    assert [item.description for item in items] == [
        "Supplier: Acme Metals — Inv#A-100",
        "Supplier: Unknown — Inv#A-101",
    ]
    assert items[0].item_type == "payment"
    assert items[0].status == "pending"
    assert items[0].expected_amount == Decimal("1500.50")
    assert items[0].due_date == date(2024, 6, 14)
    assert items[0].linked_invoice_id == "inv-1"
    assert items[0].linked_invoice_type == "supplier"
    assert items[1].expected_amount == Decimal("0")
    assert all(item.liquidity_week_id == "w1" for item in items)


def test_customer_invoices_become_undated_collections() -> None:
    invoices = [
        CustomerInvoiceRow(
            id="ci-1",
            invoice_number="S-9",
            amount=Decimal("800"),
            client_name="  Globex ",
        )
    ]

    items = build_customer_line_items("w1", invoices)

    assert items[0].description == "Customer: Globex — Inv#S-9"
    assert items[0].item_type == "collection"
    assert items[0].due_date is None
    assert items[0].linked_invoice_type == "customer"


def test_normalizers() -> None:
    assert normalize_counterparty_name("") == "Unknown"
    assert normalize_counterparty_name("   ") == "Unknown"
    assert normalize_code(" Payment ") == "payment"
    assert normalize_code("") is None


def test_validate_choice_returns_normalized_value() -> None:
    assert validate_choice("status", "Completed", ("completed",)) == "completed"


def test_validate_choice_rejects_unknown_values() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_choice("item_type", "transfer", ("collection", "payment"))

    assert excinfo.value.code == "VALIDATION_ERROR"
    assert excinfo.value.field == "item_type"
    assert "transfer" in str(excinfo.value)


def test_anomalies_are_logged_not_raised() -> None:
    logger = MagicMock()

    warn_line_item_anomalies("collection", Decimal("-5"), "supplier", logger)
    warn_line_item_anomalies("payment", Decimal("5"), "customer", logger)
    warn_line_item_anomalies("payment", Decimal("5"), "supplier", logger)

    assert logger.warning.call_count == 3


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        ("pending", True),
        ("Awaiting_Approval ", True),
        ("approved", False),
        ("paid", False),
        (None, False),
        ("", False),
    ],
)
def test_is_seedable_invoice_status(status, expected) -> None:
    assert is_seedable_invoice_status(status) is expected
