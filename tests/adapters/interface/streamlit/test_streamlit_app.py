"""Tests for the Streamlit dashboard helpers."""

from datetime import date
from decimal import Decimal
import sys
import types
from unittest.mock import MagicMock

import pytest

from src.adapters.interface.streamlit import app
from src.application.session import LiquiditySession, OperationOutcome
from src.domain.models import LiquidityLineItem, MonthlyPaymentDay


@pytest.mark.parametrize(
    ("numpy_attrs", "pandas_attrs", "expected_ok", "missing"),
    [
        ({"ndarray": object}, {"Timestamp": object}, True, None),
        ({}, {"Timestamp": object}, False, "numpy"),
        ({"ndarray": object}, {}, False, "pandas"),
    ],
)
def test_check_altair_dependencies(
    monkeypatch,
    numpy_attrs,
    pandas_attrs,
    expected_ok,
    missing,
) -> None:
    """Report which chart dependency is incomplete."""
    monkeypatch.setitem(
        sys.modules,
        "numpy",
        types.SimpleNamespace(**numpy_attrs),
    )
    monkeypatch.setitem(
        sys.modules,
        "pandas",
        types.SimpleNamespace(**pandas_attrs),
    )

    ok, message = app._check_altair_dependencies()

    assert ok is expected_ok
    if missing is None:
        assert message is None
    else:
        assert missing in message


def test_format_currency_handles_missing_values() -> None:
    assert app._format_currency(None, "₹") == "—"
    assert app._format_currency(Decimal("1234.5"), "₹") == "₹1,234.50"


def test_format_delta_signs_positive_values() -> None:
    assert app._format_delta(Decimal("10")) == "+10.00"
    assert app._format_delta(Decimal("-2.5")) == "-2.50"


def test_prepare_monthly_chart_data_keeps_empty_days() -> None:
    days = [
        MonthlyPaymentDay(date(2024, 6, 1), 0, (), Decimal("0")),
        MonthlyPaymentDay(
            date(2024, 6, 2),
            2,
            ("Steel", "Copper"),
            Decimal("1500.25"),
        ),
    ]

    rows = app._prepare_monthly_chart_data(days, "$")

    assert rows == [
        {
            "day": 1,
            "date": "2024-06-01",
            "count": 0,
            "total": 0.0,
            "total_label": "$0.00",
            "descriptions": "—",
        },
        {
            "day": 2,
            "date": "2024-06-02",
            "count": 2,
            "total": 1500.25,
            "total_label": "$1,500.25",
            "descriptions": "Steel, Copper",
        },
    ]


def test_line_item_rows_formats_manual_and_linked_items() -> None:
    items = [
        LiquidityLineItem(
            id="a",
            liquidity_week_id="w",
            item_type="payment",
            description="Invoice INV-1 - Acme",
            expected_amount=Decimal("200"),
            actual_amount=Decimal("200"),
            due_date=date(2024, 6, 14),
            payment_date=date(2024, 6, 13),
            status="completed",
            linked_invoice_id="inv-1",
            linked_invoice_type="supplier",
        ),
        LiquidityLineItem(
            id="b",
            liquidity_week_id="w",
            item_type="collection",
            description="Cash sale",
            expected_amount=Decimal("50"),
        ),
    ]

    rows = app._line_item_rows(items, "$")

    assert rows[0] == {
        "Description": "Invoice INV-1 - Acme",
        "Due": "2024-06-14",
        "Expected": "$200.00",
        "Actual": "$200.00",
        "Paid": "2024-06-13",
        "Status": "completed",
        "Source": "supplier",
    }
    assert rows[1]["Due"] == "—"
    assert rows[1]["Actual"] == "—"
    assert rows[1]["Paid"] == "—"
    assert rows[1]["Source"] == "manual"


def test_get_session_loads_once(monkeypatch) -> None:
    fake_st = types.SimpleNamespace(session_state={})
    monkeypatch.setattr(app, "st", fake_st)
    engine = MagicMock()

    first = app._get_session(engine)
    second = app._get_session(engine)

    assert isinstance(first, LiquiditySession)
    assert first is second
    engine.load.assert_called_once_with(first)


def test_show_outcome_routes_to_success_or_error(monkeypatch) -> None:
    fake_st = MagicMock()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "get_usage_logger", lambda: MagicMock())

    app._show_outcome(OperationOutcome.success("Item added"), "add item")
    app._show_outcome(
        OperationOutcome.failure("Error adding item", RuntimeError("boom")),
        "add item",
    )

    fake_st.success.assert_called_once_with("Item added")
    fake_st.error.assert_called_once_with("Error adding item: boom")


def test_render_notices_drains_session(monkeypatch) -> None:
    fake_st = MagicMock()
    monkeypatch.setattr(app, "st", fake_st)
    session = LiquiditySession()
    session.notices.append("Error fetching weeks: offline")

    app._render_notices(session)

    fake_st.error.assert_called_once_with("Error fetching weeks: offline")
    assert session.notices == []
