"""Tests for liquidity balances and alert rules."""

from datetime import date, datetime, timedelta
from decimal import Decimal

from src.domain.models import LiquidityLineItem, LiquidityWeek
from src.domain.services.finance import (
    ALERT_BELOW_THRESHOLD,
    ALERT_COLLECTION_OVERDUE,
    ALERT_NEGATIVE_PROJECTION,
    ALERT_PAYMENT_DUE_SOON,
    compute_liquidity_alerts,
    compute_liquidity_summary,
    format_amount,
)


def _week(opening="0", threshold="0") -> LiquidityWeek:
    return LiquidityWeek(
        id="w1",
        week_start_date=date(2024, 6, 10),
        opening_balance=Decimal(opening),
        alert_threshold=Decimal(threshold),
    )


def _item(
    item_id: str,
    item_type: str,
    expected: str,
    actual: str | None = None,
    due_date: date | None = None,
    status: str = "pending",
) -> LiquidityLineItem:
    return LiquidityLineItem(
        id=item_id,
        liquidity_week_id="w1",
        item_type=item_type,
        description=f"{item_type} {item_id}",
        expected_amount=Decimal(expected),
        actual_amount=Decimal(actual) if actual is not None else None,
        due_date=due_date,
        status=status,
    )


def _alerts(week, items, now, **kwargs):
    summary = compute_liquidity_summary(week.opening_balance, items)
    return compute_liquidity_alerts(week, summary, items, now, **kwargs)


def test_summary_without_items_equals_opening_balance() -> None:
    """Both balances equal the opening balance when there are no items."""
    summary = compute_liquidity_summary(Decimal("2500"), [])

    assert summary.projected_end_balance == Decimal("2500")
    assert summary.actual_balance == Decimal("2500")
    assert summary.variance == Decimal("0")


def test_summary_balance_identities() -> None:
    """Expected and actual totals follow the item types."""
    items = [
        _item("c1", "collection", "5000", actual="1000"),
        _item("c2", "collection", "700"),
        _item("p1", "payment", "3000", actual="3000"),
        _item("p2", "payment", "200", actual="50"),
    ]

    summary = compute_liquidity_summary(Decimal("10000"), items)

    assert summary.expected_collections == Decimal("5700")
    assert summary.scheduled_payments == Decimal("3200")
    assert summary.actual_collections == Decimal("1000")
    assert summary.actual_payments == Decimal("3050")
    assert summary.projected_end_balance == Decimal("12500")
    assert summary.actual_balance == Decimal("7950")
    assert summary.variance == (
        summary.actual_balance - summary.projected_end_balance
    )


def test_negative_projection_is_critical() -> None:
    week = _week(opening="100")
    items = [_item("p1", "payment", "250")]

    alerts = _alerts(week, items, datetime(2024, 6, 1), currency_symbol="₹")

    assert alerts[0].level == "critical"
    assert alerts[0].kind == ALERT_NEGATIVE_PROJECTION
    assert alerts[0].message == (
        "Projected end-of-week balance is negative: ₹-150.00"
    )


def test_threshold_alert_uses_strict_comparison() -> None:
    """4000 below 5000 alerts; exactly 5000 does not."""
    now = datetime(2024, 6, 12, 9, 0)
    below = _alerts(_week(opening="4000", threshold="5000"), [], now)
    equal = _alerts(_week(opening="5000", threshold="5000"), [], now)

    assert [alert.kind for alert in below] == [ALERT_BELOW_THRESHOLD]
    assert below[0].level == "critical"
    assert "4,000.00" in below[0].message
    assert "5,000.00" in below[0].message
    assert equal == []


def test_zero_threshold_disables_threshold_alert() -> None:
    alerts = _alerts(
        _week(opening="-10", threshold="0"),
        [],
        datetime(2024, 6, 12),
    )

    assert [alert.kind for alert in alerts] == [ALERT_NEGATIVE_PROJECTION]


def test_payment_due_exactly_at_window_end_alerts() -> None:
    """A due date exactly 48 hours ahead is inside the window."""
    now = datetime(2024, 6, 12, 0, 0)
    items = [_item("p1", "payment", "10", due_date=date(2024, 6, 14))]

    alerts = _alerts(_week(opening="1000"), items, now)

    assert [alert.kind for alert in alerts] == [ALERT_PAYMENT_DUE_SOON]
    assert alerts[0].level == "warning"
    assert alerts[0].line_item_id == "p1"
    assert alerts[0].message == (
        'Payment "payment p1" (10.00) due in next 48 hours'
    )


def test_payment_due_one_minute_past_window_does_not_alert() -> None:
    now = datetime(2024, 6, 11, 23, 59)
    items = [_item("p1", "payment", "10", due_date=date(2024, 6, 14))]

    assert _alerts(_week(opening="1000"), items, now) == []


def test_payment_due_today_alerts_only_at_midnight() -> None:
    """Due dates count from the start of the day."""
    items = [_item("p1", "payment", "10", due_date=date(2024, 6, 12))]

    at_midnight = _alerts(_week(opening="1000"), items, datetime(2024, 6, 12))
    mid_morning = _alerts(
        _week(opening="1000"),
        items,
        datetime(2024, 6, 12, 9, 0),
    )

    assert [alert.kind for alert in at_midnight] == [ALERT_PAYMENT_DUE_SOON]
    assert mid_morning == []


def test_completed_or_partial_payment_never_alerts() -> None:
    now = datetime(2024, 6, 12, 0, 0)
    items = [
        _item(
            "p1",
            "payment",
            "10",
            actual="10",
            due_date=date(2024, 6, 13),
            status="completed",
        ),
        _item(
            "p2",
            "payment",
            "10",
            actual="5",
            due_date=date(2024, 6, 13),
            status="partial",
        ),
    ]

    assert _alerts(_week(opening="1000"), items, now) == []


def test_custom_window_changes_look_ahead() -> None:
    now = datetime(2024, 6, 12, 0, 0)
    items = [_item("p1", "payment", "10", due_date=date(2024, 6, 14))]

    alerts = _alerts(
        _week(opening="1000"),
        items,
        now,
        window=timedelta(hours=24),
    )

    assert alerts == []


def test_overdue_collection_alerts_only_when_strictly_past() -> None:
    now = datetime(2024, 6, 12, 0, 0)
    items = [
        _item("c1", "collection", "50", due_date=date(2024, 6, 11)),
        _item("c2", "collection", "50", due_date=date(2024, 6, 12)),
        _item("c3", "collection", "50"),
    ]

    alerts = _alerts(_week(opening="1000"), items, now)

    assert [(a.kind, a.line_item_id) for a in alerts] == [
        (ALERT_COLLECTION_OVERDUE, "c1")
    ]
    assert alerts[0].message == 'Collection "collection c1" (50.00) is overdue'


def test_alerts_keep_rule_order() -> None:
    now = datetime(2024, 6, 12, 0, 0)
    week = _week(opening="100", threshold="500")
    items = [
        _item("c1", "collection", "50", due_date=date(2024, 6, 10)),
        _item("p1", "payment", "400", due_date=date(2024, 6, 13)),
    ]

    alerts = _alerts(week, items, now)

    assert [alert.kind for alert in alerts] == [
        ALERT_NEGATIVE_PROJECTION,
        ALERT_BELOW_THRESHOLD,
        ALERT_PAYMENT_DUE_SOON,
        ALERT_COLLECTION_OVERDUE,
    ]


def test_format_amount_groups_thousands() -> None:
    assert format_amount(Decimal("1234567.5"), "€") == "€1,234,567.50"
    assert format_amount(None) == "0.00"
