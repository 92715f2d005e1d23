"""Domain services for liquidity balances and alerts."""

from collections.abc import Iterable, Sequence
from datetime import datetime, time, timedelta
from decimal import Decimal

from src.domain.constants import (
    ALERT_CRITICAL,
    ALERT_WARNING,
    DEFAULT_ALERT_WINDOW,
    STATUS_PENDING,
)
from src.domain.models import (
    LiquidityAlert,
    LiquidityLineItem,
    LiquiditySummary,
    LiquidityWeek,
)
from src.utils.decimal_utils import coerce_decimal


ALERT_NEGATIVE_PROJECTION = "negative_projection"
ALERT_BELOW_THRESHOLD = "below_threshold"
ALERT_PAYMENT_DUE_SOON = "payment_due_soon"
ALERT_COLLECTION_OVERDUE = "collection_overdue"


def compute_liquidity_summary(
    opening_balance: Decimal,
    line_items: Iterable[LiquidityLineItem],
) -> LiquiditySummary:
    """Compute expected and actual totals for a week.

    Args:
        opening_balance: Opening balance of the week.
        line_items: Line items belonging to the week.

    Returns:
        LiquiditySummary: Totals per item type; balances are derived.
    """
    expected_collections = Decimal("0")
    scheduled_payments = Decimal("0")
    actual_collections = Decimal("0")
    actual_payments = Decimal("0")
    for item in line_items:
        expected = coerce_decimal(item.expected_amount)
        actual = coerce_decimal(item.actual_amount)
        if item.is_collection:
            expected_collections += expected
            actual_collections += actual
        elif item.is_payment:
            scheduled_payments += expected
            actual_payments += actual
    return LiquiditySummary(
        opening_balance=coerce_decimal(opening_balance),
        expected_collections=expected_collections,
        scheduled_payments=scheduled_payments,
        actual_collections=actual_collections,
        actual_payments=actual_payments,
    )


def compute_liquidity_alerts(
    week: LiquidityWeek,
    summary: LiquiditySummary,
    line_items: Sequence[LiquidityLineItem],
    now: datetime,
    *,
    window: timedelta = DEFAULT_ALERT_WINDOW,
    currency_symbol: str = "",
) -> list[LiquidityAlert]:
    """Evaluate alert rules against the current state of a week.

    Balance alerts come first, then per-item payment and collection
    warnings in line item order.

    Args:
        week: Week whose threshold applies.
        summary: Totals computed for the week.
        line_items: Line items of the week.
        now: Reference instant. Due dates count from their start of day,
            so pending payments due today are not flagged as upcoming.
        window: Look-ahead for upcoming payments, both ends inclusive.
        currency_symbol: Symbol prefixed to amounts in messages.

    Returns:
        list[LiquidityAlert]: Ordered alerts, possibly empty.
    """
    alerts: list[LiquidityAlert] = []
    projected = summary.projected_end_balance
    actual = summary.actual_balance
    threshold = coerce_decimal(week.alert_threshold)

    if projected < 0:
        alerts.append(
            LiquidityAlert(
                level=ALERT_CRITICAL,
                kind=ALERT_NEGATIVE_PROJECTION,
                message=(
                    "Projected end-of-week balance is negative: "
                    f"{format_amount(projected, currency_symbol)}"
                ),
            )
        )
    if threshold > 0 and actual < threshold:
        alerts.append(
            LiquidityAlert(
                level=ALERT_CRITICAL,
                kind=ALERT_BELOW_THRESHOLD,
                message=(
                    f"Actual balance {format_amount(actual, currency_symbol)} "
                    "is below threshold "
                    f"{format_amount(threshold, currency_symbol)}"
                ),
            )
        )

    window_end = now + window
    window_hours = int(window.total_seconds() // 3600)
    for item in line_items:
        if not item.is_payment or item.status != STATUS_PENDING:
            continue
        due = _due_instant(item, now)
        if due is not None and now <= due <= window_end:
            alerts.append(
                LiquidityAlert(
                    level=ALERT_WARNING,
                    kind=ALERT_PAYMENT_DUE_SOON,
                    message=(
                        f'Payment "{item.description}" '
                        f"({format_amount(item.expected_amount, currency_symbol)}) "
                        f"due in next {window_hours} hours"
                    ),
                    line_item_id=item.id,
                )
            )
    for item in line_items:
        if not item.is_collection or item.status != STATUS_PENDING:
            continue
        due = _due_instant(item, now)
        if due is not None and due < now:
            alerts.append(
                LiquidityAlert(
                    level=ALERT_WARNING,
                    kind=ALERT_COLLECTION_OVERDUE,
                    message=(
                        f'Collection "{item.description}" '
                        f"({format_amount(item.expected_amount, currency_symbol)}) "
                        "is overdue"
                    ),
                    line_item_id=item.id,
                )
            )
    return alerts


def format_amount(amount: Decimal, currency_symbol: str = "") -> str:
    """Render an amount for alert messages."""
    return f"{currency_symbol}{coerce_decimal(amount):,.2f}"


def _due_instant(item: LiquidityLineItem, now: datetime) -> datetime | None:
    """Return the start of the due day in the clock's timezone.

    A payment due today is already past this instant once the day has
    started, so it falls outside the upcoming-payment window.
    """
    if item.due_date is None:
        return None
    return datetime.combine(item.due_date, time.min, tzinfo=now.tzinfo)


__all__ = [
    "ALERT_NEGATIVE_PROJECTION",
    "ALERT_BELOW_THRESHOLD",
    "ALERT_PAYMENT_DUE_SOON",
    "ALERT_COLLECTION_OVERDUE",
    "compute_liquidity_summary",
    "compute_liquidity_alerts",
    "format_amount",
]
