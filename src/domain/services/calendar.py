"""Calendar helpers for weekly and monthly liquidity views."""

import calendar
from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal

from src.domain.models import LiquidityLineItem, MonthlyPaymentDay


def week_start_for(day: date) -> date:
    """Return the Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def month_bounds(month: date) -> tuple[date, date]:
    """Return the first and last calendar day of the month of ``month``."""
    _, last_day = calendar.monthrange(month.year, month.month)
    return (
        date(month.year, month.month, 1),
        date(month.year, month.month, last_day),
    )


def build_monthly_payment_days(
    month: date,
    payment_items: Iterable[LiquidityLineItem],
) -> list[MonthlyPaymentDay]:
    """Group open payment items by due day for every day of a month.

    Items outside the month, without a due date, completed, or of the
    collection type are ignored.

    Args:
        month: Any date within the month to render.
        payment_items: Candidate payment line items.

    Returns:
        list[MonthlyPaymentDay]: One entry per calendar day, in order.
    """
    first_day, last_day = month_bounds(month)
    descriptions: dict[date, list[str]] = {}
    totals: dict[date, Decimal] = {}
    for item in payment_items:
        if not item.is_payment or item.is_completed or item.due_date is None:
            continue
        if not first_day <= item.due_date <= last_day:
            continue
        descriptions.setdefault(item.due_date, []).append(item.description)
        totals[item.due_date] = (
            totals.get(item.due_date, Decimal("0")) + item.expected_amount
        )

    days = []
    current = first_day
    while current <= last_day:
        names = descriptions.get(current, [])
        days.append(
            MonthlyPaymentDay(
                date=current,
                count=len(names),
                descriptions=tuple(names),
                total_amount=totals.get(current, Decimal("0")),
            )
        )
        current += timedelta(days=1)
    return days


__all__ = ["week_start_for", "month_bounds", "build_monthly_payment_days"]
