"""Domain models for liquidity weeks and their line items."""

from dataclasses import dataclass, fields
from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import (
    ITEM_TYPE_COLLECTION,
    ITEM_TYPE_PAYMENT,
    STATUS_COMPLETED,
    STATUS_PENDING,
)


@dataclass(frozen=True)
class LiquidityWeek:
    """Weekly cash-flow record anchored to a week start date.

    Attributes:
        id: Row identifier.
        week_start_date: First day of the week (unique).
        opening_balance: Cash available when the week opens, may be negative.
        alert_threshold: Minimum acceptable actual balance; 0 disables it.
        notes: Free-text notes for the week.
        created_by: Reference of the user who created the week.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: str
    week_start_date: date
    opening_balance: Decimal = Decimal("0")
    alert_threshold: Decimal = Decimal("0")
    notes: str | None = None
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class LiquidityLineItem:
    """Expected or actual cash movement within a liquidity week."""

    id: str
    liquidity_week_id: str
    item_type: str
    description: str
    expected_amount: Decimal
    actual_amount: Decimal | None = None
    due_date: date | None = None
    payment_date: date | None = None
    status: str = STATUS_PENDING
    linked_invoice_id: str | None = None
    linked_invoice_type: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_collection(self) -> bool:
        return self.item_type == ITEM_TYPE_COLLECTION

    @property
    def is_payment(self) -> bool:
        return self.item_type == ITEM_TYPE_PAYMENT

    @property
    def is_completed(self) -> bool:
        return self.status == STATUS_COMPLETED


@dataclass(frozen=True)
class NewLineItem:
    """Line item waiting to be inserted."""

    liquidity_week_id: str
    item_type: str
    description: str
    expected_amount: Decimal
    due_date: date | None = None
    status: str = STATUS_PENDING
    linked_invoice_id: str | None = None
    linked_invoice_type: str | None = None


@dataclass(frozen=True)
class LineItemUpdate:
    """Partial update of a line item; None fields are left untouched."""

    actual_amount: Decimal | None = None
    status: str | None = None
    payment_date: date | None = None

    def as_values(self) -> dict:
        """Return only the fields provided by the caller."""
        return _provided_values(self)


@dataclass(frozen=True)
class WeekUpdate:
    """Partial update of a week's top-level fields."""

    opening_balance: Decimal | None = None
    alert_threshold: Decimal | None = None
    notes: str | None = None

    def as_values(self) -> dict:
        """Return only the fields provided by the caller."""
        return _provided_values(self)


def _provided_values(update) -> dict:
    return {
        field.name: getattr(update, field.name)
        for field in fields(update)
        if getattr(update, field.name) is not None
    }


__all__ = [
    "LiquidityWeek",
    "LiquidityLineItem",
    "NewLineItem",
    "LineItemUpdate",
    "WeekUpdate",
]
