"""Domain models for derived liquidity aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.models.liquidity import LiquidityLineItem, LiquidityWeek


@dataclass(frozen=True)
class LiquiditySummary:
    """Expected and actual totals for a liquidity week.

    Attributes:
        opening_balance: Opening balance of the week.
        expected_collections: Sum of expected amounts over collections.
        scheduled_payments: Sum of expected amounts over payments.
        actual_collections: Sum of recorded amounts over collections.
        actual_payments: Sum of recorded amounts over payments.
    """

    opening_balance: Decimal
    expected_collections: Decimal
    scheduled_payments: Decimal
    actual_collections: Decimal
    actual_payments: Decimal

    @property
    def projected_end_balance(self) -> Decimal:
        """Return the opening balance adjusted by expected amounts."""
        return (
            self.opening_balance
            + self.expected_collections
            - self.scheduled_payments
        )

    @property
    def actual_balance(self) -> Decimal:
        """Return the opening balance adjusted by recorded amounts."""
        return (
            self.opening_balance
            + self.actual_collections
            - self.actual_payments
        )

    @property
    def variance(self) -> Decimal:
        """Return actual_balance minus projected_end_balance."""
        return self.actual_balance - self.projected_end_balance


@dataclass(frozen=True)
class LiquidityAlert:
    """Alert derived from the current state of a week.

    Attributes:
        level: Either ``critical`` or ``warning``.
        kind: Machine-readable rule identifier.
        message: Human-readable description.
        line_item_id: Line item that triggered an item-level alert.
    """

    level: str
    kind: str
    message: str
    line_item_id: str | None = None


@dataclass(frozen=True)
class MonthlyPaymentDay:
    """Open supplier payments due on a calendar day."""

    date: date
    count: int
    descriptions: tuple[str, ...]
    total_amount: Decimal


@dataclass(frozen=True)
class LiquidityView:
    """Read-only state of a week for the presentation layer."""

    week: LiquidityWeek
    line_items: tuple[LiquidityLineItem, ...]
    summary: LiquiditySummary
    alerts: tuple[LiquidityAlert, ...]

    @property
    def collections(self) -> tuple[LiquidityLineItem, ...]:
        return tuple(item for item in self.line_items if item.is_collection)

    @property
    def payments(self) -> tuple[LiquidityLineItem, ...]:
        return tuple(item for item in self.line_items if item.is_payment)


__all__ = [
    "LiquiditySummary",
    "LiquidityAlert",
    "MonthlyPaymentDay",
    "LiquidityView",
]
