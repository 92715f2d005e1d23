"""Port for reading and writing liquidity weeks and line items."""

from datetime import date
from typing import Protocol

from src.domain.models import (
    LineItemUpdate,
    LiquidityLineItem,
    LiquidityWeek,
    NewLineItem,
    WeekUpdate,
)


class LiquidityRepositoryPort(Protocol):
    """Port exposing the liquidity tables of the persistence store.

    Implementations raise ``PersistenceError`` (or a subclass) when the
    store fails.
    """

    def fetch_weeks(self) -> list[LiquidityWeek]:
        """Return all weeks, most recent week start first."""

    def fetch_week(self, week_id: str) -> LiquidityWeek | None:
        """Return the week with this id, or None."""

    def fetch_week_by_start_date(
        self,
        week_start_date: date,
    ) -> LiquidityWeek | None:
        """Return the week starting on this date, or None."""

    def insert_week(
        self,
        week_start_date: date,
        opening_balance,
        alert_threshold,
        notes: str | None = None,
        created_by: str | None = None,
    ) -> LiquidityWeek:
        """Insert a week; raise DuplicateWeekError if the date is taken."""

    def update_week(self, week_id: str, update: WeekUpdate) -> None:
        """Apply a partial update to a week."""

    def fetch_line_items(self, week_id: str) -> list[LiquidityLineItem]:
        """Return the week's line items ordered by due date."""

    def fetch_line_item(self, item_id: str) -> LiquidityLineItem | None:
        """Return the line item with this id, or None."""

    def insert_line_items(
        self,
        items: list[NewLineItem],
    ) -> list[LiquidityLineItem]:
        """Insert line items in a single transaction."""

    def update_line_item(self, item_id: str, update: LineItemUpdate) -> None:
        """Apply a partial update to a line item."""

    def delete_line_item(self, item_id: str) -> None:
        """Delete a line item."""

    def fetch_open_payment_items(
        self,
        start_date: date,
        end_date: date,
    ) -> list[LiquidityLineItem]:
        """Return non-completed payments due within the inclusive range."""

    def fetch_line_items_fingerprint(self, week_id: str) -> tuple:
        """Return a value that changes whenever the week's items change."""


__all__ = ["LiquidityRepositoryPort"]
