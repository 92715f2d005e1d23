"""SQLAlchemy-backed repository for liquidity weeks and line items."""

from contextlib import contextmanager
from datetime import date, datetime, timezone
from uuid import uuid4

from sqlalchemy import delete, func, insert, select
from sqlalchemy import update as sql_update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.liquidity_repository import LiquidityRepositoryPort
from src.domain.constants import ITEM_TYPE_PAYMENT, STATUS_COMPLETED
from src.domain.errors import (
    DuplicateWeekError,
    LineItemNotFoundError,
    PersistenceError,
    WeekNotFoundError,
)
from src.domain.models import (
    LineItemUpdate,
    LiquidityLineItem,
    LiquidityWeek,
    NewLineItem,
    WeekUpdate,
)
from src.infrastructure.tables import liquidity_line_items, weekly_liquidity
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal


@contextmanager
def _store_errors(action: str):
    """Translate SQLAlchemy failures into ``PersistenceError``."""
    try:
        yield
    except SQLAlchemyError as exc:
        raise PersistenceError(f"{action} failed: {exc}") from exc


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _row_to_week(row) -> LiquidityWeek:
    return LiquidityWeek(
        id=row.id,
        week_start_date=coerce_date(row.week_start_date),
        opening_balance=coerce_decimal(row.opening_balance),
        alert_threshold=coerce_decimal(row.alert_threshold),
        notes=row.notes,
        created_by=row.created_by,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _row_to_line_item(row) -> LiquidityLineItem:
    return LiquidityLineItem(
        id=row.id,
        liquidity_week_id=row.liquidity_week_id,
        item_type=row.item_type,
        description=row.description,
        expected_amount=coerce_decimal(row.expected_amount),
        actual_amount=coerce_optional_decimal(row.actual_amount),
        due_date=coerce_date(row.due_date),
        payment_date=coerce_date(row.payment_date),
        status=row.status,
        linked_invoice_id=row.linked_invoice_id,
        linked_invoice_type=row.linked_invoice_type,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyLiquidityRepository(LiquidityRepositoryPort):
    """Repository backed by SQLAlchemy for the liquidity tables."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the operations engine.
        """
        self._db_port = db_port

    def fetch_weeks(self) -> list[LiquidityWeek]:
        """Return all weeks, most recent week start first."""
        query = select(weekly_liquidity).order_by(
            weekly_liquidity.c.week_start_date.desc()
        )
        with _store_errors("Fetching weeks"):
            with self._engine().connect() as conn:
                rows = conn.execute(query).all()
        return [_row_to_week(row) for row in rows]

    def fetch_week(self, week_id: str) -> LiquidityWeek | None:
        query = select(weekly_liquidity).where(weekly_liquidity.c.id == week_id)
        return self._fetch_one_week(query, f"Fetching week {week_id}")

    def fetch_week_by_start_date(
        self,
        week_start_date: date,
    ) -> LiquidityWeek | None:
        query = select(weekly_liquidity).where(
            weekly_liquidity.c.week_start_date == week_start_date
        )
        return self._fetch_one_week(
            query,
            f"Fetching week starting {week_start_date}",
        )

    def insert_week(
        self,
        week_start_date: date,
        opening_balance,
        alert_threshold,
        notes: str | None = None,
        created_by: str | None = None,
    ) -> LiquidityWeek:
        """Insert a week and return the stored record.

        Raises:
            DuplicateWeekError: If a week already starts on this date.
            PersistenceError: If the insert fails for another reason.
        """
        now = _utcnow()
        values = {
            "id": str(uuid4()),
            "week_start_date": week_start_date,
            "opening_balance": coerce_decimal(opening_balance),
            "alert_threshold": coerce_decimal(alert_threshold),
            "notes": notes,
            "created_by": created_by,
            "created_at": now,
            "updated_at": now,
        }
        try:
            with self._engine().begin() as conn:
                conn.execute(insert(weekly_liquidity).values(**values))
        except IntegrityError as exc:
            # Only the unique start date makes this a duplicate.
            if self.fetch_week_by_start_date(week_start_date) is not None:
                raise DuplicateWeekError(
                    week_start_date,
                    str(exc.orig),
                ) from exc
            raise PersistenceError(f"Creating week failed: {exc}") from exc
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Creating week failed: {exc}") from exc
        return LiquidityWeek(**values)

    def update_week(self, week_id: str, update: WeekUpdate) -> None:
        """Apply a partial update to a week.

        Raises:
            WeekNotFoundError: If no week has this id.
        """
        values = update.as_values()
        if not values:
            return
        statement = (
            sql_update(weekly_liquidity)
            .where(weekly_liquidity.c.id == week_id)
            .values(**values, updated_at=_utcnow())
        )
        with _store_errors(f"Updating week {week_id}"):
            with self._engine().begin() as conn:
                affected = conn.execute(statement).rowcount
        if affected == 0:
            raise WeekNotFoundError(week_id)

    def fetch_line_items(self, week_id: str) -> list[LiquidityLineItem]:
        """Return the week's items, by due date (undated last) then age."""
        query = (
            select(liquidity_line_items)
            .where(liquidity_line_items.c.liquidity_week_id == week_id)
            .order_by(
                liquidity_line_items.c.due_date.asc().nullslast(),
                liquidity_line_items.c.created_at.asc(),
            )
        )
        with _store_errors(f"Fetching line items of week {week_id}"):
            with self._engine().connect() as conn:
                rows = conn.execute(query).all()
        return [_row_to_line_item(row) for row in rows]

    def fetch_line_item(self, item_id: str) -> LiquidityLineItem | None:
        query = select(liquidity_line_items).where(
            liquidity_line_items.c.id == item_id
        )
        with _store_errors(f"Fetching line item {item_id}"):
            with self._engine().connect() as conn:
                row = conn.execute(query).one_or_none()
        return _row_to_line_item(row) if row is not None else None

    def insert_line_items(
        self,
        items: list[NewLineItem],
    ) -> list[LiquidityLineItem]:
        """Insert line items in a single transaction.

        Args:
            items: Items to insert; an empty list is a no-op.

        Returns:
            list[LiquidityLineItem]: The stored items, in input order.
        """
        if not items:
            return []
        now = _utcnow()
        created = [
            LiquidityLineItem(
                id=str(uuid4()),
                liquidity_week_id=item.liquidity_week_id,
                item_type=item.item_type,
                description=item.description,
                expected_amount=coerce_decimal(item.expected_amount),
                due_date=item.due_date,
                status=item.status,
                linked_invoice_id=item.linked_invoice_id,
                linked_invoice_type=item.linked_invoice_type,
                created_at=now,
                updated_at=now,
            )
            for item in items
        ]
        payload = [
            {
                "id": item.id,
                "liquidity_week_id": item.liquidity_week_id,
                "item_type": item.item_type,
                "description": item.description,
                "expected_amount": item.expected_amount,
                "actual_amount": None,
                "due_date": item.due_date,
                "payment_date": None,
                "status": item.status,
                "linked_invoice_id": item.linked_invoice_id,
                "linked_invoice_type": item.linked_invoice_type,
                "created_at": item.created_at,
                "updated_at": item.updated_at,
            }
            for item in created
        ]
        with _store_errors(f"Inserting {len(payload)} line items"):
            with self._engine().begin() as conn:
                conn.execute(insert(liquidity_line_items), payload)
        return created

    def update_line_item(self, item_id: str, update: LineItemUpdate) -> None:
        """Apply a partial update to a line item.

        Raises:
            LineItemNotFoundError: If no item has this id.
        """
        values = update.as_values()
        if not values:
            return
        statement = (
            sql_update(liquidity_line_items)
            .where(liquidity_line_items.c.id == item_id)
            .values(**values, updated_at=_utcnow())
        )
        with _store_errors(f"Updating line item {item_id}"):
            with self._engine().begin() as conn:
                affected = conn.execute(statement).rowcount
        if affected == 0:
            raise LineItemNotFoundError(item_id)

    def delete_line_item(self, item_id: str) -> None:
        """Delete a line item.

        Raises:
            LineItemNotFoundError: If no item has this id.
        """
        statement = delete(liquidity_line_items).where(
            liquidity_line_items.c.id == item_id
        )
        with _store_errors(f"Deleting line item {item_id}"):
            with self._engine().begin() as conn:
                affected = conn.execute(statement).rowcount
        if affected == 0:
            raise LineItemNotFoundError(item_id)

    def fetch_open_payment_items(
        self,
        start_date: date,
        end_date: date,
    ) -> list[LiquidityLineItem]:
        """Return non-completed payments of any week due in the range."""
        column = liquidity_line_items.c
        query = (
            select(liquidity_line_items)
            .where(column.item_type == ITEM_TYPE_PAYMENT)
            .where(column.status != STATUS_COMPLETED)
            .where(column.due_date >= start_date)
            .where(column.due_date <= end_date)
            .order_by(column.due_date.asc(), column.created_at.asc())
        )
        with _store_errors("Fetching open payments"):
            with self._engine().connect() as conn:
                rows = conn.execute(query).all()
        return [_row_to_line_item(row) for row in rows]

    def fetch_line_items_fingerprint(self, week_id: str) -> tuple:
        """Return the item count and latest update time of a week."""
        column = liquidity_line_items.c
        query = select(
            func.count(column.id),
            func.max(column.updated_at),
        ).where(column.liquidity_week_id == week_id)
        with _store_errors(f"Fingerprinting line items of week {week_id}"):
            with self._engine().connect() as conn:
                count, latest = conn.execute(query).one()
        return (count, latest)

    def _fetch_one_week(self, query, action: str) -> LiquidityWeek | None:
        with _store_errors(action):
            with self._engine().connect() as conn:
                row = conn.execute(query).one_or_none()
        return _row_to_week(row) if row is not None else None

    def _engine(self):
        return self._db_port.get_liquidity_engine()


__all__ = ["SqlAlchemyLiquidityRepository"]
