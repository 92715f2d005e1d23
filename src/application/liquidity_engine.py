"""Facade exposing liquidity operations to the presentation layer.

Every operation works against an explicit :class:`LiquiditySession` and
returns an :class:`OperationOutcome`; ``LiquidityError`` failures become
failed outcomes naming the operation, so a single failure never ends the
session.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
import weakref

from src.application.ports.change_notifications import (
    LINE_ITEMS_TABLE,
    ChangeNotifierPort,
)
from src.application.ports.liquidity_repository import LiquidityRepositoryPort
from src.application.session import LiquiditySession, OperationOutcome
from src.application.use_cases.add_line_item import AddLineItemUseCase
from src.application.use_cases.auto_populate_line_items import SeedResult
from src.application.use_cases.create_week import CreateWeekUseCase
from src.application.use_cases.delete_line_item import DeleteLineItemUseCase
from src.application.use_cases.ensure_current_week import (
    EnsureCurrentWeekUseCase,
)
from src.application.use_cases.get_liquidity_view import (
    GetLiquidityViewUseCase,
)
from src.application.use_cases.get_monthly_payment_days import (
    GetMonthlyPaymentDaysUseCase,
)
from src.application.use_cases.get_weeks import GetWeeksUseCase
from src.application.use_cases.record_line_item_payment import (
    MarkLineItemDoneUseCase,
    RecordActualAmountUseCase,
)
from src.application.use_cases.update_line_item import UpdateLineItemUseCase
from src.application.use_cases.update_week import UpdateWeekUseCase
from src.domain.errors import InvoiceSyncError, LiquidityError
from src.domain.models import (
    LineItemUpdate,
    LiquidityLineItem,
    LiquidityView,
    LiquidityWeek,
    WeekUpdate,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LiquidityUseCases:
    """Use cases composed by the engine."""

    ensure_current_week: EnsureCurrentWeekUseCase
    create_week: CreateWeekUseCase
    get_weeks: GetWeeksUseCase
    update_week: UpdateWeekUseCase
    add_line_item: AddLineItemUseCase
    update_line_item: UpdateLineItemUseCase
    mark_done: MarkLineItemDoneUseCase
    record_actual: RecordActualAmountUseCase
    delete_line_item: DeleteLineItemUseCase
    get_view: GetLiquidityViewUseCase
    get_monthly_payment_days: GetMonthlyPaymentDaysUseCase


class LiquidityEngine:
    """Run liquidity operations on behalf of a dashboard session."""

    def __init__(
        self,
        use_cases: LiquidityUseCases,
        repository: LiquidityRepositoryPort,
        notifier: ChangeNotifierPort,
        logger=None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the engine.

        Args:
            use_cases: Use cases backing each operation.
            repository: Port used to re-read line items on change events.
            notifier: Port delivering line item change events.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Source of the current instant.
        """
        self._use_cases = use_cases
        self._repository = repository
        self._notifier = notifier
        self._logger = logger or get_app_logger()
        self._clock = clock

    def load(self, session: LiquiditySession) -> OperationOutcome:
        """Run the initial load chain, one step after the other.

        The chain is: ensure the current week, list weeks, load the active
        week's line items, load the current month's payment days. A failed
        step leaves a notice and the remaining steps still run.

        Args:
            session: Session to populate.

        Returns:
            OperationOutcome: Success only when every step succeeded.
        """
        now = self._clock()
        failures = 0
        current_week: LiquidityWeek | None = None

        try:
            ensured = self._use_cases.ensure_current_week.execute(now.date())
            current_week = ensured.week
            if ensured.seed is not None:
                self._report_seed(session, ensured.seed)
        except LiquidityError as exc:
            failures += 1
            self._notice(session, "Error setting up current week", exc)

        if not self._refresh_weeks(session):
            failures += 1

        target = self._pick_active_week(session, current_week)
        if target is not None:
            if not self._activate(session, target):
                failures += 1

        if not self._refresh_month(session, session.month or now.date()):
            failures += 1

        if failures:
            return OperationOutcome(
                ok=False,
                message=f"Dashboard loaded with {failures} failed step(s)",
            )
        return OperationOutcome.success("Dashboard loaded")

    def select_week(
        self,
        session: LiquiditySession,
        week_id: str,
    ) -> OperationOutcome:
        """Make a known week the active one."""
        week = next((w for w in session.weeks if w.id == week_id), None)
        if week is None:
            return OperationOutcome(
                ok=False,
                message=f"Error selecting week: unknown week {week_id}",
            )
        if not self._activate(session, week):
            return OperationOutcome(
                ok=False,
                message=session.notices[-1],
            )
        return OperationOutcome.success("Week selected", week)

    def create_week(
        self,
        session: LiquiditySession,
        week_start_date: date,
        opening_balance: Decimal,
        alert_threshold: Decimal,
        notes: str | None = None,
        created_by: str | None = None,
    ) -> OperationOutcome:
        """Create a week, seed it and make it active."""
        try:
            result = self._use_cases.create_week.execute(
                week_start_date,
                opening_balance,
                alert_threshold,
                notes=notes,
                created_by=created_by,
            )
        except LiquidityError as exc:
            return self._failure("Error creating week", exc)
        self._report_seed(session, result.seed)
        self._refresh_weeks(session)
        self._activate(session, result.week)
        return OperationOutcome.success("Week created", result.week)

    def update_week(
        self,
        session: LiquiditySession,
        week_id: str,
        update: WeekUpdate,
    ) -> OperationOutcome:
        """Update a week's opening balance, threshold or notes."""
        try:
            self._use_cases.update_week.execute(week_id, update)
        except LiquidityError as exc:
            return self._failure("Error updating week", exc)
        self._refresh_weeks(session)
        if session.active_week is not None and session.active_week.id == week_id:
            refreshed = next(
                (w for w in session.weeks if w.id == week_id),
                session.active_week,
            )
            session.active_week = refreshed
        return OperationOutcome.success("Week updated")

    def add_line_item(
        self,
        session: LiquiditySession,
        item_type: str,
        description: str,
        expected_amount: Decimal,
        due_date: date | None = None,
        linked_invoice_type: str | None = None,
    ) -> OperationOutcome:
        """Add a manual line item to the active week."""
        week = session.active_week
        if week is None:
            return OperationOutcome(
                ok=False,
                message="Error adding item: no active week",
            )
        try:
            item = self._use_cases.add_line_item.execute(
                week.id,
                item_type,
                description,
                expected_amount,
                due_date=due_date,
                linked_invoice_type=linked_invoice_type,
            )
        except LiquidityError as exc:
            return self._failure("Error adding item", exc)
        self._publish_active(session)
        return OperationOutcome.success("Item added", item)

    def update_line_item(
        self,
        session: LiquiditySession,
        item_id: str,
        update: LineItemUpdate,
    ) -> OperationOutcome:
        """Apply a partial update to a line item of the active week."""
        return self._mutate_item(
            session,
            lambda: self._use_cases.update_line_item.execute(item_id, update),
        )

    def mark_done(
        self,
        session: LiquiditySession,
        item: LiquidityLineItem,
    ) -> OperationOutcome:
        """Settle a line item for its full expected amount today."""
        today = self._clock().date()
        return self._mutate_item(
            session,
            lambda: self._use_cases.mark_done.execute(item, today=today),
        )

    def record_actual(
        self,
        session: LiquiditySession,
        item: LiquidityLineItem,
        amount: Decimal,
        payment_date: date | None = None,
    ) -> OperationOutcome:
        """Record an actual amount; the status follows the amount."""
        resolved_date = payment_date or self._clock().date()
        return self._mutate_item(
            session,
            lambda: self._use_cases.record_actual.execute(
                item,
                amount,
                payment_date=resolved_date,
            ),
        )

    def delete_line_item(
        self,
        session: LiquiditySession,
        item_id: str,
    ) -> OperationOutcome:
        """Delete a line item of the active week."""
        try:
            self._use_cases.delete_line_item.execute(item_id)
        except LiquidityError as exc:
            return self._failure("Error deleting item", exc)
        self._publish_active(session)
        return OperationOutcome.success("Item deleted")

    def load_month(
        self,
        session: LiquiditySession,
        month: date,
    ) -> OperationOutcome:
        """Load the payment calendar of another month."""
        if not self._refresh_month(session, month):
            return OperationOutcome(ok=False, message=session.notices[-1])
        return OperationOutcome.success("Month loaded", session.monthly_days)

    def refresh_line_items(self, session: LiquiditySession) -> bool:
        """Re-read the active week's line items.

        Returns:
            bool: False when the read failed and a notice was recorded.
        """
        week = session.active_week
        if week is None:
            session.line_items = []
            return True
        try:
            session.line_items = self._repository.fetch_line_items(week.id)
        except LiquidityError as exc:
            self._notice(session, "Error fetching items", exc)
            return False
        return True

    def poll_changes(self, session: LiquiditySession) -> OperationOutcome:
        """Pick up changes made by other sessions or processes."""
        try:
            fired = self._notifier.poll()
        except LiquidityError as exc:
            return self._failure("Error fetching items", exc)
        return OperationOutcome.success("Changes checked", fired)

    def view(self, session: LiquiditySession) -> LiquidityView | None:
        """Return totals and alerts of the active week, if any."""
        if session.active_week is None:
            return None
        return self._use_cases.get_view.build(
            session.active_week,
            session.line_items,
            now=self._clock(),
        )

    def close(self, session: LiquiditySession) -> None:
        """Stop listening for changes on behalf of the session."""
        if session.subscription is not None:
            session.subscription.cancel()
            session.subscription = None

    def _mutate_item(
        self,
        session: LiquiditySession,
        action: Callable[[], object],
    ) -> OperationOutcome:
        try:
            action()
        except InvoiceSyncError as exc:
            # The item itself was written before the cascade failed.
            self._publish_active(session)
            return self._failure("Failed to update item", exc)
        except LiquidityError as exc:
            return self._failure("Failed to update item", exc)
        self._publish_active(session)
        return OperationOutcome.success("Item updated")

    def _publish_active(self, session: LiquiditySession) -> None:
        if session.active_week is None:
            return
        try:
            self._notifier.publish(LINE_ITEMS_TABLE, session.active_week.id)
        except LiquidityError as exc:
            self._notice(session, "Error fetching items", exc)

    def _activate(self, session: LiquiditySession, week: LiquidityWeek) -> bool:
        self.close(session)
        session.active_week = week
        session_ref = weakref.ref(session)
        week_id = week.id

        def _changed() -> None:
            live = session_ref()
            if live is not None:
                self._on_line_items_changed(live, week_id)

        try:
            session.subscription = self._notifier.subscribe(
                LINE_ITEMS_TABLE,
                week_id,
                _changed,
                owner=session,
            )
        except LiquidityError as exc:
            self._notice(session, "Error subscribing to changes", exc)
        return self.refresh_line_items(session)

    def _on_line_items_changed(
        self,
        session: LiquiditySession,
        week_id: str,
    ) -> None:
        if session.active_week is None or session.active_week.id != week_id:
            return
        self.refresh_line_items(session)
        if session.month is not None:
            self._refresh_month(session, session.month)

    def _refresh_weeks(self, session: LiquiditySession) -> bool:
        try:
            session.weeks = self._use_cases.get_weeks.execute()
        except LiquidityError as exc:
            session.weeks = []
            self._notice(session, "Error fetching weeks", exc)
            return False
        return True

    def _refresh_month(self, session: LiquiditySession, month: date) -> bool:
        session.month = month
        try:
            session.monthly_days = (
                self._use_cases.get_monthly_payment_days.execute(month)
            )
        except LiquidityError as exc:
            self._notice(session, "Error fetching monthly payments", exc)
            return False
        return True

    @staticmethod
    def _pick_active_week(
        session: LiquiditySession,
        current_week: LiquidityWeek | None,
    ) -> LiquidityWeek | None:
        by_id = {week.id: week for week in session.weeks}
        if session.active_week is not None:
            return by_id.get(session.active_week.id, session.active_week)
        if current_week is not None:
            return by_id.get(current_week.id, current_week)
        return session.weeks[0] if session.weeks else None

    def _report_seed(self, session: LiquiditySession, seed: SeedResult) -> None:
        for error in seed.errors:
            session.notices.append(f"Error adding invoices to week: {error}")

    def _notice(
        self,
        session: LiquiditySession,
        label: str,
        exc: LiquidityError,
    ) -> None:
        message = f"{label}: {exc}"
        self._logger.error(message)
        session.notices.append(message)

    def _failure(self, label: str, exc: LiquidityError) -> OperationOutcome:
        self._logger.error(f"{label}: {exc}")
        return OperationOutcome.failure(label, exc)


__all__ = ["LiquidityEngine", "LiquidityUseCases"]
