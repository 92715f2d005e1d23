"""Tests for the LiquidityEngine facade and its session handling."""

from datetime import date, datetime
import gc
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.application.liquidity_engine import LiquidityEngine
from src.application.session import LiquiditySession, OperationOutcome
from src.domain.errors import PersistenceError
from src.domain.models import LineItemUpdate, NewLineItem, WeekUpdate


def _item_by_description(session, description):
    return next(i for i in session.line_items if i.description == description)


def test_end_to_end_week_projection(liquidity_engine) -> None:
    """Opening 10,000 with a collection and a payment settles as expected."""
    session = LiquiditySession()
    liquidity_engine.load(session)
    week_id = session.active_week.id
    liquidity_engine.update_week(
        session,
        week_id,
        WeekUpdate(opening_balance=Decimal("10000")),
    )

    liquidity_engine.add_line_item(
        session,
        "collection",
        "Customer advance",
        Decimal("5000"),
        due_date=date(2024, 6, 15),
    )
    liquidity_engine.add_line_item(
        session,
        "payment",
        "Supplier run",
        Decimal("3000"),
        due_date=date(2024, 6, 13),
    )

    view = liquidity_engine.view(session)
    assert view.summary.projected_end_balance == Decimal("12000")
    assert [alert.kind for alert in view.alerts] == ["payment_due_soon"]
    assert "₹3,000.00" in view.alerts[0].message

    payment = _item_by_description(session, "Supplier run")
    outcome = liquidity_engine.mark_done(session, payment)

    view = liquidity_engine.view(session)
    assert outcome.ok is True
    assert view.summary.actual_balance == Decimal("7000")
    assert view.summary.variance == Decimal("-5000")
    assert view.alerts == ()
    done = _item_by_description(session, "Supplier run")
    assert done.payment_date == date(2024, 6, 12)


def test_load_creates_current_week_and_month(
    liquidity_engine,
    add_supplier_invoice,
) -> None:
    add_supplier_invoice("s1", "A-1", "300", due_date=date(2024, 6, 20))
    session = LiquiditySession()

    outcome = liquidity_engine.load(session)

    assert outcome.ok is True
    assert session.active_week.week_start_date == date(2024, 6, 10)
    assert [week.id for week in session.weeks] == [session.active_week.id]
    assert len(session.line_items) == 1
    assert session.month == date(2024, 6, 12)
    assert len(session.monthly_days) == 30
    assert session.monthly_days[19].count == 1
    assert session.subscription is not None


def test_load_keeps_going_after_a_failed_step(quiet_logger) -> None:
    """A failure records a notice; later steps still run."""
    week = SimpleNamespace(id="w1", week_start_date=date(2024, 6, 10))
    use_cases = MagicMock()
    use_cases.ensure_current_week.execute.return_value = SimpleNamespace(
        week=week,
        created=False,
        seed=None,
    )
    use_cases.get_weeks.execute.side_effect = PersistenceError("timeout")
    use_cases.get_monthly_payment_days.execute.return_value = []
    repository = MagicMock()
    repository.fetch_line_items.return_value = []
    engine = LiquidityEngine(
        use_cases,
        repository,
        MagicMock(),
        logger=quiet_logger,
        clock=lambda: datetime(2024, 6, 12, 9, 0),
    )
    session = LiquiditySession()

    outcome = engine.load(session)

    assert outcome.ok is False
    assert session.notices == ["Error fetching weeks: timeout"]
    assert session.weeks == []
    assert session.active_week is week
    repository.fetch_line_items.assert_called_once_with("w1")
    use_cases.get_monthly_payment_days.execute.assert_called_once()


def test_create_week_becomes_active(liquidity_engine) -> None:
    session = LiquiditySession()
    liquidity_engine.load(session)

    outcome = liquidity_engine.create_week(
        session,
        date(2024, 6, 17),
        Decimal("2500"),
        Decimal("1000"),
        notes="Next week",
    )

    assert outcome.ok is True
    assert outcome.message == "Week created"
    assert session.active_week.week_start_date == date(2024, 6, 17)
    assert [week.week_start_date for week in session.weeks] == [
        date(2024, 6, 17),
        date(2024, 6, 10),
    ]


def test_failures_name_the_operation(liquidity_engine) -> None:
    session = LiquiditySession()
    liquidity_engine.load(session)

    duplicate = liquidity_engine.create_week(
        session,
        date(2024, 6, 10),
        Decimal("0"),
        Decimal("0"),
    )
    invalid = liquidity_engine.update_line_item(
        session,
        "missing",
        LineItemUpdate(status="completed"),
    )
    bad_type = liquidity_engine.add_line_item(
        session,
        "transfer",
        "Move",
        Decimal("1"),
    )

    assert duplicate.ok is False
    assert duplicate.message.startswith("Error creating week: ")
    assert invalid.message == (
        "Failed to update item: Line item not found: missing"
    )
    assert bad_type.message == "Error adding item: Invalid item_type: 'transfer'"


def test_add_line_item_requires_active_week(liquidity_engine) -> None:
    outcome = liquidity_engine.add_line_item(
        LiquiditySession(),
        "payment",
        "Rent",
        Decimal("10"),
    )

    assert outcome == OperationOutcome(
        ok=False,
        message="Error adding item: no active week",
    )


def test_record_actual_and_delete_refresh_items(liquidity_engine) -> None:
    session = LiquiditySession()
    liquidity_engine.load(session)
    liquidity_engine.add_line_item(session, "payment", "Rent", Decimal("800"))
    rent = _item_by_description(session, "Rent")

    liquidity_engine.record_actual(session, rent, Decimal("300"))
    assert _item_by_description(session, "Rent").status == "partial"

    outcome = liquidity_engine.delete_line_item(session, rent.id)
    assert outcome.message == "Item deleted"
    assert session.line_items == []


def test_changes_reach_other_sessions_on_the_same_week(
    liquidity_engine,
) -> None:
    viewer = LiquiditySession()
    editor = LiquiditySession()
    liquidity_engine.load(viewer)
    liquidity_engine.load(editor)

    liquidity_engine.add_line_item(editor, "collection", "Cash sale", Decimal("90"))

    assert [item.description for item in viewer.line_items] == ["Cash sale"]


def test_switching_weeks_moves_the_subscription(
    liquidity_engine,
    liquidity_repository,
    notifier,
) -> None:
    session = LiquiditySession()
    liquidity_engine.load(session)
    current_id = session.active_week.id
    liquidity_engine.create_week(
        session,
        date(2024, 6, 3),
        Decimal("0"),
        Decimal("0"),
    )
    previous_id = session.active_week.id

    liquidity_engine.select_week(session, current_id)

    assert notifier.subscriber_count("liquidity_line_items", previous_id) == 0
    assert notifier.subscriber_count("liquidity_line_items", current_id) == 1
    liquidity_repository.insert_line_items(
        [
            NewLineItem(
                liquidity_week_id=previous_id,
                item_type="payment",
                description="Elsewhere",
                expected_amount=Decimal("1"),
            )
        ]
    )
    notifier.publish("liquidity_line_items", previous_id)
    assert session.line_items == []

    liquidity_engine.close(session)
    assert session.subscription is None


def test_select_unknown_week_fails(liquidity_engine) -> None:
    session = LiquiditySession()
    liquidity_engine.load(session)

    outcome = liquidity_engine.select_week(session, "missing")

    assert outcome.ok is False
    assert "missing" in outcome.message


def test_update_week_refreshes_active_week(liquidity_engine) -> None:
    session = LiquiditySession()
    liquidity_engine.load(session)

    liquidity_engine.update_week(
        session,
        session.active_week.id,
        WeekUpdate(alert_threshold=Decimal("5000"), notes="Tight week"),
    )

    assert session.active_week.alert_threshold == Decimal("5000")
    assert session.active_week.notes == "Tight week"
    view = liquidity_engine.view(session)
    assert [alert.kind for alert in view.alerts] == ["below_threshold"]


def test_load_month_switches_calendar(liquidity_engine) -> None:
    session = LiquiditySession()
    liquidity_engine.load(session)

    outcome = liquidity_engine.load_month(session, date(2024, 2, 1))

    assert outcome.ok is True
    assert len(session.monthly_days) == 29
    assert session.month == date(2024, 2, 1)


def test_pop_notices_clears_them() -> None:
    session = LiquiditySession(notices=["a", "b"])

    assert session.pop_notices() == ["a", "b"]
    assert session.notices == []


def test_discarded_sessions_stop_being_refreshed(
    liquidity_engine,
    liquidity_repository,
    notifier,
    monkeypatch,
) -> None:
    """Sessions dropped without close no longer receive change callbacks."""
    sessions = [LiquiditySession() for _ in range(5)]
    for session in sessions:
        liquidity_engine.load(session)
    week_id = sessions[0].active_week.id
    assert notifier.subscriber_count("liquidity_line_items", week_id) == 5

    kept = sessions[0]
    del sessions, session
    gc.collect()

    fetch = MagicMock(wraps=liquidity_repository.fetch_line_items)
    monkeypatch.setattr(liquidity_repository, "fetch_line_items", fetch)
    liquidity_engine.add_line_item(kept, "payment", "Rent", Decimal("400"))

    assert fetch.call_count == 1
    assert [item.description for item in kept.line_items] == ["Rent"]
    assert notifier.subscriber_count("liquidity_line_items", week_id) == 1
    assert len(notifier._subscriptions[("liquidity_line_items", week_id)]) == 1
