"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.liquidity_engine import LiquidityEngine
from src.application.session import LiquiditySession, OperationOutcome
from src.domain.constants import (
    ALERT_CRITICAL,
    ITEM_TYPE_COLLECTION,
    ITEM_TYPE_PAYMENT,
)
from src.domain.models import (
    LiquidityLineItem,
    LiquidityView,
    MonthlyPaymentDay,
    WeekUpdate,
)
from src.domain.services.calendar import week_start_for
from src.domain.services.finance import format_amount
from src.infrastructure.container import build_liquidity_engine
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import LiquiditySettings


SESSION_KEY = "liquidity_session"


@st.cache_resource(show_spinner=False)
def _load_engine() -> LiquidityEngine:
    """Build the engine once per server process."""
    return build_liquidity_engine()


@st.cache_resource(show_spinner=False)
def _load_settings() -> LiquiditySettings:
    """Read the settings once per server process."""
    return LiquiditySettings.from_env()


def _get_session(engine: LiquidityEngine) -> LiquiditySession:
    """Return the browser session's context, loading it on first use."""
    session = st.session_state.get(SESSION_KEY)
    if session is None:
        session = LiquiditySession()
        st.session_state[SESSION_KEY] = session
        engine.load(session)
    return session


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the libraries Altair renders through import cleanly.

    Returns:
        Tuple of a success flag and an error message when a check failed.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Charts need numpy and pandas: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed but incomplete (no ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed but incomplete (no Timestamp)."
    return True, None


def _format_currency(value: Decimal | None, symbol: str) -> str:
    """Format currency values for display."""
    if value is None:
        return "—"
    return format_amount(value, symbol)


def _format_delta(value: Decimal) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def _prepare_monthly_chart_data(
    days: Sequence[MonthlyPaymentDay],
    symbol: str,
) -> list[dict[str, str | int | float]]:
    """Prepare one bar per day of the month.

    Args:
        days: Payment days of the displayed month.
        symbol: Currency symbol for labels.

    Returns:
        Altair-ready rows, empty days included.
    """
    return [
        {
            "day": day.date.day,
            "date": day.date.isoformat(),
            "count": day.count,
            "total": float(day.total_amount),
            "total_label": _format_currency(day.total_amount, symbol),
            "descriptions": ", ".join(day.descriptions) or "—",
        }
        for day in days
    ]


def _line_item_rows(
    items: Sequence[LiquidityLineItem],
    symbol: str,
) -> list[dict[str, str]]:
    """Prepare line items for the table."""
    return [
        {
            "Description": item.description,
            "Due": item.due_date.isoformat() if item.due_date else "—",
            "Expected": _format_currency(item.expected_amount, symbol),
            "Actual": _format_currency(item.actual_amount, symbol),
            "Paid": (
                item.payment_date.isoformat() if item.payment_date else "—"
            ),
            "Status": item.status,
            "Source": item.linked_invoice_type or "manual",
        }
        for item in items
    ]


def _show_outcome(outcome: OperationOutcome, action: str) -> None:
    """Log the user action and report its outcome."""
    get_usage_logger().info(f"{action}: ok={outcome.ok} {outcome.message}")
    if outcome.ok:
        st.success(outcome.message)
    else:
        st.error(outcome.message)


def _render_notices(session: LiquiditySession) -> None:
    for notice in session.pop_notices():
        st.error(notice)


def _render_alerts(view: LiquidityView) -> None:
    """Render alert banners, critical first as computed."""
    for alert in view.alerts:
        if alert.level == ALERT_CRITICAL:
            st.error(alert.message)
        else:
            st.warning(alert.message)


def _render_metrics(view: LiquidityView, symbol: str) -> None:
    """Render expected and actual balances of the week."""
    summary = view.summary
    opening_col, collections_col, payments_col, projected_col = st.columns(4)
    opening_col.metric(
        "Opening Balance",
        _format_currency(summary.opening_balance, symbol),
    )
    collections_col.metric(
        "Expected Collections",
        _format_currency(summary.expected_collections, symbol),
        _format_delta(summary.actual_collections),
    )
    payments_col.metric(
        "Scheduled Payments",
        _format_currency(summary.scheduled_payments, symbol),
        _format_delta(summary.actual_payments),
        delta_color="inverse",
    )
    projected_col.metric(
        "Projected End Balance",
        _format_currency(summary.projected_end_balance, symbol),
    )
    actual_col, variance_col = st.columns(2)
    actual_col.metric(
        "Actual Balance",
        _format_currency(summary.actual_balance, symbol),
    )
    variance_col.metric(
        "Variance",
        _format_currency(summary.variance, symbol),
        _format_delta(summary.variance),
    )


def _render_monthly_chart(
    days: Sequence[MonthlyPaymentDay],
    month: date,
    symbol: str,
) -> None:
    """Render a bar chart of open supplier payments per day."""
    st.subheader(f"Supplier Payments in {month:%B %Y}")
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    if not any(day.count for day in days):
        st.info("No open payments due this month.")
    data = _prepare_monthly_chart_data(days, symbol)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
        color="#e76f51",
    ).encode(
        x=alt.X("day:O", title="Day"),
        y=alt.Y("total:Q", title="Amount due"),
        tooltip=[
            alt.Tooltip("date:N"),
            alt.Tooltip("count:Q"),
            alt.Tooltip("total_label:N"),
            alt.Tooltip("descriptions:N"),
        ],
    ).properties(height=260)
    st.altair_chart(chart, width="stretch")


def _render_line_items(
    title: str,
    items: Sequence[LiquidityLineItem],
    symbol: str,
) -> None:
    st.subheader(title)
    if not items:
        st.caption("No items.")
        return
    st.dataframe(
        _line_item_rows(items, symbol),
        width="stretch",
        hide_index=True,
    )


def _render_add_item_form(
    engine: LiquidityEngine,
    session: LiquiditySession,
) -> None:
    with st.form("add_item", clear_on_submit=True):
        st.markdown("**Add item**")
        item_type = st.radio(
            "Type",
            [ITEM_TYPE_COLLECTION, ITEM_TYPE_PAYMENT],
            horizontal=True,
        )
        description = st.text_input("Description")
        amount = st.number_input("Expected amount", min_value=0.0, step=100.0)
        has_due_date = st.checkbox("Has due date")
        due_date = st.date_input("Due date", value=date.today())
        if st.form_submit_button("Add"):
            if not description.strip():
                st.warning("Description is required.")
                return
            outcome = engine.add_line_item(
                session,
                item_type,
                description.strip(),
                Decimal(str(amount)),
                due_date=due_date if has_due_date else None,
            )
            _show_outcome(outcome, "add item")


def _render_item_actions(
    engine: LiquidityEngine,
    session: LiquiditySession,
    symbol: str,
) -> None:
    """Render mark done, record actual and delete actions."""
    items = session.line_items
    if not items:
        return
    by_id = {item.id: item for item in items}
    item_id = st.selectbox(
        "Item",
        options=list(by_id),
        format_func=lambda key: (
            f"{by_id[key].description} "
            f"({_format_currency(by_id[key].expected_amount, symbol)})"
        ),
    )
    item = by_id[item_id]
    done_col, actual_col, delete_col = st.columns(3)
    with done_col:
        if st.button("Mark done", disabled=item.is_completed):
            _show_outcome(engine.mark_done(session, item), "mark done")
    with actual_col:
        amount = st.number_input(
            "Actual amount",
            min_value=0.0,
            value=float(item.actual_amount or 0),
            step=100.0,
        )
        payment_date = st.date_input("Payment date", value=date.today())
        if st.button("Record actual"):
            outcome = engine.record_actual(
                session,
                item,
                Decimal(str(amount)),
                payment_date=payment_date,
            )
            _show_outcome(outcome, "record actual")
    with delete_col:
        if st.button("Delete item"):
            _show_outcome(engine.delete_line_item(session, item.id), "delete")


def _render_week_editor(
    engine: LiquidityEngine,
    session: LiquiditySession,
) -> None:
    week = session.active_week
    with st.form("week_editor"):
        st.markdown("**Week settings**")
        opening = st.number_input(
            "Opening balance",
            value=float(week.opening_balance),
            step=1000.0,
        )
        threshold = st.number_input(
            "Alert threshold (0 disables)",
            min_value=0.0,
            value=float(week.alert_threshold),
            step=1000.0,
        )
        notes = st.text_area("Notes", value=week.notes or "")
        if st.form_submit_button("Save week"):
            outcome = engine.update_week(
                session,
                week.id,
                WeekUpdate(
                    opening_balance=Decimal(str(opening)),
                    alert_threshold=Decimal(str(threshold)),
                    notes=notes,
                ),
            )
            _show_outcome(outcome, "update week")


def _render_sidebar(
    engine: LiquidityEngine,
    session: LiquiditySession,
) -> None:
    """Render week selection, week creation and month selection."""
    if session.weeks:
        ids = [week.id for week in session.weeks]
        labels = {
            week.id: f"Week of {week.week_start_date:%d %b %Y}"
            for week in session.weeks
        }
        active_id = session.active_week.id if session.active_week else ids[0]
        selected = st.sidebar.selectbox(
            "Week",
            options=ids,
            index=ids.index(active_id) if active_id in ids else 0,
            format_func=lambda key: labels[key],
        )
        if session.active_week is None or selected != session.active_week.id:
            engine.select_week(session, selected)

    with st.sidebar.form("create_week", clear_on_submit=True):
        st.markdown("**New week**")
        start = st.date_input("Week start", value=week_start_for(date.today()))
        opening = st.number_input("Opening balance", value=0.0, step=1000.0)
        threshold = st.number_input(
            "Alert threshold",
            min_value=0.0,
            value=0.0,
            step=1000.0,
        )
        if st.form_submit_button("Create week"):
            outcome = engine.create_week(
                session,
                start,
                Decimal(str(opening)),
                Decimal(str(threshold)),
            )
            _show_outcome(outcome, "create week")

    month = st.sidebar.date_input(
        "Calendar month",
        value=session.month or date.today(),
    )
    if session.month is None or (month.year, month.month) != (
        session.month.year,
        session.month.month,
    ):
        engine.load_month(session, month)

    if st.sidebar.button("Refresh"):
        engine.poll_changes(session)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Liquidity Dashboard", layout="wide")
    st.title("Weekly Liquidity")

    engine = _load_engine()
    settings = _load_settings()
    symbol = settings.currency_symbol
    session = _get_session(engine)
    engine.poll_changes(session)

    _render_sidebar(engine, session)
    _render_notices(session)

    view = engine.view(session)
    if view is None:
        st.warning("No liquidity week yet. Create one from the sidebar.")
        return

    st.caption(f"Week starting {view.week.week_start_date:%A %d %B %Y}")
    _render_alerts(view)
    _render_metrics(view, symbol)

    collections_col, payments_col = st.columns(2)
    with collections_col:
        _render_line_items("Expected Collections", view.collections, symbol)
    with payments_col:
        _render_line_items("Scheduled Payments", view.payments, symbol)

    actions_col, add_col = st.columns(2)
    with actions_col:
        _render_item_actions(engine, session, symbol)
    with add_col:
        _render_add_item_form(engine, session)

    _render_monthly_chart(
        session.monthly_days,
        session.month or date.today(),
        symbol,
    )
    _render_week_editor(engine, session)


if __name__ == "__main__":  # pragma: no cover
    main()
