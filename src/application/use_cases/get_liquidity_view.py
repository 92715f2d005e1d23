"""Use case computing balances and alerts for a week."""

from collections.abc import Sequence
from datetime import datetime, timedelta

from src.application.ports.liquidity_repository import LiquidityRepositoryPort
from src.domain.constants import DEFAULT_ALERT_WINDOW
from src.domain.errors import WeekNotFoundError
from src.domain.models import LiquidityLineItem, LiquidityView, LiquidityWeek
from src.domain.services.finance import (
    compute_liquidity_alerts,
    compute_liquidity_summary,
)
from src.infrastructure.logging.logger import get_app_logger


class GetLiquidityViewUseCase:
    """Build the read-only view of a week.

    Nothing here is persisted: totals and alerts are recomputed from the
    week and its line items on every call.
    """

    def __init__(
        self,
        repository: LiquidityRepositoryPort,
        logger=None,
        alert_window: timedelta = DEFAULT_ALERT_WINDOW,
        currency_symbol: str = "",
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port reading weeks and line items.
            logger: Optional logger compatible with logging.Logger-like API.
            alert_window: Look-ahead for upcoming payment warnings.
            currency_symbol: Symbol used in alert messages.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._alert_window = alert_window
        self._currency_symbol = currency_symbol

    def execute(
        self,
        week_id: str,
        now: datetime | None = None,
    ) -> LiquidityView:
        """Load the week and derive its view.

        Args:
            week_id: Week to render.
            now: Reference instant for time-based alerts.

        Returns:
            LiquidityView: Week, items, totals and alerts.

        Raises:
            WeekNotFoundError: If the week does not exist.
        """
        week = self._repository.fetch_week(week_id)
        if week is None:
            raise WeekNotFoundError(week_id)
        line_items = self._repository.fetch_line_items(week_id)
        return self.build(week, line_items, now)

    def build(
        self,
        week: LiquidityWeek,
        line_items: Sequence[LiquidityLineItem],
        now: datetime | None = None,
    ) -> LiquidityView:
        """Derive the view from already loaded state."""
        summary = compute_liquidity_summary(week.opening_balance, line_items)
        alerts = compute_liquidity_alerts(
            week,
            summary,
            line_items,
            now or datetime.now(),
            window=self._alert_window,
            currency_symbol=self._currency_symbol,
        )
        if alerts:
            self._logger.info(
                f"Week {week.week_start_date} raised {len(alerts)} alerts"
            )
        return LiquidityView(
            week=week,
            line_items=tuple(line_items),
            summary=summary,
            alerts=tuple(alerts),
        )


__all__ = ["GetLiquidityViewUseCase", "LiquidityView"]
