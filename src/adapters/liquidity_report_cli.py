"""CLI adapter printing a week's balances, alerts and payment calendar."""

from datetime import date
import os

from src.application.use_cases.get_liquidity_view import (
    GetLiquidityViewUseCase,
)
from src.application.use_cases.get_monthly_payment_days import (
    GetMonthlyPaymentDaysUseCase,
)
from src.domain.services.calendar import week_start_for
from src.domain.services.finance import format_amount
from src.infrastructure.container import build_liquidity_repository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LiquiditySettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> None:
    """Print the liquidity report of the selected week."""
    logger = get_app_logger()
    settings = LiquiditySettings.from_env()
    reference = (
        _parse_date(os.getenv("LIQUIDITY_REPORT_WEEK"), logger)
        or date.today()
    )
    week_start = week_start_for(reference)

    repository = build_liquidity_repository()
    week = repository.fetch_week_by_start_date(week_start)
    if week is None:
        logger.warning(f"No liquidity week starts on {week_start}.")
        return

    view = GetLiquidityViewUseCase(
        repository,
        logger=logger,
        alert_window=settings.alert_window,
        currency_symbol=settings.currency_symbol,
    ).execute(week.id)
    payment_days = GetMonthlyPaymentDaysUseCase(
        repository,
        logger=logger,
    ).execute(reference)

    symbol = settings.currency_symbol
    summary = view.summary
    print(f"Liquidity week starting {week.week_start_date}")
    print(
        f"Opening: {format_amount(summary.opening_balance, symbol)}, "
        f"collections: {format_amount(summary.expected_collections, symbol)}, "
        f"payments: {format_amount(summary.scheduled_payments, symbol)}"
    )
    print(
        f"Projected: {format_amount(summary.projected_end_balance, symbol)}, "
        f"actual: {format_amount(summary.actual_balance, symbol)}, "
        f"variance: {format_amount(summary.variance, symbol)}"
    )
    for alert in view.alerts:
        print(f"[{alert.level.upper()}] {alert.message}")
    for day in payment_days:
        if day.count:
            print(
                f"{day.date}: {day.count} payment(s), "
                f"{format_amount(day.total_amount, symbol)}"
            )


if __name__ == "__main__":  # pragma: no cover
    main()
