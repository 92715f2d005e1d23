"""Use case building the monthly supplier payment calendar."""

from datetime import date

from src.application.ports.liquidity_repository import LiquidityRepositoryPort
from src.domain.models import MonthlyPaymentDay
from src.domain.services.calendar import build_monthly_payment_days, month_bounds
from src.infrastructure.logging.logger import get_app_logger


class GetMonthlyPaymentDaysUseCase:
    """Group open payments of every week by due day of a month."""

    def __init__(self, repository: LiquidityRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, month: date) -> list[MonthlyPaymentDay]:
        """Return one entry per day of the month.

        Args:
            month: Any date within the month.

        Returns:
            list[MonthlyPaymentDay]: Daily counts, descriptions and totals.
        """
        first_day, last_day = month_bounds(month)
        items = self._repository.fetch_open_payment_items(first_day, last_day)
        self._logger.info(
            f"Fetched {len(items)} open payments for "
            f"{first_day:%Y-%m}"
        )
        return build_monthly_payment_days(month, items)


__all__ = ["GetMonthlyPaymentDaysUseCase"]
