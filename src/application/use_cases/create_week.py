"""Use case creating a liquidity week explicitly."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.application.ports.liquidity_repository import LiquidityRepositoryPort
from src.application.use_cases.auto_populate_line_items import (
    AutoPopulateLineItemsUseCase,
    SeedResult,
)
from src.domain.models import LiquidityWeek
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class CreateWeekResult:
    """Created week and the outcome of its seeding."""

    week: LiquidityWeek
    seed: SeedResult


class CreateWeekUseCase:
    """Insert a week, then seed it from unpaid invoices.

    The start date is stored as given; aligning it to a Monday is left to
    the caller.
    """

    def __init__(
        self,
        repository: LiquidityRepositoryPort,
        auto_populate: AutoPopulateLineItemsUseCase,
        logger=None,
    ) -> None:
        self._repository = repository
        self._auto_populate = auto_populate
        self._logger = logger or get_app_logger()

    def execute(
        self,
        week_start_date: date,
        opening_balance: Decimal = Decimal("0"),
        alert_threshold: Decimal = Decimal("0"),
        notes: str | None = None,
        created_by: str | None = None,
    ) -> CreateWeekResult:
        """Create the week.

        Args:
            week_start_date: Start date of the week.
            opening_balance: Opening balance, may be negative.
            alert_threshold: Threshold for the actual balance; 0 disables it.
            notes: Optional notes.
            created_by: Optional reference of the creating user.

        Returns:
            CreateWeekResult: The stored week and its seed outcome.

        Raises:
            PersistenceError: If the week cannot be inserted.
        """
        week = self._repository.insert_week(
            week_start_date,
            coerce_decimal(opening_balance),
            coerce_decimal(alert_threshold),
            notes=notes,
            created_by=created_by,
        )
        self._logger.info(f"Created liquidity week {week.week_start_date}")
        seed = self._auto_populate.execute(week)
        return CreateWeekResult(week=week, seed=seed)


__all__ = ["CreateWeekUseCase", "CreateWeekResult"]
