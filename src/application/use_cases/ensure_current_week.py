"""Use case making sure the current calendar week has a record."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.application.ports.liquidity_repository import LiquidityRepositoryPort
from src.application.use_cases.auto_populate_line_items import (
    AutoPopulateLineItemsUseCase,
    SeedResult,
)
from src.domain.errors import DuplicateWeekError
from src.domain.models import LiquidityWeek
from src.domain.services.calendar import week_start_for
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class EnsureCurrentWeekResult:
    """Week of today and whether this call created it.

    Attributes:
        week: Week starting on the Monday of today.
        created: True when the week was inserted by this call.
        seed: Seed outcome, only set when the week was created.
    """

    week: LiquidityWeek
    created: bool
    seed: SeedResult | None = None


class EnsureCurrentWeekUseCase:
    """Create the current Monday-start week once, with its seed."""

    def __init__(
        self,
        repository: LiquidityRepositoryPort,
        auto_populate: AutoPopulateLineItemsUseCase,
        logger=None,
    ) -> None:
        self._repository = repository
        self._auto_populate = auto_populate
        self._logger = logger or get_app_logger()

    def execute(self, today: date | None = None) -> EnsureCurrentWeekResult:
        """Return the current week, creating and seeding it when missing.

        Args:
            today: Reference day, defaults to the system date.

        Returns:
            EnsureCurrentWeekResult: The week and whether it was created.

        Raises:
            PersistenceError: If the week cannot be read or inserted.
        """
        week_start = week_start_for(today or date.today())
        existing = self._repository.fetch_week_by_start_date(week_start)
        if existing is not None:
            return EnsureCurrentWeekResult(week=existing, created=False)

        try:
            week = self._repository.insert_week(
                week_start,
                Decimal("0"),
                Decimal("0"),
            )
        except DuplicateWeekError:
            # Another session created the week between the read and insert.
            existing = self._repository.fetch_week_by_start_date(week_start)
            if existing is None:
                raise
            return EnsureCurrentWeekResult(week=existing, created=False)

        self._logger.info(f"Created current liquidity week {week_start}")
        seed = self._auto_populate.execute(week)
        return EnsureCurrentWeekResult(week=week, created=True, seed=seed)


__all__ = [
    "EnsureCurrentWeekUseCase",
    "EnsureCurrentWeekResult",
]
