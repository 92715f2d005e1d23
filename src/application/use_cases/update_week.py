"""Use case updating a week's opening balance, threshold or notes."""

from src.application.ports.liquidity_repository import LiquidityRepositoryPort
from src.domain.models import WeekUpdate
from src.infrastructure.logging.logger import get_app_logger


class UpdateWeekUseCase:
    """Apply a partial update to a week without touching its line items."""

    def __init__(self, repository: LiquidityRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, week_id: str, update: WeekUpdate) -> None:
        """Write the provided week fields.

        Args:
            week_id: Week to update.
            update: Fields to write; an empty update is a no-op.
        """
        if not update.as_values():
            return
        self._repository.update_week(week_id, update)
        self._logger.info(
            f"Updated liquidity week {week_id}: {sorted(update.as_values())}"
        )


__all__ = ["UpdateWeekUseCase"]
