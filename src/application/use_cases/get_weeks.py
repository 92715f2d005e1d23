"""Use case listing liquidity weeks."""

from src.application.ports.liquidity_repository import LiquidityRepositoryPort
from src.domain.models import LiquidityWeek
from src.infrastructure.logging.logger import get_app_logger


class GetWeeksUseCase:
    """Return every week, most recent first."""

    def __init__(self, repository: LiquidityRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> list[LiquidityWeek]:
        weeks = sorted(
            self._repository.fetch_weeks(),
            key=lambda week: week.week_start_date,
            reverse=True,
        )
        self._logger.info(f"Fetched {len(weeks)} liquidity weeks")
        return weeks


__all__ = ["GetWeeksUseCase"]
