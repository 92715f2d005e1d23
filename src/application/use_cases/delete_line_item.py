"""Use case deleting a line item."""

from src.application.ports.liquidity_repository import LiquidityRepositoryPort
from src.infrastructure.logging.logger import get_app_logger


class DeleteLineItemUseCase:
    """Hard-delete a line item; linked invoices are left untouched."""

    def __init__(self, repository: LiquidityRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, item_id: str) -> None:
        self._repository.delete_line_item(item_id)
        self._logger.info(f"Deleted line item {item_id}")


__all__ = ["DeleteLineItemUseCase"]
