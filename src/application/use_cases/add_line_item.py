"""Use case adding a manual line item to a week."""

from datetime import date
from decimal import Decimal

from src.application.ports.liquidity_repository import LiquidityRepositoryPort
from src.domain.constants import (
    ITEM_TYPES,
    LINKED_INVOICE_TYPES,
    LINKED_MANUAL,
    STATUS_PENDING,
)
from src.domain.models import LiquidityLineItem, NewLineItem
from src.domain.services.validation import (
    validate_choice,
    warn_line_item_anomalies,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class AddLineItemUseCase:
    """Insert a pending line item with no recorded amount."""

    def __init__(self, repository: LiquidityRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        week_id: str,
        item_type: str,
        description: str,
        expected_amount: Decimal,
        due_date: date | None = None,
        linked_invoice_type: str | None = None,
    ) -> LiquidityLineItem:
        """Add the line item.

        Args:
            week_id: Week receiving the item.
            item_type: ``collection`` or ``payment``.
            description: Free-text description.
            expected_amount: Amount expected to move.
            due_date: Optional due date.
            linked_invoice_type: Origin label, ``manual`` when omitted.

        Returns:
            LiquidityLineItem: The stored item.

        Raises:
            ValidationError: If the type or origin label is unknown.
            PersistenceError: If the store rejects the insert.
        """
        resolved_type = validate_choice("item_type", item_type, ITEM_TYPES)
        resolved_link = validate_choice(
            "linked_invoice_type",
            linked_invoice_type or LINKED_MANUAL,
            LINKED_INVOICE_TYPES,
        )
        amount = coerce_decimal(expected_amount)
        warn_line_item_anomalies(
            resolved_type,
            amount,
            resolved_link,
            self._logger,
        )
        created = self._repository.insert_line_items(
            [
                NewLineItem(
                    liquidity_week_id=week_id,
                    item_type=resolved_type,
                    description=description,
                    expected_amount=amount,
                    due_date=due_date,
                    status=STATUS_PENDING,
                    linked_invoice_type=resolved_link,
                )
            ]
        )
        self._logger.info(
            f"Added {resolved_type} line item to week {week_id}: {amount}"
        )
        return created[0]


__all__ = ["AddLineItemUseCase"]
