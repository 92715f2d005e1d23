"""Shortcuts recording that a line item was paid or collected."""

from datetime import date
from decimal import Decimal

from src.application.use_cases.update_line_item import UpdateLineItemUseCase
from src.domain.constants import STATUS_COMPLETED
from src.domain.events import LineItemCompleted
from src.domain.models import LineItemUpdate, LiquidityLineItem
from src.domain.services.status import derive_status_from_amount
from src.utils.decimal_utils import coerce_decimal


class MarkLineItemDoneUseCase:
    """Record the full expected amount as settled today."""

    def __init__(self, update_line_item: UpdateLineItemUseCase) -> None:
        self._update_line_item = update_line_item

    def execute(
        self,
        item: LiquidityLineItem,
        today: date | None = None,
    ) -> LineItemCompleted | None:
        return self._update_line_item.execute(
            item.id,
            LineItemUpdate(
                actual_amount=coerce_decimal(item.expected_amount),
                status=STATUS_COMPLETED,
                payment_date=today or date.today(),
            ),
        )


class RecordActualAmountUseCase:
    """Record an actual amount and derive the status from it."""

    def __init__(self, update_line_item: UpdateLineItemUseCase) -> None:
        self._update_line_item = update_line_item

    def execute(
        self,
        item: LiquidityLineItem,
        amount: Decimal,
        payment_date: date | None = None,
    ) -> LineItemCompleted | None:
        """Record the amount.

        Args:
            item: Line item being settled.
            amount: Amount actually collected or paid.
            payment_date: Settlement date, today when omitted.

        Returns:
            LineItemCompleted | None: Completion event when dispatched.
        """
        actual = coerce_decimal(amount)
        return self._update_line_item.execute(
            item.id,
            LineItemUpdate(
                actual_amount=actual,
                status=derive_status_from_amount(
                    coerce_decimal(item.expected_amount),
                    actual,
                ),
                payment_date=payment_date or date.today(),
            ),
        )


__all__ = ["MarkLineItemDoneUseCase", "RecordActualAmountUseCase"]
