"""Use case applying partial updates to line items.

The update itself only writes the provided fields. When it moves an item
linked to an invoice into ``completed``, a :class:`LineItemCompleted`
event is handed to the registered completion handlers.
"""

from collections.abc import Callable, Sequence

from src.application.ports.liquidity_repository import LiquidityRepositoryPort
from src.domain.constants import LINE_ITEM_STATUSES, STATUS_COMPLETED
from src.domain.errors import LineItemNotFoundError
from src.domain.events import LineItemCompleted
from src.domain.models import LineItemUpdate, LiquidityLineItem
from src.domain.services.validation import validate_choice
from src.infrastructure.logging.logger import get_app_logger


CompletionHandler = Callable[[LineItemCompleted], None]


class UpdateLineItemUseCase:
    """Update actual amount, status or payment date of a line item."""

    def __init__(
        self,
        repository: LiquidityRepositoryPort,
        completion_handlers: Sequence[CompletionHandler] = (),
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port writing liquidity line items.
            completion_handlers: Callables receiving completion events.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._completion_handlers = tuple(completion_handlers)
        self._logger = logger or get_app_logger()

    def execute(
        self,
        item_id: str,
        update: LineItemUpdate,
    ) -> LineItemCompleted | None:
        """Apply the update and dispatch the completion event, if any.

        Args:
            item_id: Line item to update.
            update: Fields to write.

        Returns:
            LineItemCompleted | None: The dispatched event.

        Raises:
            ValidationError: If the status is unknown.
            LineItemNotFoundError: If the item does not exist.
            PersistenceError: If the store or a handler fails.
        """
        if update.status is not None:
            update = LineItemUpdate(
                actual_amount=update.actual_amount,
                status=validate_choice(
                    "status",
                    update.status,
                    LINE_ITEM_STATUSES,
                ),
                payment_date=update.payment_date,
            )
        current = self._repository.fetch_line_item(item_id)
        if current is None:
            raise LineItemNotFoundError(item_id)

        self._repository.update_line_item(item_id, update)
        self._logger.info(
            f"Updated line item {item_id}: {sorted(update.as_values())}"
        )

        event = self._completion_event(current, update)
        if event is not None:
            for handler in self._completion_handlers:
                handler(event)
        return event

    @staticmethod
    def _completion_event(
        current: LiquidityLineItem,
        update: LineItemUpdate,
    ) -> LineItemCompleted | None:
        if update.status != STATUS_COMPLETED or current.is_completed:
            return None
        if current.linked_invoice_id is None:
            return None
        return LineItemCompleted(
            line_item_id=current.id,
            linked_invoice_id=current.linked_invoice_id,
            linked_invoice_type=current.linked_invoice_type,
        )


__all__ = ["UpdateLineItemUseCase", "CompletionHandler"]
