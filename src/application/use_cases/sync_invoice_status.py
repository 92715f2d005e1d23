"""Handler keeping invoice statuses in step with cash reconciliation."""

from src.application.ports.invoices import InvoiceStatusPort
from src.domain.constants import (
    INVOICE_STATUS_APPROVED,
    LINKED_CUSTOMER,
    LINKED_SUPPLIER,
)
from src.domain.errors import InvoiceSyncError, PersistenceError
from src.domain.events import LineItemCompleted
from src.infrastructure.logging.logger import get_app_logger


class SyncInvoiceStatusHandler:
    """Approve the invoice behind a completed line item."""

    def __init__(self, invoice_status: InvoiceStatusPort, logger=None) -> None:
        self._invoice_status = invoice_status
        self._logger = logger or get_app_logger()

    def __call__(self, event: LineItemCompleted) -> None:
        """Set the linked supplier or customer invoice to ``approved``.

        Manual items and unknown origins are ignored.

        Args:
            event: Completion event of a linked line item.

        Raises:
            InvoiceSyncError: If the invoice status cannot be written.
        """
        try:
            if event.linked_invoice_type == LINKED_SUPPLIER:
                self._invoice_status.update_supplier_invoice_status(
                    event.linked_invoice_id,
                    INVOICE_STATUS_APPROVED,
                )
            elif event.linked_invoice_type == LINKED_CUSTOMER:
                self._invoice_status.update_customer_invoice_status(
                    event.linked_invoice_id,
                    INVOICE_STATUS_APPROVED,
                )
            else:
                return
        except PersistenceError as exc:
            raise InvoiceSyncError(
                f"Could not approve {event.linked_invoice_type} invoice "
                f"{event.linked_invoice_id}: {exc}"
            ) from exc
        self._logger.info(
            f"Approved {event.linked_invoice_type} invoice "
            f"{event.linked_invoice_id} after line item {event.line_item_id}"
        )


__all__ = ["SyncInvoiceStatusHandler"]
