"""Domain events emitted by line item mutations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LineItemCompleted:
    """A line item moved into the completed status.

    Attributes:
        line_item_id: Identifier of the completed line item.
        linked_invoice_id: Invoice the line item was seeded from.
        linked_invoice_type: Origin of the invoice (supplier or customer).
    """

    line_item_id: str
    linked_invoice_id: str
    linked_invoice_type: str | None


__all__ = ["LineItemCompleted"]
