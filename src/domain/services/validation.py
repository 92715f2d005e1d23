"""Domain validation helpers."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    ITEM_TYPE_COLLECTION,
    ITEM_TYPE_PAYMENT,
    LINKED_CUSTOMER,
    LINKED_SUPPLIER,
)
from src.domain.errors import ValidationError
from src.domain.services.normalization import normalize_code


def validate_choice(
    field: str,
    value: str | None,
    allowed: Iterable[str],
) -> str:
    """Return the normalized value when it belongs to a closed vocabulary.

    Args:
        field: Field name used in the error message.
        value: Raw value supplied by the caller.
        allowed: Accepted codes.

    Returns:
        str: Normalized code.

    Raises:
        ValidationError: If the value is not one of the accepted codes.
    """
    normalized = normalize_code(value)
    if normalized not in tuple(allowed):
        raise ValidationError(field, value)
    return normalized


def warn_line_item_anomalies(
    item_type: str,
    expected_amount: Decimal,
    linked_invoice_type: str | None,
    logger: Logger,
) -> None:
    """Warn when a line item breaks conventions that are not enforced.

    Args:
        item_type: Collection or payment.
        expected_amount: Expected amount of the item.
        linked_invoice_type: Origin of the linked invoice, if any.
        logger: Logger used for warnings.
    """
    if expected_amount < 0:
        logger.warning(
            f"Line item has a negative expected amount: {expected_amount}"
        )
    if item_type == ITEM_TYPE_COLLECTION and linked_invoice_type == LINKED_SUPPLIER:
        logger.warning("Collection line item is linked to a supplier invoice")
    if item_type == ITEM_TYPE_PAYMENT and linked_invoice_type == LINKED_CUSTOMER:
        logger.warning("Payment line item is linked to a customer invoice")


__all__ = ["validate_choice", "warn_line_item_anomalies"]
