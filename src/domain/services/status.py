"""Status rules for recorded line item amounts."""

from decimal import Decimal

from src.domain.constants import (
    STATUS_COMPLETED,
    STATUS_PARTIAL,
    STATUS_PENDING,
)


def derive_status_from_amount(
    expected_amount: Decimal,
    actual_amount: Decimal,
) -> str:
    """Return the status implied by a recorded amount.

    ``overdue`` is never produced here; it depends on time, not amounts.

    Args:
        expected_amount: Amount the line item expects.
        actual_amount: Amount actually collected or paid.

    Returns:
        str: ``completed`` when the amount covers the expectation,
        ``partial`` for a positive shortfall, ``pending`` otherwise.
    """
    if actual_amount >= expected_amount:
        return STATUS_COMPLETED
    if actual_amount > 0:
        return STATUS_PARTIAL
    return STATUS_PENDING


__all__ = ["derive_status_from_amount"]
