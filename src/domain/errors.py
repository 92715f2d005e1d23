"""Typed errors raised by the liquidity engine.

Every error carries a machine-readable ``code`` so adapters can branch on
the type of failure without parsing messages::

    LiquidityError
    +-- ValidationError
    +-- PersistenceError
    |   +-- DuplicateWeekError
    |   +-- InvoiceSyncError
    +-- NotFoundError
        +-- WeekNotFoundError
        +-- LineItemNotFoundError
"""


class LiquidityError(Exception):
    """Base class for liquidity engine errors."""

    code = "LIQUIDITY_ERROR"


class ValidationError(LiquidityError):
    """A value lies outside a closed vocabulary."""

    code = "VALIDATION_ERROR"

    def __init__(self, field: str, value) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r}")


class PersistenceError(LiquidityError):
    """The persistence store rejected or failed an operation."""

    code = "PERSISTENCE_ERROR"


class DuplicateWeekError(PersistenceError):
    """A week already exists for the requested start date."""

    code = "DUPLICATE_WEEK"

    def __init__(self, week_start_date, detail: str = "") -> None:
        self.week_start_date = week_start_date
        message = f"Week starting {week_start_date} already exists"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvoiceSyncError(PersistenceError):
    """The linked invoice status could not be updated."""

    code = "INVOICE_SYNC_FAILED"


class NotFoundError(LiquidityError):
    """A requested record does not exist."""

    code = "NOT_FOUND"


class WeekNotFoundError(NotFoundError):
    code = "WEEK_NOT_FOUND"

    def __init__(self, week_id: str) -> None:
        self.week_id = week_id
        super().__init__(f"Liquidity week not found: {week_id}")


class LineItemNotFoundError(NotFoundError):
    code = "LINE_ITEM_NOT_FOUND"

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"Line item not found: {item_id}")


__all__ = [
    "LiquidityError",
    "ValidationError",
    "PersistenceError",
    "DuplicateWeekError",
    "InvoiceSyncError",
    "NotFoundError",
    "WeekNotFoundError",
    "LineItemNotFoundError",
]
