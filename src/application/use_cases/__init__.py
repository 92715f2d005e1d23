"""Application use cases package."""

from .auto_populate_line_items import AutoPopulateLineItemsUseCase, SeedResult
from .create_week import CreateWeekUseCase, CreateWeekResult
from .ensure_current_week import (
    EnsureCurrentWeekUseCase,
    EnsureCurrentWeekResult,
)
from .add_line_item import AddLineItemUseCase
from .update_line_item import UpdateLineItemUseCase, CompletionHandler
from .record_line_item_payment import (
    MarkLineItemDoneUseCase,
    RecordActualAmountUseCase,
)
from .sync_invoice_status import SyncInvoiceStatusHandler
from .delete_line_item import DeleteLineItemUseCase
from .update_week import UpdateWeekUseCase
from .get_weeks import GetWeeksUseCase
from .get_liquidity_view import GetLiquidityViewUseCase
from .get_monthly_payment_days import GetMonthlyPaymentDaysUseCase

__all__ = [
    "AutoPopulateLineItemsUseCase",
    "SeedResult",
    "CreateWeekUseCase",
    "CreateWeekResult",
    "EnsureCurrentWeekUseCase",
    "EnsureCurrentWeekResult",
    "AddLineItemUseCase",
    "UpdateLineItemUseCase",
    "CompletionHandler",
    "MarkLineItemDoneUseCase",
    "RecordActualAmountUseCase",
    "SyncInvoiceStatusHandler",
    "DeleteLineItemUseCase",
    "UpdateWeekUseCase",
    "GetWeeksUseCase",
    "GetLiquidityViewUseCase",
    "GetMonthlyPaymentDaysUseCase",
]
