"""Domain models package."""

from .finance import (
    LiquidityAlert,
    LiquiditySummary,
    LiquidityView,
    MonthlyPaymentDay,
)
from .invoice_rows import CustomerInvoiceRow, SupplierInvoiceRow
from .liquidity import (
    LineItemUpdate,
    LiquidityLineItem,
    LiquidityWeek,
    NewLineItem,
    WeekUpdate,
)

__all__ = [
    "LiquidityWeek",
    "LiquidityLineItem",
    "NewLineItem",
    "LineItemUpdate",
    "WeekUpdate",
    "SupplierInvoiceRow",
    "CustomerInvoiceRow",
    "LiquiditySummary",
    "LiquidityAlert",
    "MonthlyPaymentDay",
    "LiquidityView",
]
