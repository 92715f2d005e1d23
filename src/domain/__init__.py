"""Domain package for liquidity rules and core models."""

from .constants import (
    ITEM_TYPES,
    LINE_ITEM_STATUSES,
    LINKED_INVOICE_TYPES,
    SEEDABLE_INVOICE_STATUSES,
)
from .errors import (
    DuplicateWeekError,
    InvoiceSyncError,
    LineItemNotFoundError,
    LiquidityError,
    NotFoundError,
    PersistenceError,
    ValidationError,
    WeekNotFoundError,
)
from .events import LineItemCompleted
from .models import (
    CustomerInvoiceRow,
    LineItemUpdate,
    LiquidityAlert,
    LiquidityLineItem,
    LiquiditySummary,
    LiquidityView,
    LiquidityWeek,
    MonthlyPaymentDay,
    NewLineItem,
    SupplierInvoiceRow,
    WeekUpdate,
)
from .policies import is_seedable_invoice_status
from .services import (
    build_customer_line_items,
    build_monthly_payment_days,
    build_supplier_line_items,
    compute_liquidity_alerts,
    compute_liquidity_summary,
    derive_status_from_amount,
    month_bounds,
    week_start_for,
)

__all__ = [
    "ITEM_TYPES",
    "LINE_ITEM_STATUSES",
    "LINKED_INVOICE_TYPES",
    "SEEDABLE_INVOICE_STATUSES",
    "LiquidityError",
    "ValidationError",
    "PersistenceError",
    "DuplicateWeekError",
    "InvoiceSyncError",
    "NotFoundError",
    "WeekNotFoundError",
    "LineItemNotFoundError",
    "LineItemCompleted",
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
    "is_seedable_invoice_status",
    "build_customer_line_items",
    "build_monthly_payment_days",
    "build_supplier_line_items",
    "compute_liquidity_alerts",
    "compute_liquidity_summary",
    "derive_status_from_amount",
    "month_bounds",
    "week_start_for",
]
