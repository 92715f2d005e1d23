"""Domain services package."""

from .calendar import build_monthly_payment_days, month_bounds, week_start_for
from .finance import (
    compute_liquidity_alerts,
    compute_liquidity_summary,
    format_amount,
)
from .normalization import normalize_code, normalize_counterparty_name
from .seeding import build_customer_line_items, build_supplier_line_items
from .status import derive_status_from_amount
from .validation import validate_choice, warn_line_item_anomalies

__all__ = [
    "build_monthly_payment_days",
    "month_bounds",
    "week_start_for",
    "compute_liquidity_alerts",
    "compute_liquidity_summary",
    "format_amount",
    "normalize_code",
    "normalize_counterparty_name",
    "build_customer_line_items",
    "build_supplier_line_items",
    "derive_status_from_amount",
    "validate_choice",
    "warn_line_item_anomalies",
]
