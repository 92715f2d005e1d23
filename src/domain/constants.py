"""Domain constants for weekly liquidity tracking."""

from datetime import timedelta

ITEM_TYPE_COLLECTION = "collection"
ITEM_TYPE_PAYMENT = "payment"
ITEM_TYPES = (ITEM_TYPE_COLLECTION, ITEM_TYPE_PAYMENT)

STATUS_PENDING = "pending"
STATUS_PARTIAL = "partial"
STATUS_COMPLETED = "completed"
STATUS_OVERDUE = "overdue"
LINE_ITEM_STATUSES = (
    STATUS_PENDING,
    STATUS_PARTIAL,
    STATUS_COMPLETED,
    STATUS_OVERDUE,
)

LINKED_SUPPLIER = "supplier"
LINKED_CUSTOMER = "customer"
LINKED_MANUAL = "manual"
LINKED_INVOICE_TYPES = (LINKED_SUPPLIER, LINKED_CUSTOMER, LINKED_MANUAL)

INVOICE_STATUS_PENDING = "pending"
INVOICE_STATUS_AWAITING_APPROVAL = "awaiting_approval"
INVOICE_STATUS_APPROVED = "approved"
SEEDABLE_INVOICE_STATUSES = (
    INVOICE_STATUS_PENDING,
    INVOICE_STATUS_AWAITING_APPROVAL,
)

ALERT_CRITICAL = "critical"
ALERT_WARNING = "warning"

DEFAULT_ALERT_WINDOW = timedelta(hours=48)
UNKNOWN_COUNTERPARTY = "Unknown"


__all__ = [
    "ITEM_TYPE_COLLECTION",
    "ITEM_TYPE_PAYMENT",
    "ITEM_TYPES",
    "STATUS_PENDING",
    "STATUS_PARTIAL",
    "STATUS_COMPLETED",
    "STATUS_OVERDUE",
    "LINE_ITEM_STATUSES",
    "LINKED_SUPPLIER",
    "LINKED_CUSTOMER",
    "LINKED_MANUAL",
    "LINKED_INVOICE_TYPES",
    "INVOICE_STATUS_PENDING",
    "INVOICE_STATUS_AWAITING_APPROVAL",
    "INVOICE_STATUS_APPROVED",
    "SEEDABLE_INVOICE_STATUSES",
    "ALERT_CRITICAL",
    "ALERT_WARNING",
    "DEFAULT_ALERT_WINDOW",
    "UNKNOWN_COUNTERPARTY",
]
