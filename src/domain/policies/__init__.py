"""Domain policies package."""

from .invoice_filters import is_seedable_invoice_status

__all__ = ["is_seedable_invoice_status"]
