"""Policies deciding which invoices feed the liquidity plan."""

from src.domain.constants import SEEDABLE_INVOICE_STATUSES
from src.domain.services.normalization import normalize_code


def is_seedable_invoice_status(status: str | None) -> bool:
    """Return True when an invoice with this status is still unpaid."""
    return normalize_code(status) in SEEDABLE_INVOICE_STATUSES


__all__ = ["is_seedable_invoice_status"]
