"""Domain normalization helpers."""

from src.domain.constants import UNKNOWN_COUNTERPARTY


def normalize_counterparty_name(name: str | None) -> str:
    """Normalize supplier or client names used in descriptions.

    Args:
        name: Raw name joined from the suppliers or clients table.

    Returns:
        str: Stripped name, or ``Unknown`` when the name is missing.
    """
    if not name:
        return UNKNOWN_COUNTERPARTY
    cleaned = name.strip()
    return cleaned if cleaned else UNKNOWN_COUNTERPARTY


def normalize_code(value: str | None) -> str | None:
    """Normalize vocabulary codes such as statuses and item types.

    Args:
        value: Raw code value from a caller or repository.

    Returns:
        str | None: Lower-cased code, or None when empty.
    """
    if not value:
        return None
    cleaned = value.strip()
    return cleaned.lower() if cleaned else None


__all__ = ["normalize_counterparty_name", "normalize_code"]
