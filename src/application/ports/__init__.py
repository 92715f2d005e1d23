"""Application ports package."""

from .change_notifications import (
    LINE_ITEMS_TABLE,
    ChangeNotifierPort,
    ChangeSubscription,
)
from .database import DatabaseEnginePort
from .invoices import InvoiceSourcePort, InvoiceStatusPort
from .liquidity_repository import LiquidityRepositoryPort

__all__ = [
    "LINE_ITEMS_TABLE",
    "ChangeNotifierPort",
    "ChangeSubscription",
    "DatabaseEnginePort",
    "InvoiceSourcePort",
    "InvoiceStatusPort",
    "LiquidityRepositoryPort",
]
