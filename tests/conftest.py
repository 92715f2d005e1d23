"""Shared fixtures: an in-memory operations database and a wired engine."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, insert
from sqlalchemy.pool import StaticPool

from src.application.liquidity_engine import LiquidityEngine
from src.infrastructure.change_notifications import InProcessChangeNotifier
from src.infrastructure.container import build_liquidity_use_cases
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.invoice_repository import SqlAlchemyInvoiceRepository
from src.infrastructure.liquidity_repository import (
    SqlAlchemyLiquidityRepository,
)
from src.infrastructure.settings import LiquiditySettings
from src.infrastructure.tables import (
    client_invoices,
    clients,
    metadata,
    raw_material_invoices,
    suppliers,
)

# Wednesday; its week starts on Monday 2024-06-10.
FIXED_NOW = datetime(2024, 6, 12, 9, 0)


@pytest.fixture
def sqlite_engine():
    """In-memory SQLite engine holding the hosted tables."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        future=True,
    )
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_port(sqlite_engine):
    return SqlAlchemyDatabaseEngineAdapter(sqlite_engine)


@pytest.fixture
def liquidity_repository(db_port):
    return SqlAlchemyLiquidityRepository(db_port)


@pytest.fixture
def invoice_repository(db_port):
    return SqlAlchemyInvoiceRepository(db_port)


@pytest.fixture
def quiet_logger():
    return MagicMock()


@pytest.fixture
def add_supplier_invoice(sqlite_engine):
    """Return a helper inserting a supplier invoice (and its supplier)."""

    def _add(
        invoice_id: str,
        invoice_number: str,
        amount,
        due_date: date | None = None,
        status: str = "pending",
        supplier_name: str | None = "Acme Metals",
    ) -> None:
        supplier_id = f"sup-{invoice_id}"
        with sqlite_engine.begin() as conn:
            conn.execute(
                insert(suppliers).values(id=supplier_id, name=supplier_name)
            )
            conn.execute(
                insert(raw_material_invoices).values(
                    id=invoice_id,
                    invoice_number=invoice_number,
                    amount=Decimal(str(amount)) if amount is not None else None,
                    due_date=due_date,
                    status=status,
                    supplier_id=supplier_id,
                )
            )

    return _add


@pytest.fixture
def add_customer_invoice(sqlite_engine):
    """Return a helper inserting a customer invoice (and its client)."""

    def _add(
        invoice_id: str,
        invoice_number: str,
        amount,
        status: str = "pending",
        client_name: str | None = "Globex",
    ) -> None:
        client_id = f"cli-{invoice_id}"
        with sqlite_engine.begin() as conn:
            conn.execute(insert(clients).values(id=client_id, name=client_name))
            conn.execute(
                insert(client_invoices).values(
                    id=invoice_id,
                    invoice_number=invoice_number,
                    amount=Decimal(str(amount)) if amount is not None else None,
                    status=status,
                    client_id=client_id,
                )
            )

    return _add


@pytest.fixture
def notifier(quiet_logger):
    return InProcessChangeNotifier(logger=quiet_logger)


@pytest.fixture
def liquidity_engine(
    liquidity_repository,
    invoice_repository,
    notifier,
    quiet_logger,
):
    """Engine wired to the SQLite database with a fixed clock."""
    settings = LiquiditySettings(currency="INR")
    return LiquidityEngine(
        build_liquidity_use_cases(
            liquidity_repository,
            invoice_repository,
            settings,
        ),
        liquidity_repository,
        notifier,
        logger=quiet_logger,
        clock=lambda: FIXED_NOW,
    )
