"""SQLAlchemy-backed access to the supplier and customer invoice tables."""

from collections.abc import Iterable

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.invoices import InvoiceSourcePort, InvoiceStatusPort
from src.domain.errors import PersistenceError
from src.domain.models import CustomerInvoiceRow, SupplierInvoiceRow
from src.infrastructure.tables import (
    client_invoices,
    clients,
    raw_material_invoices,
    suppliers,
)
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_optional_decimal


SELECT_SUPPLIER_INVOICES = (
    select(
        raw_material_invoices.c.id,
        raw_material_invoices.c.invoice_number,
        raw_material_invoices.c.amount,
        raw_material_invoices.c.due_date,
        raw_material_invoices.c.status,
        suppliers.c.name.label("supplier_name"),
    )
    .select_from(
        raw_material_invoices.outerjoin(
            suppliers,
            raw_material_invoices.c.supplier_id == suppliers.c.id,
        )
    )
    .order_by(
        raw_material_invoices.c.due_date.asc().nullslast(),
        raw_material_invoices.c.invoice_number.asc(),
    )
)

SELECT_CUSTOMER_INVOICES = (
    select(
        client_invoices.c.id,
        client_invoices.c.invoice_number,
        client_invoices.c.amount,
        client_invoices.c.status,
        clients.c.name.label("client_name"),
    )
    .select_from(
        client_invoices.outerjoin(
            clients,
            client_invoices.c.client_id == clients.c.id,
        )
    )
    .order_by(client_invoices.c.invoice_number.asc())
)


class SqlAlchemyInvoiceRepository(InvoiceSourcePort, InvoiceStatusPort):
    """Reads unpaid invoices and writes their statuses."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the operations engine.
        """
        self._db_port = db_port

    def fetch_supplier_invoices(
        self,
        statuses: Iterable[str],
    ) -> list[SupplierInvoiceRow]:
        """Return supplier invoices whose status is in ``statuses``.

        Raises:
            PersistenceError: If the query fails.
        """
        query = SELECT_SUPPLIER_INVOICES.where(
            raw_material_invoices.c.status.in_(list(statuses))
        )
        rows = self._fetch(query, "supplier")
        return [
            SupplierInvoiceRow(
                id=row.id,
                invoice_number=row.invoice_number,
                amount=coerce_optional_decimal(row.amount),
                due_date=coerce_date(row.due_date),
                supplier_name=row.supplier_name,
                status=row.status,
            )
            for row in rows
        ]

    def fetch_customer_invoices(
        self,
        statuses: Iterable[str],
    ) -> list[CustomerInvoiceRow]:
        """Return customer invoices whose status is in ``statuses``.

        Raises:
            PersistenceError: If the query fails.
        """
        query = SELECT_CUSTOMER_INVOICES.where(
            client_invoices.c.status.in_(list(statuses))
        )
        rows = self._fetch(query, "customer")
        return [
            CustomerInvoiceRow(
                id=row.id,
                invoice_number=row.invoice_number,
                amount=coerce_optional_decimal(row.amount),
                client_name=row.client_name,
                status=row.status,
            )
            for row in rows
        ]

    def update_supplier_invoice_status(
        self,
        invoice_id: str,
        status: str,
    ) -> None:
        self._update_status(raw_material_invoices, invoice_id, status)

    def update_customer_invoice_status(
        self,
        invoice_id: str,
        status: str,
    ) -> None:
        self._update_status(client_invoices, invoice_id, status)

    def _fetch(self, query, kind: str):
        engine = self._db_port.get_liquidity_engine()
        try:
            with engine.connect() as conn:
                return conn.execute(query).all()
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Fetching {kind} invoices failed: {exc}"
            ) from exc

    def _update_status(self, table, invoice_id: str, status: str) -> None:
        statement = (
            update(table).where(table.c.id == invoice_id).values(status=status)
        )
        engine = self._db_port.get_liquidity_engine()
        try:
            with engine.begin() as conn:
                conn.execute(statement)
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Updating {table.name} {invoice_id} failed: {exc}"
            ) from exc


__all__ = ["SqlAlchemyInvoiceRepository"]
