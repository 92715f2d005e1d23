"""SQLAlchemy Core descriptions of the hosted tables.

The schema itself is owned by the hosted database; these descriptions only
let repositories build typed statements. Identifiers are UUID strings
generated on insert.
"""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)

metadata = MetaData()

weekly_liquidity = Table(
    "weekly_liquidity",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("week_start_date", Date, nullable=False, unique=True),
    Column("opening_balance", Numeric(14, 2), nullable=False),
    Column("alert_threshold", Numeric(14, 2), nullable=False),
    Column("notes", Text),
    Column("created_by", String(36)),
    Column("created_at", DateTime(timezone=True)),
    Column("updated_at", DateTime(timezone=True)),
)

liquidity_line_items = Table(
    "liquidity_line_items",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "liquidity_week_id",
        String(36),
        ForeignKey("weekly_liquidity.id"),
        nullable=False,
    ),
    Column("item_type", String(20), nullable=False),
    Column("description", Text, nullable=False),
    Column("expected_amount", Numeric(14, 2), nullable=False),
    Column("actual_amount", Numeric(14, 2)),
    Column("due_date", Date),
    Column("payment_date", Date),
    Column("status", String(20), nullable=False),
    Column("linked_invoice_id", String(36)),
    Column("linked_invoice_type", String(20)),
    Column("created_at", DateTime(timezone=True)),
    Column("updated_at", DateTime(timezone=True)),
)

suppliers = Table(
    "suppliers",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", Text),
)

clients = Table(
    "clients",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", Text),
)

raw_material_invoices = Table(
    "raw_material_invoices",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("invoice_number", Text),
    Column("amount", Numeric(14, 2)),
    Column("due_date", Date),
    Column("status", String(30)),
    Column("supplier_id", String(36), ForeignKey("suppliers.id")),
)

client_invoices = Table(
    "client_invoices",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("invoice_number", Text),
    Column("amount", Numeric(14, 2)),
    Column("status", String(30)),
    Column("client_id", String(36), ForeignKey("clients.id")),
)


__all__ = [
    "metadata",
    "weekly_liquidity",
    "liquidity_line_items",
    "suppliers",
    "clients",
    "raw_material_invoices",
    "client_invoices",
]
