"""Database ports for the liquidity dashboard.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the hosted operations database.

    Repositories depend on this protocol instead of concrete drivers or
    configuration details.
    """

    def get_liquidity_engine(self) -> Engine:
        """Get the engine for the operations database.

        Returns:
            Engine: SQLAlchemy engine holding liquidity and invoice tables.
        """


__all__ = ["DatabaseEnginePort"]
