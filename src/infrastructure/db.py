"""Database infrastructure for the liquidity dashboard.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the hosted operations database. It belongs to the
infrastructure layer because it deals with external systems (PostgreSQL).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Values from a ``.env`` file in the working tree are loaded first.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for a PostgreSQL database.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_liquidity_engine: Optional[Engine] = None


def get_liquidity_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the operations database.

    Returns:
        Engine: Lazily initialized engine connected to the hosted database.
    """
    global _liquidity_engine
    if _liquidity_engine is None:
        db_url = _get_env_var("LIQUIDITY_DB_URL")
        _liquidity_engine = _create_engine(db_url)
    return _liquidity_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so repositories can depend only on the protocol.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        """Initialize the adapter.

        Args:
            engine: Optional engine to use instead of the configured one.
        """
        self._engine = engine

    def get_liquidity_engine(self) -> Engine:
        """Get the engine for the operations database.

        Returns:
            Engine: SQLAlchemy engine holding liquidity and invoice tables.
        """
        if self._engine is not None:
            return self._engine
        return get_liquidity_engine()


__all__ = [
    "get_liquidity_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
