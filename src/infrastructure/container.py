"""Composition root for wiring infrastructure adapters."""

from src.application.liquidity_engine import LiquidityEngine, LiquidityUseCases
from src.application.ports.change_notifications import ChangeNotifierPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.liquidity_repository import LiquidityRepositoryPort
from src.application.use_cases.add_line_item import AddLineItemUseCase
from src.application.use_cases.auto_populate_line_items import (
    AutoPopulateLineItemsUseCase,
)
from src.application.use_cases.create_week import CreateWeekUseCase
from src.application.use_cases.delete_line_item import DeleteLineItemUseCase
from src.application.use_cases.ensure_current_week import (
    EnsureCurrentWeekUseCase,
)
from src.application.use_cases.get_liquidity_view import (
    GetLiquidityViewUseCase,
)
from src.application.use_cases.get_monthly_payment_days import (
    GetMonthlyPaymentDaysUseCase,
)
from src.application.use_cases.get_weeks import GetWeeksUseCase
from src.application.use_cases.record_line_item_payment import (
    MarkLineItemDoneUseCase,
    RecordActualAmountUseCase,
)
from src.application.use_cases.sync_invoice_status import (
    SyncInvoiceStatusHandler,
)
from src.application.use_cases.update_line_item import UpdateLineItemUseCase
from src.application.use_cases.update_week import UpdateWeekUseCase
from src.infrastructure.change_notifications import (
    InProcessChangeNotifier,
    PollingChangeNotifier,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.invoice_repository import SqlAlchemyInvoiceRepository
from src.infrastructure.liquidity_repository import (
    SqlAlchemyLiquidityRepository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import CHANGE_MODE_POLLING, LiquiditySettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_liquidity_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LiquidityRepositoryPort:
    """Return the repository of weeks and line items."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLiquidityRepository(resolved_db)


def build_invoice_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SqlAlchemyInvoiceRepository:
    """Return the repository of supplier and customer invoices."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyInvoiceRepository(resolved_db)


def build_change_notifier(
    repository: LiquidityRepositoryPort,
    settings: LiquiditySettings | None = None,
) -> ChangeNotifierPort:
    """Return the change notifier selected by the settings."""
    resolved_settings = settings or LiquiditySettings.from_env()
    if resolved_settings.change_mode == CHANGE_MODE_POLLING:
        return PollingChangeNotifier(repository, logger=get_app_logger())
    return InProcessChangeNotifier(logger=get_app_logger())


def build_ensure_current_week_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> EnsureCurrentWeekUseCase:
    """Return the use case creating the current week when missing."""
    resolved_db = db_port or build_database_adapter()
    repository = build_liquidity_repository(resolved_db)
    auto_populate = AutoPopulateLineItemsUseCase(
        repository,
        build_invoice_repository(resolved_db),
    )
    return EnsureCurrentWeekUseCase(repository, auto_populate)


def build_liquidity_use_cases(
    repository: LiquidityRepositoryPort,
    invoices: SqlAlchemyInvoiceRepository,
    settings: LiquiditySettings,
) -> LiquidityUseCases:
    """Wire every use case the engine composes."""
    logger = get_app_logger()
    auto_populate = AutoPopulateLineItemsUseCase(
        repository,
        invoices,
        logger=logger,
    )
    update_line_item = UpdateLineItemUseCase(
        repository,
        completion_handlers=[SyncInvoiceStatusHandler(invoices, logger=logger)],
        logger=logger,
    )
    return LiquidityUseCases(
        ensure_current_week=EnsureCurrentWeekUseCase(
            repository,
            auto_populate,
            logger=logger,
        ),
        create_week=CreateWeekUseCase(repository, auto_populate, logger=logger),
        get_weeks=GetWeeksUseCase(repository, logger=logger),
        update_week=UpdateWeekUseCase(repository, logger=logger),
        add_line_item=AddLineItemUseCase(repository, logger=logger),
        update_line_item=update_line_item,
        mark_done=MarkLineItemDoneUseCase(update_line_item),
        record_actual=RecordActualAmountUseCase(update_line_item),
        delete_line_item=DeleteLineItemUseCase(repository, logger=logger),
        get_view=GetLiquidityViewUseCase(
            repository,
            logger=logger,
            alert_window=settings.alert_window,
            currency_symbol=settings.currency_symbol,
        ),
        get_monthly_payment_days=GetMonthlyPaymentDaysUseCase(
            repository,
            logger=logger,
        ),
    )


def build_liquidity_engine(
    db_port: DatabaseEnginePort | None = None,
    settings: LiquiditySettings | None = None,
) -> LiquidityEngine:
    """Return a fully wired liquidity engine."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or LiquiditySettings.from_env()
    repository = build_liquidity_repository(resolved_db)
    invoices = SqlAlchemyInvoiceRepository(resolved_db)
    return LiquidityEngine(
        build_liquidity_use_cases(repository, invoices, resolved_settings),
        repository,
        build_change_notifier(repository, resolved_settings),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_liquidity_repository",
    "build_invoice_repository",
    "build_change_notifier",
    "build_ensure_current_week_use_case",
    "build_liquidity_use_cases",
    "build_liquidity_engine",
]
