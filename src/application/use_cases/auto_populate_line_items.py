"""Use case seeding a new week with line items from unpaid invoices.

Supplier invoices become scheduled payments and customer invoices become
expected collections. The two batches are independent: a failure in one is
logged and reported in the result without blocking the other.
"""

from dataclasses import dataclass

from src.application.ports.invoices import InvoiceSourcePort
from src.application.ports.liquidity_repository import LiquidityRepositoryPort
from src.domain.constants import SEEDABLE_INVOICE_STATUSES
from src.domain.errors import PersistenceError
from src.domain.models import LiquidityWeek
from src.domain.policies import is_seedable_invoice_status
from src.domain.services.seeding import (
    build_customer_line_items,
    build_supplier_line_items,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SeedResult:
    """Outcome of seeding a week.

    Attributes:
        supplier_count: Payments created from supplier invoices.
        customer_count: Collections created from customer invoices.
        errors: Messages of the batches that failed.
    """

    supplier_count: int = 0
    customer_count: int = 0
    errors: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def total_count(self) -> int:
        return self.supplier_count + self.customer_count


class AutoPopulateLineItemsUseCase:
    """Create the one-time seed of line items for a week."""

    def __init__(
        self,
        repository: LiquidityRepositoryPort,
        invoice_source: InvoiceSourcePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port writing liquidity line items.
            invoice_source: Port listing unpaid invoices.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._invoice_source = invoice_source
        self._logger = logger or get_app_logger()

    def execute(self, week: LiquidityWeek) -> SeedResult:
        """Seed the week from supplier and customer invoices.

        Args:
            week: Freshly created week.

        Returns:
            SeedResult: Counts per batch and the failures, if any.
        """
        errors: list[str] = []
        supplier_count = 0
        customer_count = 0

        try:
            invoices = self._seedable(
                self._invoice_source.fetch_supplier_invoices(
                    SEEDABLE_INVOICE_STATUSES
                ),
                "supplier",
            )
            created = self._repository.insert_line_items(
                build_supplier_line_items(week.id, invoices)
            )
            supplier_count = len(created)
        except PersistenceError as exc:
            self._logger.error(
                f"Seeding supplier payments failed for week {week.id}: {exc}"
            )
            errors.append(f"Supplier invoices: {exc}")

        try:
            invoices = self._seedable(
                self._invoice_source.fetch_customer_invoices(
                    SEEDABLE_INVOICE_STATUSES
                ),
                "customer",
            )
            created = self._repository.insert_line_items(
                build_customer_line_items(week.id, invoices)
            )
            customer_count = len(created)
        except PersistenceError as exc:
            self._logger.error(
                f"Seeding customer collections failed for week {week.id}: {exc}"
            )
            errors.append(f"Customer invoices: {exc}")

        self._logger.info(
            f"Seeded week {week.week_start_date}: "
            f"payments={supplier_count}, collections={customer_count}"
        )
        return SeedResult(
            supplier_count=supplier_count,
            customer_count=customer_count,
            errors=tuple(errors),
        )

    def _seedable(self, invoices, kind: str) -> list:
        """Keep the invoices whose status still counts as unpaid."""
        kept = [
            invoice
            for invoice in invoices
            if is_seedable_invoice_status(invoice.status)
        ]
        skipped = len(invoices) - len(kept)
        if skipped:
            self._logger.warning(
                f"Skipped {skipped} {kind} invoices with a settled status"
            )
        return kept


__all__ = ["AutoPopulateLineItemsUseCase", "SeedResult"]
