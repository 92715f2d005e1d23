"""CLI adapter making sure the current liquidity week exists.

Meant to run from a scheduler at the start of each week so the week and
its invoice seed are ready before anyone opens the dashboard.
"""

from src.domain.errors import LiquidityError
from src.infrastructure.container import build_ensure_current_week_use_case
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the ensure-current-week use case and print the outcome."""
    logger = get_app_logger()
    use_case = build_ensure_current_week_use_case()

    try:
        result = use_case.execute()
    except LiquidityError as exc:
        logger.error(f"Error setting up current week: {exc}")
        raise SystemExit(1) from exc

    if not result.created:
        print(f"Week starting {result.week.week_start_date} already exists.")
        return

    print(
        f"Created week starting {result.week.week_start_date} "
        f"with {result.seed.total_count} seeded line items "
        f"({result.seed.supplier_count} payments, "
        f"{result.seed.customer_count} collections)."
    )
    for error in result.seed.errors:
        print(f"Seeding failed: {error}")


if __name__ == "__main__":  # pragma: no cover
    main()
