"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from datetime import timedelta
import os

import dotenv

from src.domain.constants import DEFAULT_ALERT_WINDOW
from src.infrastructure.logging.logger import get_app_logger


CURRENCY_SYMBOLS = {
    "INR": "₹",
    "EUR": "€",
    "USD": "$",
    "GBP": "£",
}

CHANGE_MODE_INPROCESS = "inprocess"
CHANGE_MODE_POLLING = "polling"
CHANGE_MODES = (CHANGE_MODE_INPROCESS, CHANGE_MODE_POLLING)


@dataclass(frozen=True)
class LiquiditySettings:
    """Runtime settings of the liquidity dashboard.

    Attributes:
        currency: ISO currency code used for display.
        alert_window: Look-ahead of upcoming payment warnings.
        change_mode: Change notifier implementation (inprocess or polling).
    """

    currency: str = "INR"
    alert_window: timedelta = DEFAULT_ALERT_WINDOW
    change_mode: str = CHANGE_MODE_INPROCESS

    @property
    def currency_symbol(self) -> str:
        """Return the display symbol for the configured currency."""
        return CURRENCY_SYMBOLS.get(self.currency, self.currency)

    @classmethod
    def from_env(cls) -> "LiquiditySettings":
        """Build settings from environment variables.

        Invalid values fall back to the defaults with a warning.

        Returns:
            LiquiditySettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        currency = os.getenv("LIQUIDITY_CURRENCY", "INR").strip().upper()
        alert_window = cls._parse_window(
            os.getenv("LIQUIDITY_ALERT_WINDOW_HOURS"),
            logger=logger,
        )
        change_mode = (
            os.getenv("LIQUIDITY_CHANGE_MODE", CHANGE_MODE_INPROCESS)
            .strip()
            .lower()
        )
        if change_mode not in CHANGE_MODES:
            logger.warning(
                f"Unknown LIQUIDITY_CHANGE_MODE {change_mode!r}; "
                f"using {CHANGE_MODE_INPROCESS}"
            )
            change_mode = CHANGE_MODE_INPROCESS
        return cls(
            currency=currency or "INR",
            alert_window=alert_window,
            change_mode=change_mode,
        )

    @staticmethod
    def _parse_window(raw_hours: str | None, logger) -> timedelta:
        """Parse the alert window in hours.

        Args:
            raw_hours: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            timedelta: Parsed window, or the default when unset or invalid.
        """
        if raw_hours is None or not raw_hours.strip():
            return DEFAULT_ALERT_WINDOW
        try:
            hours = float(raw_hours)
        except ValueError:
            logger.warning(
                f"Invalid LIQUIDITY_ALERT_WINDOW_HOURS {raw_hours!r}; "
                "using 48 hours"
            )
            return DEFAULT_ALERT_WINDOW
        if hours < 0:
            logger.warning("Negative alert window ignored; using 48 hours")
            return DEFAULT_ALERT_WINDOW
        return timedelta(hours=hours)


__all__ = [
    "CURRENCY_SYMBOLS",
    "CHANGE_MODE_INPROCESS",
    "CHANGE_MODE_POLLING",
    "LiquiditySettings",
]
