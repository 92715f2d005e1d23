"""Session-scoped state consumed by the presentation layer."""

from dataclasses import dataclass, field
from datetime import date

from src.application.ports.change_notifications import ChangeSubscription
from src.domain.errors import LiquidityError
from src.domain.models import LiquidityLineItem, LiquidityWeek, MonthlyPaymentDay


@dataclass
class LiquiditySession:
    """Explicit context holding what one dashboard session looks at.

    Attributes:
        weeks: Known weeks, most recent first.
        active_week: Week currently displayed.
        line_items: Line items of the active week.
        month: Month shown in the payment calendar.
        monthly_days: Payment days of ``month``.
        notices: Failure messages not yet shown to the user.
        subscription: Change subscription for the active week.
    """

    weeks: list[LiquidityWeek] = field(default_factory=list)
    active_week: LiquidityWeek | None = None
    line_items: list[LiquidityLineItem] = field(default_factory=list)
    month: date | None = None
    monthly_days: list[MonthlyPaymentDay] = field(default_factory=list)
    notices: list[str] = field(default_factory=list)
    subscription: ChangeSubscription | None = None

    def pop_notices(self) -> list[str]:
        """Return pending notices and clear them."""
        notices, self.notices = self.notices, []
        return notices


@dataclass(frozen=True)
class OperationOutcome:
    """Success or failure of an engine operation.

    Attributes:
        ok: Whether the operation succeeded.
        message: Short human-readable message.
        value: Optional result of a successful operation.
    """

    ok: bool
    message: str
    value: object = None

    @classmethod
    def success(cls, message: str, value: object = None) -> "OperationOutcome":
        return cls(ok=True, message=message, value=value)

    @classmethod
    def failure(cls, label: str, exc: LiquidityError) -> "OperationOutcome":
        return cls(ok=False, message=f"{label}: {exc}")


__all__ = ["LiquiditySession", "OperationOutcome"]
