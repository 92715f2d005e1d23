"""Port for "something changed" notifications on liquidity tables."""

from collections.abc import Callable
from typing import Protocol

LINE_ITEMS_TABLE = "liquidity_line_items"


class ChangeSubscription(Protocol):
    """Handle returned by a subscription."""

    def cancel(self) -> None:
        """Stop delivering notifications to the callback."""


class ChangeNotifierPort(Protocol):
    """Port delivering change events scoped to a table and a week.

    Events carry no payload; subscribers re-read what they display.
    """

    def subscribe(
        self,
        table: str,
        week_id: str,
        callback: Callable[[], None],
        owner: object | None = None,
    ) -> ChangeSubscription:
        """Register a callback for changes of ``table`` rows of a week.

        When ``owner`` is given the registration only holds a weak
        reference to it and lapses once the owner is garbage-collected.
        """

    def publish(self, table: str, week_id: str) -> None:
        """Signal that rows of ``table`` for a week have changed."""

    def poll(self) -> int:
        """Deliver changes made elsewhere; return the callbacks fired."""


__all__ = [
    "LINE_ITEMS_TABLE",
    "ChangeSubscription",
    "ChangeNotifierPort",
]
