"""Change notifier implementations.

``InProcessChangeNotifier`` delivers events published by sessions of the
same process. ``PollingChangeNotifier`` also detects writes made by other
processes by comparing a per-week fingerprint of the line items.

Registrations made with an ``owner`` hold it weakly; once the owner is
garbage-collected the registration is dropped on the next publish or poll.
"""

import threading
import weakref
from collections.abc import Callable

from src.application.ports.change_notifications import (
    LINE_ITEMS_TABLE,
    ChangeNotifierPort,
)
from src.application.ports.liquidity_repository import LiquidityRepositoryPort
from src.infrastructure.logging.logger import get_app_logger


class Subscription:
    """Registration of one callback for a table and week."""

    def __init__(
        self,
        notifier: "InProcessChangeNotifier",
        table: str,
        week_id: str,
        callback: Callable[[], None],
        owner: object | None = None,
    ) -> None:
        self._notifier = notifier
        self.table = table
        self.week_id = week_id
        self.callback = callback
        self.active = True
        self._owner = weakref.ref(owner) if owner is not None else None

    @property
    def alive(self) -> bool:
        """True while cancelled neither explicitly nor by losing its owner."""
        if not self.active:
            return False
        return self._owner is None or self._owner() is not None

    def cancel(self) -> None:
        """Stop delivering notifications to the callback."""
        if self.active:
            self.active = False
            self._notifier._remove(self)


class InProcessChangeNotifier(ChangeNotifierPort):
    """Deliver change events between sessions sharing this process."""

    def __init__(self, logger=None) -> None:
        self._lock = threading.Lock()
        self._subscriptions: dict[tuple[str, str], list[Subscription]] = {}
        self._logger = logger or get_app_logger()

    def subscribe(
        self,
        table: str,
        week_id: str,
        callback: Callable[[], None],
        owner: object | None = None,
    ) -> Subscription:
        subscription = Subscription(self, table, week_id, callback, owner)
        with self._lock:
            self._subscriptions.setdefault((table, week_id), []).append(
                subscription
            )
        return subscription

    def publish(self, table: str, week_id: str) -> None:
        """Run the callbacks registered for the table and week."""
        self._fire(table, week_id)

    def poll(self) -> int:
        """Nothing to detect: events only come from ``publish``."""
        self._prune()
        return 0

    def subscriber_count(self, table: str, week_id: str) -> int:
        with self._lock:
            return sum(
                1
                for subscription in self._subscriptions.get((table, week_id), [])
                if subscription.alive
            )

    def _fire(self, table: str, week_id: str) -> int:
        self._prune()
        with self._lock:
            targets = list(self._subscriptions.get((table, week_id), []))
        fired = 0
        for subscription in targets:
            if subscription.alive:
                subscription.callback()
                fired += 1
        if fired:
            self._logger.debug(
                f"Notified {fired} subscribers of {table}/{week_id}"
            )
        return fired

    def _prune(self) -> None:
        """Drop the registrations whose owner has been garbage-collected."""
        with self._lock:
            dead = [
                subscription
                for subscriptions in self._subscriptions.values()
                for subscription in subscriptions
                if not subscription.alive
            ]
        for subscription in dead:
            subscription.cancel()
        if dead:
            self._logger.debug(f"Dropped {len(dead)} orphaned subscriptions")

    def _keys(self) -> list[tuple[str, str]]:
        with self._lock:
            return list(self._subscriptions)

    def _remove(self, subscription: Subscription) -> None:
        key = (subscription.table, subscription.week_id)
        with self._lock:
            remaining = [
                s for s in self._subscriptions.get(key, [])
                if s is not subscription
            ]
            if remaining:
                self._subscriptions[key] = remaining
            else:
                self._subscriptions.pop(key, None)


class PollingChangeNotifier(InProcessChangeNotifier):
    """Detect line item changes by polling a per-week fingerprint.

    The fingerprint (row count and latest update time) is read when a week
    gains its first subscriber and on every :meth:`poll`; callbacks fire
    only when it differs from the last value seen.
    """

    def __init__(self, repository: LiquidityRepositoryPort, logger=None) -> None:
        super().__init__(logger=logger)
        self._repository = repository
        self._fingerprints: dict[str, tuple] = {}

    def subscribe(
        self,
        table: str,
        week_id: str,
        callback: Callable[[], None],
        owner: object | None = None,
    ) -> Subscription:
        if table == LINE_ITEMS_TABLE and week_id not in self._fingerprints:
            self._fingerprints[week_id] = (
                self._repository.fetch_line_items_fingerprint(week_id)
            )
        return super().subscribe(table, week_id, callback, owner)

    def publish(self, table: str, week_id: str) -> None:
        """Re-check the week instead of firing unconditionally."""
        if table == LINE_ITEMS_TABLE:
            self._prune()
            if week_id in self._fingerprints:
                self._check(week_id)
        else:
            self._fire(table, week_id)

    def poll(self) -> int:
        """Compare the fingerprint of every subscribed week.

        Returns:
            int: Number of callbacks fired.

        Raises:
            PersistenceError: If a fingerprint cannot be read.
        """
        self._prune()
        fired = 0
        for table, week_id in self._keys():
            if table == LINE_ITEMS_TABLE:
                fired += self._check(week_id)
        return fired

    def _check(self, week_id: str) -> int:
        current = self._repository.fetch_line_items_fingerprint(week_id)
        if self._fingerprints.get(week_id) == current:
            return 0
        self._fingerprints[week_id] = current
        return self._fire(LINE_ITEMS_TABLE, week_id)

    def _remove(self, subscription: Subscription) -> None:
        super()._remove(subscription)
        if subscription.table == LINE_ITEMS_TABLE and not self.subscriber_count(
            LINE_ITEMS_TABLE,
            subscription.week_id,
        ):
            self._fingerprints.pop(subscription.week_id, None)


__all__ = [
    "Subscription",
    "InProcessChangeNotifier",
    "PollingChangeNotifier",
]
