"""Sequences calculation, persistence and notification.

``process`` runs three stages in a fixed order:

    compute total → save summary → notify

A calculation failure stops before anything is saved. A storage failure
stops before anyone is notified, so a notified party only hears about
orders that were recorded. A notification failure happens after the save
and never undoes it; whether it is reported to the caller is decided by
the coordinator's ``NotificationFailurePolicy``. Nothing is retried here.
"""

from collections.abc import Iterable

import structlog

from orderflow.config import (
    NotificationFailurePolicy,
    get_currency,
    get_currency_places,
    get_notification_failure_policy,
)
from orderflow.errors import (
    CalculationError,
    CalculationFailed,
    NotificationError,
    NotificationFailed,
    PersistenceFailed,
    StorageError,
)
from orderflow.notification.port import NotificationSender
from orderflow.order.calculator import TotalCalculator
from orderflow.order.summary import OrderSummary
from orderflow.storage.port import OrderStore

logger = structlog.get_logger(__name__)


class OrderCoordinator:
    """Processes orders through an injected calculator, store and notifier.

    The collaborators are fixed at construction and exposed read-only. The
    coordinator keeps no state between ``process`` calls; sharing one across
    threads is safe only if its collaborators are.
    """

    def __init__(
        self,
        calculator: TotalCalculator,
        store: OrderStore,
        notifier: NotificationSender,
        notification_failure_policy: NotificationFailurePolicy = NotificationFailurePolicy.LOG,
        currency: str = "USD",
    ) -> None:
        self._calculator = calculator
        self._store = store
        self._notifier = notifier
        self._notification_failure_policy = NotificationFailurePolicy(notification_failure_policy)
        self._currency = currency

    @property
    def calculator(self) -> TotalCalculator:
        return self._calculator

    @property
    def store(self) -> OrderStore:
        return self._store

    @property
    def notifier(self) -> NotificationSender:
        return self._notifier

    @property
    def notification_failure_policy(self) -> NotificationFailurePolicy:
        return self._notification_failure_policy

    def process(self, items: Iterable) -> OrderSummary:
        """Compute, save and announce an order.

        Returns:
            The saved ``OrderSummary``.

        Raises:
            CalculationFailed: an item was invalid; nothing was saved or sent.
            PersistenceFailed: the store rejected the summary; nothing was sent.
            NotificationFailed: only under ``NotificationFailurePolicy.RAISE``;
                the summary is already saved.
        """
        items = list(items)

        try:
            total = self._calculator.compute_total(items)
        except CalculationError as e:
            logger.warning("Order total could not be computed", item_count=len(items), error=str(e))
            raise CalculationFailed(f"Order total could not be computed: {e}", cause=e) from e

        summary = OrderSummary(total=total, item_count=len(items), currency=self._currency)
        log = logger.bind(order_id=summary.order_id, total=str(total), item_count=len(items))

        try:
            self._store.save(summary)
        except StorageError as e:
            log.error("Order could not be saved", error=str(e))
            raise PersistenceFailed(f"Order {summary.order_id} could not be saved: {e}", cause=e) from e

        log.info("Order saved")

        try:
            self._notifier.notify(summary)
        except NotificationError as e:
            if self._notification_failure_policy is NotificationFailurePolicy.RAISE:
                log.error("Order notification failed", error=str(e))
                raise NotificationFailed(
                    f"Order {summary.order_id} was saved but the notification failed: {e}",
                    summary=summary,
                    cause=e,
                ) from e
            log.warning("Order notification failed, order remains saved", error=str(e))
            return summary

        log.info("Order processed")
        return summary


def build_coordinator(
    store: OrderStore | None = None,
    notifier: NotificationSender | None = None,
    calculator: TotalCalculator | None = None,
) -> OrderCoordinator:
    """Compose a coordinator from configuration.

    Collaborators passed in are used as given; the rest come from the
    ``ORDERFLOW_*`` environment settings.
    """
    from orderflow.notification import create_notifier
    from orderflow.storage import create_store

    return OrderCoordinator(
        calculator=calculator if calculator is not None else TotalCalculator(places=get_currency_places()),
        store=store if store is not None else create_store(),
        notifier=notifier if notifier is not None else create_notifier(),
        notification_failure_policy=get_notification_failure_policy(),
        currency=get_currency(),
    )
