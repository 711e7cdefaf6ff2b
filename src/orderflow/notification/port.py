"""Notification sender port — abstract interface for order notifications."""

from abc import ABC, abstractmethod

from orderflow.order.summary import OrderSummary


class NotificationSender(ABC):
    """Abstract interface for telling a party that an order was processed."""

    @abstractmethod
    def notify(self, summary: OrderSummary) -> None:
        """Announce the processed order.

        Raises:
            NotificationError: if the message could not be delivered.
        """
        ...
