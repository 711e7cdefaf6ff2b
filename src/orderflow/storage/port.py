"""Order store port (abstract interface).

Any backend that can record an ``OrderSummary`` can stand behind this
contract without changes to the coordinator or the calculator.
"""

from abc import ABC, abstractmethod

from orderflow.order.summary import OrderSummary


class OrderStore(ABC):
    """Abstract order persistence interface."""

    @abstractmethod
    def save(self, summary: OrderSummary) -> None:
        """Persist the summary.

        Raises:
            StorageError: if the backend could not record the summary.
        """
        ...
