"""Error taxonomy for order processing.

Collaborators raise ``CalculationError``, ``StorageError`` or
``NotificationError``. The coordinator turns those into ``OrderError``
subclasses at its boundary, keeping the original error as ``cause``.
"""


class CalculationError(Exception):
    """Raised when an order total cannot be computed."""


class InvalidLineItem(CalculationError):
    """A line item has a missing, negative or non-numeric price or quantity."""

    def __init__(self, index: int, field: str, reason: str) -> None:
        self.index = index
        self.field = field
        self.reason = reason
        super().__init__(f"Line item {index}: {field} {reason}")


class StorageError(Exception):
    """Raised by an order store when a summary could not be persisted."""


class NotificationError(Exception):
    """Raised by a notification sender when delivery failed."""


class OrderError(Exception):
    """Base class for failures surfaced by ``OrderCoordinator.process``."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(message)


class CalculationFailed(OrderError):
    """The total could not be computed; nothing was saved or sent."""


class PersistenceFailed(OrderError):
    """The summary could not be saved; no notification was sent."""


class NotificationFailed(OrderError):
    """The summary was saved but the notification could not be delivered.

    The saved record is left in place.
    """

    def __init__(self, message: str, summary, cause: Exception | None = None) -> None:
        self.summary = summary
        super().__init__(message, cause)
