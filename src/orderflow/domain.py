"""Orderflow bounded context — order total calculation, persistence and notification.

Hosts the Protean domain that owns the ``ProcessedOrder`` aggregate written by
the repository-backed order store.
"""

from protean.domain import Domain

from orderflow.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

orderflow = Domain(name="orderflow")
