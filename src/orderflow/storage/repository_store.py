"""Database-backed order store.

Writes a ``ProcessedOrder`` through the repository of the active Protean
domain, so the actual database is whatever provider the domain is configured
with (in-memory under test). Must be used inside an initialized
``orderflow`` domain context.

Connection failures (``OSError``) and operations the provider refuses
(``InvalidOperationError``) are reported as ``StorageError``. Anything else
is a bug and propagates unchanged.
"""

import structlog
from protean.exceptions import InvalidOperationError, ValidationError
from protean.utils.globals import current_domain

from orderflow.errors import StorageError
from orderflow.order.record import ProcessedOrder
from orderflow.order.summary import OrderSummary
from orderflow.storage.port import OrderStore

logger = structlog.get_logger(__name__)


class RepositoryOrderStore(OrderStore):
    """Persists order summaries as ``ProcessedOrder`` aggregates."""

    def save(self, summary: OrderSummary) -> None:
        try:
            record = ProcessedOrder.from_summary(summary)
        except ValidationError as e:
            raise StorageError(f"Order {summary.order_id} rejected: {e.messages}") from e

        try:
            current_domain.repository_for(ProcessedOrder).add(record)
        except (OSError, InvalidOperationError) as e:
            logger.error(
                "Failed to persist processed order",
                order_id=summary.order_id,
                error=str(e),
            )
            raise StorageError(f"Order {summary.order_id} could not be saved: {e}") from e

        logger.debug("Processed order persisted", order_id=summary.order_id, record_id=str(record.id))

    def find(self, order_id: str) -> ProcessedOrder | None:
        """Look up a persisted order by its order id."""
        repo = current_domain.repository_for(ProcessedOrder)
        matches = repo._dao.query.filter(order_id=order_id).all().items
        return matches[0] if matches else None
