"""The persisted form of an order summary."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from orderflow.domain import orderflow
from orderflow.order.summary import OrderSummary


@orderflow.aggregate
class ProcessedOrder:
    """An order whose total has been computed and recorded.

    The total is stored as a float rounded to the summary's precision;
    ``OrderSummary`` remains the source of truth for exact arithmetic.
    """

    order_id = Identifier(required=True)
    total = Float(required=True, min_value=0.0)
    item_count = Integer(default=0, min_value=0)
    currency = String(max_length=3, default="USD")
    processed_at = DateTime()

    @classmethod
    def from_summary(cls, summary: OrderSummary) -> "ProcessedOrder":
        return cls(
            order_id=summary.order_id,
            total=float(summary.total),
            item_count=summary.item_count,
            currency=summary.currency,
            processed_at=summary.created_at,
        )
