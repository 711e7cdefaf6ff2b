"""In-memory order store — records saved summaries for testing."""

from orderflow.errors import StorageError
from orderflow.order.summary import OrderSummary
from orderflow.storage.port import OrderStore


class InMemoryOrderStore(OrderStore):
    """Order store that keeps summaries in a list. Not thread safe."""

    def __init__(self):
        self.saved: list[OrderSummary] = []
        self.calls = 0
        self.should_succeed = True
        self.failure_reason = "Order could not be saved"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Order could not be saved"):
        """Configure the fake store behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def save(self, summary: OrderSummary) -> None:
        self.calls += 1
        if not self.should_succeed:
            raise StorageError(self.failure_reason)
        self.saved.append(summary)

    def get(self, order_id: str) -> OrderSummary | None:
        for summary in self.saved:
            if summary.order_id == order_id:
                return summary
        return None

    def reset(self):
        """Clear saved summaries (useful between tests)."""
        self.saved.clear()
        self.calls = 0
        self.should_succeed = True
        self.failure_reason = "Order could not be saved"
