"""Recording notification sender — keeps notifications in memory for testing."""

from uuid import uuid4

from orderflow.errors import NotificationError
from orderflow.notification.port import NotificationSender
from orderflow.notification.template import OrderProcessedTemplate
from orderflow.order.summary import OrderSummary


class RecordingNotificationSender(NotificationSender):
    """Sender that records rendered messages for test assertions. Not thread safe."""

    def __init__(self):
        self.sent: list[dict] = []
        self.calls = 0
        self.should_succeed = True
        self.failure_reason = "Notification delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Notification delivery failed"):
        """Configure the fake sender behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def notify(self, summary: OrderSummary) -> None:
        self.calls += 1
        if not self.should_succeed:
            raise NotificationError(self.failure_reason)

        message = OrderProcessedTemplate.render(summary)
        self.sent.append(
            {
                "message_id": f"note-{uuid4().hex[:12]}",
                "order_id": summary.order_id,
                "subject": message["subject"],
                "body": message["body"],
            }
        )

    def reset(self):
        """Clear sent notifications (useful between tests)."""
        self.sent.clear()
        self.calls = 0
        self.should_succeed = True
        self.failure_reason = "Notification delivery failed"
