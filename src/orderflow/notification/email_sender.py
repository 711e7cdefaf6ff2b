"""Email notification sender.

Renders the order processed template and hands it to an SMTP relay. The
relay does the actual delivery; this adapter only reports whether the relay
accepted the message.
"""

import smtplib
from email.message import EmailMessage

import structlog

from orderflow.errors import NotificationError
from orderflow.notification.port import NotificationSender
from orderflow.notification.template import OrderProcessedTemplate
from orderflow.order.summary import OrderSummary

logger = structlog.get_logger(__name__)


class EmailNotificationSender(NotificationSender):
    """Sends one email per processed order through an SMTP relay."""

    def __init__(
        self,
        sender: str,
        recipient: str,
        host: str = "localhost",
        port: int = 25,
        timeout: float = 10.0,
    ) -> None:
        if not recipient:
            raise ValueError("An email recipient is required")
        self.sender = sender
        self.recipient = recipient
        self.host = host
        self.port = port
        self.timeout = timeout

    def build_message(self, summary: OrderSummary) -> EmailMessage:
        content = OrderProcessedTemplate.render(summary)
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = self.recipient
        message["Subject"] = content["subject"]
        message.set_content(content["body"])
        return message

    def notify(self, summary: OrderSummary) -> None:
        message = self.build_message(summary)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as client:
                client.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(
                "Order email could not be sent",
                order_id=summary.order_id,
                recipient=self.recipient,
                error=str(e),
            )
            raise NotificationError(f"Email for order {summary.order_id} not sent: {e}") from e

        logger.info("Order email sent", order_id=summary.order_id, recipient=self.recipient)
