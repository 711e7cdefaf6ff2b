"""Message sent once an order is saved."""

from orderflow.order.summary import OrderSummary


class OrderProcessedTemplate:
    @staticmethod
    def render(summary: OrderSummary) -> dict:
        return {
            "subject": f"Order #{summary.order_id} Processed",
            "body": (
                f"Your order #{summary.order_id} has been processed.\n\n"
                f"Items: {summary.item_count}\n"
                f"Order Total: {summary.currency} {summary.total}\n\n"
                "Thank you for your order!"
            ),
        }
