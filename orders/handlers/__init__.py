from orders.handlers.views import EventOrderListView, StripeWebhookView, UserOrderListView

__all__ = ["EventOrderListView", "StripeWebhookView", "UserOrderListView"]
