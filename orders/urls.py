from django.urls import path

from orders.handlers import EventOrderListView, StripeWebhookView, UserOrderListView

urlpatterns = [
    path("webhook/stripe", StripeWebhookView.as_view(), name="stripe-webhook"),
    path("users/<str:user_id>/orders", UserOrderListView.as_view(), name="user-order-list"),
    path("events/<str:event_id>/orders", EventOrderListView.as_view(), name="event-order-list"),
]
