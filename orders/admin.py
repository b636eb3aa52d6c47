from django.contrib import admin

from orders.models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ["stripe_id", "event_id", "buyer_id", "total_amount", "created_at"]
    search_fields = ["stripe_id", "event_id", "buyer_id"]
