from orders.domain.models import CheckoutOrder, Order, minor_units_to_amount

__all__ = ["CheckoutOrder", "Order", "minor_units_to_amount"]
