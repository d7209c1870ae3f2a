"""Ordering API package."""

from storefront.ordering.api.routes import cart_router, customer_router, order_router

__all__ = ["cart_router", "order_router", "customer_router"]
