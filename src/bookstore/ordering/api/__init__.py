"""Cart API package."""

from bookstore.ordering.api.routes import cart_router

__all__ = ["cart_router"]
